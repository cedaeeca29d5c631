"""Positional scanner for '[TIMESTAMP] [THREAD/LEVEL]: MESSAGE' lines.

Each sub-scanner takes the line and a start position and returns the text of
its field together with the position the next scanner starts from. Scanners
never share a mutable cursor; parse_line threads the position through them.
"""

from __future__ import annotations

from typing import Callable

from .errors import MalformedLineError, UnterminatedFieldError
from .types import ParsedFields

Scanner = Callable[[str, int], tuple[str, int]]


def expect(line: str, pos: int, expected: str) -> int:
    """Check that 'expected' sits at 'pos' and return the position after it."""
    if pos >= len(line):
        raise UnterminatedFieldError(expected, pos)
    if line[pos] != expected:
        raise MalformedLineError(line[pos], pos)
    return pos + 1


def find_forward(line: str, pos: int, terminator: str) -> int:
    """Index of the first 'terminator' at or after 'pos'."""
    end = line.find(terminator, pos)
    if end < 0:
        raise UnterminatedFieldError(terminator, len(line))
    return end


def scan_timestamp(line: str, pos: int) -> tuple[str, int]:
    begin = expect(line, pos, "[")
    end = find_forward(line, begin, "]")
    return line[begin:end], end + 1


def scan_thread(line: str, pos: int) -> tuple[str, int]:
    """Capture the thread name and stop on the '/' before the level.

    Thread names may contain '/', so the separator is the last '/' inside the
    bracket group: find the group's ']' first, then walk back to the nearest
    '/' without leaving the group.
    """
    pos = expect(line, pos, " ")
    begin = expect(line, pos, "[")
    close = find_forward(line, begin, "]")
    slash = line.rfind("/", begin, close)
    if slash < 0:
        # no thread/level separator inside the group
        raise MalformedLineError(line[close], close)
    return line[begin:slash], slash


def scan_level(line: str, pos: int) -> tuple[str, int]:
    begin = expect(line, pos, "/")
    end = find_forward(line, begin, "]")
    return line[begin:end], end + 1


def scan_message(line: str, pos: int) -> tuple[str, int]:
    pos = expect(line, pos, ":")
    pos = expect(line, pos, " ")
    return line[pos:], len(line)


# Order matters: each scanner starts where the previous one stopped.
SCANNERS: tuple[Scanner, ...] = (scan_timestamp, scan_thread, scan_level, scan_message)


def parse_line(line: str) -> ParsedFields:
    """Split one raw line into its four fields or raise a LineError."""
    pos = 0
    values: list[str] = []
    for scanner in SCANNERS:
        text, pos = scanner(line, pos)
        values.append(text)
    return ParsedFields(*values)
