from __future__ import annotations

from dataclasses import dataclass, field

from jinja2 import Environment, StrictUndefined, Template

from .errors import UnrecognizedLevelError
from .parser import parse_line
from .types import ParsedFields

MC_LOG_FORMAT = "[{{ timestamp }}] [{{ thread }}/{{ level }}]: {{ message }}"

# Field values carry raw escape sequences and arbitrary log text: no escaping.
JINJA_ENV = Environment(undefined=StrictUndefined, autoescape=False)

ESC = "\x1b"

ANSI_RESET = ESC + "[0m"
ANSI_GREEN = ESC + "[32m"
ANSI_WHITE = ESC + "[37m"
ANSI_THREAD = ESC + "[38;5;12m"

LEVEL_COLORS: dict[str, str] = {
    "ERROR": ESC + "[38;5;09m",
    "WARN": ESC + "[38;5;11m",
    "INFO": ESC + "[38;5;14m",
}


def render_timestamp(text: str, tz_name: str) -> str:
    return f"{ANSI_GREEN}{text}{ANSI_RESET} ({tz_name})"


def render_thread(text: str) -> str:
    return f"{ANSI_THREAD}{text}{ANSI_RESET}"


def render_level(text: str) -> str:
    """Color a level by exact match; anything outside LEVEL_COLORS is an error."""
    color = LEVEL_COLORS.get(text)
    if color is None:
        raise UnrecognizedLevelError(text)
    return f"{color}{text}{ANSI_RESET}"


def render_message(text: str) -> str:
    return f"{ANSI_WHITE}{text}{ANSI_RESET}"


@dataclass
class LineFormatter:
    """Render ParsedFields into one colored line.

    tz_name is resolved once by the caller and appended to every timestamp.
    """
    tz_name: str
    _template: Template = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._template = JINJA_ENV.from_string(MC_LOG_FORMAT)

    def format(self, fields: ParsedFields) -> str:
        # level first: an unknown level must fail before anything is rendered
        level = render_level(fields.level)
        return self._template.render(
            timestamp=render_timestamp(fields.timestamp, self.tz_name),
            thread=render_thread(fields.thread),
            level=level,
            message=render_message(fields.message),
        )


def colorize_line(line: str, formatter: LineFormatter) -> str:
    """Parse and format a single raw line."""
    return formatter.format(parse_line(line))
