from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Iterator


@dataclass(frozen=True)
class ParsedFields:
    """The four fields of one log line, in line order.

    - timestamp: text between the first pair of brackets
    - thread: thread name, may itself contain '/'
    - level: severity text as written, not yet validated
    - message: remainder of the line after ': ', verbatim
    """
    timestamp: str
    thread: str
    level: str
    message: str

    def __iter__(self) -> Iterator[str]:
        return iter(astuple(self))

