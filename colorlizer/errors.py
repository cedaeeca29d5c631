from __future__ import annotations


class LineError(ValueError):
    """Base class for failures on a single input line."""


class MalformedLineError(LineError):
    """An expected delimiter was replaced by some other character."""

    def __init__(self, char: str, index: int) -> None:
        super().__init__(f"Illegal char {char!r} at {index}")
        self.char = char
        self.index = index


class UnterminatedFieldError(LineError):
    """End of line reached before a required delimiter."""

    def __init__(self, expected: str, index: int) -> None:
        super().__init__(f"Expected {expected!r} but reached end of line at {index}")
        self.expected = expected
        self.index = index


class UnrecognizedLevelError(LineError):
    def __init__(self, level: str) -> None:
        super().__init__(f"Level {level!r} is invalid.")
        self.level = level
