"""Tests for the line formatter."""

import pytest

from colorlizer.errors import UnrecognizedLevelError
from colorlizer.formatter import (
    ANSI_RESET,
    ANSI_WHITE,
    LEVEL_COLORS,
    LineFormatter,
    colorize_line,
    render_level,
    render_timestamp,
)
from colorlizer.types import ParsedFields


@pytest.fixture
def formatter():
    return LineFormatter(tz_name="UTC")


def test_full_line(formatter):
    out = formatter.format(ParsedFields("12:34:56", "Server thread", "INFO", "Hello"))
    assert out == (
        "[\x1b[32m12:34:56\x1b[0m (UTC)] "
        "[\x1b[38;5;12mServer thread\x1b[0m/\x1b[38;5;14mINFO\x1b[0m]: "
        "\x1b[37mHello\x1b[0m"
    )


def test_timezone_label_outside_color():
    assert render_timestamp("10:00:00", "JST") == "\x1b[32m10:00:00\x1b[0m (JST)"


@pytest.mark.parametrize("level,code", [
    ("ERROR", "\x1b[38;5;09m"),
    ("WARN", "\x1b[38;5;11m"),
    ("INFO", "\x1b[38;5;14m"),
])
def test_level_colors(level, code):
    assert LEVEL_COLORS[level] == code
    assert render_level(level) == code + level + ANSI_RESET


@pytest.mark.parametrize("level", ["DEBUG", "info", "", "WARNING"])
def test_unknown_level_rejected(level):
    with pytest.raises(UnrecognizedLevelError) as exc:
        render_level(level)
    assert exc.value.level == level


def test_unknown_level_produces_no_output(formatter):
    with pytest.raises(UnrecognizedLevelError):
        colorize_line("[t] [main/DEBUG]: m", formatter)


def test_empty_message_still_wrapped(formatter):
    out = colorize_line("[12:00:00] [main/INFO]: ", formatter)
    assert out.endswith("]: " + ANSI_WHITE + ANSI_RESET)


def test_template_syntax_in_message_not_expanded(formatter):
    out = colorize_line("[t] [main/INFO]: {{ level }} {MESSAGE} {% raw %}", formatter)
    assert out.endswith(ANSI_WHITE + "{{ level }} {MESSAGE} {% raw %}" + ANSI_RESET)


def test_formatting_is_repeatable(formatter):
    fields = ParsedFields("t", "main", "WARN", "same")
    assert formatter.format(fields) == formatter.format(fields)


def test_label_applied_to_every_line():
    fmt = LineFormatter(tz_name="PST")
    for line in ("[a] [x/INFO]: 1", "[b] [y/ERROR]: 2"):
        assert " (PST)] " in colorize_line(line, fmt)
