from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from .errors import LineError
from .formatter import LineFormatter, colorize_line

logger = logging.getLogger(__name__)


@dataclass
class Processor:
    formatter: LineFormatter
    on_error: str = "fail"

    def process_stream(self, src: TextIO, dst: TextIO) -> int:
        """Colorize 'src' into 'dst' line by line; return the number of skipped lines.

        In 'fail' mode the first LineError propagates. In 'skip' mode it is
        logged and the line dropped. A failing line never writes output.
        """
        skipped = 0
        for line_number, raw_line in enumerate(src, start=1):
            line = _strip_terminator(raw_line)
            try:
                rendered = colorize_line(line, self.formatter)
            except LineError as e:
                if self.on_error != "skip":
                    logger.error("line %d: %s", line_number, e)
                    raise
                logger.warning("line %d: %s", line_number, e)
                skipped += 1
                continue
            self._emit(rendered, dst)
        return skipped

    def _emit(self, rendered: str, dst: TextIO) -> None:
        dst.write(rendered + "\n")
        # keep pace with a live tail upstream
        dst.flush()


def _strip_terminator(raw_line: str) -> str:
    if raw_line.endswith("\n"):
        raw_line = raw_line[:-1]
        if raw_line.endswith("\r"):
            raw_line = raw_line[:-1]
    return raw_line
