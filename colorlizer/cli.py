from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import TextIO

from .config import Config, load_config
from .errors import LineError
from .formatter import LineFormatter
from .processor import Processor
from .zones import display_timezone_name

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="colorlizer", description="Colorize Minecraft server log lines.")
    parser.add_argument("input", type=str, nargs="?", default="-", help="Input file path or '-' for stdin")
    parser.add_argument("-o", "--output", type=str, default="-", help="Output file path or '-' for stdout")
    parser.add_argument("-c", "--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--timezone", type=str, default=None, help="Zone id for the timestamp label (default: host zone)")
    parser.add_argument(
        "--skip-errors",
        action="store_const",
        const="skip",
        dest="on_error",
        default=None,
        help="Log malformed lines and keep going instead of aborting",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    try:
        cfg: Config = load_config(args.config, timezone=args.timezone, on_error=args.on_error)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    # Resolved once; every line carries the same label.
    tz_name = display_timezone_name(cfg.timezone)
    processor = Processor(formatter=LineFormatter(tz_name=tz_name), on_error=cfg.on_error)

    src: TextIO | None = None
    dst: TextIO | None = None
    try:
        src = _open_input(args.input)
        dst = _open_output(args.output)
        skipped = processor.process_stream(src, dst)
        if skipped:
            logger.info("skipped %d malformed line(s)", skipped)
        return 0
    except LineError:
        return 1
    except (BrokenPipeError, KeyboardInterrupt):
        return 0
    except OSError as e:
        logger.error("%s", e)
        return 1
    finally:
        if src is not None and src is not sys.stdin:
            src.close()
        if dst is not None and dst is not sys.stdout:
            dst.close()


def _open_input(path: str) -> TextIO:
    # Undecodable bytes become U+FFFD instead of aborting the stream.
    if path == "-":
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(errors="replace")
        return sys.stdin
    return open(path, "r", encoding="utf-8", errors="replace")


def _open_output(path: str) -> TextIO:
    if path == "-":
        return sys.stdout
    return open(path, "w", encoding="utf-8")


if __name__ == "__main__":
    raise SystemExit(main())
