"""Command line front end.

Examples:
    cloverlogger warn "job failed" retry=3
    cloverlogger --file /var/log/app.log info "deploy finished"
    cloverlogger --show-config
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .errors import WriteError
from .facade import Logger
from .settings import config_path, load_config


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cloverlogger",
        description="Append a tagged line to the cloverlogger file.",
    )
    p.add_argument("tag", nargs="?", help="Free-form tag, e.g. info or warn")
    p.add_argument("values", nargs="*", help="Values joined with the separator")
    p.add_argument("--config", help="Config file (default: %(prog)s.conf at the project root or $CLOVERLOGGER_CONF)")
    p.add_argument("--file", dest="file_path", help="Destination file, overrides FILE")
    p.add_argument("--separator", help="Field separator, overrides SEPARATOR")
    p.add_argument("--show-config", action="store_true", help="Print the resolved settings and exit")
    return p


def _configure_logging() -> None:
    logger.remove()
    logger.add(sys.stderr, level="INFO", format="<level>{level}</level>: {message}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging()

    config = load_config(args.config)
    overrides = {}
    if args.file_path is not None:
        overrides["file_path"] = args.file_path
    if args.separator is not None:
        overrides["separator"] = args.separator
    if overrides:
        config = config.model_copy(update=overrides)

    if args.show_config:
        print(f"config:    {args.config or config_path()}")
        print(f"separator: {config.separator}")
        print(f"file:      {config.file_path}")
        return 0

    if not args.tag:
        parser.error("a tag is required unless --show-config is given")

    try:
        Logger(config).log(args.tag, *args.values)
    except WriteError as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
