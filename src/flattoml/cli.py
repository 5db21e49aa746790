"""Command line access to flattoml documents."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from .config import ReaderSettings
from .data import get_bool, get_float, get_int, get_string
from .errors import FlatTomlError
from .loader import load_file
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)

_GETTERS = {
    "string": get_string,
    "bool": get_bool,
    "int": get_int,
    "float": get_float,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flattoml", description="Read values from flat TOML-style files")
    parser.add_argument("--settings", help="Path to a flattoml settings file")
    parser.add_argument("--log-level", help="Override the configured logging level")
    commands = parser.add_subparsers(dest="command", required=True)

    get = commands.add_parser("get", help="Print one typed value")
    get.add_argument("path", help="Configuration file")
    get.add_argument("section", help="Section name (case-insensitive)")
    get.add_argument("key", help="Key name (case-sensitive)")
    get.add_argument("--type", dest="value_type", choices=sorted(_GETTERS), default="string")

    dump = commands.add_parser("dump", help="Print all sections as JSON")
    dump.add_argument("path", help="Configuration file")
    return parser


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = ReaderSettings.from_file(args.settings) if args.settings else ReaderSettings()
        if args.log_level:
            settings.logging.level = args.log_level
        configure_logging(settings.logging)

        config = load_file(args.path, encoding=settings.encoding)
    except FlatTomlError as exc:
        print(f"flattoml: {exc}", file=sys.stderr)
        return 1

    logger.info("document_loaded", extra={"path": args.path, "sections": len(config)})
    if args.command == "get":
        print(_format(_GETTERS[args.value_type](config, args.section, args.key)))
    else:
        print(json.dumps(config.to_dict(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
