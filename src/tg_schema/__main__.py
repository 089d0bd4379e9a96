# src/tg_schema/__main__.py

"""Fetch the Bot API page, extract the schema and print it.

    python -m tg_schema [SOURCE] [--config FILE] [--section NAME] [-v]
"""

import argparse
import logging
import sys
from pprint import pprint

from .config import SchemaConfig, load_config
from .errors import SchemaError
from .parsers import BotApiHtmlParser
from .retrieval import load_source

logger = logging.getLogger("tg_schema")

SECTIONS = ("all", "types", "methods", "recent_changes")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="tg_schema",
        description="Extract a typed schema from the Telegram Bot API docs.",
    )
    p.add_argument(
        "source",
        nargs="?",
        help="URL or path of the documentation page (default from config)",
    )
    p.add_argument("--config", help="YAML file with section boundaries")
    p.add_argument(
        "--section",
        choices=SECTIONS,
        default="all",
        help="part of the schema to print (default all)",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config) if args.config else SchemaConfig()
    source = args.source or config.source

    markup = load_source(source)
    try:
        schema = BotApiHtmlParser(config).parse(markup)
    except SchemaError as e:
        logger.error("Failed to parse %s: %s", source, e)
        return 1

    if args.section == "all":
        pprint(schema)
    else:
        pprint(getattr(schema, args.section))
    return 0


if __name__ == "__main__":
    sys.exit(main())
