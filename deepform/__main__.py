"""Interface for ``python -m deepform``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Sequence

from ._version import version
from .errors import DeepFormError
from .parser import parse_form_data


__all__ = ["main"]

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = ArgumentParser(prog="deepform", description="Parse flat form data into nested JSON.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("query", nargs="*", help="query strings to parse; read from stdin when omitted")
    _ = parser.add_argument("--omit-empty-strings", action="store_true", help="drop entries with empty values")
    _ = parser.add_argument("--indent", type=int, default=None, help="indent the JSON output")
    _ = parser.add_argument("--debug", action="store_true", help="log parsing details to stderr")
    options = parser.parse_args(args)

    if options.debug:
        logging.basicConfig(level=logging.DEBUG, format=_LOG_FORMAT)

    text = "&".join(options.query) if options.query else sys.stdin.read().strip()

    try:
        result = parse_form_data(text, omit_empty_strings=options.omit_empty_strings)
    except DeepFormError as error:
        parser.error(str(error))
    print(json.dumps(result, indent=options.indent))


if __name__ == "__main__":
    main()
