"""
OptKit Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich.markup import escape

from optkit.console import console, error_console
from optkit.exceptions import OptionParseError
from optkit.logger import logger
from optkit.option import BoolOption, IntOption, StrOption, UIntOption
from optkit.parser import OptParser
from optkit.table import build_options_table
from optkit.utils import setup_logging
from optkit.validators import int_range_validator, words_validator


def build_parser() -> OptParser:
    """Sample option set for a program launcher."""
    parser = OptParser(program="optkit")
    parser.add(BoolOption("-v", "--verbose", description="Log parser activity."))
    parser.add(BoolOption("-t", "--trace", description="Trace each executed step."))
    parser.add(
        IntOption(
            "-j",
            "--jobs",
            default=1,
            description="Worker count (1-64).",
            callback=int_range_validator(1, 64),
        )
    )
    parser.add(UIntOption("--memory", default=65536, description="Memory size in bytes."))
    parser.add(
        StrOption(
            "-m",
            "--mode",
            default="run",
            description="One of run, debug, dump.",
            callback=words_validator(["run", "debug", "dump"]),
        )
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv
    parser = build_parser()
    try:
        parser.parse(argv)
    except OptionParseError as error:
        error_console.print(f"[error]error:[/] {escape(str(error))}", soft_wrap=True)
        return 2

    verbose = parser.registry.find_by_long("verbose")
    setup_logging(
        console_log_level=logging.DEBUG if verbose and verbose.value else logging.WARNING
    )
    logger.debug("Finished parsing: %s", parser)

    console.print(build_options_table(parser.registry, title="Parsed options"))
    console.print(f"program: {escape(parser.program_name or '<none>')}", soft_wrap=True)
    console.print(f"trailer: {escape(repr(parser.program_trailer))}", soft_wrap=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
