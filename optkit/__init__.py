"""
OptKit Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    CallbackError,
    DuplicateOptionError,
    InvalidUsageError,
    OptionDefinitionError,
    OptionParseError,
    OptionRangeError,
    OptKitError,
    SequenceError,
    UnknownOptionError,
)
from .logger import logger
from .option import BoolOption, IntOption, Option, StrOption, UIntOption, create_option
from .option_type import OptionType
from .parser import OptParser
from .registry import OptionRegistry

__all__ = [
    "OptParser",
    "OptionRegistry",
    "Option",
    "BoolOption",
    "IntOption",
    "UIntOption",
    "StrOption",
    "OptionType",
    "create_option",
    "OptKitError",
    "OptionDefinitionError",
    "DuplicateOptionError",
    "OptionParseError",
    "UnknownOptionError",
    "InvalidUsageError",
    "OptionRangeError",
    "SequenceError",
    "CallbackError",
    "logger",
]
