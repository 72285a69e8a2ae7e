# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains the value coercion rules for OptKit options.

Raw option values arrive as strings. The functions in this module convert them
into the typed values stored by options and separate syntactic failures from
range failures, so the caller can report `InvalidUsageError` and
`OptionRangeError` distinctly.

Functions:
- is_uint: Check that a string is made only of ASCII decimal digits.
- coerce_int64: Parse a signed 64-bit integer.
- coerce_uint64: Parse an unsigned 64-bit integer (digits only).
- coerce_value: Dispatch to the rule for an `OptionType`.
"""
import re
from typing import Any

from optkit.exceptions import InvalidUsageError, OptionRangeError
from optkit.option_type import OptionType

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_uint(value: str) -> bool:
    """
    Return True if every character of `value` is an ASCII decimal digit.

    An empty string passes; it is rejected later by the integer grammar.
    """
    return all("0" <= char <= "9" for char in value)


def coerce_int64(value: str) -> int:
    """
    Convert a string to a signed 64-bit integer.

    Args:
        value (str): Optional sign followed by decimal digits.

    Returns:
        int: The parsed value.

    Raises:
        InvalidUsageError: If the string is not a decimal integer.
        OptionRangeError: If the integer does not fit in 64 signed bits.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise InvalidUsageError("Argument expects an integer value")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise OptionRangeError("Value is not in range of a 64 bit int")
    return number


def coerce_uint64(value: str) -> int:
    """
    Convert a string to an unsigned 64-bit integer.

    The digit check runs before any numeric parsing, so `-1` is a usage error
    and not a range error.

    Raises:
        InvalidUsageError: If the string is empty or has a non-digit character.
        OptionRangeError: If the integer does not fit in 64 unsigned bits.
    """
    if not value or not is_uint(value):
        raise InvalidUsageError("Argument expects a non negative int value")
    number = int(value)
    if number > UINT64_MAX:
        raise OptionRangeError("Value is not in range of a 64 bit unsigned integer")
    return number


def coerce_value(value: str, option_type: OptionType) -> Any:
    """
    Convert a raw string according to `option_type`.

    `BOOL` has no raw value to convert; callers handle flags before reaching
    this function.
    """
    if option_type is OptionType.INT64:
        return coerce_int64(value)
    if option_type is OptionType.UINT64:
        return coerce_uint64(value)
    if option_type is OptionType.STRING:
        return value
    raise ValueError(f"Option type {option_type} does not take a value")
