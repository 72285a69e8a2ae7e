# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionType`, an enum used to tag every option with the kind of value
it stores.

Each member maps to one concrete `Option` subclass and to the coercion rules
applied to its raw command-line value. Types can be given by name when options
are declared through `OptParser.add_option()`, and common aliases are accepted.

Exports:
    - OptionType: Enum of supported option value types.

Example:
    OptionType("bool")   → OptionType.BOOL
    OptionType("int")    → OptionType.INT64 (via alias)
    OptionType("str")    → OptionType.STRING (via alias)
"""
from __future__ import annotations

from enum import Enum


class OptionType(Enum):
    """
    Defines the type of value held by an option.

    Members:
        BOOL: A flag that takes no value and becomes `True` when present.
        INT64: A signed 64-bit integer, given as `-x=VALUE` or `--name=VALUE`.
        UINT64: An unsigned 64-bit integer, digits only.
        STRING: Any string, stored verbatim.

    Aliases:
        - "flag", "store_true" → "bool"
        - "int" → "int64"
        - "uint" → "uint64"
        - "str" → "string"
    """

    BOOL = "bool"
    INT64 = "int64"
    UINT64 = "uint64"
    STRING = "string"

    @classmethod
    def choices(cls) -> list[OptionType]:
        """Return a list of all option types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "flag": "bool",
            "store_true": "bool",
            "int": "int64",
            "uint": "uint64",
            "str": "string",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> OptionType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """Whether options of this type require an attached `=value`."""
        return self is not OptionType.BOOL

    def __str__(self) -> str:
        """Return the string representation of the option type."""
        return self.value
