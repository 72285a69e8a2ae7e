# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` family: named, typed, settable values that the parser
fills in from the command line.

Every option has a short form (`-x`), a long form (`--name`), or both, a
default value, a presence flag and a type-specific coercion routine. Options
are created and held by the caller; the parser only keeps references to them
and reads results back through the same objects.

Option Classes:
- Option: Base class holding identity, presence and the apply/callback cycle.
- BoolOption: A flag; takes no value and becomes `True` when seen.
- IntOption: A signed 64-bit integer; always needs `=VALUE`.
- UIntOption: An unsigned 64-bit integer; digits only.
- StrOption: Any string, stored verbatim.

Example:
    verbose = BoolOption("-v", "--verbose", description="Chatty output.")
    jobs = IntOption("-j", "--jobs", default=1, callback=int_range_validator(1, 64))

    jobs.apply(True, "8")
    assert jobs.value == 8

Known limitation:
    A `BoolOption` can only be switched on from the command line. There is no
    `--flag=false` form; a false value can only come from the default.
"""
from __future__ import annotations

from typing import Any, Callable

from optkit.coercion import INT64_MAX, INT64_MIN, UINT64_MAX, coerce_value
from optkit.exceptions import CallbackError, InvalidUsageError, OptionDefinitionError
from optkit.logger import logger
from optkit.option_type import OptionType

OptionCallback = Callable[[Any], Any]


class Option:
    """
    Base class for all options.

    Subclasses set `option_type` and implement `_coerce()` and
    `_validate_default()`. The value is only changed by `apply()` and
    `reset()`.

    Attributes:
        short_name (str | None): Single character used as `-x`, if any.
        long_name (str | None): Name used as `--name`, if any.
        description (str): Documentation text; not used while parsing.
        callback (Callable | None): Called with each newly coerced value.
    """

    option_type: OptionType

    def __init__(
        self,
        *flags: str,
        default: Any = None,
        description: str = "",
        callback: OptionCallback | None = None,
    ) -> None:
        self.short_name, self.long_name = self._parse_flags(flags)
        if default is None:
            default = self._empty_default()
        self._validate_default(default)
        if callback is not None and not callable(callback):
            raise OptionDefinitionError(
                f"callback for '{self.display_name}' must be callable, got {type(callback)}"
            )
        self.default: Any = default
        self.description: str = description
        self.callback: OptionCallback | None = callback
        self._value: Any = default
        self._present: bool = False

    @staticmethod
    def _parse_flags(flags: tuple[str, ...]) -> tuple[str | None, str | None]:
        """Split flags into at most one short and one long name."""
        if not flags:
            raise OptionDefinitionError("No flags provided")
        short_name: str | None = None
        long_name: str | None = None
        for flag in flags:
            if not isinstance(flag, str):
                raise OptionDefinitionError(f"Flag '{flag}' must be a string")
            if flag.startswith("--"):
                name = flag[2:]
                if not name:
                    raise OptionDefinitionError(
                        f"Flag '{flag}' must be at least 3 characters long"
                    )
                if "=" in name:
                    raise OptionDefinitionError(f"Flag '{flag}' must not contain '='")
                if long_name is not None:
                    raise OptionDefinitionError(
                        f"Only one long flag is allowed, got '--{long_name}' and '{flag}'"
                    )
                long_name = name
            elif flag.startswith("-"):
                name = flag[1:]
                if len(name) != 1:
                    raise OptionDefinitionError(
                        f"Flag '{flag}' must be a single character or start with '--'"
                    )
                if name in ("-", "="):
                    raise OptionDefinitionError(f"Flag '{flag}' is not a valid short flag")
                if short_name is not None:
                    raise OptionDefinitionError(
                        f"Only one short flag is allowed, got '-{short_name}' and '{flag}'"
                    )
                short_name = name
            else:
                raise OptionDefinitionError(
                    f"Flag '{flag}' must start with '-' or '--'; positional options are not supported"
                )
        return short_name, long_name

    def _empty_default(self) -> Any:
        raise NotImplementedError

    def _validate_default(self, default: Any) -> None:
        raise NotImplementedError

    def _coerce(self, has_value: bool, raw_value: str) -> Any:
        raise NotImplementedError

    @property
    def flags(self) -> tuple[str, ...]:
        """The option's flags in `-x`, `--name` order."""
        flags = []
        if self.short_name is not None:
            flags.append(f"-{self.short_name}")
        if self.long_name is not None:
            flags.append(f"--{self.long_name}")
        return tuple(flags)

    @property
    def display_name(self) -> str:
        """The long name if there is one, else the short name."""
        return self.long_name or self.short_name or ""

    @property
    def dest(self) -> str:
        """Identifier used as the key when exporting parsed values."""
        return self.display_name.replace("-", "_")

    @property
    def present(self) -> bool:
        """Whether the option was matched during parsing."""
        return self._present

    @property
    def value(self) -> Any:
        """The current value: the default until a successful `apply()`."""
        return self._value

    def get(self) -> Any:
        """Return the current value."""
        return self._value

    def set_present(self) -> None:
        """Mark the option as seen. Presence is never cleared except by `reset()`."""
        self._present = True

    def apply(self, has_value: bool, raw_value: str = "") -> None:
        """
        Coerce a raw command-line value and store it.

        Args:
            has_value (bool): Whether the token carried an `=value` part.
            raw_value (str): The text after `=`; ignored when `has_value` is False.

        Raises:
            InvalidUsageError: The value is missing, unexpected or malformed.
            OptionRangeError: An integer value is out of range.
            CallbackError: The user callback rejected the coerced value.
        """
        value = self._coerce(has_value, raw_value)
        self._value = value
        logger.debug("[%s] Set value -> %r", self.display_name, value)
        if self.callback is not None:
            try:
                self.callback(value)
            except Exception as error:
                raise CallbackError(str(error) or type(error).__name__) from error

    def reset(self) -> None:
        """Restore the default value and clear presence."""
        self._value = self.default
        self._present = False

    def __call__(self) -> bool:
        return self._present

    def __str__(self) -> str:
        return (
            f"{type(self).__name__}(flags={self.flags}, value={self._value!r}, "
            f"present={self._present})"
        )

    def __repr__(self) -> str:
        return str(self)


class BoolOption(Option):
    """A flag that takes no value and becomes `True` when present."""

    option_type = OptionType.BOOL

    def _empty_default(self) -> bool:
        return False

    def _validate_default(self, default: Any) -> None:
        if not isinstance(default, bool):
            raise OptionDefinitionError(
                f"Default value {default!r} for '{self.display_name}' must be a bool"
            )

    def _coerce(self, has_value: bool, raw_value: str) -> bool:
        if has_value:
            raise InvalidUsageError("Argument does not expect a value")
        return True


class IntOption(Option):
    """A signed 64-bit integer option."""

    option_type = OptionType.INT64

    def _empty_default(self) -> int:
        return 0

    def _validate_default(self, default: Any) -> None:
        if isinstance(default, bool) or not isinstance(default, int):
            raise OptionDefinitionError(
                f"Default value {default!r} for '{self.display_name}' must be an int"
            )
        if not INT64_MIN <= default <= INT64_MAX:
            raise OptionDefinitionError(
                f"Default value {default!r} for '{self.display_name}' is not in range of a 64 bit int"
            )

    def _coerce(self, has_value: bool, raw_value: str) -> int:
        if not has_value:
            raise InvalidUsageError("Argument expects an integer value")
        return coerce_value(raw_value, self.option_type)


class UIntOption(Option):
    """An unsigned 64-bit integer option. Only decimal digits are accepted."""

    option_type = OptionType.UINT64

    def _empty_default(self) -> int:
        return 0

    def _validate_default(self, default: Any) -> None:
        if isinstance(default, bool) or not isinstance(default, int):
            raise OptionDefinitionError(
                f"Default value {default!r} for '{self.display_name}' must be an int"
            )
        if not 0 <= default <= UINT64_MAX:
            raise OptionDefinitionError(
                f"Default value {default!r} for '{self.display_name}' is not in range "
                "of a 64 bit unsigned integer"
            )

    def _coerce(self, has_value: bool, raw_value: str) -> int:
        if not has_value:
            raise InvalidUsageError("Argument expects a non negative int value")
        return coerce_value(raw_value, self.option_type)


class StrOption(Option):
    """A string option. The raw value is stored verbatim, including `=` and ''."""

    option_type = OptionType.STRING

    def _empty_default(self) -> str:
        return ""

    def _validate_default(self, default: Any) -> None:
        if not isinstance(default, str):
            raise OptionDefinitionError(
                f"Default value {default!r} for '{self.display_name}' must be a str"
            )

    def _coerce(self, has_value: bool, raw_value: str) -> str:
        if not has_value:
            raise InvalidUsageError("Argument expects a value")
        return raw_value


OPTION_CLASSES: dict[OptionType, type[Option]] = {
    OptionType.BOOL: BoolOption,
    OptionType.INT64: IntOption,
    OptionType.UINT64: UIntOption,
    OptionType.STRING: StrOption,
}


def create_option(
    *flags: str,
    type: OptionType | str = OptionType.BOOL,
    default: Any = None,
    description: str = "",
    callback: OptionCallback | None = None,
) -> Option:
    """
    Build the `Option` subclass matching `type`.

    Args:
        *flags (str): `-x` and/or `--name`.
        type (OptionType | str): The option type or one of its names/aliases.
        default (Any): Default value; the type's empty value when None.
        description (str): Documentation text.
        callback (Callable | None): Called with each newly coerced value.

    Returns:
        Option: The new option.
    """
    if not isinstance(type, OptionType):
        try:
            type = OptionType(type)
        except ValueError as error:
            raise OptionDefinitionError(str(error)) from error
    option_class = OPTION_CLASSES[type]
    return option_class(
        *flags, default=default, description=description, callback=callback
    )
