# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by OptKit.

Two families of failures exist. Definition errors are raised while options are
being declared or registered and signal a programming mistake. Parse errors are
raised while an argument vector is being parsed and signal bad user input.

All exceptions inherit from `OptKitError`, the base exception for the package.

Exception Hierarchy:
- OptKitError
    ├── OptionDefinitionError
    │   └── DuplicateOptionError
    └── OptionParseError
        ├── UnknownOptionError
        ├── InvalidUsageError
        ├── OptionRangeError
        ├── SequenceError
        └── CallbackError

Parse errors carry the name of the option being processed (if any) and the
underlying reason, so callers can format their own messages.
"""
from __future__ import annotations


class OptKitError(Exception):
    """Base exception for OptKit."""


class OptionDefinitionError(OptKitError):
    """Exception raised when an option is declared with invalid flags or defaults."""


class DuplicateOptionError(OptionDefinitionError):
    """Exception raised when a short or long name is registered twice."""


class OptionParseError(OptKitError):
    """
    Exception raised when an argument vector cannot be parsed.

    Attributes:
        reason (str): The underlying failure message.
        option (str | None): The short or long name being processed, if any.
    """

    def __init__(self, reason: str, option: str | None = None) -> None:
        self.reason = reason
        self.option = option
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.option is None:
            return self.reason
        return f"Parsing of '{self.option}' failed: {self.reason}"

    def with_option(self, option: str) -> OptionParseError:
        """Return a copy of this error of the same kind, naming the failed option."""
        return type(self)(self.reason, option=option)


class UnknownOptionError(OptionParseError):
    """Exception raised when a short or long name is not registered."""

    def _format_message(self) -> str:
        if self.option is None:
            return self.reason
        return f"No such option '{self.option}'"


class InvalidUsageError(OptionParseError):
    """Exception raised when a value is missing, unexpected, or malformed."""


class OptionRangeError(OptionParseError):
    """Exception raised when an integer value does not fit the option's type."""


class SequenceError(OptionParseError):
    """Exception raised when the program name or `--` appears out of order."""


class CallbackError(OptionParseError):
    """Exception raised when a user callback rejects a well-formed value."""
