# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Dispatcher`, which applies single option requests to a registry.

For each `OptionRequest` the dispatcher looks the name up by short or long
form, marks the option present, and hands the raw value to the option's
coercion routine. Failures are re-raised as the same error kind with the
option name layered on, chained to the original error.
"""
from __future__ import annotations

from optkit.exceptions import OptionParseError, UnknownOptionError
from optkit.logger import logger
from optkit.option import Option
from optkit.registry import OptionRegistry
from optkit.tokenizer import OptionRequest, TokenKind


class Dispatcher:
    """Resolves option requests against an `OptionRegistry` and applies them."""

    def __init__(self, registry: OptionRegistry) -> None:
        self.registry = registry

    def resolve(self, request: OptionRequest) -> Option:
        """Return the option named by `request` or raise `UnknownOptionError`."""
        if request.kind is TokenKind.LONG:
            option = self.registry.find_by_long(request.name)
        else:
            option = self.registry.find_by_short(request.name)
        if option is None:
            raise UnknownOptionError(f"No such option {request.name}", option=request.name)
        return option

    def dispatch(self, request: OptionRequest) -> Option:
        """
        Apply one request and return the option it updated.

        Raises:
            UnknownOptionError: The name is not registered.
            OptionParseError: The option rejected the value; same subclass as
                raised by the option, with the option name attached.
        """
        option = self.resolve(request)
        option.set_present()
        logger.debug(
            "Dispatching %s (has_value=%s, value=%r)",
            request.flag,
            request.has_value,
            request.value,
        )
        try:
            option.apply(request.has_value, request.value)
        except OptionParseError as error:
            raise error.with_option(request.name) from error
        return option
