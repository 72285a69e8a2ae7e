# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptParser`, the entry point of OptKit. It maps a raw
argument vector onto typed options and separates the program name and its
trailing arguments from the option set.

The parser is small and strict:
- Short options are bundlable (`-abc`) and take values as `-abc=VALUE`, where
  the value belongs to the last character.
- Long options take values as `--name=VALUE`.
- Exactly one non-option word is accepted as the program name.
- `--` ends option parsing; everything after it is kept verbatim as the
  program trailer.

Any error aborts the parse immediately. Options applied before the failing
token keep their new values; there is no rollback.

Public Interface:
- `add(option)`: Register a caller-owned `Option`; chainable.
- `add_option(*flags, type=..., ...)`: Build, register and return an option.
- `parse(argv)`: Parse a `sys.argv`-style list (index 0 is skipped).
- `program_name`, `program_trailer`, `program_argc`: Parse results.
- `values()`, `to_namespace()`: Export option values by `dest`.
- `reset()`: Restore all options and clear program state.

Example Usage:
    is_ = BoolOption("-i", "--is")
    js = IntOption("-j", "--js", default=1100)
    parser = OptParser().add(is_).add(js)

    parser.parse(["vm", "-ij=100", "image.bin", "--", "-x", "y"])

    # is_.value is True, js.value == 100
    # parser.program_name == "image.bin"
    # parser.program_trailer == ["-x", "y"]

Re-using options:
    Option presence and values are not reset by `parse()`. Call `reset()`
    before parsing a second argument vector with the same options.
"""
from __future__ import annotations

from argparse import Namespace
from typing import Any, Iterable, Sequence

from optkit.dispatcher import Dispatcher
from optkit.exceptions import OptionParseError, SequenceError
from optkit.logger import logger
from optkit.option import Option, OptionCallback, create_option
from optkit.option_type import OptionType
from optkit.registry import OptionRegistry
from optkit.tokenizer import TokenKind, classify


class OptParser:
    """
    Command-line option parser.

    Attributes:
        program (str | None): Name of the executable, shown in `str(parser)`.
        registry (OptionRegistry): The registered options.
    """

    def __init__(
        self,
        options: Iterable[Option] | None = None,
        program: str | None = None,
    ) -> None:
        self.program: str | None = program
        self.registry: OptionRegistry = OptionRegistry(options)
        self._dispatcher: Dispatcher = Dispatcher(self.registry)
        self._program_name: str = ""
        self._program_trailer: list[str] = []

    def add(self, option: Option) -> OptParser:
        """Register a caller-owned option and return the parser."""
        self.registry.add(option)
        return self

    def add_option(
        self,
        *flags: str,
        type: OptionType | str = OptionType.BOOL,
        default: Any = None,
        description: str = "",
        callback: OptionCallback | None = None,
    ) -> Option:
        """
        Define a new option, register it, and return it.

        Args:
            *flags (str): `-x` and/or `--name`.
            type (OptionType | str): The option type (default: "bool").
            default (Any): Default value; the type's empty value when None.
            description (str): Documentation text.
            callback (Callable | None): Called with each newly coerced value.
        """
        option = create_option(
            *flags,
            type=type,
            default=default,
            description=description,
            callback=callback,
        )
        self.registry.add(option)
        return option

    @property
    def program_name(self) -> str:
        """The program name from argv, or "" if none was given."""
        return self._program_name

    @property
    def has_program_name(self) -> bool:
        return bool(self._program_name)

    @property
    def program_trailer(self) -> list[str]:
        """Arguments after `--`, passed through without parsing."""
        return list(self._program_trailer)

    @property
    def program_argc(self) -> int:
        return len(self._program_trailer)

    def _set_program_name(self, name: str) -> None:
        if self._program_name:
            raise SequenceError(f"Bad option - {name}")
        self._program_name = name
        logger.debug("Program name -> %r", name)

    def parse(self, argv: Sequence[str]) -> OptParser:
        """
        Parse an argument vector as received by a program's entry point.

        Args:
            argv (Sequence[str]): The full vector; `argv[0]` (the executable
                path) is skipped.

        Returns:
            OptParser: This parser, for reading results fluently.

        Raises:
            UnknownOptionError: An option name is not registered.
            InvalidUsageError: A value is missing, unexpected or malformed.
            OptionRangeError: An integer value is out of range.
            SequenceError: A second program name, or `--` before any program name.
            CallbackError: A user callback rejected a value.
        """
        self._program_name = ""
        self._program_trailer = []
        try:
            for index in range(1, len(argv)):
                token = classify(argv[index])
                if token.kind is TokenKind.END_OF_OPTIONS:
                    if not self._program_name:
                        raise SequenceError(
                            "Program filename must be specified before arguments"
                        )
                    self._program_trailer = list(argv[index + 1 :])
                    break
                if token.kind is TokenKind.POSITIONAL:
                    self._set_program_name(token.raw)
                    continue
                for request in token.requests():
                    self._dispatcher.dispatch(request)
        except OptionParseError as error:
            logger.debug("Parse failed (%s): %s", type(error).__name__, error)
            raise
        logger.debug(
            "Parsed %d argument(s): program=%r, trailer=%r",
            len(argv),
            self._program_name,
            self._program_trailer,
        )
        return self

    def values(self) -> dict[str, Any]:
        """Return option values keyed by `dest`."""
        return self.registry.as_dict()

    def to_namespace(self) -> Namespace:
        """Return option values as an `argparse.Namespace`."""
        return self.registry.to_namespace()

    def reset(self) -> None:
        """Reset every option to its default and clear the program name and trailer."""
        self.registry.reset()
        self._program_name = ""
        self._program_trailer = []

    def __str__(self) -> str:
        present = sum(option.present for option in self.registry)
        return (
            f"OptParser(program={self.program!r}, options={len(self.registry)}, "
            f"present={present}, "
            f"program_name={self.program_name!r}, trailer={self.program_argc})"
        )

    def __repr__(self) -> str:
        return str(self)
