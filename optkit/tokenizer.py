# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Classifies single argument-vector entries for the OptKit parser.

`classify()` looks at one token and decides whether it is a long option
(`--name`, `--name=value`), a short option bundle (`-abc`, `-abc=value`), the
end-of-options sentinel (`--`) or a positional word (the program name
candidate). It does no registry lookups; `Token.requests()` expands an option
token into the ordered list of single-option dispatch requests.

Rules, in priority order:
1. Tokens shorter than two characters are positional (this covers `-` and
   the empty string, which never counts as a program name).
2. `--` ends option parsing.
3. `--rest` is a long option; `rest` is split at the first `=`.
4. `-rest` is a short bundle; `rest` is split at the first `=` and the value
   belongs to the last character of the bundle. A bundle with no name before
   `=` (`-=5`) is rejected instead of being ignored.
5. Anything else is positional.

Example:
    classify("-ij=100").requests()
    # → [OptionRequest("i", SHORT, False, ""), OptionRequest("j", SHORT, True, "100")]
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from optkit.exceptions import InvalidUsageError

END_OF_OPTIONS = "--"


class TokenKind(Enum):
    """The form of an argument-vector entry."""

    SHORT = "short"
    LONG = "long"
    POSITIONAL = "positional"
    END_OF_OPTIONS = "end_of_options"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionRequest:
    """A single option to dispatch, with its optional attached value."""

    name: str
    kind: TokenKind
    has_value: bool = False
    value: str = ""

    @property
    def flag(self) -> str:
        """The name as it would be written on the command line."""
        prefix = "--" if self.kind is TokenKind.LONG else "-"
        return f"{prefix}{self.name}"


@dataclass(frozen=True)
class Token:
    """
    A classified argument-vector entry.

    Attributes:
        raw (str): The original entry.
        kind (TokenKind): How the entry was classified.
        name (str): Long name, short bundle, or the positional word itself.
        has_value (bool): Whether an `=` was present.
        value (str): Everything after the first `=`.
    """

    raw: str
    kind: TokenKind
    name: str = ""
    has_value: bool = False
    value: str = ""

    @property
    def is_option(self) -> bool:
        return self.kind in (TokenKind.SHORT, TokenKind.LONG)

    def requests(self) -> list[OptionRequest]:
        """
        Expand this token into single-option dispatch requests.

        A long token yields one request. A short bundle yields one request per
        character; only the last one carries the attached value.

        Raises:
            InvalidUsageError: A short token has `=` with no option name before it.
        """
        if self.kind is TokenKind.LONG:
            return [OptionRequest(self.name, self.kind, self.has_value, self.value)]
        if self.kind is not TokenKind.SHORT:
            return []
        if not self.has_value:
            return [OptionRequest(char, self.kind) for char in self.name]
        if not self.name:
            raise InvalidUsageError(f"Missing option name before '=' in '{self.raw}'")
        requests = [OptionRequest(char, self.kind) for char in self.name[:-1]]
        requests.append(OptionRequest(self.name[-1], self.kind, True, self.value))
        return requests


def _split_value(text: str) -> tuple[str, bool, str]:
    name, separator, value = text.partition("=")
    return name, bool(separator), value


def classify(raw: str) -> Token:
    """Classify one argument-vector entry."""
    if len(raw) < 2:
        return Token(raw, TokenKind.POSITIONAL, name=raw)
    if raw == END_OF_OPTIONS:
        return Token(raw, TokenKind.END_OF_OPTIONS)
    if raw[0] == "-":
        if raw[1] == "-":
            name, has_value, value = _split_value(raw[2:])
            return Token(raw, TokenKind.LONG, name, has_value, value)
        bundle, has_value, value = _split_value(raw[1:])
        return Token(raw, TokenKind.SHORT, bundle, has_value, value)
    return Token(raw, TokenKind.POSITIONAL, name=raw)
