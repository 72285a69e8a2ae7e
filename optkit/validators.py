# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Reusable option callbacks that validate parsed values.

Each factory returns a callable suitable for the `callback=` argument of an
option. The callable raises `ValueError` with a descriptive message when the
value is rejected; the option turns that into a `CallbackError` naming the
option that failed.

Included Validators:
- int_range_validator: Enforces an inclusive integer range.
- words_validator: Accepts only specific words (case-insensitive).
- non_empty_validator: Rejects empty or whitespace-only strings.
"""
from typing import Callable, KeysView, Sequence


def int_range_validator(minimum: int, maximum: int) -> Callable[[int], None]:
    """Validator for integer ranges."""

    def validate(value: int) -> None:
        if not minimum <= value <= maximum:
            raise ValueError(
                f"Invalid value {value}. Enter a number between {minimum} and {maximum}."
            )

    return validate


def words_validator(
    words: Sequence[str] | KeysView[str], error_message: str | None = None
) -> Callable[[str], None]:
    """Validator for specific word inputs."""
    allowed = {word.upper() for word in words}
    if error_message is None:
        error_message = f"Invalid input. Choices: {{{', '.join(words)}}}."

    def validate(value: str) -> None:
        if value.upper() not in allowed:
            raise ValueError(error_message)

    return validate


def non_empty_validator() -> Callable[[str], None]:
    """Validator for non-empty strings."""

    def validate(value: str) -> None:
        if not value.strip():
            raise ValueError("Value must not be empty")

    return validate
