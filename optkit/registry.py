# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionRegistry`, the ordered set of options known to a parser.

The registry keeps references to caller-owned `Option` objects in registration
order and resolves short and long names to them. Names are checked when an
option is added: a short or long name that is already taken raises
`DuplicateOptionError`, so every lookup has at most one match. Two options
that would export under the same `dest` are rejected the same way.

Typical Usage:
    registry = OptionRegistry()
    registry.add(verbose).add(jobs)
    registry.find_by_short("v")   # → verbose
    registry.find_by_long("jobs") # → jobs
    registry.to_namespace()       # → Namespace(verbose=False, jobs=1)
"""
from __future__ import annotations

from argparse import Namespace
from typing import Any, Iterable, Iterator

from optkit.exceptions import DuplicateOptionError, OptionDefinitionError
from optkit.logger import logger
from optkit.option import Option


class OptionRegistry:
    """Ordered collection of options with lookup by short or long name."""

    def __init__(self, options: Iterable[Option] | None = None) -> None:
        self._options: list[Option] = []
        self._short_map: dict[str, Option] = {}
        self._long_map: dict[str, Option] = {}
        if options:
            for option in options:
                self.add(option)

    def add(self, option: Option) -> OptionRegistry:
        """
        Register an option and return the registry so calls can be chained.

        Raises:
            OptionDefinitionError: If `option` is not an `Option`.
            DuplicateOptionError: If the option or one of its names is already registered.
        """
        if not isinstance(option, Option):
            raise OptionDefinitionError(
                f"Expected an Option instance, got {type(option).__name__}"
            )
        if option in self:
            raise DuplicateOptionError(f"Option '{option.display_name}' is already registered")
        if option.short_name is not None and option.short_name in self._short_map:
            existing = self._short_map[option.short_name]
            raise DuplicateOptionError(
                f"Flag '-{option.short_name}' is already used by option '{existing.display_name}'"
            )
        if option.long_name is not None and option.long_name in self._long_map:
            existing = self._long_map[option.long_name]
            raise DuplicateOptionError(
                f"Flag '--{option.long_name}' is already used by option '{existing.display_name}'"
            )
        if self.get(option.dest) is not None:
            raise DuplicateOptionError(
                f"Destination '{option.dest}' is already defined. "
                "Give each option a unique long name."
            )

        self._options.append(option)
        if option.short_name is not None:
            self._short_map[option.short_name] = option
        if option.long_name is not None:
            self._long_map[option.long_name] = option
        logger.debug("Registered %s as %s", option.flags, option.option_type)
        return self

    def find_by_short(self, name: str) -> Option | None:
        """Return the option whose short name is `name`, or None."""
        return self._short_map.get(name)

    def find_by_long(self, name: str) -> Option | None:
        """Return the option whose long name is `name`, or None."""
        return self._long_map.get(name)

    def get(self, dest: str) -> Option | None:
        """Return the option exported under `dest`, or None."""
        return next((option for option in self._options if option.dest == dest), None)

    def reset(self) -> None:
        """Reset every registered option to its default."""
        for option in self._options:
            option.reset()

    def as_dict(self) -> dict[str, Any]:
        """Return the current values keyed by `dest`, in registration order."""
        return {option.dest: option.value for option in self._options}

    def to_namespace(self) -> Namespace:
        """Return the current values as an `argparse.Namespace`."""
        return Namespace(**self.as_dict())

    def __contains__(self, option: object) -> bool:
        return any(option is registered for registered in self._options)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        return (
            f"OptionRegistry(options={len(self._options)}, "
            f"short={len(self._short_map)}, long={len(self._long_map)})"
        )

    def __repr__(self) -> str:
        return str(self)
