# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Generates a Rich table view of registered options and their parsed state.

Functions:
- build_options_table(registry): Returns a `rich.Table` with one row per option.
"""
from rich import box
from rich.markup import escape
from rich.table import Table

from optkit.registry import OptionRegistry


def build_options_table(registry: OptionRegistry, title: str | None = None) -> Table:
    """Build a table of flags, type, value, presence and description."""
    table = Table(title=title, box=box.SIMPLE)  # type: ignore[arg-type]
    table.add_column("Flags", style="flag")
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Present")
    table.add_column("Description", style="dim")

    for option in registry:
        present = "[present]yes[/]" if option.present else "[absent]no[/]"
        table.add_row(
            ", ".join(option.flags),
            str(option.option_type),
            escape(repr(option.value)),
            present,
            escape(option.description),
        )
    return table
