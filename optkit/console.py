# OptKit Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for OptKit output."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "flag": "bold cyan",
        "present": "bold green",
        "absent": "dim",
        "error": "bold red",
    }
)

console = Console(theme=theme)
error_console = Console(theme=theme, stderr=True)
