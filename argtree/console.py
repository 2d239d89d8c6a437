# Argtree CLI Resolver — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argtree output."""
from rich.console import Console
from rich.theme import Theme

ARGTREE_THEME = Theme(
    {
        "option": "bold cyan",
        "command": "bold magenta",
        "error": "bold red",
        "warning": "yellow",
        "success": "green",
    }
)

console = Console(theme=ARGTREE_THEME)
