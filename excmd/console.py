# Excmd CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for excmd output."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "excmd.option": "green",
        "excmd.value": "yellow",
        "excmd.error": "bold red",
    }
)

console = Console(theme=theme, highlight=False)
error_console = Console(theme=theme, highlight=False, stderr=True)
