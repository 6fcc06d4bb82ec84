"""
Rich output helpers for the minexpr CLI.
"""

from rich.console import Console
from rich.style import Style
from rich.text import Text

console = Console()

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "muted": Style(color="bright_black"),
    "result": Style(color="bright_white", bold=True),
}


def print_header(title: str) -> None:
    """Print a section header such as ``=== Syntax Tree ===``."""
    console.print(Text(f"=== {title} ===", style=STYLES["title"]), soft_wrap=True)


def print_line(line: str, style: str | None = None) -> None:
    """Print one line verbatim, without markup or wrapping."""
    console.print(Text(line, style=STYLES[style] if style else ""), soft_wrap=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(message, style=STYLES["success"]), soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]), soft_wrap=True)
