"""
Rich output helpers for the figtokens CLI.
"""

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

console = Console()

# Style definitions
STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
}


def print_header(title: str) -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    console.print()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def display_documents_table(documents: dict[str, str], title: str = "") -> None:
    """Show generated files with their line counts."""
    if title:
        print_header(title)

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("File", style="white bold")
    table.add_column("Lines", style="bright_black", justify="right")

    for path, content in documents.items():
        table.add_row(path, str(content.count("\n")))

    console.print(table)
    console.print()
