"""Rich Console factory and theme for banksim output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BANK_THEME = Theme(
    {
        "bank.ok": "bold green",
        "bank.error": "bold red",
        "bank.warning": "bold yellow",
        "bank.op": "bold cyan",
        "bank.key": "dim",
        "bank.id": "bold blue",
        "bank.amount": "magenta",
        "bank.status.open": "green",
        "bank.status.closed": "yellow",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "open": "bank.status.open",
    "closed": "bank.status.closed",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=BANK_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Return the Rich style name for an account status."""
    return _STATUS_STYLES.get(status, "")
