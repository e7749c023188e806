"""
Rich console output for the depgrammar commands.

Results go to stdout as a table or as plain lines; status messages go to
stderr. Diagnostics belong to :mod:`depgrammar.utils.logger`.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, Dict, List, Mapping, Optional

from rich.table import Table
from rich.theme import Theme
from rich.console import Console
from rich.markup import escape

from depgrammar.utils.logger import supports_color

DEPGRAMMAR_THEME = Theme(
    {
        "error": "bold red",
        "warning": "bold yellow",
        "stability.stable": "green",
        "stability.rc": "cyan",
        "stability.beta": "yellow",
        "stability.alpha": "magenta",
        "stability.dev": "red",
    }
)

_STATUS_PREFIXES = {"error": "[ERROR]", "warning": "[WARNING]"}

_consoles: Dict[bool, Console] = {}
_forced_color: Optional[bool] = None
_lock = threading.Lock()


def configure_console(color: Optional[bool] = None) -> None:
    """Drop cached consoles and choose how the next ones handle color.

    Args:
        color: ``True`` forces colors, ``False`` disables them and ``None``
            detects them per stream.
    """
    global _forced_color

    with _lock:
        _forced_color = color
        _consoles.clear()


def get_console(*, stderr: bool = False) -> Console:
    """Return the shared console for stdout, or for stderr."""
    console = _consoles.get(stderr)
    if console is not None:
        return console

    with _lock:
        if stderr not in _consoles:
            color = _forced_color
            if color is None:
                color = supports_color(sys.stderr if stderr else sys.stdout)
            _consoles[stderr] = Console(
                theme=DEPGRAMMAR_THEME,
                stderr=stderr,
                force_terminal=True if _forced_color else None,
                no_color=not color,
                highlight=False,
            )
        return _consoles[stderr]


def _print_status(kind: str, message: str) -> None:
    get_console(stderr=True).print(
        f"{escape(_STATUS_PREFIXES[kind])} {message}", style=kind
    )


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    _print_status("error", message)


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    _print_status("warning", message)


def print_table(
    rows: List[Mapping[str, Any]],
    *,
    headers: List[str],
    title: Optional[str] = None,
    column_styles: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> None:
    """Render result rows as a Rich table on stdout.

    Args:
        rows: Rows keyed by header; missing keys render as empty cells.
        headers: Column order.
        title: Table title.
        column_styles: Keyword arguments for :meth:`Table.add_column`,
            per header.
    """
    if not rows:
        return

    table = Table(title=title, header_style="bold")
    for header in headers:
        table.add_column(header, **(column_styles or {}).get(header, {}))
    for row in rows:
        table.add_row(*(str(row.get(header, "")) for header in headers))

    get_console().print(table)


def print_plain_rows(rows: List[Mapping[str, Any]], *, headers: List[str]) -> None:
    """Print each row as one line of space-separated cells."""
    console = get_console()
    for row in rows:
        console.print(
            "  ".join(str(row.get(header, "")) for header in headers).rstrip(),
            soft_wrap=True,
        )


def colorize_stability(stability: str) -> str:
    """Wrap a stability label in its theme style.

    Example::

        >>> colorize_stability("RC")
        '[stability.rc]RC[/]'
    """
    style = f"stability.{stability.lower()}"
    if style not in DEPGRAMMAR_THEME.styles:
        return escape(stability)
    return f"[{style}]{escape(stability)}[/]"
