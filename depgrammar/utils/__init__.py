"""
Utility helpers for depgrammar.

- Logging for the grammar layer and the CLI's ``-v`` levels
- Rich console output for command results and status messages
"""

from __future__ import annotations

from depgrammar.utils.logger import (
    configure_cli_logging,
    get_logger,
    reset_cli_logging,
)
from depgrammar.utils.console import (
    colorize_stability,
    configure_console,
    get_console,
    print_error,
    print_plain_rows,
    print_table,
    print_warning,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_cli_logging",
    "reset_cli_logging",
    # Console
    "get_console",
    "configure_console",
    "print_error",
    "print_warning",
    "print_table",
    "print_plain_rows",
    "colorize_stability",
]
