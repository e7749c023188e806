"""
Executable module for depgrammar.

Running:
    python -m depgrammar

is equivalent to:
    depgrammar

This module simply forwards execution to the CLI entrypoint defined in
`depgrammar.cli`.
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain why the CLI could not be loaded."""
    sys.stderr.write("depgrammar CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from depgrammar.__version__ import __version__

        sys.stderr.write(f"depgrammar version: {__version__}\n")
    except ImportError:
        sys.stderr.write("depgrammar version: <unknown>\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m depgrammar`.

    Returns:
        Exit code returned by the CLI.
    """
    try:
        # Import lazily so CLI dependencies are only loaded when needed
        from depgrammar.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
