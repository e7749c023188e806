"""
Command-line interface for depgrammar.

The ``depgrammar`` group loads configuration, sets up logging and console
color from its global options, and hands a
:class:`~depgrammar.context.DepGrammarContext` to the inspection commands.
:func:`main` turns the outcome into a process exit code.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from depgrammar.__version__ import __version__
from depgrammar.commands.constraint import constraint_command
from depgrammar.commands.normalize import normalize_command
from depgrammar.commands.pairs import pairs_command
from depgrammar.config import load_config
from depgrammar.context import DepGrammarContext
from depgrammar.exceptions import ConfigError, DepGrammarError
from depgrammar.utils import (
    configure_cli_logging,
    configure_console,
    get_logger,
    print_error,
    print_warning,
)

logger = get_logger("cli")

#: Exit code for a run interrupted with Ctrl+C.
EXIT_INTERRUPTED = 130


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar="DEPGRAMMAR_CONFIG",
    help="Read settings from this file instead of discovering one.",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Show progress (-v) or every grammar decision (-vv) on stderr.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force colored output on or off. Detected from the terminal by default.",
)
@click.version_option(__version__, prog_name="depgrammar", message="%(prog)s %(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: Optional[bool],
) -> None:
    """depgrammar: inspect how versions and constraints are understood.

    \b
    Examples:
      depgrammar normalize 1.0 v2.1-beta3 dev-master
      depgrammar constraint "~1.2" ">=1.0,<2.0 | 3.0.*"
      depgrammar -v pairs vendor/pkg 1.0 other/pkg=2.*
    """
    configure_cli_logging(verbose, color=color)
    configure_console(color)

    try:
        loaded_config = load_config(config)
    except ConfigError as exc:
        print_error(str(exc))
        ctx.exit(1)

    ctx.obj = DepGrammarContext(
        config=loaded_config,
        config_path=config or loaded_config.source_path,
        verbosity=verbose,
        color=color,
    )
    logger.debug("depgrammar %s, config from %s", __version__, ctx.obj.config_path)


for _command in (normalize_command, constraint_command, pairs_command):
    cli.add_command(_command)


def main() -> int:
    """Run the CLI and return its exit code.

    Returns:
        0 on success, 1 for invalid input or an unexpected error, 2 for
        usage errors and 130 when interrupted.
    """
    try:
        exit_code = cli(standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except (click.exceptions.Abort, KeyboardInterrupt):
        print_warning("Interrupted")
        return EXIT_INTERRUPTED
    except DepGrammarError as exc:
        print_error(str(exc))
        logger.debug("Error details: %s", exc.details or "<none>", exc_info=True)
        return 1
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        logger.exception("Unhandled exception in CLI")
        return 1
    # Without standalone mode, ctx.exit() codes are returned rather than raised
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":
    sys.exit(main())
