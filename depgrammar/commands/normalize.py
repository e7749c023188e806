"""Normalize command implementation for depgrammar.

Shows the canonical form and stability of version or branch strings.

Typical usage::

    $ depgrammar normalize 1.0 v2.1-beta3 dev-master
    $ depgrammar normalize --branch 2.1.x feature/foo
    $ depgrammar normalize --format json 1.0 > versions.json
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.markup import escape

from depgrammar.constants import OUTPUT_FORMATS
from depgrammar.context import DepGrammarContext, pass_context
from depgrammar.core import normalize, normalize_branch, parse_stability
from depgrammar.exceptions import DepGrammarError, InvalidVersionError
from depgrammar.utils import colorize_stability, get_logger, print_error

from depgrammar.commands._output import display_rows

logger = get_logger("commands.normalize")


@click.command(name="normalize")
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--branch",
    "-b",
    is_flag=True,
    help="Treat inputs as branch names.",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)
@pass_context
def normalize_command(
    ctx: DepGrammarContext,
    versions: Tuple[str, ...],
    branch: bool,
    format: Optional[str],
) -> None:
    """Normalize version or branch strings.

    Exits with 1 when any input is not a valid version.
    """
    output_format = ctx.resolve_format(format)

    try:
        results = _normalize_all(versions, branch=branch, fail_fast=ctx.config.fail_fast)
    except DepGrammarError as e:
        print_error(escape(str(e)))
        sys.exit(1)

    rows = [_create_row(result) for result in results]
    display_rows(
        rows,
        output_format,
        title="Normalized Versions",
        headers=["Input", "Normalized", "Stability", "Error"],
        json_rows=results,
        column_styles={
            "Input": {"style": "bold cyan", "no_wrap": True},
            "Normalized": {"style": "bold green", "no_wrap": True},
            "Stability": {"justify": "center"},
            "Error": {"style": "red"},
        },
    )

    if any(result["error"] for result in results):
        sys.exit(1)


def _normalize_all(
    versions: Tuple[str, ...],
    *,
    branch: bool,
    fail_fast: bool,
) -> List[Dict[str, Any]]:
    """Normalize every input, collecting per-input errors.

    Raises:
        InvalidVersionError: An input is invalid and ``fail_fast`` is set.
    """
    results: List[Dict[str, Any]] = []

    for version in versions:
        logger.info("Normalizing %r", version)
        try:
            normalized = normalize_branch(version) if branch else normalize(version)
        except InvalidVersionError as e:
            if fail_fast:
                raise
            results.append(
                {"input": version, "normalized": None, "stability": None, "error": e.message}
            )
            continue

        results.append(
            {
                "input": version,
                "normalized": normalized,
                "stability": parse_stability(normalized),
                "error": None,
            }
        )

    return results


def _create_row(result: Dict[str, Any]) -> Dict[str, str]:
    """Build a table row for one normalization result."""
    return {
        "Input": escape(result["input"]),
        "Normalized": escape(result["normalized"] or "-"),
        "Stability": colorize_stability(result["stability"]) if result["stability"] else "-",
        "Error": escape(result["error"] or ""),
    }
