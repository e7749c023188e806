"""Constraint command implementation for depgrammar.

Shows the constraint tree a resolver would receive for each expression.

Typical usage::

    $ depgrammar constraint "~1.2" ">=1.0,<2.0 | ~3.1"
    $ depgrammar constraint --format json "1.0.*@dev"
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.markup import escape

from depgrammar.constants import OUTPUT_FORMATS
from depgrammar.context import DepGrammarContext, pass_context
from depgrammar.core import ConstraintParser
from depgrammar.exceptions import DepGrammarError, InvalidConstraintError
from depgrammar.utils import get_logger, print_error

from depgrammar.commands._output import display_rows

logger = get_logger("commands.constraint")


@click.command(name="constraint")
@click.argument("expressions", nargs=-1, required=True)
@click.option(
    "--format",
    "-f",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)
@pass_context
def constraint_command(
    ctx: DepGrammarContext,
    expressions: Tuple[str, ...],
    format: Optional[str],
) -> None:
    """Parse constraint expressions into constraint trees.

    Exits with 1 when any expression cannot be parsed.
    """
    output_format = ctx.resolve_format(format)

    try:
        results = _parse_all(expressions, fail_fast=ctx.config.fail_fast)
    except DepGrammarError as e:
        print_error(escape(str(e)))
        sys.exit(1)

    rows = [
        {
            "Expression": escape(result["expression"]),
            "Constraint": escape(result["rendered"] or "-"),
            "Error": escape(result["error"] or ""),
        }
        for result in results
    ]
    json_rows = [
        {
            "expression": result["expression"],
            "constraint": result["constraint"],
            "error": result["error"],
        }
        for result in results
    ]

    display_rows(
        rows,
        output_format,
        title="Parsed Constraints",
        headers=["Expression", "Constraint", "Error"],
        json_rows=json_rows,
        column_styles={
            "Expression": {"style": "bold cyan"},
            "Constraint": {"style": "bold green", "overflow": "fold"},
            "Error": {"style": "red"},
        },
    )

    if any(result["error"] for result in results):
        sys.exit(1)


def _parse_all(
    expressions: Tuple[str, ...],
    *,
    fail_fast: bool,
) -> List[Dict[str, Any]]:
    """Parse every expression, collecting per-expression errors.

    Raises:
        InvalidConstraintError: An expression is invalid and ``fail_fast``
            is set.
    """
    parser = ConstraintParser()
    results: List[Dict[str, Any]] = []

    for expression in expressions:
        logger.info("Parsing %r", expression)
        try:
            constraint = parser.parse_constraints(expression)
        except InvalidConstraintError as e:
            if fail_fast:
                raise
            results.append(
                {
                    "expression": expression,
                    "rendered": None,
                    "constraint": None,
                    "error": e.message,
                }
            )
            continue

        results.append(
            {
                "expression": constraint.get_pretty_string(),
                "rendered": str(constraint),
                "constraint": constraint.to_json(),
                "error": None,
            }
        )

    return results
