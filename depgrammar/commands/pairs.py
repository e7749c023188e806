"""Pairs command implementation for depgrammar.

Splits CLI-style package arguments into name/version pairs, the way a
``require``-style command would read them.

Typical usage::

    $ depgrammar pairs vendor/pkg 1.0 other/pkg=2.*
    $ depgrammar pairs --parse-constraints vendor/pkg:~1.2
"""

from __future__ import annotations

import sys
from typing import Any, Dict, List, Optional, Tuple

import click
from rich.markup import escape

from depgrammar.constants import OUTPUT_FORMATS
from depgrammar.context import DepGrammarContext, pass_context
from depgrammar.core import ConstraintParser, parse_name_version_pairs
from depgrammar.exceptions import DepGrammarError, InvalidConstraintError
from depgrammar.utils import get_logger, print_error

from depgrammar.commands._output import display_rows

logger = get_logger("commands.pairs")


@click.command(name="pairs")
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--parse-constraints",
    "-p",
    is_flag=True,
    help="Also parse each version as a constraint expression.",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    default=None,
    help="Output format (defaults to the configured output_format).",
)
@pass_context
def pairs_command(
    ctx: DepGrammarContext,
    tokens: Tuple[str, ...],
    parse_constraints: bool,
    format: Optional[str],
) -> None:
    """Split package arguments into name/version pairs."""
    output_format = ctx.resolve_format(format)

    pairs = parse_name_version_pairs(tokens)
    logger.info("Tokenized %d argument(s) into %d pair(s)", len(tokens), len(pairs))

    results: List[Dict[str, Any]] = [
        {"name": pair.name, "version": pair.version} for pair in pairs
    ]

    if parse_constraints:
        try:
            _attach_constraints(results, fail_fast=ctx.config.fail_fast)
        except DepGrammarError as e:
            print_error(escape(str(e)))
            sys.exit(1)

    headers = ["Name", "Version"]
    if parse_constraints:
        headers += ["Constraint", "Error"]

    rows = [
        {
            "Name": escape(result["name"]),
            "Version": escape(result["version"] or "-"),
            "Constraint": escape(result.get("rendered") or "-"),
            "Error": escape(result.get("error") or ""),
        }
        for result in results
    ]
    json_rows = [
        {key: value for key, value in result.items() if key != "rendered"}
        for result in results
    ]

    display_rows(
        rows,
        output_format,
        title="Name/Version Pairs",
        headers=headers,
        json_rows=json_rows,
        column_styles={"Name": {"style": "bold cyan", "no_wrap": True}},
    )

    if any(result.get("error") for result in results):
        sys.exit(1)


def _attach_constraints(results: List[Dict[str, Any]], *, fail_fast: bool) -> None:
    """Parse each pair's version in place; a missing version means any version."""
    parser = ConstraintParser()

    for result in results:
        expression = result["version"] if result["version"] is not None else "*"
        try:
            constraint = parser.parse_constraints(expression)
        except InvalidConstraintError as e:
            if fail_fast:
                raise
            result.update(rendered=None, constraint=None, error=e.message)
            continue

        result.update(
            rendered=str(constraint),
            constraint=constraint.to_json(),
            error=None,
        )
