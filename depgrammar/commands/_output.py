"""Output helpers shared by the depgrammar inspection commands.

Every command builds a list of row dictionaries and hands it to
:func:`display_rows` in the format resolved by
:meth:`~depgrammar.context.DepGrammarContext.resolve_format`.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from depgrammar.utils import print_plain_rows, print_table


def display_rows(
    rows: List[Dict[str, Any]],
    format: str,
    *,
    title: str,
    headers: List[str],
    json_rows: Optional[List[Dict[str, Any]]] = None,
    column_styles: Optional[Dict[str, Dict[str, Any]]] = None,
) -> None:
    """Render command results.

    Args:
        rows: Display rows keyed by column header.
        format: ``table``, ``simple`` or ``json``.
        title: Table title.
        headers: Column order for ``table`` and ``simple`` output.
        json_rows: Machine-readable rows; defaults to ``rows``.
        column_styles: Per-column Rich styles for ``table`` output.
    """
    if format == "json":
        print(json.dumps(json_rows if json_rows is not None else rows, indent=2))
    elif format == "simple":
        print_plain_rows(rows, headers=headers)
    else:
        print_table(rows, headers=headers, title=title, column_styles=column_styles)
