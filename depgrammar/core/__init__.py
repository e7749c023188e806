"""
Core grammar exports for depgrammar.

Importing from here keeps user-facing imports clean and stable::

    from depgrammar.core import ConstraintParser, normalize
"""

from __future__ import annotations

from depgrammar.core.constraint_parser import ConstraintParser, parse_constraints
from depgrammar.core.formatting import format_version
from depgrammar.core.links import parse_links
from depgrammar.core.normalizer import normalize, normalize_branch
from depgrammar.core.pairs import parse_name_version_pairs
from depgrammar.core.segments import manipulate_version_string
from depgrammar.core.stability import (
    expand_stability,
    normalize_stability,
    parse_stability,
)

__all__ = [
    "ConstraintParser",
    "parse_constraints",
    "normalize",
    "normalize_branch",
    "parse_stability",
    "normalize_stability",
    "expand_stability",
    "manipulate_version_string",
    "parse_links",
    "parse_name_version_pairs",
    "format_version",
]
