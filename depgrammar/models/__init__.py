"""
Unified data model exports for depgrammar.

Example:
    >>> from depgrammar.models import Link, VersionConstraint, MultiConstraint
"""

from __future__ import annotations

from depgrammar.models.constraint import (
    ConstraintNode,
    EmptyConstraint,
    MultiConstraint,
    VersionConstraint,
)
from depgrammar.models.link import Link
from depgrammar.models.pair import NameVersionPair
from depgrammar.models.source_package import SourcePackage

__all__ = [
    "ConstraintNode",
    "EmptyConstraint",
    "VersionConstraint",
    "MultiConstraint",
    "Link",
    "NameVersionPair",
    "SourcePackage",
]
