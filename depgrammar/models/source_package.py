"""
Source package data model for depgrammar.

Describes just enough of a package to render its version for display:
its pretty version and where its code was checked out from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from depgrammar.core.stability import parse_stability


@dataclass(frozen=True)
class SourcePackage:
    """A package version together with its source checkout.

    Attributes:
        name: Package name.
        pretty_version: Version as written by the package author.
        source_type: VCS type (``git``, ``hg``, ``svn``) or ``None``.
        source_reference: Commit, tag or revision of the checkout.
    """

    name: str
    pretty_version: str
    source_type: Optional[str] = None
    source_reference: Optional[str] = None

    @property
    def stability(self) -> str:
        """Stability derived from the pretty version."""
        return parse_stability(self.pretty_version)

    @property
    def is_dev(self) -> bool:
        """Whether this is a development (branch) version."""
        return self.stability == "dev"
