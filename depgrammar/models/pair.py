"""
Name/version pair data model for depgrammar.

Pairs are produced from CLI-style argument lists such as
``["vendor/pkg", "1.0", "other/pkg=2.*"]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class NameVersionPair:
    """A package name with an optional version or constraint.

    Attributes:
        name: Package name as written.
        version: Version or constraint text, or ``None`` when absent.
    """

    name: str
    version: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        """Return ``{"name": ..., "version": ...}``, omitting a missing version."""
        if self.version is None:
            return {"name": self.name}
        return {"name": self.name, "version": self.version}

    def __str__(self) -> str:
        if self.version is None:
            return self.name
        return f"{self.name} {self.version}"
