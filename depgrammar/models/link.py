"""
Dependency link data model for depgrammar.

A link is one edge of the dependency graph: package ``source`` relates to
package ``target`` (requires, conflicts, replaces, ...) under a parsed
constraint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from depgrammar.models.constraint import ConstraintNode


@dataclass(frozen=True)
class Link:
    """Represents a dependency link between two packages.

    Args:
        source: Name of the package declaring the link.
        target: Name of the linked package; stored lowercased.
        constraint: Parsed constraint the target must satisfy.
        description: Link type (e.g. ``"requires"``, ``"replaces"``).
        pretty_constraint: Constraint text as written by the user, which may
            be ``self.version``.
    """

    source: str
    target: str
    constraint: ConstraintNode
    description: str = "relates to"
    pretty_constraint: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", self.target.lower())

    def get_pretty_string(self, source_pretty_name: str) -> str:
        """Return the link as a human-readable sentence.

        Args:
            source_pretty_name: Display name of the source package.
        """
        return (
            f"{source_pretty_name} {self.description} {self.target} "
            f"{self.constraint.get_pretty_string()}"
        )

    def to_display_string(self) -> str:
        """Return the link with its internal constraint representation."""
        return f"{self.source} {self.description} {self.target} ({self.constraint})"

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "source": self.source,
            "target": self.target,
            "description": self.description,
            "constraint": self.constraint.to_json(),
            "pretty_constraint": self.pretty_constraint,
        }

    def __str__(self) -> str:
        return self.to_display_string()
