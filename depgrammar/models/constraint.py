"""
Constraint tree data models for depgrammar.

A parsed constraint expression is a tree built from exactly three node
types:

- :class:`EmptyConstraint` matches every version (``*``).
- :class:`VersionConstraint` applies one operator to one canonical version.
- :class:`MultiConstraint` combines two or more nodes with AND or OR.

:data:`ConstraintNode` is the union of the three. Evaluating a tree
against concrete versions is left to the resolver consuming it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Tuple, Union

#: Operators a :class:`VersionConstraint` may carry.
OPERATORS: FrozenSet[str] = frozenset({"=", "<", "<=", ">", ">=", "<>", "!="})


class _PrettyStringMixin:
    """Shared handling of the user-written text attached to a tree root."""

    pretty_string: Optional[str]

    def set_pretty_string(self, pretty_string: Optional[str]) -> None:
        """Attach the original expression text to this node."""
        self.pretty_string = pretty_string

    def get_pretty_string(self) -> str:
        """Return the original expression text, or the rendered form if unset."""
        if self.pretty_string is not None:
            return self.pretty_string
        return str(self)


@dataclass
class EmptyConstraint(_PrettyStringMixin):
    """Constraint matching every version."""

    kind: ClassVar[str] = "any"

    pretty_string: Optional[str] = field(default=None, compare=False, repr=False)

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {"type": self.kind}

    def __str__(self) -> str:
        return "[]"


@dataclass
class VersionConstraint(_PrettyStringMixin):
    """Single operator applied to a canonical version.

    Args:
        operator: One of :data:`OPERATORS`. ``==`` is stored as ``=``.
        version: Canonical version produced by the normalizer.
    """

    kind: ClassVar[str] = "simple"

    operator: str
    version: str
    pretty_string: Optional[str] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.operator == "==":
            self.operator = "="
        if self.operator not in OPERATORS:
            raise ValueError(f"Unsupported constraint operator: {self.operator!r}")

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "type": self.kind,
            "operator": self.operator,
            "version": self.version,
        }

    def __str__(self) -> str:
        return f"{self.operator} {self.version}"


@dataclass
class MultiConstraint(_PrettyStringMixin):
    """Ordered conjunction (AND) or disjunction (OR) of constraints.

    Args:
        constraints: Child nodes, at least two.
        conjunctive: ``True`` for AND, ``False`` for OR.
    """

    kind: ClassVar[str] = "group"

    constraints: Tuple["ConstraintNode", ...]
    conjunctive: bool = True
    pretty_string: Optional[str] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.constraints = tuple(self.constraints)
        if len(self.constraints) < 2:
            raise ValueError(
                "MultiConstraint needs at least two constraints, "
                f"got {len(self.constraints)}"
            )

    @property
    def is_conjunctive(self) -> bool:
        return self.conjunctive

    @property
    def is_disjunctive(self) -> bool:
        return not self.conjunctive

    def to_json(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation."""
        return {
            "type": self.kind,
            "conjunctive": self.conjunctive,
            "constraints": [constraint.to_json() for constraint in self.constraints],
        }

    def __str__(self) -> str:
        separator = " " if self.conjunctive else " | "
        return "[" + separator.join(str(c) for c in self.constraints) + "]"


ConstraintNode = Union[EmptyConstraint, VersionConstraint, MultiConstraint]
