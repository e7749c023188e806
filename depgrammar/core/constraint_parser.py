"""Constraint expression parser.

Parses constraint expressions into a tree of constraint nodes:

- Operator constraints (``>=1.0``, ``<2.0``, ``!=1.5``, ``1.0``)
- Tilde ranges (``~1.2`` means ``>=1.2.0.0-dev,<2.0.0.0-dev``)
- Wildcard ranges (``1.0.*`` means ``>=1.0.0.0-dev,<1.1.0.0-dev``)
- Any version (``*``, ``x.x``)
- AND groups separated by ``,`` and OR groups separated by ``|``
- Stability pins (``1.0@beta``, ``@dev``)

Typical usage::

    from depgrammar.core import ConstraintParser

    parser = ConstraintParser()
    constraint = parser.parse_constraints(">=1.0,<2.0 | ~3.1")

    print(constraint)                       # [[>= 1.0.0.0 < 2.0.0.0-dev] | [...]]
    print(constraint.get_pretty_string())   # >=1.0,<2.0 | ~3.1

Bounds use ``-dev`` versions so that pre-releases of a boundary version
are handled correctly: ``<2.0`` becomes ``< 2.0.0.0-dev`` so that
``2.0.0.0-beta1`` is excluded, and ``~1.2`` starts at ``1.2.0.0-dev`` so
that ``1.2.0.0-RC1`` is included.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from depgrammar.constants import MODIFIER_REGEX, STABILITY_ALTERNATION
from depgrammar.core.normalizer import normalize
from depgrammar.core.segments import manipulate_version_string
from depgrammar.core.stability import (
    expand_stability,
    normalize_stability,
    parse_stability,
)
from depgrammar.exceptions import InvalidConstraintError, InvalidVersionError
from depgrammar.models.constraint import (
    ConstraintNode,
    EmptyConstraint,
    MultiConstraint,
    VersionConstraint,
)
from depgrammar.utils.logger import get_logger

# ---------------------------------------------------------------------------
# Grammar
# ---------------------------------------------------------------------------

_EXPRESSION_STABILITY_RE = re.compile(
    r"^([^,\s]*?)@(" + STABILITY_ALTERNATION + r")$", re.IGNORECASE | re.ASCII
)
_DEV_REFERENCE_RE = re.compile(
    r"^(dev-[^,\s@]+?|[^,\s@]+?\.x-dev)#.+$", re.IGNORECASE | re.ASCII
)
_OR_SPLIT_RE = re.compile(r"\s*\|\s*", re.ASCII)
_AND_SPLIT_RE = re.compile(r"\s*,\s*", re.ASCII)

_ATOM_STABILITY_RE = re.compile(
    r"^([^,\s]+?)@(" + STABILITY_ALTERNATION + r")$", re.IGNORECASE | re.ASCII
)
_ANY_RE = re.compile(r"^[x*](\.[x*])*$", re.IGNORECASE | re.ASCII)
_TILDE_RE = re.compile(
    r"^~(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:\.(\d+))?(?:" + MODIFIER_REGEX + r")?$",
    re.IGNORECASE | re.ASCII,
)
_WILDCARD_RANGE_RE = re.compile(
    r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?\.[x*]$", re.ASCII
)
_OPERATOR_RE = re.compile(r"^(<>|!=|>=?|<=?|==?)?\s*(.*)", re.ASCII)
_STABLE_SUFFIX_RE = re.compile(r"-stable$")

_LOWEST_DEV_VERSION = "0.0.0.0-dev"


class ConstraintParser:
    """Parser turning constraint expressions into constraint trees.

    The parser keeps no state between calls, so a single instance can be
    shared freely (see :func:`parse_constraints`).

    Example::

        >>> parser = ConstraintParser()
        >>> str(parser.parse_constraints("~1.2"))
        '[>= 1.2.0.0-dev < 2.0.0.0-dev]'
        >>> parser.parse_constraints("~1.2").get_pretty_string()
        '~1.2'
    """

    def __init__(self) -> None:
        self.logger = get_logger("core.constraint_parser")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse_constraints(self, constraints: str) -> ConstraintNode:
        """Parse a constraint expression into a constraint tree.

        ``|`` separates alternatives and binds loosest; ``,`` separates
        constraints that must all hold. A single-child group collapses to
        its child. The root node's pretty string is always ``constraints``
        exactly as given.

        Args:
            constraints: Constraint expression, e.g. ``">=1.0,<2.0 | ~3.1"``.

        Returns:
            Root node of the parsed tree.

        Raises:
            InvalidConstraintError: Any of the constraint tokens is invalid.
        """
        pretty_constraint = constraints
        self.logger.debug("Parsing constraint expression: %r", constraints)

        # A whole-expression stability pin does not constrain further
        match = _EXPRESSION_STABILITY_RE.match(constraints)
        if match:
            constraints = match.group(1) or "*"

        match = _DEV_REFERENCE_RE.match(constraints)
        if match:
            constraints = match.group(1)

        or_groups: List[ConstraintNode] = []
        for or_constraint in _OR_SPLIT_RE.split(constraints.strip()):
            atoms: List[ConstraintNode] = []
            for and_constraint in _AND_SPLIT_RE.split(or_constraint):
                atoms.extend(self.parse_constraint(and_constraint))

            or_groups.append(_combine(atoms, conjunctive=True))

        constraint = _combine(or_groups, conjunctive=False)
        constraint.set_pretty_string(pretty_constraint)

        self.logger.debug("Parsed %r as %s", pretty_constraint, constraint)
        return constraint

    def parse_constraint(self, constraint: str) -> List[ConstraintNode]:
        """Parse a single constraint token into one or two atoms.

        Range tokens (``~1.2``, ``1.0.*``) expand into a lower and an upper
        bound; every other token yields a single atom.

        Args:
            constraint: One token of an AND group, e.g. ``">=1.0"``.

        Returns:
            List of one or two atomic constraints.

        Raises:
            InvalidConstraintError: The token matches no constraint grammar.
        """
        stability_modifier: Optional[str] = None

        match = _ATOM_STABILITY_RE.match(constraint)
        if match:
            constraint = match.group(1)
            stability = normalize_stability(match.group(2))
            if stability != "stable":
                stability_modifier = stability

        if _ANY_RE.match(constraint):
            return [EmptyConstraint()]

        match = _TILDE_RE.match(constraint)
        if match:
            return self._parse_tilde_range(constraint, match)

        match = _WILDCARD_RANGE_RE.match(constraint)
        if match:
            return self._parse_wildcard_range(constraint, match)

        error: Optional[InvalidVersionError] = None
        match = _OPERATOR_RE.match(constraint)
        if match:
            operator, target = match.group(1), match.group(2)
            try:
                version = normalize(target)
            except InvalidVersionError as exc:
                error = exc
            else:
                if stability_modifier and parse_stability(version) == "stable":
                    version += "-" + stability_modifier
                elif operator == "<" and not _STABLE_SUFFIX_RE.search(target.lower()):
                    # Exclude pre-releases of the upper bound itself
                    version += "-dev"

                return [VersionConstraint(operator or "=", version)]

        message = f"Could not parse version constraint {constraint}"
        if error is not None:
            message += f": {error.message}"

        raise InvalidConstraintError(
            message,
            constraint=constraint,
            original_error=error,
        )

    # ------------------------------------------------------------------
    # Range expansion
    # ------------------------------------------------------------------

    def _parse_tilde_range(
        self,
        constraint: str,
        match: "re.Match[str]",
    ) -> List[ConstraintNode]:
        """Expand ``~N[.N[.N[.N]]][modifier]`` into ``>=`` and ``<`` bounds.

        The lower bound keeps the given segments and stability (``-dev``
        when no modifier is given). The upper bound increments the segment
        before the last given one, so ``~1.2`` allows ``1.x`` and ``~1.2.3``
        allows ``1.2.x``.
        """
        segments = match.groups()[:4]
        position = _last_present_position(segments)

        stability_suffix = ""
        if match.group(5):
            stability_suffix += "-" + expand_stability(match.group(5)) + (
                match.group(6) or ""
            )

        if match.group(7):
            stability_suffix += "-dev"

        if not stability_suffix:
            stability_suffix = "-dev"

        low_version = self._manipulate(constraint, segments, position)
        lower_bound = VersionConstraint(">=", low_version + stability_suffix)

        # Incrementing the segment before ``position``; position 0 is invalid
        high_position = max(1, position - 1)
        high_version = self._manipulate(constraint, segments, high_position, 1)
        upper_bound = VersionConstraint("<", high_version + "-dev")

        return [lower_bound, upper_bound]

    def _parse_wildcard_range(
        self,
        constraint: str,
        match: "re.Match[str]",
    ) -> List[ConstraintNode]:
        """Expand ``N[.N[.N]].*`` into ``>=`` and ``<`` bounds.

        A range starting at ``0.0.0.0-dev`` only yields its upper bound.
        """
        segments = tuple(match.groups()) + (None,)
        position = _last_present_position(segments)

        low_version = self._manipulate(constraint, segments, position) + "-dev"
        high_version = self._manipulate(constraint, segments, position, 1) + "-dev"

        if low_version == _LOWEST_DEV_VERSION:
            return [VersionConstraint("<", high_version)]

        return [
            VersionConstraint(">=", low_version),
            VersionConstraint("<", high_version),
        ]

    def _manipulate(
        self,
        constraint: str,
        segments: Sequence[Optional[str]],
        position: int,
        increment: int = 0,
    ) -> str:
        """Run :func:`manipulate_version_string`, rejecting unrepresentable bounds."""
        version = manipulate_version_string(segments, position, increment)
        if version is None:
            raise InvalidConstraintError(
                f"Could not parse version constraint {constraint}: "
                "range bound is out of bounds",
                constraint=constraint,
            )
        return version


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _last_present_position(segments: Sequence[Optional[str]]) -> int:
    """Return the 1-based index of the last segment given in a range."""
    for index in range(len(segments), 1, -1):
        if segments[index - 1]:
            return index
    return 1


def _combine(nodes: List[ConstraintNode], *, conjunctive: bool) -> ConstraintNode:
    """Return the single node, or a group of all nodes."""
    if len(nodes) == 1:
        return nodes[0]
    return MultiConstraint(tuple(nodes), conjunctive=conjunctive)


_default_parser = ConstraintParser()


def parse_constraints(constraints: str) -> ConstraintNode:
    """Parse a constraint expression with a shared :class:`ConstraintParser`."""
    return _default_parser.parse_constraints(constraints)
