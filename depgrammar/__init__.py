"""
depgrammar: version grammar for package dependency resolution

depgrammar turns free-form, human-written version strings and constraint
expressions into a canonical, comparable form and into a small constraint
tree that a dependency resolver can evaluate.

Features include:
    • Version and branch normalization (``1.0`` -> ``1.0.0.0``)
    • Stability classification (stable, RC, beta, alpha, dev)
    • Constraint parsing: operators, tilde and wildcard ranges, AND/OR groups
    • Dependency link building, including ``self.version`` links
    • Name/version pair tokenizing for CLI-style arguments

Example:
    >>> from depgrammar import normalize, parse_constraints
    >>> normalize("1.0.0-beta2")
    '1.0.0.0-beta2'
    >>> str(parse_constraints(">=1.0,<2.0"))
    '[>= 1.0.0.0 < 2.0.0.0-dev]'
"""

from __future__ import annotations

from depgrammar.__version__ import __version__
from depgrammar.core import (
    ConstraintParser,
    expand_stability,
    format_version,
    manipulate_version_string,
    normalize,
    normalize_branch,
    normalize_stability,
    parse_constraints,
    parse_links,
    parse_name_version_pairs,
    parse_stability,
)
from depgrammar.exceptions import (
    ConfigError,
    DepGrammarError,
    InvalidConstraintError,
    InvalidVersionError,
)
from depgrammar.models import (
    ConstraintNode,
    EmptyConstraint,
    Link,
    MultiConstraint,
    NameVersionPair,
    SourcePackage,
    VersionConstraint,
)

# ---------------------------------------------------------------------------
# Package Metadata
# ---------------------------------------------------------------------------

__license__ = "Apache-2.0"
__description__ = "Version normalization and constraint parsing for dependency resolvers."

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "__version__",
    # Grammar
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
    # Models
    "ConstraintNode",
    "EmptyConstraint",
    "VersionConstraint",
    "MultiConstraint",
    "Link",
    "NameVersionPair",
    "SourcePackage",
    # Errors
    "DepGrammarError",
    "InvalidVersionError",
    "InvalidConstraintError",
    "ConfigError",
]
