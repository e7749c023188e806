"""Dependency link building.

Turns a package's ``{target name: constraint}`` mapping (as found in its
``require``, ``conflict``, ``replace`` ... sections) into :class:`Link`
records.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

from depgrammar.constants import SELF_VERSION, SUPPORTED_LINK_TYPES
from depgrammar.core.constraint_parser import ConstraintParser
from depgrammar.models.link import Link
from depgrammar.utils.logger import get_logger

logger = get_logger("core.links")


def parse_links(
    source: str,
    source_version: str,
    description: str,
    links: Mapping[str, str],
    parser: Optional[ConstraintParser] = None,
) -> Dict[str, Link]:
    """Parse a name to constraint mapping into links keyed by target name.

    A constraint of ``self.version`` ties the target to the source
    package's own version, so ``source_version`` is parsed instead.

    Args:
        source: Source package name.
        source_version: Source package version, ideally the pretty version.
        description: Link description (e.g. ``"requires"``), or the section
            it came from (``"require"``, ``"replace"`` ...), which is mapped
            through :data:`SUPPORTED_LINK_TYPES`.
        links: Mapping of target package name to constraint text.
        parser: Parser to use; a new :class:`ConstraintParser` by default.

    Returns:
        Links keyed by lowercased target name. When two targets differ
        only in case, the later one wins.

    Raises:
        InvalidConstraintError: A constraint (or ``source_version`` for a
            ``self.version`` link) cannot be parsed.

    Example::

        >>> links = parse_links("acme/app", "1.2.0", "requires", {"Acme/Lib": "self.version"})
        >>> str(links["acme/lib"].constraint)
        '= 1.2.0.0'
    """
    parser = parser or ConstraintParser()
    description = SUPPORTED_LINK_TYPES.get(description, description)
    result: Dict[str, Link] = {}

    for target, constraint in links.items():
        if constraint == SELF_VERSION:
            parsed_constraint = parser.parse_constraints(source_version)
        else:
            parsed_constraint = parser.parse_constraints(constraint)

        key = target.lower()
        if key in result:
            logger.debug(
                "%s %s %s overrides an earlier entry", source, description, target
            )

        result[key] = Link(
            source=source,
            target=target,
            constraint=parsed_constraint,
            description=description,
            pretty_constraint=constraint,
        )

    return result
