"""Stability classification for version strings.

A version's stability is one of ``stable``, ``RC``, ``beta``, ``alpha`` or
``dev`` (see :data:`depgrammar.constants.STABILITIES` for their ranks).
It is derived from the trailing modifier of the version, so it works on
both raw and normalized versions::

    >>> parse_stability("1.0.0-beta2")
    'beta'
    >>> parse_stability("dev-feature#abc123")
    'dev'
"""

from __future__ import annotations

import re
from typing import Dict

from depgrammar.constants import DEV_PREFIX, MODIFIER_REGEX

_FRAGMENT_RE = re.compile(r"#.+$")
_TRAILING_MODIFIER_RE = re.compile(
    MODIFIER_REGEX + r"$", re.IGNORECASE | re.ASCII
)

_STABILITY_ALIASES: Dict[str, str] = {
    "beta": "beta",
    "b": "beta",
    "alpha": "alpha",
    "a": "alpha",
    "rc": "RC",
}

_EXPANSIONS: Dict[str, str] = {
    "a": "alpha",
    "b": "beta",
    "p": "patch",
    "pl": "patch",
    "rc": "RC",
}


def parse_stability(version: str) -> str:
    """Return the stability of a version.

    A trailing ``#reference`` fragment is ignored. Versions starting with
    ``dev-`` or ending with ``-dev`` are always ``dev``.

    Args:
        version: Raw or normalized version string.

    Returns:
        One of ``stable``, ``RC``, ``beta``, ``alpha`` or ``dev``.
    """
    version = _FRAGMENT_RE.sub("", version)

    if version.startswith(DEV_PREFIX) or version.endswith("-dev"):
        return "dev"

    match = _TRAILING_MODIFIER_RE.search(version.lower())
    if match is None:
        return "stable"

    if match.group(3):
        return "dev"

    if match.group(1):
        return _STABILITY_ALIASES.get(match.group(1), "stable")

    return "stable"


def normalize_stability(stability: str) -> str:
    """Lowercase a stability name, keeping ``RC`` in its display form."""
    stability = stability.lower()
    return "RC" if stability == "rc" else stability


def expand_stability(stability: str) -> str:
    """Expand a short stability modifier (``a``, ``b``, ``p``, ...) to its full name."""
    stability = stability.lower()
    return _EXPANSIONS.get(stability, stability)
