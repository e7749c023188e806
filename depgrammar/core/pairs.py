"""Name/version pair tokenizer for CLI-style argument lists."""

from __future__ import annotations

import re
from typing import List, Sequence

from depgrammar.models.pair import NameVersionPair

_SEPARATOR_RE = re.compile(r"^([^=: ]+)[=: ](.*)$")


def parse_name_version_pairs(pairs: Sequence[str]) -> List[NameVersionPair]:
    """Parse package/version pairs separated by ``:``, ``=`` or a space.

    A name without a version takes the next argument as its version, unless
    that argument looks like another package name (contains ``/``).

    Args:
        pairs: Arguments such as ``["foo/bar", "1.0", "baz/qux=2.0"]``.

    Returns:
        One pair per package, in input order.

    Example::

        >>> [str(p) for p in parse_name_version_pairs(["foo/bar", "1.0", "baz/qux=2.0"])]
        ['foo/bar 1.0', 'baz/qux 2.0']
    """
    pairs = list(pairs)
    result: List[NameVersionPair] = []

    i = 0
    while i < len(pairs):
        pair = _SEPARATOR_RE.sub(r"\1 \2", pairs[i].strip())
        if " " not in pair and i + 1 < len(pairs) and "/" not in pairs[i + 1]:
            pair += " " + pairs[i + 1]
            i += 1

        if pair.find(" ") > 0:
            name, version = pair.split(" ", 1)
            result.append(NameVersionPair(name=name, version=version))
        else:
            result.append(NameVersionPair(name=pair))

        i += 1

    return result
