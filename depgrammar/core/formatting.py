"""Display formatting for package versions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from depgrammar.constants import (
    FULL_REFERENCE_LENGTH,
    SHORT_REFERENCE_LENGTH,
    VCS_SOURCE_TYPES,
)

if TYPE_CHECKING:
    from depgrammar.models.source_package import SourcePackage


def format_version(package: "SourcePackage", truncate: bool = True) -> str:
    """Return a package's pretty version, with its reference for VCS dev versions.

    Dev versions checked out from git or hg show which revision they point
    at, since the branch name alone does not identify the code.

    Args:
        package: Package to describe.
        truncate: Shorten full 40-character hashes to 7 characters.

    Example::

        >>> pkg = SourcePackage("acme/lib", "dev-master", "git", "a" * 40)
        >>> format_version(pkg)
        'dev-master aaaaaaa'
    """
    if not package.is_dev or package.source_type not in VCS_SOURCE_TYPES:
        return package.pretty_version

    reference = package.source_reference or ""
    if truncate and len(reference) == FULL_REFERENCE_LENGTH:
        reference = reference[:SHORT_REFERENCE_LENGTH]

    return f"{package.pretty_version} {reference}"
