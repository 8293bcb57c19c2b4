# SPDX-License-Identifier: MIT
"""Version comparison and sorting.

Components are compared numerically in order: major, minor, patch, build.
When all four are equal the suffixes are compared lexicographically, so
"1.0.0.0" < "1.0.0.0-a" < "1.0.0.0-b".
"""

from __future__ import annotations

import enum
from functools import cmp_to_key
from typing import Callable, Iterable, Union

from .version import Version, parse_version

VersionLike = Union[str, Version]


class SortOrder(enum.Enum):
    """Direction for sorting a sequence of versions."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def _coerce(version: VersionLike) -> Version:
    if isinstance(version, Version):
        return version
    # Anything else, including non-strings, goes through the parser
    return parse_version(version)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0", "2.0")
        -1
        >>> compare_versions("2", "1.9.9.9-zz")
        1
        >>> compare_versions("1-a", "1-b")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch", "build"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return 1 if val1 > val2 else -1

    return (v1.suffix > v2.suffix) - (v1.suffix < v2.suffix)


def versions_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if the two versions compare as equal."""
    return compare_versions(version1, version2) == 0


def version_key(version: VersionLike) -> tuple[int, int, int, int, str]:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["2.0", "1.0-rc", "1.0"], key=version_key)
        ['1.0', '1.0-rc', '2.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch, v.build, v.suffix)


def version_comparator(
    order: SortOrder = SortOrder.ASCENDING,
) -> Callable[[VersionLike, VersionLike], int]:
    """Return a three-way comparator for the given sort direction.

    The descending comparator is the ascending one negated. Wrap the result
    with ``functools.cmp_to_key`` to use it with ``sorted``.
    """
    if order is SortOrder.DESCENDING:
        return lambda version1, version2: -compare_versions(version1, version2)
    return compare_versions


def sort_versions(
    versions: Iterable[VersionLike],
    order: SortOrder = SortOrder.ASCENDING,
) -> list[Version]:
    """Return the versions as a new sorted list of Version objects.

    String items are parsed first. The sort is stable, so versions that
    compare equal keep their input order in both directions.

    Raises:
        InvalidVersionFormatError: If any version string is invalid

    Examples:
        >>> [str(v) for v in sort_versions(["1.1", "1.0-rc", "1.0"])]
        ['1.0.0.0', '1.0.0.0-rc', '1.1.0.0']
        >>> [str(v) for v in sort_versions(["1.1", "1.0"], SortOrder.DESCENDING)]
        ['1.1.0.0', '1.0.0.0']
    """
    parsed = [_coerce(v) for v in versions]
    return sorted(parsed, key=cmp_to_key(version_comparator(order)))
