# SPDX-License-Identifier: MIT
"""Four-component version parsing, formatting and comparison.

This package provides a small immutable Version value for identifiers such
as "1.2.3.4-rc", a parser and formatter for their canonical string form,
and a total ordering suitable for sorting releases.

Example:
    >>> from release_version import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3.4-rc")
    >>> version.build
    4
    >>> version.suffix
    'rc'
    >>>
    >>> str(Version(1, 2))
    '1.2.0.0'
    >>>
    >>> compare_versions("1.0", "2.0")
    -1
"""

__version__ = "0.1.0"

from .version import (
    Version,
    parse_version,
    format_version,
    is_valid_version,
    VersionError,
    InvalidVersionFormatError,
    VERSION_SEPARATOR,
    COMPONENT_SEPARATOR,
    MAX_COMPONENTS,
    MIN_COMPONENT,
    MAX_COMPONENT,
)
from .compare import (
    SortOrder,
    compare_versions,
    versions_equal,
    version_key,
    version_comparator,
    sort_versions,
)

__all__ = [
    # Version parsing and formatting
    "Version",
    "parse_version",
    "format_version",
    "is_valid_version",
    "VersionError",
    "InvalidVersionFormatError",
    "VERSION_SEPARATOR",
    "COMPONENT_SEPARATOR",
    "MAX_COMPONENTS",
    "MIN_COMPONENT",
    "MAX_COMPONENT",
    # Version comparison
    "SortOrder",
    "compare_versions",
    "versions_equal",
    "version_key",
    "version_comparator",
    "sort_versions",
]
