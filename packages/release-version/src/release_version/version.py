# SPDX-License-Identifier: MIT
"""Four-component version parsing and formatting.

Supports MAJOR[.MINOR[.PATCH[.BUILD]]] with an optional free-text suffix:
- 1, 1.2, 1.2.3, 1.2.3.4
- 1-rc, 1.2-rc, 1.2.3-rc, 1.2.3.4-rc

Missing trailing components default to zero. Every component must fit in a
signed 32-bit integer.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

VERSION_SEPARATOR = "-"
COMPONENT_SEPARATOR = "."
MAX_COMPONENTS = 4

# Signed 32-bit bounds for numeric components
MIN_COMPONENT = -(2**31)
MAX_COMPONENT = 2**31 - 1

# Optional sign and ASCII digits only: no whitespace, underscores or
# non-ASCII digits.
_COMPONENT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Longest in-range group once sign and leading zeros are dropped
_MAX_COMPONENT_DIGITS = len(str(MAX_COMPONENT))


class VersionError(Exception):
    """Base class for errors raised by release_version."""

    pass


class InvalidVersionFormatError(VersionError, ValueError):
    """Raised when a string is not one of the supported version formats."""

    def __init__(self, version: object):
        self.version = version
        self.message = "invalid version format"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True, order=True)
class Version:
    """A four-component version with an optional suffix.

    Field order is significant: the generated comparison operators compare
    major, minor, patch, build and then suffix, which is the same order
    ``compare_versions`` uses.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        build: Build number
        suffix: Free-text tag (e.g. "rc", "beta2"); empty when absent
    """

    major: int
    minor: int = 0
    patch: int = 0
    build: int = 0
    suffix: str = ""

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}.{self.build}"
        if self.suffix:
            version += f"{VERSION_SEPARATOR}{self.suffix}"
        return version

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Alternate constructor, equivalent to ``parse_version``.

        Subclasses get an instance of their own type.
        """
        version = parse_version(version_string)
        if cls is Version:
            return version
        return cls(*version.components, suffix=version.suffix)

    @property
    def has_suffix(self) -> bool:
        """Return True if the version carries a non-empty suffix."""
        return bool(self.suffix)

    @property
    def components(self) -> tuple[int, int, int, int]:
        """Return the four numeric components as a tuple."""
        return (self.major, self.minor, self.patch, self.build)


def _parse_component(text: str) -> int | None:
    if not _COMPONENT_PATTERN.fullmatch(text):
        return None
    sign = text[0] if text[0] in "+-" else ""
    digits = text[len(sign) :].lstrip("0") or "0"
    if len(digits) > _MAX_COMPONENT_DIGITS:
        return None
    number = int(sign + digits)
    if not MIN_COMPONENT <= number <= MAX_COMPONENT:
        return None
    return number


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form MAJOR[.MINOR[.PATCH[.BUILD]]]
            optionally followed by "-suffix"

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionFormatError: If the string is not a supported format

    Examples:
        >>> parse_version("1.2.3.4-rc")
        Version(major=1, minor=2, patch=3, build=4, suffix='rc')

        >>> parse_version("1")
        Version(major=1, minor=0, patch=0, build=0, suffix='')

        >>> parse_version("1.2-")
        Version(major=1, minor=2, patch=0, build=0, suffix='')
    """
    if not isinstance(version_string, str):
        logger.debug("Rejected non-string version %r", version_string)
        raise InvalidVersionFormatError(version_string)

    parts = version_string.split(VERSION_SEPARATOR)
    if len(parts) > 2:
        logger.debug(
            "Rejected version %r: %d separators", version_string, len(parts) - 1
        )
        raise InvalidVersionFormatError(version_string)

    groups = parts[0].split(COMPONENT_SEPARATOR)
    if len(groups) > MAX_COMPONENTS:
        logger.debug(
            "Rejected version %r: %d components", version_string, len(groups)
        )
        raise InvalidVersionFormatError(version_string)

    numbers = []
    for group in groups:
        number = _parse_component(group)
        if number is None:
            logger.debug("Rejected version %r: bad component %r", version_string, group)
            raise InvalidVersionFormatError(version_string)
        numbers.append(number)
    numbers.extend([0] * (MAX_COMPONENTS - len(numbers)))

    suffix = parts[1] if len(parts) == 2 else ""
    return Version(*numbers, suffix=suffix)


def format_version(version: Version) -> str:
    """Return the canonical string form of a version.

    Examples:
        >>> format_version(Version(1, 2, 3, 4, "rc"))
        '1.2.3.4-rc'
        >>> format_version(Version(1, 0, 0, 0))
        '1.0.0.0'
    """
    return str(version)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1.0.0.0.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionFormatError:
        return False
    return True
