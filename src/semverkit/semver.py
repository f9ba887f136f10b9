# SPDX-License-Identifier: MIT
"""Semantic version value type, parser and formatter.

Supports MAJOR.MINOR.PATCH format with an optional pre-release tail and
optional build metadata:
- Pre-release: -RC, -RC.1, -M.RC.2, -5
- Build metadata: +build, +build.123, +20240101 (accepted, then discarded)

The pre-release tail is split into an identifier (``preid``) and a numeric
counter (``prerelease``)::

    1.2.3-RC.2    -> preid="RC",    prerelease=2
    1.2.3-RC      -> preid="RC",    prerelease=0
    1.2.3-M.RC    -> preid="M.RC",  prerelease=0
    1.2.3-5       -> preid=None,    prerelease=5
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from .compare import compare
from .constants import (
    BUILD_IDENTIFIER,
    DEFAULT_PRERELEASE,
    NUMERIC_IDENTIFIER,
    PRERELEASE_IDENTIFIER,
)
from .errors import ConstructionError, FormatError

logger = logging.getLogger(__name__)

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    rf"^(?P<major>{NUMERIC_IDENTIFIER})"
    rf"\.(?P<minor>{NUMERIC_IDENTIFIER})"
    rf"\.(?P<patch>{NUMERIC_IDENTIFIER})"
    rf"(?:-(?P<prerelease>(?:{PRERELEASE_IDENTIFIER})"
    rf"(?:\.(?:{PRERELEASE_IDENTIFIER}))*))?"
    rf"(?:\+(?P<buildmetadata>{BUILD_IDENTIFIER}(?:\.{BUILD_IDENTIFIER})*))?$",
    re.ASCII,
)

_PREID_PATTERN = re.compile(
    rf"(?:{PRERELEASE_IDENTIFIER})(?:\.(?:{PRERELEASE_IDENTIFIER}))*",
    re.ASCII,
)


def _is_counter(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _invalid(message: str) -> ConstructionError:
    logger.debug("Rejected version components: %s", message)
    return ConstructionError(message)


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a semantic version.

    Instances are immutable; every ``inc_*`` method returns a new Version.
    Equality and hashing cover all five fields, ordering follows Semantic
    Versioning precedence (see :func:`semverkit.compare.compare`).

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        preid: Optional pre-release identifier (e.g., "RC", "alpha.beta")
        prerelease: Optional pre-release counter; required when preid is set

    Raises:
        ConstructionError: If preid is given without prerelease, a number is
            negative or not an int, or preid is not a valid identifier
    """

    major: int
    minor: int
    patch: int
    preid: Optional[str] = None
    prerelease: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate components after initialization."""
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not _is_counter(value):
                raise _invalid(f"{name} must be a non-negative integer, got {value!r}")
        if self.prerelease is not None and not _is_counter(self.prerelease):
            raise _invalid(
                f"prerelease must be a non-negative integer, got {self.prerelease!r}"
            )
        if self.preid is not None:
            if self.prerelease is None:
                raise _invalid(
                    f"Illegal arguments: {self.major}, {self.minor}, {self.patch}, "
                    f"{self.preid!r}, None (preid requires a prerelease number)"
                )
            if not isinstance(self.preid, str) or not _PREID_PATTERN.fullmatch(self.preid):
                raise _invalid(f"Invalid pre-release identifier: {self.preid!r}")

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Alias for :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.preid is not None or self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without the pre-release tail."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # ------------------------------------------------------------------
    # Increments
    # ------------------------------------------------------------------

    def _carried_prerelease(self, preid: Optional[str]) -> int:
        """Counter kept by a pre-major/minor/patch bump.

        The current counter survives only when the requested identifier
        matches the current one; otherwise it restarts at DEFAULT_PRERELEASE.
        """
        if preid == self.preid and self.prerelease is not None:
            return self.prerelease
        return DEFAULT_PRERELEASE

    def inc_major(self) -> Version:
        """Return ``(major+1).0.0``."""
        return Version(self.major + 1, 0, 0)

    def inc_minor(self) -> Version:
        """Return ``major.(minor+1).0``."""
        return Version(self.major, self.minor + 1, 0)

    def inc_patch(self) -> Version:
        """Return ``major.minor.(patch+1)``."""
        return Version(self.major, self.minor, self.patch + 1)

    def inc_premajor(self, preid: Optional[str] = None) -> Version:
        """Return ``(major+1).0.0-preid.N``.

        N is the current counter when ``preid`` equals the current
        identifier, otherwise DEFAULT_PRERELEASE (0).

        Examples:
            >>> str(parse_version("1.2.3-RC.2").inc_premajor("RC"))
            '2.0.0-RC.2'
            >>> str(parse_version("1.2.3-RC.2").inc_premajor())
            '2.0.0-0'
        """
        return Version(self.major + 1, 0, 0, preid, self._carried_prerelease(preid))

    def inc_preminor(self, preid: Optional[str] = None) -> Version:
        """Return ``major.(minor+1).0-preid.N`` (see :meth:`inc_premajor`)."""
        return Version(
            self.major, self.minor + 1, 0, preid, self._carried_prerelease(preid)
        )

    def inc_prepatch(self, preid: Optional[str] = None) -> Version:
        """Return ``major.minor.(patch+1)-preid.N`` (see :meth:`inc_premajor`)."""
        return Version(
            self.major, self.minor, self.patch + 1, preid, self._carried_prerelease(preid)
        )

    def inc_prerelease(self, preid: Optional[str] = None) -> Version:
        """Return ``major.minor.patch-preid.M``.

        M is the current counter plus one when ``preid`` equals the current
        identifier (a missing counter counts as DEFAULT_PRERELEASE), otherwise
        DEFAULT_PRERELEASE (0).

        Examples:
            >>> str(parse_version("1.2.3-RC.2").inc_prerelease("RC"))
            '1.2.3-RC.3'
            >>> str(parse_version("1.2.3-RC.2").inc_prerelease())
            '1.2.3-0'
        """
        if preid == self.preid:
            counter = self._carried_prerelease(preid) + 1
        else:
            counter = DEFAULT_PRERELEASE
        return Version(self.major, self.minor, self.patch, preid, counter)


def format_version(version: Version) -> str:
    """Render a Version in canonical form.

    Examples:
        >>> format_version(Version(1, 2, 3))
        '1.2.3'
        >>> format_version(Version(1, 2, 3, None, 4))
        '1.2.3-4'
        >>> format_version(Version(1, 2, 3, "RC", 4))
        '1.2.3-RC.4'
    """
    text = version.base_version
    if version.preid is not None:
        text += f"-{version.preid}.{version.prerelease}"
    elif version.prerelease is not None:
        text += f"-{version.prerelease}"
    return text


def _split_prerelease(tail: Optional[str]) -> tuple[Optional[str], Optional[int]]:
    """Split a matched pre-release tail into (preid, prerelease)."""
    if tail is None:
        return None, None
    *head, last = tail.split(".")
    if last.isdigit():
        if not head:
            return None, int(last)
        return ".".join(head), int(last)
    return tail, DEFAULT_PRERELEASE


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The whole string must match the grammar; surrounding whitespace is not
    trimmed. Build metadata is validated and discarded.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        FormatError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, preid=None, prerelease=None)

        >>> parse_version("1.0.0-RC.1+build.456")
        Version(major=1, minor=0, patch=0, preid='RC', prerelease=1)

        >>> parse_version("1.0.0-5")
        Version(major=1, minor=0, patch=0, preid=None, prerelease=5)
    """
    if not isinstance(version_string, str):
        raise FormatError(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        logger.debug("Rejected version string %r", version_string)
        raise FormatError(version_string)

    preid, prerelease = _split_prerelease(match.group("prerelease"))
    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        preid=preid,
        prerelease=prerelease,
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-RC.")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None

