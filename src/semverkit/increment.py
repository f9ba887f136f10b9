# SPDX-License-Identifier: MIT
"""Release-type driven version bumps.

Maps a release type name to the matching ``Version.inc_*`` method so that
release tooling can select the increment from configuration or user input.

Example:
    >>> str(bump("1.2.3-RC.2", ReleaseType.PRERELEASE, "RC"))
    '1.2.3-RC.3'
    >>> str(bump("1.2.3", "minor"))
    '1.3.0'
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .semver import Version, parse_version


class ReleaseType(str, Enum):
    """Kinds of version increments."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PREMAJOR = "premajor"
    PREMINOR = "preminor"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"

    @property
    def is_prerelease(self) -> bool:
        """Return True if this increment produces a pre-release."""
        return self in _PRERELEASE_TYPES


_PRERELEASE_TYPES = frozenset(
    {
        ReleaseType.PREMAJOR,
        ReleaseType.PREMINOR,
        ReleaseType.PREPATCH,
        ReleaseType.PRERELEASE,
    }
)


def bump(
    version: Union[str, Version],
    release_type: Union[str, ReleaseType],
    preid: Optional[str] = None,
) -> Version:
    """Return a new version incremented according to ``release_type``.

    Args:
        version: Version string or Version object to increment
        release_type: A ReleaseType member or its value (e.g. "prepatch")
        preid: Pre-release identifier for the pre-release types

    Returns:
        The incremented Version

    Raises:
        FormatError: If ``version`` is a string that is not a valid version
        ValueError: If ``release_type`` is unknown, or ``preid`` is given for
            a release type that does not produce a pre-release
    """
    v = parse_version(version) if isinstance(version, str) else version

    try:
        kind = ReleaseType(release_type)
    except ValueError:
        choices = ", ".join(t.value for t in ReleaseType)
        raise ValueError(
            f"Unknown release type: {release_type!r}. Expected one of: {choices}"
        ) from None

    if not kind.is_prerelease:
        if preid is not None:
            raise ValueError(f"preid is only valid for pre-release types, not {kind.value!r}")
        return getattr(v, f"inc_{kind.value}")()
    return getattr(v, f"inc_{kind.value}")(preid)
