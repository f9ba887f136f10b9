# SPDX-License-Identifier: MIT
"""Version precedence following Semantic Versioning.

Ordering rules:
- MAJOR, MINOR and PATCH compare numerically (1.9.0 < 1.10.0).
- A release outranks every pre-release of the same MAJOR.MINOR.PATCH.
- Two pre-releases compare by identifier first (absent < present, then
  lexically), then by their numeric counter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from .semver import Version


def _sign(value1: Any, value2: Any) -> int:
    if value1 == value2:
        return 0
    return -1 if value1 < value2 else 1


def _compare_identifier(preid1: Optional[str], preid2: Optional[str]) -> int:
    """Compare two optional pre-release identifiers, absent sorting first."""
    if preid1 is None and preid2 is None:
        return 0
    if preid1 is None:
        return -1
    if preid2 is None:
        return 1
    return _sign(preid1, preid2)


def compare(v1: Version, v2: Version) -> int:
    """Compare two versions by Semantic Versioning precedence.

    Returns:
        -1 if v1 < v2
        0 if v1 == v2
        1 if v1 > v2

    Examples:
        >>> from semverkit import parse_version
        >>> compare(parse_version("1.9.0"), parse_version("1.10.0"))
        -1
        >>> compare(parse_version("1.0.0"), parse_version("1.0.0-rc.1"))
        1
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result:
            return result

    # Release > pre-release
    if not v1.is_prerelease and not v2.is_prerelease:
        return 0
    if not v1.is_prerelease:
        return 1
    if not v2.is_prerelease:
        return -1

    result = _compare_identifier(v1.preid, v2.preid)
    if result:
        return result
    # Equal identifiers on two pre-releases imply both counters are set
    return _sign(v1.prerelease, v2.prerelease)


def version_key(version: Version) -> tuple:
    """Return a sort key consistent with :func:`compare`.

    Examples:
        >>> from semverkit import parse_version
        >>> versions = [parse_version(s) for s in ("1.0.0", "1.0.0-beta", "1.0.0-alpha")]
        >>> [str(v) for v in sorted(versions, key=version_key)]
        ['1.0.0-alpha.0', '1.0.0-beta.0', '1.0.0']
    """
    if not version.is_prerelease:
        # (1,) sorts after every (0, ...) pre-release key
        release_key: tuple = (1,)
    else:
        release_key = (
            0,
            (version.preid is not None, version.preid or ""),
            version.prerelease,
        )
    return (version.major, version.minor, version.patch, release_key)


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions, parsing string operands first.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        FormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0-alpha", "1.0.0-alpha.1")
        -1
        >>> compare_versions("1.0.0", "1.0.0+build.7")
        0
    """
    # semver imports this module for Version ordering
    from .semver import parse_version

    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return compare(v1, v2)
