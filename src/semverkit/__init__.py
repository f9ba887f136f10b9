# SPDX-License-Identifier: MIT
"""Semantic version parsing, precedence and increments.

This package provides an immutable ``Version`` value type with a strict
SemVer 2.0.0 grammar, Semantic Versioning precedence ordering, and pure
increment operations for release tooling.

Example:
    >>> from semverkit import parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-RC.1+build.456")
    >>> version.preid, version.prerelease
    ('RC', 1)
    >>> str(version.inc_prerelease("RC"))
    '1.2.3-RC.2'
    >>>
    >>> compare_versions("1.0.0-rc.1", "1.0.0")
    -1

Pre-release increments that switch identifier, and pre-release tails without
a trailing number, use ``DEFAULT_PRERELEASE`` (0) as the counter.
"""

import logging

__version__ = "0.1.0"

from .constants import DEFAULT_PRERELEASE
from .errors import (
    SemVerError,
    FormatError,
    ConstructionError,
)
from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    format_version,
    SEMVER_PATTERN,
)
from .compare import (
    compare,
    compare_versions,
    version_key,
)
from .increment import (
    ReleaseType,
    bump,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Value type and parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "format_version",
    "SEMVER_PATTERN",
    "DEFAULT_PRERELEASE",
    # Precedence
    "compare",
    "compare_versions",
    "version_key",
    # Increments
    "ReleaseType",
    "bump",
    # Errors
    "SemVerError",
    "FormatError",
    "ConstructionError",
]
