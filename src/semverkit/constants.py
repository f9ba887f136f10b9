# SPDX-License-Identifier: MIT
"""Constants shared by the semverkit modules."""

from __future__ import annotations

# Counter assigned when a pre-release carries no explicit number (``1.2.3-RC``)
# and when an increment switches to a different pre-release identifier.
DEFAULT_PRERELEASE = 0

# Numeric components: "0" or digits without a leading zero
NUMERIC_IDENTIFIER = r"0|[1-9]\d*"

# Pre-release identifier: numeric, or containing at least one letter or hyphen
PRERELEASE_IDENTIFIER = r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*"

# Build metadata identifier (leading zeros allowed)
BUILD_IDENTIFIER = r"[0-9a-zA-Z-]+"
