# SPDX-License-Identifier: MIT
"""Exceptions raised by semverkit."""

from __future__ import annotations

from typing import Any


class SemVerError(Exception):
    """Base class for all semverkit errors."""


class FormatError(SemVerError):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: Any, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class ConstructionError(SemVerError):
    """Raised when a Version is built from inconsistent components."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
