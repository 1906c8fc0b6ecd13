#!/usr/bin/env python3
"""
Exception types raised by the XML resources provider.

Import treats every error as fatal. Export never raises these for a single
file; they are turned into ERROR results for that file instead.
"""

from typing import Optional


class ResourceSyncError(Exception):
    """Base class for all provider errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} ({self.path})"
        return self.message


class MalformedRecordError(ResourceSyncError, ValueError):
    """A resource file is not valid XML or a string entry has no key."""


class StorageIOError(ResourceSyncError):
    """A resource file or directory could not be read or written."""


class InvalidCharacterError(ResourceSyncError, ValueError):
    """A value holds a character that XML 1.0 cannot represent."""
