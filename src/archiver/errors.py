"""
Error taxonomy for archiving runs.

All errors derive from ArchiverError so the CLI can report any of them with a
single handler and exit non-zero.
"""

from pathlib import Path
from typing import Optional


class ArchiverError(Exception):
    """Base class for all fatal archiving errors."""


class InvalidDateConfig(ArchiverError):
    """Configured year is negative or month is outside 1-12."""


class MissingConfig(ArchiverError):
    """Configuration source is absent, unreadable or lacks a required key."""


class TraversalError(ArchiverError):
    """Filesystem error while listing a directory or reading attributes."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ArchiveWriteError(ArchiverError):
    """Failure to create, write, close or dispose of one directory's archive."""

    def __init__(self, message: str, directory: Optional[Path] = None):
        super().__init__(message)
        self.directory = directory
