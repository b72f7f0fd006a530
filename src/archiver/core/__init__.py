"""
Core traversal, classification and archiving engine.
"""

from src.archiver.errors import (
    ArchiverError,
    InvalidDateConfig,
    MissingConfig,
    TraversalError,
    ArchiveWriteError,
)
from .cutoff import compute_cutoff, archive_label
from .tree_walker import walk, VisitResult
from .classifier import LayoutMembership, is_archive_candidate, skip_reason
from .aggregator import Aggregator
from .archive_writer import Archiver
from .run_coordinator import ArchiveRun, run_archiving

__all__ = [
    "ArchiverError",
    "InvalidDateConfig",
    "MissingConfig",
    "TraversalError",
    "ArchiveWriteError",
    "compute_cutoff",
    "archive_label",
    "walk",
    "VisitResult",
    "LayoutMembership",
    "is_archive_candidate",
    "skip_reason",
    "Aggregator",
    "Archiver",
    "ArchiveRun",
    "run_archiving",
]
