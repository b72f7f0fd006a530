"""
Data models for the document archiver using Pydantic for type safety and validation.
"""

from .options import LayoutCategory, Disposition, ErrorPolicy, DateAttribute
from .archive import PendingFile, ArchiveGroup, ArchiveResult, RunSummary

__all__ = [
    "LayoutCategory",
    "Disposition",
    "ErrorPolicy",
    "DateAttribute",
    "PendingFile",
    "ArchiveGroup",
    "ArchiveResult",
    "RunSummary",
]
