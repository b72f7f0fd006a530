"""
Enumerations for layout categories and deployment policies.
"""

from enum import Enum


class LayoutCategory(str, Enum):
    """How a category folder is organised on disk."""
    STRUCTURED = "structured"  # category -> numbered folder -> files
    FLAT = "flat"  # category -> files


class Disposition(str, Enum):
    """What happens to original files once they are archived."""
    DELETE = "delete"
    MOVE = "move"  # relocate into the holding directory


class ErrorPolicy(str, Enum):
    """Reaction to a failed archive for one directory."""
    ABORT = "abort"
    SKIP = "skip"


class DateAttribute(str, Enum):
    """File timestamp compared against the cutoff."""
    CREATED = "created"
    MODIFIED = "modified"
