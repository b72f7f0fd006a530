"""
File classification: which files qualify for archiving and which directories
are archive targets.

Structured categories are laid out as root/<category>/<number>/<file>; files
sit at depth 3 and the numbered folder (depth 2) is the archive target.
Flat categories are laid out as root/<category>/<file>; files sit at depth 2
and the category folder (depth 1) is the archive target. In both layouts the
target directory of a qualifying file is its parent.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from src.archiver.models.options import LayoutCategory

logger = logging.getLogger(__name__)

STRUCTURED_FILE_DEPTH = 3
FLAT_FILE_DEPTH = 2
ARCHIVE_SUFFIX = ".zip"


@dataclass(frozen=True)
class LayoutMembership:
    """
    Category folder names per layout.
    
    structured=None means every category that is not flat is structured.
    """
    structured: Optional[FrozenSet[str]] = None
    flat: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_names(
        cls,
        structured: Optional[Iterable[str]] = None,
        flat: Optional[Iterable[str]] = None
    ) -> "LayoutMembership":
        return cls(
            structured=frozenset(structured) if structured is not None else None,
            flat=frozenset(flat or ()),
        )

    def is_flat(self, name: str) -> bool:
        return name in self.flat

    def is_structured(self, name: str) -> bool:
        if self.structured is None:
            return name not in self.flat
        return name in self.structured

    def category_of(self, name: str) -> Optional[LayoutCategory]:
        """Layout of a category folder, or None if it is not configured."""
        if self.is_flat(name):
            return LayoutCategory.FLAT
        if self.is_structured(name):
            return LayoutCategory.STRUCTURED
        return None


def skip_reason(
    file_name: str,
    file_date: date,
    cutoff: date,
    depth: int,
    parent_name: str,
    grandparent_name: str,
    membership: LayoutMembership,
    skip_archives: bool = True
) -> Optional[str]:
    """
    Explain why a visited file is not archived.

    Args:
        file_name: Base name of the file
        file_date: Local calendar date of the file's reference timestamp
        cutoff: Exclusive cutoff date
        depth: Path segments between the walk root and the file
        parent_name: Name of the directory containing the file
        grandparent_name: Name of the parent's parent
        membership: Structured/flat category names
        skip_archives: Never select files that already are zip archives

    Returns:
        Human-readable reason, or None if the file must be added to its
        target directory's archive
    """
    if skip_archives and file_name.lower().endswith(ARCHIVE_SUFFIX):
        return "already a zip archive"

    in_structured = depth == STRUCTURED_FILE_DEPTH and membership.is_structured(grandparent_name)
    in_flat = depth == FLAT_FILE_DEPTH and membership.is_flat(parent_name)
    if not (in_structured or in_flat):
        return f"not inside an archived folder (depth {depth})"

    if file_date >= cutoff:
        return f"dated {file_date}, not before {cutoff}"
    return None


def is_archive_candidate(
    file_name: str,
    file_date: date,
    cutoff: date,
    depth: int,
    parent_name: str,
    grandparent_name: str,
    membership: LayoutMembership,
    skip_archives: bool = True
) -> bool:
    """True if skip_reason() finds no reason to leave the file alone."""
    return skip_reason(
        file_name, file_date, cutoff, depth,
        parent_name, grandparent_name, membership,
        skip_archives=skip_archives
    ) is None


def is_archive_target(directory: Path, depth: int, membership: LayoutMembership) -> bool:
    """True if the directory collects an archive when its visit completes."""
    if depth == STRUCTURED_FILE_DEPTH - 1:
        return membership.is_structured(directory.parent.name)
    if depth == FLAT_FILE_DEPTH - 1:
        return membership.is_flat(directory.name)
    return False


def target_directory(file_path: Path) -> Path:
    """Archive target a qualifying file belongs to."""
    return file_path.parent
