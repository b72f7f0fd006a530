"""
Per-directory accumulation of files to archive.
"""

from pathlib import Path
from typing import Dict, Optional

from src.archiver.models.archive import ArchiveGroup, PendingFile


class Aggregator:
    """Groups pending files by their target directory in traversal order."""

    def __init__(self):
        self._groups: Dict[Path, ArchiveGroup] = {}

    def record(self, target: Path, pending: PendingFile) -> None:
        group = self._groups.get(target)
        if group is None:
            group = ArchiveGroup(target=target)
            self._groups[target] = group
        group.files.append(pending)

    def pop(self, target: Path) -> Optional[ArchiveGroup]:
        """Remove and return the group for target; a group is consumed once."""
        return self._groups.pop(target, None)

    def count(self, target: Path) -> int:
        group = self._groups.get(target)
        return len(group) if group is not None else 0
