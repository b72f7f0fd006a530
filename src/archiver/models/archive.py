"""
Archive run models: pending files, groups, results and the run summary.
"""

from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from .options import Disposition


class PendingFile(BaseModel):
    """A file known to qualify for archiving, with its captured timestamps."""
    path: Path
    created: datetime
    modified: datetime
    accessed: datetime

    @property
    def name(self) -> str:
        return self.path.name


class ArchiveGroup(BaseModel):
    """Qualifying files discovered under one target directory."""
    target: Path
    files: List[PendingFile] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)


class ArchiveResult(BaseModel):
    """Outcome of archiving one target directory."""
    target: Path
    archive_path: Path
    members: List[str] = Field(default_factory=list)
    disposition: Optional[Disposition] = None
    dry_run: bool = False
    timestamp: datetime = Field(default_factory=datetime.now)


class RunSummary(BaseModel):
    """Totals for one complete traversal."""
    root: Path
    cutoff: Optional[date] = None
    files_visited: int = Field(default=0, ge=0)
    files_matched: int = Field(default=0, ge=0)
    files_archived: int = Field(default=0, ge=0)
    archives: List[ArchiveResult] = Field(default_factory=list)
    failed_dirs: List[Path] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed_dirs
