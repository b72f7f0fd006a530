"""
Disposition policies for archived originals.
"""

import shutil
import logging
from pathlib import Path
from typing import Optional

from src.interfaces.disposer import IDisposer
from src.archiver.models.options import Disposition

logger = logging.getLogger(__name__)


def unique_path(path: Path) -> Path:
    """
    Return path, or the first free "<stem>_<n><suffix>" sibling of it.
    
    Suffixes are tried in order _1, _2, ...
    """
    if not path.exists():
        return path
    counter = 1
    while True:
        candidate = path.with_name(f"{path.stem}_{counter}{path.suffix}")
        if not candidate.exists():
            return candidate
        counter += 1


class DeleteDisposer(IDisposer):
    """Delete originals once they are archived."""

    disposition = Disposition.DELETE

    def dispose(self, file_path: Path) -> Optional[Path]:
        file_path.unlink()
        logger.info(f"Deleted original {file_path}")
        return None


class MoveToHoldingDisposer(IDisposer):
    """
    Move originals into a holding directory that mirrors the tree.
    
    root/Category/001/file.txt ends up in root/<holding>/Category/001/file.txt.
    """

    disposition = Disposition.MOVE

    def __init__(self, root: Path, holding_dir: Path):
        self.root = root
        self.holding_dir = holding_dir

    def destination_for(self, file_path: Path) -> Path:
        relative = file_path.parent.relative_to(self.root)
        return self.holding_dir / relative / file_path.name

    def dispose(self, file_path: Path) -> Optional[Path]:
        destination = self.destination_for(file_path)
        if not destination.parent.exists():
            logger.info(f"Creating holding directory {destination.parent}")
            destination.parent.mkdir(parents=True, exist_ok=True)
        destination = unique_path(destination)
        shutil.move(str(file_path), str(destination))
        logger.info(f"Moved original {file_path} -> {destination}")
        return destination


def create_disposer(disposition: Disposition, root: Path, holding_dir: Path) -> IDisposer:
    if disposition is Disposition.DELETE:
        return DeleteDisposer()
    return MoveToHoldingDisposer(root, holding_dir)
