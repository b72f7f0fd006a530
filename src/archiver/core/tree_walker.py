"""
Depth-first directory traversal with enter/file/exit callbacks.

Siblings are visited in lexicographic order so runs are reproducible.
Symbolic links are neither followed nor reported as files.
"""

import os
import logging
from pathlib import Path
from typing import Union

from src.interfaces.visitor import ITreeVisitor, VisitResult
from src.archiver.errors import TraversalError

logger = logging.getLogger(__name__)

__all__ = ["walk", "VisitResult"]


def walk(root: Union[str, Path], visitor: ITreeVisitor) -> None:
    """
    Walk the tree below root, invoking visitor callbacks.
    
    Args:
        root: Directory to start from (depth 0)
        visitor: Object providing enter_dir, visit_file and exit_dir
        
    Raises:
        TraversalError: If root is not a directory or any entry cannot be read
    """
    root = Path(root)
    if not root.is_dir():
        raise TraversalError(f"Root is not a directory: {root}", path=root)
    _walk_directory(root, 0, visitor)


def _walk_directory(directory: Path, depth: int, visitor: ITreeVisitor) -> None:
    if visitor.enter_dir(directory, depth) is VisitResult.SKIP_SUBTREE:
        logger.debug(f"Skipping subtree: {directory}")
        return

    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        raise TraversalError(f"Cannot list directory {directory}: {e}", path=directory) from e

    for entry in entries:
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
            file_stat = None if is_dir else _regular_file_stat(entry)
        except OSError as e:
            raise TraversalError(f"Cannot read attributes of {path}: {e}", path=path) from e

        if is_dir:
            _walk_directory(path, depth + 1, visitor)
        elif file_stat is not None:
            visitor.visit_file(path, file_stat, depth + 1)
        else:
            logger.debug(f"Ignoring non-regular entry: {path}")

    visitor.exit_dir(directory, depth)


def _regular_file_stat(entry: os.DirEntry):
    if not entry.is_file(follow_symlinks=False):
        return None
    return entry.stat(follow_symlinks=False)
