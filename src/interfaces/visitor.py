"""
Interface for directory tree visitors.
"""

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
import os


class VisitResult(Enum):
    """Signal returned by enter_dir."""
    CONTINUE = "continue"
    SKIP_SUBTREE = "skip_subtree"


class ITreeVisitor(ABC):
    """Callbacks invoked by the tree walker in depth-first order."""
    
    @abstractmethod
    def enter_dir(self, directory: Path, depth: int) -> VisitResult:
        """
        Called before a directory's children are visited.
        
        Args:
            directory: Directory being entered
            depth: Path segments between the walk root and the directory
            
        Returns:
            VisitResult.SKIP_SUBTREE to prune the directory
        """
        pass
    
    @abstractmethod
    def visit_file(self, file_path: Path, stat: os.stat_result, depth: int) -> None:
        """Called for each regular file with its stat result."""
        pass
    
    @abstractmethod
    def exit_dir(self, directory: Path, depth: int) -> None:
        """Called after all children of a directory were processed."""
        pass
