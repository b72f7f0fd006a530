"""
Interface for disposing of original files after they were archived.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from src.archiver.models.options import Disposition


class IDisposer(ABC):
    """Disposition policy for archived originals."""
    
    disposition: Disposition
    
    @abstractmethod
    def dispose(self, file_path: Path) -> Optional[Path]:
        """
        Remove an archived original from its directory.
        
        Args:
            file_path: Original file that is now inside an archive
            
        Returns:
            New location of the file, or None if it was deleted
        """
        pass
