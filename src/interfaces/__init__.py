"""
Interfaces for archiver components.
"""

from .visitor import ITreeVisitor, VisitResult
from .disposer import IDisposer

__all__ = ["ITreeVisitor", "VisitResult", "IDisposer"]
