"""
Test that all modules can be imported successfully.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_core_imports():
    """Test that the core engine exports its public API."""
    from src.archiver.core import (
        compute_cutoff,
        walk,
        is_archive_candidate,
        Aggregator,
        Archiver,
        run_archiving,
    )
    assert callable(run_archiving)


def test_service_imports():
    from src.services import ConfigService, ArchiveSettings, LoggingService
    assert ConfigService and ArchiveSettings and LoggingService


def test_interface_imports():
    from src.interfaces import ITreeVisitor, IDisposer, VisitResult
    from src.archiver.core.run_coordinator import ArchiveRun
    from src.archiver.core.disposers import DeleteDisposer
    assert issubclass(ArchiveRun, ITreeVisitor)
    assert issubclass(DeleteDisposer, IDisposer)
    assert VisitResult.SKIP_SUBTREE is not VisitResult.CONTINUE


def test_utils_imports():
    from src.utils import file_timestamps, load_env_automatically
    assert callable(file_timestamps) and callable(load_env_automatically)
