"""
Services for configuration and logging.
"""

from .config_service import ConfigService, ArchiveSettings
from .logging_service import LoggingService

__all__ = ["ConfigService", "ArchiveSettings", "LoggingService"]
