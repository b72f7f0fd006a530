"""
Centralized logging service.

Progress of an archiving run (entered folders, matched files, created
archives) is reported through the standard logging module; this service
only decides where those records go.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional
from datetime import datetime

DEFAULT_FORMAT = '[%(asctime)s - %(levelname)s - %(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggingService:
    """Service for configuring logging."""

    @staticmethod
    def setup_logging(
        log_level: int = logging.INFO,
        log_file: Optional[Path] = None,
        format_string: Optional[str] = None
    ) -> None:
        """
        Route all archiver logging to stdout and, optionally, a file.

        Existing root handlers are replaced, so calling this twice does not
        duplicate output.

        Args:
            log_level: Logging level (default: INFO)
            log_file: Optional log file path; parent directories are created
            format_string: Optional custom format string
        """
        handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

        logging.basicConfig(
            level=log_level,
            format=format_string or DEFAULT_FORMAT,
            datefmt=DATE_FORMAT,
            handlers=handlers,
            force=True
        )

        if log_file:
            logging.info(f"Logging to {log_file} (level: {logging.getLevelName(log_level)})")

    @staticmethod
    def run_log_file(log_dir: Path) -> Path:
        """
        Timestamped log file path for one archiving run.

        Args:
            log_dir: Directory for log files

        Returns:
            Path like log_dir/archive_run_20240131_235959.log
        """
        return log_dir / f"archive_run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
