"""
Utility modules for the document archiver.
"""

from .file_times import (
    file_timestamps,
    local_date,
    dos_date_time,
    extended_timestamp_extra,
    read_extended_timestamps,
)
from .env_loader import load_env_automatically

__all__ = [
    "file_timestamps",
    "local_date",
    "dos_date_time",
    "extended_timestamp_extra",
    "read_extended_timestamps",
    "load_env_automatically",
]
