"""
Unit tests for timestamp helpers and the zip extended-timestamp field.
"""

import os
import sys
from pathlib import Path
from datetime import datetime
import tempfile

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.utils.file_times import (
    EXTENDED_TIMESTAMP_ID,
    dos_date_time,
    extended_timestamp_extra,
    file_timestamps,
    local_date,
    read_extended_timestamps,
)


class TestFileTimestamps:
    """Tests for file_timestamps."""
    
    def test_modified_and_accessed_follow_utime(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.txt"
            path.write_text("x")
            accessed = datetime(2022, 3, 4, 5, 6, 7)
            modified = datetime(2023, 5, 1, 12, 0, 0)
            os.utime(path, (accessed.timestamp(), modified.timestamp()))
            
            _, mod, acc = file_timestamps(path.stat())
        
        assert mod == modified
        assert acc == accessed
    
    def test_local_date_drops_time_of_day(self):
        assert local_date(datetime(2023, 5, 31, 23, 59, 59)).isoformat() == "2023-05-31"


class TestDosDateTime:
    """Tests for dos_date_time."""
    
    def test_regular_date(self):
        assert dos_date_time(datetime(2023, 5, 1, 12, 30, 10)) == (2023, 5, 1, 12, 30, 10)
    
    def test_dates_before_1980_are_clamped(self):
        assert dos_date_time(datetime(1970, 1, 2)) == (1980, 1, 1, 0, 0, 0)


class TestExtendedTimestamp:
    """Tests for the 0x5455 extra field."""
    
    def test_layout(self):
        moment = datetime(2023, 5, 1, 12, 0, 0)
        extra = extended_timestamp_extra(moment, accessed=moment, created=moment)
        
        assert int.from_bytes(extra[0:2], "little") == EXTENDED_TIMESTAMP_ID
        assert int.from_bytes(extra[2:4], "little") == 13
        assert extra[4] == 0x07
    
    def test_read_back(self):
        modified = datetime(2023, 5, 1, 12, 0, 0)
        accessed = datetime(2023, 5, 2, 8, 0, 0)
        created = datetime(2023, 4, 30, 9, 15, 0)
        
        times = read_extended_timestamps(
            extended_timestamp_extra(modified, accessed=accessed, created=created)
        )
        
        assert times == {"modified": modified, "accessed": accessed, "created": created}
    
    def test_other_fields_are_skipped(self):
        """Unrelated extra records before the timestamp field are ignored."""
        modified = datetime(2023, 5, 1, 12, 0, 0)
        foreign = (0xCAFE).to_bytes(2, "little") + (2).to_bytes(2, "little") + b"\x00\x00"
        
        times = read_extended_timestamps(foreign + extended_timestamp_extra(modified))
        
        assert times == {"modified": modified}
    
    def test_missing_field(self):
        assert read_extended_timestamps(b"") == {}
