"""
File timestamp helpers.

Reads creation/modification/access times from stat results and encodes them
into zip entries: the DOS modification time of the entry header plus the
"extended timestamp" extra field (header id 0x5455) that carries
modification, access and creation times as 32-bit Unix seconds.
"""

import os
import struct
from datetime import date, datetime
from typing import Dict, Optional, Tuple

EXTENDED_TIMESTAMP_ID = 0x5455
_FLAG_MODIFIED = 0x01
_FLAG_ACCESSED = 0x02
_FLAG_CREATED = 0x04

_DOS_EPOCH = (1980, 1, 1, 0, 0, 0)
_DOS_MAX_YEAR = 2107
_INT32_MIN = -(2 ** 31)
_INT32_MAX = 2 ** 31 - 1


def file_timestamps(stat: os.stat_result) -> Tuple[datetime, datetime, datetime]:
    """
    Return (created, modified, accessed) as local naive datetimes.
    
    Creation time is the birth time where the platform records one
    (st_birthtime, or st_ctime on Windows); elsewhere the modification time
    stands in for it.
    """
    birth = getattr(stat, "st_birthtime", None)
    if birth is None:
        birth = stat.st_ctime if os.name == "nt" else stat.st_mtime
    return (
        datetime.fromtimestamp(birth),
        datetime.fromtimestamp(stat.st_mtime),
        datetime.fromtimestamp(stat.st_atime),
    )


def local_date(moment: datetime) -> date:
    """Calendar date of a timestamp, time-of-day discarded."""
    return moment.date()


def dos_date_time(moment: datetime) -> Tuple[int, int, int, int, int, int]:
    """Clamp a datetime into the range a zip entry header can represent."""
    if moment.year < 1980:
        return _DOS_EPOCH
    if moment.year > _DOS_MAX_YEAR:
        return (_DOS_MAX_YEAR, 12, 31, 23, 59, 58)
    return (moment.year, moment.month, moment.day, moment.hour, moment.minute, moment.second)


def extended_timestamp_extra(
    modified: datetime,
    accessed: Optional[datetime] = None,
    created: Optional[datetime] = None
) -> bytes:
    """
    Build the 0x5455 extra field.
    
    Times outside the signed 32-bit range are left out; an empty bytes
    object is returned when none fits.
    """
    flags = 0
    values = []
    for flag, moment in (
        (_FLAG_MODIFIED, modified),
        (_FLAG_ACCESSED, accessed),
        (_FLAG_CREATED, created),
    ):
        if moment is None:
            continue
        seconds = int(moment.timestamp())
        if _INT32_MIN <= seconds <= _INT32_MAX:
            flags |= flag
            values.append(seconds)

    if not flags:
        return b""
    payload = struct.pack("<B", flags) + struct.pack(f"<{len(values)}i", *values)
    return struct.pack("<HH", EXTENDED_TIMESTAMP_ID, len(payload)) + payload


def read_extended_timestamps(extra: bytes) -> Dict[str, datetime]:
    """Parse the 0x5455 field out of a zip entry's extra data."""
    offset = 0
    while offset + 4 <= len(extra):
        header_id, size = struct.unpack_from("<HH", extra, offset)
        body = extra[offset + 4:offset + 4 + size]
        offset += 4 + size
        if header_id != EXTENDED_TIMESTAMP_ID or not body:
            continue

        flags = body[0]
        times: Dict[str, datetime] = {}
        position = 1
        for flag, key in (
            (_FLAG_MODIFIED, "modified"),
            (_FLAG_ACCESSED, "accessed"),
            (_FLAG_CREATED, "created"),
        ):
            if flags & flag and position + 4 <= len(body):
                (seconds,) = struct.unpack_from("<i", body, position)
                times[key] = datetime.fromtimestamp(seconds)
                position += 4
        return times
    return {}
