"""
Cutoff date calculation.
"""

from datetime import date
from typing import Tuple

from src.archiver.errors import InvalidDateConfig


def compute_cutoff(year: int, month: int, roll_to_next_month: bool = True) -> date:
    """
    Turn a configured (year, month) into the exclusive cutoff date.

    Args:
        year: Calendar year, must be >= 0
        month: Calendar month, 1-12
        roll_to_next_month: If True the cutoff is the first day of the month
            after the configured one, so files created in or before the
            configured month qualify.

    Returns:
        First day of the cutoff month

    Raises:
        InvalidDateConfig: For a negative year or a month outside 1-12
    """
    if year < 0:
        raise InvalidDateConfig(f"Incorrect year: {year}")
    if month < 1 or month > 12:
        raise InvalidDateConfig(f"Incorrect month: {month}")

    if roll_to_next_month:
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1

    # date() only supports years 1..9999
    try:
        return date(year, month, 1)
    except ValueError as e:
        raise InvalidDateConfig(f"Incorrect date {year}-{month:02d}: {e}") from e


def archive_label(cutoff: date) -> Tuple[int, int]:
    """Return the (year, month) being archived: the month before the cutoff."""
    if cutoff.month == 1:
        return cutoff.year - 1, 12
    return cutoff.year, cutoff.month - 1
