"""
Unit tests for cutoff calculation and archive labels.
"""

import sys
from pathlib import Path
from datetime import date

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from src.archiver.core.cutoff import compute_cutoff, archive_label
from src.archiver.errors import InvalidDateConfig


class TestComputeCutoff:
    """Tests for compute_cutoff."""
    
    def test_exact_month(self):
        """Without rollover the cutoff is the first of the configured month."""
        assert compute_cutoff(2023, 6, roll_to_next_month=False) == date(2023, 6, 1)
    
    def test_roll_to_next_month(self):
        """With rollover the configured month itself is archived."""
        assert compute_cutoff(2023, 5, roll_to_next_month=True) == date(2023, 6, 1)
    
    def test_december_rolls_into_next_year(self):
        """December wraps to January of the following year."""
        assert compute_cutoff(2023, 12, roll_to_next_month=True) == date(2024, 1, 1)
    
    def test_default_rolls_over(self):
        """Rollover is the default."""
        assert compute_cutoff(2023, 1) == date(2023, 2, 1)
    
    def test_negative_year_rejected(self):
        """A negative year is an invalid date configuration."""
        with pytest.raises(InvalidDateConfig):
            compute_cutoff(-1, 5)
    
    @pytest.mark.parametrize("month", [0, 13, -3])
    def test_month_out_of_range_rejected(self, month):
        """Months outside 1-12 are rejected before any rollover."""
        with pytest.raises(InvalidDateConfig):
            compute_cutoff(2023, month, roll_to_next_month=True)
    
    def test_year_beyond_calendar_rejected(self):
        """A year the calendar cannot represent is reported as invalid, not ValueError."""
        with pytest.raises(InvalidDateConfig):
            compute_cutoff(9999, 12, roll_to_next_month=True)


class TestArchiveLabel:
    """Tests for archive_label."""
    
    def test_label_is_previous_month(self):
        assert archive_label(date(2023, 6, 1)) == (2023, 5)
    
    def test_january_cutoff_labels_previous_december(self):
        assert archive_label(date(2024, 1, 1)) == (2023, 12)
    
    def test_rollover_round_trip(self):
        """The label of a rolled-over cutoff is the configured month."""
        for month in range(1, 13):
            assert archive_label(compute_cutoff(2023, month)) == (2023, month)
