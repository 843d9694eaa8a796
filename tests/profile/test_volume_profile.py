"""Tests for volume profile queries."""

from datetime import time

import pytest

from volprofile.errors import InvalidRangeError
from volprofile.models.bucket import BucketCategory


class TestCumulativePercentage:
    """Test cumulative volume integration."""

    def test_whole_buckets(self, three_minute_profile):
        assert three_minute_profile.cumulative_percentage(time(9, 30), time(9, 32)) == pytest.approx(0.7)

    def test_touching_buckets_contribute_nothing(self, three_minute_profile):
        """Buckets that only share a boundary with the range are skipped."""
        assert three_minute_profile.cumulative_percentage(time(9, 31), time(9, 32)) == pytest.approx(0.3)

    def test_full_day(self, session_profile):
        assert session_profile.cumulative_percentage(time(9, 0), time(16, 10)) == pytest.approx(1.0)

    def test_range_wider_than_profile(self, session_profile):
        assert session_profile.cumulative_percentage(time(8, 0), time(17, 0)) == pytest.approx(1.0)

    def test_straddles_start(self, session_profile):
        """Bucket crossing the range start contributes its remaining fraction."""
        # POS: 0.1 * 15/30, CTS: 0.4 * 15/150
        assert session_profile.cumulative_percentage(time(9, 15), time(9, 45)) == pytest.approx(0.09)

    def test_straddles_end(self, session_profile):
        assert session_profile.cumulative_percentage(time(9, 30), time(10, 45)) == pytest.approx(0.2)

    def test_range_inside_single_bucket(self, session_profile):
        """A range strictly inside one bucket gets the interior fraction only."""
        assert session_profile.cumulative_percentage(time(10, 0), time(11, 0)) == pytest.approx(0.16)

    def test_sub_minute_range_inside_single_bucket(self, three_minute_profile):
        result = three_minute_profile.cumulative_percentage(time(9, 30, 15), time(9, 30, 45))
        assert result == pytest.approx(0.2)

    def test_seconds_resolution(self, session_profile):
        result = session_profile.cumulative_percentage(time(9, 0, 0), time(9, 0, 30))
        assert result == pytest.approx(0.1 * 30 / 1800)

    def test_zero_share_bucket(self, session_profile):
        assert session_profile.cumulative_percentage(time(12, 15), time(12, 45)) == 0.0

    def test_outside_profile(self, session_profile):
        assert session_profile.cumulative_percentage(time(17, 0), time(18, 0)) == 0.0

    def test_monotonic_in_end_time(self, session_profile):
        """Extending the range end never decreases cumulative volume."""
        start = time(9, 0)
        previous = 0.0
        for minutes in range(9 * 60 + 1, 16 * 60 + 11):
            end = time(minutes // 60, minutes % 60)
            current = session_profile.cumulative_percentage(start, end)
            assert current >= previous
            previous = current

    def test_reversed_range(self, session_profile):
        with pytest.raises(InvalidRangeError) as exc_info:
            session_profile.cumulative_percentage(time(9, 0), time(8, 0))
        assert exc_info.value.from_time == time(9, 0)
        assert exc_info.value.to_time == time(8, 0)
        assert exc_info.value.recoverable is False

    def test_empty_range(self, session_profile):
        with pytest.raises(InvalidRangeError):
            session_profile.cumulative_percentage(time(10, 0), time(10, 0))

    def test_none_bounds(self, session_profile):
        with pytest.raises(InvalidRangeError, match="cannot be None"):
            session_profile.cumulative_percentage(None, time(10, 0))


class TestNormalizedTarget:
    """Test normalized execution targets."""

    def test_mid_bucket_target(self, three_minute_profile):
        # 0.4 + half of 0.3
        target = three_minute_profile.normalized_target(time(9, 31, 30), time(9, 30), time(9, 33))
        assert target == pytest.approx(0.55)

    def test_later_mid_bucket_target(self, three_minute_profile):
        # 0.4 + 0.3 + half of 0.3
        target = three_minute_profile.normalized_target(time(9, 32, 30), time(9, 30), time(9, 33))
        assert target == pytest.approx(0.85)

    def test_target_is_zero_at_start(self, session_profile):
        assert session_profile.normalized_target(time(9, 30), time(9, 30), time(11, 30)) == 0.0

    def test_target_is_one_at_end(self, session_profile):
        assert session_profile.normalized_target(time(11, 30), time(9, 30), time(11, 30)) == 1.0

    def test_full_day_target(self, session_profile):
        target = session_profile.normalized_target(time(10, 30), time(9, 0), time(16, 10))
        assert target == pytest.approx(0.26)

    def test_target_normalizes_by_period_volume(self, session_profile):
        """Target is relative to the period, not to the whole day."""
        target = session_profile.normalized_target(time(10, 45), time(9, 30), time(12, 0))
        assert target == pytest.approx(0.5)

    def test_zero_volume_period(self, session_profile):
        assert session_profile.normalized_target(time(12, 30), time(12, 0), time(13, 0)) == 0.0

    def test_flat_through_lunch(self, session_profile):
        target = session_profile.normalized_target(time(12, 30), time(11, 0), time(13, 0))
        assert target == pytest.approx(1.0)

    def test_time_before_period(self, session_profile):
        with pytest.raises(InvalidRangeError, match="must be between") as exc_info:
            session_profile.normalized_target(time(9, 0), time(9, 30), time(11, 30))
        assert exc_info.value.at_time == time(9, 0)

    def test_time_after_period(self, session_profile):
        with pytest.raises(InvalidRangeError):
            session_profile.normalized_target(time(12, 0), time(9, 30), time(11, 30))

    def test_reversed_period(self, session_profile):
        with pytest.raises(InvalidRangeError, match="End time must be after start time"):
            session_profile.normalized_target(time(10, 0), time(11, 30), time(9, 30))


class TestEntryLookup:
    """Test exact-start point lookups."""

    def test_entry_at_time(self, session_profile):
        bucket = session_profile.entry_at(time(9, 30))
        assert bucket.category is BucketCategory.CTS
        assert bucket.end == time(12, 0)

    def test_entry_at_text(self, session_profile):
        assert session_profile.entry_at("16:00").category is BucketCategory.CAS

    def test_entry_lookup_is_exact(self, session_profile):
        """Times inside a bucket but not at its start are not found."""
        assert session_profile.entry_at(time(9, 5)) is None

    def test_describe_entry(self, three_minute_profile):
        assert three_minute_profile.describe_entry("09:30") == "[09:30-09:31] 40.00% (continuous trading session)"

    def test_describe_missing_entry(self, session_profile):
        assert session_profile.describe_entry("09:05") == "Entry not found at 09:05"


class TestProfileShape:
    """Test the profile container itself."""

    def test_total_share(self, session_profile):
        assert session_profile.total_share == pytest.approx(1.0, abs=1e-4)

    def test_day_bounds(self, session_profile):
        assert session_profile.start_of_day == time(9, 0)
        assert session_profile.end_of_day == time(16, 10)

    def test_contiguous(self, session_profile):
        buckets = session_profile.buckets
        assert all(a.end == b.start for a, b in zip(buckets, buckets[1:]))

    def test_index_matches_buckets(self, session_profile):
        assert list(session_profile.by_start.values()) == list(session_profile.buckets)

    def test_index_is_read_only(self, session_profile):
        with pytest.raises(TypeError):
            session_profile.by_start[time(8, 0)] = None

    def test_iteration(self, session_profile):
        assert [b.category.code for b in session_profile] == ["POS", "CTS", "L", "CTS", "CAS"]

    def test_repr(self, session_profile):
        assert "origin='test'" in repr(session_profile)
