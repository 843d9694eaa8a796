"""
Volume profile aggregate and its queries.

A profile is an ordered, contiguous tuple of buckets covering the trading
day. Volume is assumed to be spread uniformly within each bucket, so any
sub-interval receives a share proportional to the seconds it covers.
"""

from collections.abc import Iterable, Iterator, Mapping
from datetime import time
from types import MappingProxyType
from typing import Optional, Union

from volprofile.errors import InvalidRangeError
from volprofile.models.bucket import Bucket
from volprofile.utils.time import DEFAULT_TIME_FORMAT, ensure_clock, format_clock, seconds_of_day


class VolumeProfile:
    """Read-only intraday volume profile."""

    def __init__(self, buckets: Iterable[Bucket], origin: str = "custom",
                 source_path: Optional[str] = None,
                 time_format: str = DEFAULT_TIME_FORMAT) -> None:
        self._buckets = tuple(buckets)
        self._by_start = {bucket.start: bucket for bucket in self._buckets}
        self._total_share = 0.0
        for bucket in self._buckets:
            self._total_share += bucket.share
        self.origin = origin
        self.source_path = source_path
        self.time_format = time_format

    @property
    def buckets(self) -> tuple[Bucket, ...]:
        return self._buckets

    @property
    def by_start(self) -> Mapping[time, Bucket]:
        return MappingProxyType(self._by_start)

    @property
    def total_share(self) -> float:
        return self._total_share

    @property
    def start_of_day(self) -> Optional[time]:
        return self._buckets[0].start if self._buckets else None

    @property
    def end_of_day(self) -> Optional[time]:
        return self._buckets[-1].end if self._buckets else None

    def __len__(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self._buckets)

    def __repr__(self) -> str:
        return (f"VolumeProfile(origin={self.origin!r}, buckets={len(self._buckets)}, "
                f"total_share={self._total_share:.6f})")

    def cumulative_percentage(self, from_time: time, to_time: time) -> float:
        """
        Share of daily volume expected between two instants.

        Args:
            from_time: Start of the period
            to_time: End of the period, strictly after ``from_time``

        Returns:
            Expected share of daily volume traded within the period

        Raises:
            InvalidRangeError: If the period is empty or reversed
        """
        if from_time is None or to_time is None:
            raise InvalidRangeError("Start time and end time cannot be None",
                                    from_time=from_time, to_time=to_time)
        if to_time <= from_time:
            raise InvalidRangeError(
                f"End time must be after start time: {from_time} - {to_time}",
                from_time=from_time, to_time=to_time,
            )

        lo = seconds_of_day(from_time)
        hi = seconds_of_day(to_time)

        cumulative = 0.0
        for bucket in self._buckets:
            cumulative += _overlap_share(bucket, lo, hi)
        return cumulative

    def normalized_target(self, at_time: time, from_time: time, to_time: time) -> float:
        """
        Fraction of the period's expected volume that should be done by ``at_time``.

        Args:
            at_time: Instant to evaluate, within ``[from_time, to_time]``
            from_time: Start of the execution period
            to_time: End of the execution period

        Returns:
            Normalized target in [0, 1]; 0.0 when the period carries no volume

        Raises:
            InvalidRangeError: If the period is invalid or excludes ``at_time``
        """
        if at_time is None or from_time is None or to_time is None:
            raise InvalidRangeError("Time parameters cannot be None",
                                    from_time=from_time, to_time=to_time, at_time=at_time)
        if to_time <= from_time:
            raise InvalidRangeError(
                f"End time must be after start time: {from_time} - {to_time}",
                from_time=from_time, to_time=to_time, at_time=at_time,
            )
        if at_time < from_time or at_time > to_time:
            raise InvalidRangeError(
                f"Time {at_time} must be between start and end times {from_time} - {to_time}",
                from_time=from_time, to_time=to_time, at_time=at_time,
            )

        period_volume = self.cumulative_percentage(from_time, to_time)
        if period_volume == 0:
            return 0.0
        if at_time == from_time:
            return 0.0

        return self.cumulative_percentage(from_time, at_time) / period_volume

    def entry_at(self, start: Union[time, str]) -> Optional[Bucket]:
        """Bucket starting exactly at ``start``, or None."""
        return self._by_start.get(ensure_clock(start, self.time_format))

    def describe_entry(self, start: Union[time, str]) -> str:
        """Display form of the bucket starting at ``start``."""
        start = ensure_clock(start, self.time_format)
        bucket = self._by_start.get(start)
        if bucket is None:
            return f"Entry not found at {format_clock(start, self.time_format)}"
        return str(bucket)


def _overlap_share(bucket: Bucket, lo: float, hi: float) -> float:
    """Share of ``bucket`` falling inside ``[lo, hi]`` seconds of day."""
    start = seconds_of_day(bucket.start)
    end = seconds_of_day(bucket.end)
    duration = end - start

    # Cases are mutually exclusive; checked in this order.
    if end <= lo or start >= hi:
        return 0.0
    if start >= lo and end <= hi:
        return bucket.share
    if start < lo and end > hi:
        return bucket.share * (hi - lo) / duration
    if start < lo:
        return bucket.share * (end - lo) / duration
    return bucket.share * (hi - start) / duration
