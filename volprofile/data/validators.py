"""
Validation of complete bucket sequences against profile invariants.

A bucket sequence is only accepted as a volume profile when it tiles the
trading day without gaps, its shares sum to one, and every session category
covers its expected number of minutes.
"""

from collections import defaultdict
from collections.abc import Sequence
from typing import Any, Optional

import structlog

from volprofile.errors import ValidationError
from volprofile.models.bucket import Bucket
from volprofile.utils.time import format_clock

logger = structlog.get_logger(__name__)

DEFAULT_SHARE_TOLERANCE = 1e-4
DEFAULT_SHARE_WARNING_THRESHOLD = 0.3
DEFAULT_CATEGORY_MINUTES = {"POS": 30, "CTS": 330, "L": 60, "CAS": 10}


class BucketValidator:
    """Validates bucket sequences against continuity, share and duration rules."""

    def __init__(self, config: Optional[dict[str, Any]] = None):
        """
        Initialize validator with configuration.

        Args:
            config: The ``validation`` section of the merged configuration
        """
        self.config = config or {}

        self.share_tolerance = self.config.get("share_tolerance", DEFAULT_SHARE_TOLERANCE)
        self.share_warning_threshold = self.config.get(
            "share_warning_threshold", DEFAULT_SHARE_WARNING_THRESHOLD
        )
        self.category_minutes = dict(self.config.get("category_minutes", DEFAULT_CATEGORY_MINUTES))

    def validate(self, buckets: Sequence[Bucket], total_share: float) -> None:
        """
        Validate a complete, ordered bucket sequence.

        Args:
            buckets: Buckets ordered by start time
            total_share: Accumulated share of all buckets

        Raises:
            ValidationError: If any profile invariant is violated
        """
        if not buckets:
            raise ValidationError("No data entries found in the profile")

        self.validate_total_share(total_share)
        self.validate_continuity(buckets)
        self.validate_category_durations(buckets)
        self.warn_large_shares(buckets)

    def validate_total_share(self, total_share: float) -> None:
        """Check that the shares sum to 1.0 within tolerance."""
        deviation = total_share - 1.0
        if abs(deviation) > self.share_tolerance:
            raise ValidationError(
                f"Total percentage doesn't sum to 1.0: {total_share} (deviation {deviation:+.6f})",
                total_share=total_share,
                deviation=deviation,
            )

    def validate_continuity(self, buckets: Sequence[Bucket]) -> None:
        """Check that each bucket ends exactly where the next one starts."""
        for current, following in zip(buckets, buckets[1:]):
            if current.end != following.start:
                kind = "Gap" if current.end < following.start else "Overlap"
                raise ValidationError(
                    f"{kind} detected between entries: {format_clock(current.end)}",
                    boundary=current.end,
                )

    def validate_category_durations(self, buckets: Sequence[Bucket]) -> None:
        """Check per-category minute totals for every category present."""
        for code, minutes in sum_minutes_by_category(buckets).items():
            expected = self.category_minutes.get(code)
            if expected is not None and minutes != expected:
                raise ValidationError(
                    f"Invalid {code} duration: {minutes}. Expected {expected} minutes.",
                    category=code,
                    expected=expected,
                    actual=minutes,
                )

    def warn_large_shares(self, buckets: Sequence[Bucket]) -> None:
        """Log buckets carrying an unusually large share of daily volume."""
        for bucket in buckets:
            if bucket.share > self.share_warning_threshold:
                logger.warning(
                    "Bucket share above threshold",
                    time_range=bucket.time_range,
                    share=bucket.share,
                    threshold=self.share_warning_threshold,
                )


def sum_minutes_by_category(buckets: Sequence[Bucket]) -> dict[str, int]:
    """
    Sum bucket durations in whole minutes, grouped by category code.

    Args:
        buckets: Buckets to aggregate

    Returns:
        Mapping of category code to total minutes, in first-seen order
    """
    totals: dict[str, int] = defaultdict(int)
    for bucket in buckets:
        totals[bucket.category.code] += bucket.duration_minutes
    return dict(totals)


def validate_buckets(buckets: Sequence[Bucket], total_share: float,
                     config: Optional[dict[str, Any]] = None) -> None:
    """Validate a bucket sequence with a one-off validator."""
    BucketValidator(config).validate(buckets, total_share)
