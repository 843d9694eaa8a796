"""
Parsing of raw profile rows into buckets and validated volume profiles.

Each row carries ``start,end,share,category``. Rows are parsed strictly in
order; the first malformed row aborts the build with a ``FormatError`` naming
the offending line and field.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any, Optional

import structlog

from volprofile.errors import FormatError
from volprofile.models.bucket import Bucket, BucketCategory
from volprofile.profile.volume_profile import VolumeProfile
from volprofile.utils.time import DEFAULT_TIME_FORMAT, parse_clock

from .sources import RawRow
from .validators import BucketValidator

logger = structlog.get_logger(__name__)

FIELD_COUNT = 4


def parse_row(fields: Sequence[str], line_number: int,
              time_format: str = DEFAULT_TIME_FORMAT) -> Bucket:
    """
    Parse one ``start,end,share,category`` row into a bucket.

    Args:
        fields: Raw text fields of the row
        line_number: Line number used in error messages
        time_format: strptime pattern for start and end

    Returns:
        Parsed bucket

    Raises:
        FormatError: If any field is missing or malformed
    """
    if len(fields) != FIELD_COUNT:
        raise FormatError(
            f"Invalid format at line {line_number}: expected {FIELD_COUNT} fields but found {len(fields)}",
            line_number=line_number,
            field_count=len(fields),
        )

    raw_start, raw_end, raw_share, raw_category = fields

    start = _parse_time_field("start", raw_start, line_number, time_format)
    end = _parse_time_field("end", raw_end, line_number, time_format)

    if end <= start:
        raise FormatError(
            f"End time must be after start time: {raw_start} - {raw_end} at line {line_number}.",
            line_number=line_number,
            field="end",
            value=raw_end,
        )

    try:
        share = float(raw_share)
    except ValueError:
        raise FormatError(
            f"Invalid percentage format: {raw_share} at line {line_number}.",
            line_number=line_number,
            field="share",
            value=raw_share,
        ) from None

    if not math.isfinite(share) or share < 0:
        raise FormatError(
            f"Percentage must be non-negative: {raw_share} at line {line_number}.",
            line_number=line_number,
            field="share",
            value=raw_share,
        )

    code = raw_category.strip()
    if not code:
        raise FormatError(
            f"Type cannot be empty at line {line_number}.",
            line_number=line_number,
            field="category",
            value=raw_category,
        )

    category = BucketCategory.from_code(code)
    if category is None:
        raise FormatError(
            f"Invalid bucket type: {code} at line {line_number}.",
            line_number=line_number,
            field="category",
            value=code,
        )

    return Bucket(start=start, end=end, share=share, category=category)


def _parse_time_field(name: str, value: str, line_number: int, time_format: str):
    try:
        return parse_clock(value, time_format)
    except ValueError:
        raise FormatError(
            f"Invalid {name} time: {value} at line {line_number}. Expected format: {time_format}",
            line_number=line_number,
            field=name,
            value=value,
        ) from None


class ProfileBuilder:
    """Turns raw rows into a validated volume profile."""

    def __init__(self, config: Optional[dict[str, Any]] = None,
                 validator: Optional[BucketValidator] = None):
        """
        Initialize builder.

        Args:
            config: The ``format`` section of the merged configuration
            validator: Validator applied once all rows are parsed
        """
        self.config = config or {}
        self.time_format = self.config.get("time_format", DEFAULT_TIME_FORMAT)
        self.validator = validator or BucketValidator()

    def build(self, rows: Iterable[RawRow], origin: str = "primary",
              source_path: Optional[str] = None) -> VolumeProfile:
        """
        Parse and validate all rows.

        Args:
            rows: Raw rows in file order
            origin: Fallback-chain position recorded on the profile
            source_path: Path recorded on the profile

        Returns:
            Fully validated profile

        Raises:
            FormatError: If a row is malformed
            ValidationError: If the parsed buckets violate profile invariants
        """
        buckets: list[Bucket] = []
        total_share = 0.0

        for row in rows:
            bucket = parse_row(row.fields, row.line_number, self.time_format)
            buckets.append(bucket)
            total_share += bucket.share

        self.validator.validate(buckets, total_share)

        logger.debug(
            "Profile built",
            origin=origin,
            source_path=source_path,
            bucket_count=len(buckets),
            total_share=total_share,
        )
        return VolumeProfile(buckets, origin=origin, source_path=source_path,
                             time_format=self.time_format)
