"""
Flat (time-weighted) profile generation.

Used as the last step of the fallback chain when no profile file can be
loaded. Every volume-carrying bucket gets the same share, so executing
against this profile paces an order evenly through the trading sessions.
"""

from dataclasses import asdict
from datetime import time
from typing import Any, Optional

import structlog

from volprofile.config.defaults import SessionParams
from volprofile.models.bucket import Bucket, BucketCategory
from volprofile.utils.time import add_minutes, parse_clock, seconds_between

from .volume_profile import VolumeProfile

logger = structlog.get_logger(__name__)


def _minutes(start: time, end: time) -> int:
    return int(seconds_between(start, end) // 60)


def _minute_buckets(start: time, count: int, share: float) -> list[Bucket]:
    buckets = []
    current = start
    for _ in range(count):
        following = add_minutes(current, 1)
        buckets.append(Bucket(current, following, share, BucketCategory.CTS))
        current = following
    return buckets


def generate_flat_profile(session: Optional[dict[str, Any]] = None) -> VolumeProfile:
    """
    Build a flat profile over the trading calendar.

    Layout: one pre-open bucket, one-minute continuous buckets through the
    morning session, a zero-share lunch bucket, one-minute continuous buckets
    through the afternoon session, and one close-auction bucket.

    Args:
        session: The ``session`` section of the merged configuration

    Returns:
        Profile whose shares sum to 1.0
    """
    params = {**asdict(SessionParams()), **(session or {})}
    pre_open_start = parse_clock(params["pre_open_start"])
    morning_start = parse_clock(params["morning_start"])
    lunch_start = parse_clock(params["lunch_start"])
    afternoon_start = parse_clock(params["afternoon_start"])
    close_auction_start = parse_clock(params["close_auction_start"])
    close_auction_end = parse_clock(params["close_auction_end"])

    morning_minutes = _minutes(morning_start, lunch_start)
    afternoon_minutes = _minutes(afternoon_start, close_auction_start)
    volume_bucket_count = 1 + morning_minutes + afternoon_minutes + 1
    share = 1.0 / volume_bucket_count

    buckets = [Bucket(pre_open_start, morning_start, share, BucketCategory.POS)]
    buckets.extend(_minute_buckets(morning_start, morning_minutes, share))
    buckets.append(Bucket(lunch_start, afternoon_start, 0.0, BucketCategory.L))
    buckets.extend(_minute_buckets(afternoon_start, afternoon_minutes, share))
    buckets.append(Bucket(close_auction_start, close_auction_end, share, BucketCategory.CAS))

    logger.info(
        "Generated flat profile",
        bucket_count=len(buckets),
        volume_bucket_count=volume_bucket_count,
        share_per_bucket=share,
    )
    return VolumeProfile(buckets, origin="synthetic")
