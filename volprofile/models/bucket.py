"""
Immutable bucket model for intraday volume profiles.

A bucket is one contiguous slice of the trading day carrying a share of the
expected daily volume and the trading session it belongs to.
"""

import math
from dataclasses import dataclass
from datetime import time
from enum import Enum
from typing import Optional

from volprofile.errors import FormatError
from volprofile.utils.time import format_clock, seconds_between


class BucketCategory(Enum):
    """Trading session a bucket belongs to, keyed by its file code."""
    POS = "pre open session"
    CTS = "continuous trading session"
    L = "lunch break"
    CAS = "close auction session"

    @property
    def code(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Optional["BucketCategory"]:
        """Look up a category by its exact (case-sensitive) code."""
        return cls.__members__.get(code)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Bucket:
    """One time slice of the volume profile."""
    start: time                 # Inclusive start of the slice
    end: time                   # Exclusive end, strictly after start
    share: float                # Fraction of daily volume
    category: BucketCategory

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise FormatError(
                f"End time must be after start time: {format_clock(self.start)} - {format_clock(self.end)}",
                field="end",
                value=format_clock(self.end),
            )
        if not math.isfinite(self.share) or self.share < 0:
            raise FormatError(
                f"Share must be a non-negative number: {self.share}",
                field="share",
                value=str(self.share),
            )

    @property
    def duration_seconds(self) -> float:
        return seconds_between(self.start, self.end)

    @property
    def duration_minutes(self) -> int:
        return int(self.duration_seconds // 60)

    @property
    def time_range(self) -> str:
        return f"{format_clock(self.start)}-{format_clock(self.end)}"

    def __str__(self) -> str:
        return f"[{self.time_range}] {self.share * 100:.2f}% ({self.category})"
