"""
Time-of-day utilities for bucket boundaries and query instants.

Bucket boundaries are minute-resolution clock times; query instants may carry
seconds. All arithmetic is done on seconds since midnight.
"""

from datetime import datetime, time, timedelta
from typing import Union

DEFAULT_TIME_FORMAT = "%H:%M"


def parse_clock(value: str, time_format: str = DEFAULT_TIME_FORMAT) -> time:
    """
    Parse a clock string such as ``"09:30"`` into a time of day.

    The text must be in the exact zero-padded form the pattern produces,
    so ``"9:30"`` and ``"09:5"`` are rejected.

    Args:
        value: Text to parse
        time_format: strptime pattern

    Returns:
        Parsed time of day

    Raises:
        ValueError: If the text does not match the pattern
    """
    text = value.strip()
    parsed = datetime.strptime(text, time_format).time()
    if parsed.strftime(time_format) != text:
        raise ValueError(f"time data {value!r} is not in the fixed form {time_format!r}")
    return parsed


def format_clock(value: time, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """Format a time of day for logs and messages."""
    return value.strftime(time_format)


def ensure_clock(value: Union[time, str], time_format: str = DEFAULT_TIME_FORMAT) -> time:
    """Accept either a time of day or its text form."""
    if isinstance(value, time):
        return value
    return parse_clock(value, time_format)


def seconds_of_day(value: time) -> float:
    """Seconds elapsed since midnight, including fractional seconds."""
    return value.hour * 3600 + value.minute * 60 + value.second + value.microsecond / 1_000_000


def seconds_between(start: time, end: time) -> float:
    """Signed number of seconds from ``start`` to ``end`` within one day."""
    return seconds_of_day(end) - seconds_of_day(start)


def add_minutes(value: time, minutes: int) -> time:
    """
    Shift a time of day by whole minutes.

    Raises:
        ValueError: If the result falls outside the same day
    """
    shifted = datetime.combine(datetime.min.date(), value) + timedelta(minutes=minutes)
    if shifted.date() != datetime.min.date():
        raise ValueError(f"{format_clock(value)} + {minutes} minutes leaves the trading day")
    return shifted.time()
