"""
Load-time error classifications for volume profile ingestion.

These exceptions describe why a profile source could not be turned into a
validated profile. All of them are recoverable: the profile loader reacts by
moving to the next source in the fallback chain.
"""

from datetime import time
from typing import Optional, Dict, Any


class ProfileLoadError(Exception):
    """Base class for failures while loading a profile from a source."""

    def __init__(self, message: str, source: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.source = source
        self.context = context or {}
        self.recoverable = True


class SourceNotFoundError(ProfileLoadError):
    """The profile source does not exist."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, source=path, **kwargs)
        self.path = path


class FormatError(ProfileLoadError):
    """A row or header of the profile source is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None,
                 field: Optional[str] = None, value: Optional[str] = None,
                 field_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.line_number = line_number
        self.field = field
        self.value = value
        self.field_count = field_count


class ValidationError(ProfileLoadError):
    """Bucket data parsed but violates profile invariants."""

    def __init__(self, message: str, total_share: Optional[float] = None,
                 deviation: Optional[float] = None, boundary: Optional[time] = None,
                 category: Optional[str] = None, expected: Optional[int] = None,
                 actual: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.total_share = total_share
        self.deviation = deviation
        self.boundary = boundary
        self.category = category
        self.expected = expected
        self.actual = actual
