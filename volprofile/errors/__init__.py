"""
Error classification for volume profile loading and querying.

Load-time errors are recoverable: the loader escalates them through the
fallback chain. Query-time errors are surfaced directly to the caller.
"""

from .load_errors import (
    ProfileLoadError,
    SourceNotFoundError,
    FormatError,
    ValidationError,
)
from .query_errors import (
    QueryError,
    InvalidRangeError,
)

__all__ = [
    # Load-time errors
    "ProfileLoadError",
    "SourceNotFoundError",
    "FormatError",
    "ValidationError",
    # Query-time errors
    "QueryError",
    "InvalidRangeError",
]
