"""
Query-time error classifications.

Raised by an already-built profile when the caller passes a malformed time
range. These are never retried.
"""

from datetime import time
from typing import Optional, Dict, Any


class QueryError(Exception):
    """Base class for unrecoverable query failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidRangeError(QueryError):
    """The requested time range is empty, reversed, or excludes the query time."""

    def __init__(self, message: str, from_time: Optional[time] = None,
                 to_time: Optional[time] = None, at_time: Optional[time] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.from_time = from_time
        self.to_time = to_time
        self.at_time = at_time
