"""Pytest configuration and shared fixtures."""

from datetime import time

import pytest

from volprofile.models.bucket import Bucket, BucketCategory
from volprofile.profile.volume_profile import VolumeProfile

HEADER = "start,end,percentage,type"

# One bucket per session; category minutes match the default calendar.
SESSION_ROWS = [
    "09:00,09:30,0.1,POS",
    "09:30,12:00,0.4,CTS",
    "12:00,13:00,0.0,L",
    "13:00,16:00,0.4,CTS",
    "16:00,16:10,0.1,CAS",
]


@pytest.fixture
def session_rows() -> list[str]:
    """Data rows of a valid coarse profile covering the full trading day."""
    return list(SESSION_ROWS)


@pytest.fixture
def write_profile(tmp_path):
    """Factory writing a profile CSV into the test's temporary directory."""
    def _write(rows, name="profile.csv", header=HEADER):
        path = tmp_path / name
        lines = ([header] if header is not None else []) + list(rows)
        path.write_text("\n".join(lines) + "\n")
        return path
    return _write


@pytest.fixture
def session_profile_path(write_profile, session_rows):
    """Path of a valid coarse profile file."""
    return write_profile(session_rows, name="session.csv")


@pytest.fixture
def session_profile() -> VolumeProfile:
    """Valid coarse profile built directly from buckets."""
    return VolumeProfile([
        Bucket(time(9, 0), time(9, 30), 0.1, BucketCategory.POS),
        Bucket(time(9, 30), time(12, 0), 0.4, BucketCategory.CTS),
        Bucket(time(12, 0), time(13, 0), 0.0, BucketCategory.L),
        Bucket(time(13, 0), time(16, 0), 0.4, BucketCategory.CTS),
        Bucket(time(16, 0), time(16, 10), 0.1, BucketCategory.CAS),
    ], origin="test")


@pytest.fixture
def three_minute_profile() -> VolumeProfile:
    """Minimal three-bucket profile; bypasses category duration checks."""
    return VolumeProfile([
        Bucket(time(9, 30), time(9, 31), 0.4, BucketCategory.CTS),
        Bucket(time(9, 31), time(9, 32), 0.3, BucketCategory.CTS),
        Bucket(time(9, 32), time(9, 33), 0.3, BucketCategory.CTS),
    ], origin="test")
