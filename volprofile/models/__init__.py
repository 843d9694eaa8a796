"""
Data models for volume profile buckets.
"""
from .bucket import Bucket, BucketCategory

__all__ = ["Bucket", "BucketCategory"]
