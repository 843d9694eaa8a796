"""
Logging configuration and utilities for the volume profile engine.
"""
from .config import configure_logging, get_logger, get_loader_logger

__all__ = ["configure_logging", "get_logger", "get_loader_logger"]
