"""Configuration management for the volume profile engine."""

from .defaults import DefaultConfig, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator

__all__ = ["DefaultConfig", "get_default_config", "ConfigLoader", "ConfigValidator"]
