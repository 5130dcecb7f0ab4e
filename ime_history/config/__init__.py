"""Configuration management for IME History."""

from .config import IMEHistoryConfig
from .defaults import create_default_config

__all__ = ["IMEHistoryConfig", "create_default_config"]
