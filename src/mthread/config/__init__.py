"""
Configuration module for mthread.

This package provides centralized configuration management with environment variable support.
"""

from .settings import Config, get_config

__all__ = [
    "Config",
    "get_config",
]
