"""Configuration management for Subject Spotter.

This package provides configuration management with environment
variables loading, validation, and error handling.
"""

from .exceptions import ConfigError, ConfigValidationError
from .settings import Settings
from .validation import ConfigValidator

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "Settings",
    "ConfigValidator",
]
