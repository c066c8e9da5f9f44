"""Core module exports."""

from taghelpers.core.errors import (
    ConfigError,
    ErrorCode,
    ManifestError,
    TagHelperError,
)
from taghelpers.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "TagHelperError",
    "ConfigError",
    "ErrorCode",
    "ManifestError",
    # Logging
    "configure_logging",
    "get_logger",
]
