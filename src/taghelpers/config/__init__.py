"""Config module exports."""

from taghelpers.config.loader import load_config
from taghelpers.config.models import (
    DiscoveryConfig,
    LoggingConfig,
    ProducersConfig,
    TagHelpersConfig,
)

__all__ = [
    "load_config",
    "TagHelpersConfig",
    "DiscoveryConfig",
    "LoggingConfig",
    "ProducersConfig",
]
