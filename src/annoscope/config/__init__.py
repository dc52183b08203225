"""Config module exports."""

from annoscope.config.loader import AnnoscopeSettings, load_config
from annoscope.config.models import (
    AnnoscopeConfig,
    ContextConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "AnnoscopeConfig",
    "AnnoscopeSettings",
    "ContextConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
