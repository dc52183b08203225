"""Core module exports."""

from annoscope.core.errors import (
    AnnoscopeError,
    ConfigError,
    ErrorCode,
    InternalError,
)
from annoscope.core.logging import (
    clear_scan_id,
    configure_logging,
    get_logger,
    get_scan_id,
    set_scan_id,
)

__all__ = [
    # Errors
    "AnnoscopeError",
    "ConfigError",
    "ErrorCode",
    "InternalError",
    # Logging
    "clear_scan_id",
    "configure_logging",
    "get_logger",
    "get_scan_id",
    "set_scan_id",
]
