"""Annoscope: scope-chained parse contexts for source annotations."""

from __future__ import annotations

from pathlib import Path

from annoscope.config import AnnoscopeConfig, load_config
from annoscope.context import ContextNode, describe_location, resolve, set_default_version
from annoscope.core import configure_logging

__version__ = "0.1.0"


def configure(
    config: AnnoscopeConfig | None = None,
    project_root: Path | None = None,
) -> AnnoscopeConfig:
    """Load configuration (unless given), set up logging and the default version."""
    config = config or load_config(project_root)
    configure_logging(config=config.logging)
    set_default_version(config.context.default_version)
    return config


__all__ = [
    "AnnoscopeConfig",
    "ContextNode",
    "configure",
    "describe_location",
    "load_config",
    "resolve",
]
