"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
For configurable values, see models.py.
"""

# =============================================================================
# Name Resolution
# =============================================================================

NAMESPACE_SEPARATOR = "\\"
"""Reserved namespace separator. Names starting with it are fully qualified."""

# =============================================================================
# Document Versions
# =============================================================================

DEFAULT_VERSION = "3.0.0"
"""Version a context tree gets when no node in it records one."""

SUPPORTED_VERSIONS: tuple[str, ...] = ("3.0.0", "3.1.0")
"""Versions accepted as a configured default."""

# =============================================================================
# Config Locations
# =============================================================================

CONFIG_DIR_NAME = ".annoscope"
CONFIG_FILE_NAME = "config.yaml"
ENV_PREFIX = "ANNOSCOPE__"
