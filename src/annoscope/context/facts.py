"""Well-known fact names and the process-wide default version."""

from __future__ import annotations

from enum import Enum

from annoscope.config.constants import DEFAULT_VERSION, SUPPORTED_VERSIONS
from annoscope.core.errors import ConfigError


class Fact(str, Enum):
    """Fact names recorded by scanners and processors.

    Advisory only: a context node accepts any string as a fact name.
    """

    COMMENT = "comment"  # raw doc-comment text
    FILENAME = "filename"
    LINE = "line"
    CHARACTER = "character"
    NAMESPACE = "namespace"
    USES = "uses"  # alias -> fully-qualified namespace
    CLASS = "class"
    INTERFACE = "interface"
    TRAIT = "trait"
    ENUM = "enum"
    EXTENDS = "extends"  # interfaces may extend a list of interfaces
    IMPLEMENTS = "implements"
    METHOD = "method"
    PROPERTY = "property"
    TYPE = "type"
    STATIC = "static"
    NULLABLE = "nullable"
    GENERATED = "generated"  # created by a processor, not found in source
    NESTED = "nested"
    ANNOTATIONS = "annotations"
    LOGGER = "logger"
    SCANNED = "scanned"  # scanner-specific details
    VERSION = "version"


_default_version = DEFAULT_VERSION


def get_default_version() -> str:
    return _default_version


def set_default_version(version: str) -> None:
    """Change the version installed on roots of trees that record none.

    Only affects trees created afterwards; existing roots keep their version.

    Raises:
        ConfigError: If the version is not supported.
    """
    global _default_version
    if version not in SUPPORTED_VERSIONS:
        raise ConfigError.unsupported_version(version, SUPPORTED_VERSIONS)
    _default_version = version
