"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (ANNOSCOPE__SECTION__KEY)
3. Project YAML (.annoscope/config.yaml)
4. Global YAML (~/.config/annoscope/config.yaml)
5. Built-in defaults (this file)

Examples:
    ANNOSCOPE__LOGGING__LEVEL=DEBUG
    ANNOSCOPE__CONTEXT__DEFAULT_VERSION=3.1.0
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from annoscope.config.constants import DEFAULT_VERSION, SUPPORTED_VERSIONS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        ANNOSCOPE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every alias substitution.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ContextConfig(BaseModel):
    """Context tree configuration.

    Env vars:
        ANNOSCOPE__CONTEXT__DEFAULT_VERSION: Version given to trees that record none
    """

    default_version: str = Field(
        default=DEFAULT_VERSION,
        description="Document version installed on the root of a context tree "
        "when no node in the tree records one.",
    )

    @field_validator("default_version")
    @classmethod
    def validate_default_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported version {v!r}, expected one of: {', '.join(SUPPORTED_VERSIONS)}"
            )
        return v


class AnnoscopeConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    context: ContextConfig = Field(default_factory=ContextConfig)
