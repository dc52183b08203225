"""Tests for fact names and the default version."""

from __future__ import annotations

import pytest

from annoscope.config.constants import DEFAULT_VERSION
from annoscope.context import Fact, get_default_version, set_default_version
from annoscope.core.errors import ConfigError, ErrorCode


class TestFact:
    """Fact enum tests."""

    def test_given_fact_when_compared_then_equals_name(self) -> None:
        """Fact members compare equal to their plain names."""
        assert Fact.CLASS == "class"
        assert Fact.USES.value == "uses"


class TestDefaultVersion:
    """Process-wide default version tests."""

    def test_given_fresh_process_when_read_then_builtin_default(self) -> None:
        """The built-in default applies until configured."""
        assert get_default_version() == DEFAULT_VERSION

    def test_given_supported_version_when_set_then_read_back(self) -> None:
        """Supported versions can be configured."""
        set_default_version("3.1.0")

        assert get_default_version() == "3.1.0"

    def test_given_unsupported_version_when_set_then_config_error(self) -> None:
        """Unsupported versions are rejected and the default is kept."""
        with pytest.raises(ConfigError) as exc_info:
            set_default_version("2.0")

        assert exc_info.value.code == ErrorCode.CONFIG_UNSUPPORTED_VERSION
        assert exc_info.value.details["version"] == "2.0"
        assert get_default_version() == DEFAULT_VERSION
