"""Shared fixtures for context tests."""

from __future__ import annotations

from typing import Any

import pytest

from annoscope.context import ContextNode


@pytest.fixture
def file_node() -> ContextNode:
    """Root node for a scanned file declaring namespace App with two imports."""
    return ContextNode(
        {
            "filename": "src/Models/User.php",
            "namespace": "App",
            "uses": {
                "Foo": "App\\Models",
                "Carbon": "Carbon\\Carbon",
            },
        }
    )


@pytest.fixture
def class_node(file_node: ContextNode) -> ContextNode:
    """Class User declared inside file_node."""
    return file_node.child({"class": "User", "line": 12, "comment": "/** @Schema() */"})


@pytest.fixture
def make_node() -> Any:
    """Build a node with the given facts under a bare root."""

    def _make(facts: dict[str, Any]) -> ContextNode:
        return ContextNode().child(facts)

    return _make
