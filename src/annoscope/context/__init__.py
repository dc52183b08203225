"""Hierarchical parse context and name resolution."""

from annoscope.context.detect import detect
from annoscope.context.facts import Fact, get_default_version, set_default_version
from annoscope.context.location import describe_location
from annoscope.context.node import ContextNode
from annoscope.context.resolver import (
    NAMESPACE_SEPARATOR,
    current_namespace,
    enclosing_type,
    resolve,
)

__all__ = [
    "ContextNode",
    "Fact",
    "NAMESPACE_SEPARATOR",
    "current_namespace",
    "describe_location",
    "detect",
    "enclosing_type",
    "get_default_version",
    "resolve",
    "set_default_version",
]
