"""Build a context from the caller's stack frame.

Kept for callers that create annotations by hand instead of scanning source.
Alias tables are not extracted.
"""

from __future__ import annotations

import inspect
import warnings

from annoscope.config.constants import NAMESPACE_SEPARATOR
from annoscope.context.facts import Fact
from annoscope.context.node import ContextNode


def detect(index: int = 0) -> ContextNode:
    """Create a root ContextNode describing the code that called this function.

    Args:
        index: Extra frames to skip above the direct caller.
    """
    warnings.warn(
        "detect() is deprecated; let the scanner create contexts instead.",
        DeprecationWarning,
        stacklevel=2,
    )

    facts: dict[str, object] = {}
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        for _ in range(index):
            if caller is None:
                break
            caller = caller.f_back
        if caller is None:
            return ContextNode()

        facts[Fact.FILENAME.value] = caller.f_code.co_filename
        facts[Fact.LINE.value] = caller.f_lineno

        function = caller.f_code.co_name
        if not function.startswith("<"):
            facts[Fact.METHOD.value] = function

        owner = caller.f_locals.get("self")
        if owner is not None:
            facts[Fact.CLASS.value] = type(owner).__name__
        elif isinstance(caller.f_locals.get("cls"), type):
            facts[Fact.CLASS.value] = caller.f_locals["cls"].__name__
            facts[Fact.STATIC.value] = True

        module = caller.f_globals.get("__name__")
        if module and Fact.CLASS.value in facts:
            facts[Fact.NAMESPACE.value] = module.replace(".", NAMESPACE_SEPARATOR)
    finally:
        # Break the frame reference cycle.
        del frame, caller

    return ContextNode(facts)
