"""Resolve partial type references to fully-qualified names.

A reference is resolved with what is visible from the node where it was
written: the current namespace, the enclosing type and the alias table
(``uses``) recorded on that node or any ancestor.

    \\Foo\\Bar   fully qualified, returned unchanged
    Foo\\Bar    qualified, the leading segment may be an alias
    Foo        unqualified, may be an alias itself

Aliases are tried in insertion order and the first match wins. Nothing here
raises; a reference that matches no alias is placed in the current namespace.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import structlog

from annoscope.config.constants import NAMESPACE_SEPARATOR
from annoscope.context.facts import Fact

if TYPE_CHECKING:
    from annoscope.context.node import ContextNode

logger = structlog.get_logger()

SEP = NAMESPACE_SEPARATOR


def current_namespace(node: ContextNode) -> str:
    """Return the visible namespace as ``\\Ns\\``, or ``\\`` for the global one."""
    namespace = node.get(Fact.NAMESPACE)
    if not namespace:
        return SEP
    return (SEP + namespace + SEP).replace(SEP + SEP, SEP)


def enclosing_type(node: ContextNode) -> str | None:
    """Simple name of the nearest class, else interface, else trait."""
    return node.get(Fact.CLASS) or node.get(Fact.INTERFACE) or node.get(Fact.TRAIT) or None


def resolve(node: ContextNode, reference: str | None) -> str:
    """Resolve ``reference`` as written in the scope of ``node``."""
    if not reference:
        return ""

    namespace = current_namespace(node)

    this_type = enclosing_type(node)
    if this_type and reference.lower() == this_type.lower():
        return namespace + this_type

    uses = node.get(Fact.USES)
    if not isinstance(uses, Mapping):
        uses = {}

    if reference.startswith(SEP):
        return reference
    if SEP in reference:
        for alias, aliased_namespace in uses.items():
            alias = str(alias)
            if reference[: len(alias) + 1].lower() == (alias + SEP).lower():
                resolved = SEP + str(aliased_namespace).lstrip(SEP) + reference[len(alias) :]
                logger.debug("alias_applied", reference=reference, alias=alias, resolved=resolved)
                return resolved
    else:
        for alias, aliased_namespace in uses.items():
            if str(alias).lower() == reference.lower():
                resolved = SEP + str(aliased_namespace).lstrip(SEP)
                logger.debug("alias_applied", reference=reference, alias=alias, resolved=resolved)
                return resolved

    return namespace + reference
