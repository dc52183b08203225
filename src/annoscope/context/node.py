"""Hierarchical parse context.

Every syntactic unit found while scanning (namespace, type, method, property,
parameter) gets a ContextNode. A node stores the facts known at its own
position and sees the facts of its ancestors, the way a nested scope sees the
names of the enclosing ones:

    file = ContextNode({"filename": "User.php", "namespace": "App"})
    cls = file.child({"class": "User", "line": 12})
    cls.namespace          # "App", read from the file node
    cls.has_own("namespace")  # False

Reads never raise. A fact nobody recorded reads as None.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from annoscope.context.facts import Fact, get_default_version
from annoscope.context.location import describe_location
from annoscope.context.resolver import resolve
from annoscope.core.logging import get_logger


class ContextNode:
    """One node of the context tree.

    The parent link is only used for lookups. Nodes do not keep a list of
    their children, so the structure stays a tree.
    """

    __slots__ = ("_facts", "_parent")

    def __init__(
        self,
        facts: Mapping[str, Any] | None = None,
        parent: ContextNode | None = None,
    ) -> None:
        self._facts: dict[str, Any] = {_name(k): v for k, v in (facts or {}).items()}
        self._parent = parent

        if not self.get(Fact.LOGGER):
            self._facts[Fact.LOGGER.value] = get_logger("annoscope.context")

        if not self.get(Fact.VERSION):
            # One version holder per tree: the root.
            self.root()._facts[Fact.VERSION.value] = get_default_version()

    # -- structure -------------------------------------------------------

    @property
    def parent(self) -> ContextNode | None:
        return self._parent

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def depth(self) -> int:
        """Number of ancestors; the root has depth 0."""
        return sum(1 for _ in self.ancestors())

    def ancestors(self) -> Iterator[ContextNode]:
        """Yield the parent, the grandparent, and so on up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def root(self) -> ContextNode:
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def child(self, facts: Mapping[str, Any] | None = None) -> ContextNode:
        """Create a node for a syntactic unit nested inside this one."""
        return ContextNode(facts, parent=self)

    def clone(self, overrides: Mapping[str, Any] | None = None) -> ContextNode:
        """Return a new node with a snapshot of this node's own facts.

        The clone has the same parent. ``overrides`` replace or add facts on
        the clone only; this node is left untouched.
        """
        facts = self.own_facts()
        if overrides:
            facts.update({_name(k): v for k, v in overrides.items()})
        return ContextNode(facts, parent=self._parent)

    # -- fact lookup -----------------------------------------------------

    def has_own(self, name: str) -> bool:
        """Check if a fact is set directly on this node and not inherited.

        Example: node.has_own("method") or node.has_own("class")
        """
        return _name(name) in self._facts

    def lacks_own(self, name: str) -> bool:
        return not self.has_own(name)

    def owner_of(self, name: str) -> ContextNode | None:
        """Return the closest node in the chain (self included) that sets ``name``."""
        key = _name(name)
        node: ContextNode | None = self
        while node is not None:
            if key in node._facts:
                return node
            node = node._parent
        return None

    def get(self, name: str, default: Any = None) -> Any:
        """Read the effective value of a fact.

        Returns ``default`` only when no node in the chain sets the fact. A
        fact explicitly recorded as None is still found and returns None.
        """
        owner = self.owner_of(name)
        if owner is None:
            return default
        return owner._facts[_name(name)]

    def own_facts(self) -> dict[str, Any]:
        """Shallow copy of the facts recorded on this node."""
        return dict(self._facts)

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.owner_of(name) is not None

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal attribute lookup fails.
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    # -- derived queries -------------------------------------------------

    def matches_version(self, versions: str | Iterable[str]) -> bool:
        """Check if one of the given version strings is the effective version."""
        if isinstance(versions, str):
            versions = (versions,)
        current = self.get(Fact.VERSION) or get_default_version()
        return current in set(versions)

    def fully_qualified_name(self, reference: str | None) -> str:
        return resolve(self, reference)

    @property
    def debug_location(self) -> str:
        return describe_location(self)

    def __str__(self) -> str:
        return self.debug_location

    def __repr__(self) -> str:
        location = self.debug_location
        return f"<ContextNode {location}>" if location else "<ContextNode>"


def _name(name: str) -> str:
    return name.value if isinstance(name, Fact) else name
