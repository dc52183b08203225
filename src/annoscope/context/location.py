"""Human-readable source locations for diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from annoscope.context.facts import Fact

if TYPE_CHECKING:
    from annoscope.context.node import ContextNode


def describe_location(node: ContextNode) -> str:
    """Describe where ``node`` sits in the scanned source.

    Examples:
        Foo::bar() in f.php on line 10
        \\App\\Foo->name in src/Foo.php on line 7:5
        src/Foo.php on line 3
        line 3

    Segments whose facts are not visible from ``node`` are left out.
    """
    location = ""
    cls = node.get(Fact.CLASS)
    method = node.get(Fact.METHOD)
    prop = node.get(Fact.PROPERTY)
    static = bool(node.get(Fact.STATIC))

    if cls and (method or prop):
        location += node.fully_qualified_name(cls) if node.get(Fact.NAMESPACE) else cls
        if method:
            location += ("::" if static else "->") + f"{method}()"
        else:
            location += ("::$" if static else "->") + str(prop)

    filename = node.get(Fact.FILENAME)
    if filename:
        if location:
            location += " in "
        location += str(filename)

    line = node.get(Fact.LINE)
    if line:
        if location:
            location += " on "
        location += f"line {line}"
        character = node.get(Fact.CHARACTER)
        if character:
            location += f":{character}"

    return location
