"""
Navigation over already-parsed JSON trees.

The query engine never owns the tree it walks. Any value graph shaped like the
output of ``json.loads`` works: mappings are objects, non-string sequences are
arrays, and ``str``, numbers, ``bool`` and ``None`` are scalars. Nodes are
returned by reference and never copied.
"""

from collections.abc import Iterator, Mapping, Sequence
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Any, Union

Key = Union[str, int]

_MISSING = object()


class NodeKind(Enum):
    """The six JSON value kinds."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def kind_of(node: Any) -> NodeKind:
    """Classify a tree node.

    ``bool`` is checked before numbers since it subclasses ``int``. Objects that
    are not JSON values at all are reported as NULL, so they never match.
    """
    if node is None:
        return NodeKind.NULL
    if isinstance(node, bool):
        return NodeKind.BOOLEAN
    if isinstance(node, str):
        return NodeKind.STRING
    if isinstance(node, (Real, Decimal)):
        return NodeKind.NUMBER
    if isinstance(node, Mapping):
        return NodeKind.OBJECT
    if isinstance(node, Sequence) and not isinstance(node, (bytes, bytearray)):
        return NodeKind.ARRAY
    return NodeKind.NULL


def get_property(node: Any, name: str) -> tuple[bool, Any]:
    """Look up ``name`` on an object node. Returns ``(found, value)``."""
    if kind_of(node) != NodeKind.OBJECT:
        return False, None
    value = node.get(name, _MISSING)
    if value is _MISSING:
        return False, None
    return True, value


def get_element(node: Any, index: int) -> tuple[bool, Any]:
    """Fetch element ``index`` of an array node. Returns ``(found, value)``."""
    if kind_of(node) != NodeKind.ARRAY or not 0 <= index < len(node):
        return False, None
    return True, node[index]


def resolve_path(node: Any, names: tuple[str, ...]) -> tuple[bool, Any]:
    """Follow a chain of property names from ``node``."""
    current = node
    for name in names:
        found, current = get_property(current, name)
        if not found:
            return False, None
    return True, current


def iter_children(node: Any) -> Iterator[tuple[Key, Any]]:
    """Yield ``(key, child)`` pairs in insertion or index order."""
    kind = kind_of(node)
    if kind == NodeKind.OBJECT:
        yield from node.items()
    elif kind == NodeKind.ARRAY:
        yield from enumerate(node)


def iter_descendants(
    node: Any, location: tuple[Key, ...] = ()
) -> Iterator[tuple[tuple[Key, ...], Any]]:
    """Yield every node below ``node`` in pre-order document order.

    Uses an explicit stack of child iterators so arbitrarily deep trees do not
    hit the interpreter's recursion limit.
    """
    stack = [(location, iter_children(node))]
    while stack:
        parent_location, children = stack[-1]
        for key, child in children:
            child_location = parent_location + (key,)
            yield child_location, child
            stack.append((child_location, iter_children(child)))
            break
        else:
            stack.pop()


def format_location(location: tuple[Key, ...]) -> str:
    """Render a location as a normalized path such as ``$['a'][0]``."""
    parts = ["$"]
    for key in location:
        if isinstance(key, int):
            parts.append(f"[{key}]")
        else:
            escaped = key.replace("\\", "\\\\").replace("'", "\\'")
            parts.append(f"['{escaped}']")
    return "".join(parts)
