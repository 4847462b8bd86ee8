"""Identity-keyed record of visited container nodes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class VisitedGuard:
    """Remember which dicts/lists have been seen during one extraction pass.

    Nodes are compared by identity, never by equality: two structurally equal
    dicts are distinct nodes. Visited nodes are kept alive by the guard so
    their ``id()`` cannot be reused while the pass is running.

    Create a new guard for every top-level extraction; never share one
    between concurrent calls.
    """

    def __init__(self) -> None:
        self._seen: dict[int, Any] = {}

    def visit(self, node: Any) -> bool:
        """Record *node* and return True if it has not been seen before.

        Primitives and ``None`` are never recorded and always return False.
        """
        if not is_container(node):
            return False
        key = id(node)
        if key in self._seen:
            return False
        self._seen[key] = node
        return True

    def __contains__(self, node: Any) -> bool:
        return id(node) in self._seen and self._seen[id(node)] is node

    def __len__(self) -> int:
        return len(self._seen)


def is_container(value: Any) -> bool:
    """Return True if *value* is object-like or array-like."""
    return isinstance(value, (Mapping, list, tuple))
