"""Extract class descriptors from an arbitrary JSON value."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from jsonzoom.guard import VisitedGuard, is_container
from jsonzoom.model import ClassDescriptor, ClassDiagram, PropertyDescriptor
from jsonzoom.naming import class_name_for

logger = logging.getLogger(__name__)


class ClassExtractor:
    """Populate ``diagram.classes`` from the JSON value, starting at the root."""

    def extract(self, value: Any, diagram: ClassDiagram) -> None:
        diagram.classes = extract_classes(value, diagram.root_name)
        logger.debug("Extracted %d classes", len(diagram.classes))


def extract_classes(
    value: Any, name: str, guard: VisitedGuard | None = None
) -> list[ClassDescriptor]:
    """Return class descriptors for *value* and everything nested in it.

    The first descriptor describes *value* itself (named *name*); the rest
    follow in pre-order, depth-first, in key order. A primitive, ``None``, or
    a node already recorded in *guard* yields an empty list, which is how
    cyclic documents terminate. A property may therefore reference a class
    that has no descriptor of its own.

    Only the first element of an array is sampled.

    The traversal keeps its own stack instead of recursing, so arbitrarily
    deep documents are fine.
    """
    if guard is None:
        guard = VisitedGuard()

    classes: list[ClassDescriptor] = []
    stack: list[tuple[Any, str]] = [(value, name)]

    while stack:
        node, node_name = stack.pop()
        if not guard.visit(node):
            continue

        properties: list[PropertyDescriptor] = []
        nested: list[tuple[Any, str]] = []
        for key, child in _iter_fields(node):
            annotation, nested_node = _annotate(key, child)
            properties.append(PropertyDescriptor(key, annotation))
            if nested_node is not None:
                nested.append((nested_node, class_name_for(key)))

        classes.append(ClassDescriptor(node_name, tuple(properties)))
        # Reversed so the first key's subtree is popped (and finished) first
        stack.extend(reversed(nested))

    return classes


def _iter_fields(node: Any) -> Iterator[tuple[str, Any]]:
    """Yield ``(key, value)`` pairs of a dict, or ``(index, item)`` of a list."""
    if isinstance(node, Mapping):
        for key, child in node.items():
            yield str(key), child
    else:
        for index, child in enumerate(node):
            yield str(index), child


def _annotate(key: str, value: Any) -> tuple[str, Any]:
    """Return (type annotation, node to descend into or None) for one field."""
    if isinstance(value, (list, tuple)):
        if not value:
            return "any[]", None
        first = value[0]
        if is_container(first):
            return f"{class_name_for(key)}[]", first
        return f"{primitive_type_name(first)}[]", None

    if is_container(value):
        return class_name_for(key), value

    return primitive_type_name(value), None


def primitive_type_name(value: Any) -> str:
    """Return the JSON type name of a non-container value."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if value is None:
        return "null"
    return "any"
