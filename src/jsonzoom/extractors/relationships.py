"""Derive class-to-class edges from property type annotations."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Any

from jsonzoom.model import ClassDescriptor, ClassDiagram, Edge

logger = logging.getLogger(__name__)

# A class reference: uppercase-led identifier, optionally an array of it
_CLASS_REF_RE = re.compile(r"([A-Z][A-Za-z0-9_]*)(?:\[\])?")


class RelationshipExtractor:
    """Populate ``diagram.edges`` from the classes already in *diagram*."""

    def extract(self, value: Any, diagram: ClassDiagram) -> None:
        diagram.edges = resolve_edges(diagram.classes)
        logger.debug("Resolved %d edges", len(diagram.edges))


def resolve_edges(classes: Iterable[ClassDescriptor]) -> list[Edge]:
    """Return one edge per property whose type names another class.

    Edges are not deduplicated: two properties of ``Root`` typed ``Item`` and
    ``Item[]`` give two edges, both with id ``e-Root-Item``.
    """
    edges: list[Edge] = []
    for cls in classes:
        for prop in cls.properties:
            target = referenced_class(prop.type_annotation)
            if target is None:
                continue
            edges.append(
                Edge(id=f"e-{cls.name}-{target}", source=cls.name, target=target)
            )
    return edges


def referenced_class(type_annotation: str) -> str | None:
    """Return the class named by *type_annotation*, or None for primitives."""
    m = _CLASS_REF_RE.fullmatch(type_annotation)
    if m:
        return m.group(1)
    return None
