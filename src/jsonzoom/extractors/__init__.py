"""Extractors that populate a ClassDiagram from a JSON value."""

from __future__ import annotations

from jsonzoom.extractors.classes import ClassExtractor, extract_classes
from jsonzoom.extractors.relationships import RelationshipExtractor, resolve_edges

__all__ = [
    "ClassExtractor",
    "RelationshipExtractor",
    "extract_classes",
    "resolve_edges",
]
