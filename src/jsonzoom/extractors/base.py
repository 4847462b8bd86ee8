"""Extractor protocol — all extractors conform to this interface."""

from __future__ import annotations

from typing import Any, Protocol

from jsonzoom.model import ClassDiagram


class Extractor(Protocol):
    """Protocol for class diagram extractors."""

    def extract(self, value: Any, diagram: ClassDiagram) -> None:
        """Populate *diagram* with data derived from the JSON *value*."""
        ...
