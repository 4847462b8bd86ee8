"""Write a ClassDiagram as plain JSON."""

from __future__ import annotations

import json
from pathlib import Path

from jsonzoom.model import ClassDiagram


def diagram_to_json(diagram: ClassDiagram, *, indent: int | None = 2) -> str:
    """Serialize *diagram* as ``{"classes": [...]}`` plus ``"edges"`` if resolved."""
    return json.dumps(diagram.to_dict(), indent=indent, ensure_ascii=False)


def render_json(diagram: ClassDiagram, output_path: Path) -> None:
    """Write the diagram JSON to *output_path*."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(diagram_to_json(diagram) + "\n", encoding="utf-8")
