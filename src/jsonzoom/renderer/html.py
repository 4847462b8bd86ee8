"""Render a ClassDiagram to a standalone HTML file."""

from __future__ import annotations

import html
import json
import logging
from pathlib import Path
from string import Template

from jsonzoom.config import Settings
from jsonzoom.model import ClassDiagram
from jsonzoom.renderer.layout import grid_layout, visible_count

logger = logging.getLogger(__name__)

_TEMPLATE_PATH = Path(__file__).with_name("template.html")


def _diagram_to_json(diagram: ClassDiagram, settings: Settings) -> str:
    """Serialize *diagram* into the JSON blob consumed by the template JS."""
    positions = grid_layout(len(diagram.classes), settings)
    in_cycle = {name for cycle in diagram.cycles for name in cycle}

    # Colliding names share one node id in the graph; edges attach to the first
    # node with that name at both ends, including edges emitted by a later twin
    first_index: dict[str, int] = {}
    nodes: list[dict] = []
    for i, (cls, pos) in enumerate(zip(diagram.classes, positions)):
        first_index.setdefault(cls.name, i)
        node = {
            "name": cls.name,
            "properties": [str(p) for p in cls.properties],
            "x": pos.x,
            "y": pos.y,
        }
        if cls.name in in_cycle:
            node["in_cycle"] = True
        nodes.append(node)

    edges: list[dict] = []
    for edge in diagram.edges or []:
        target = first_index.get(edge.target)
        if target is None:
            logger.debug("Not drawing edge %s: no class '%s'", edge.id, edge.target)
            continue
        edges.append(
            {"id": edge.id, "source": first_index[edge.source], "target": target}
        )

    data = {
        "root_name": diagram.root_name,
        "page_size": settings.page_size,
        "initial_count": visible_count(len(nodes), 1, settings),
        "nodes": nodes,
        "edges": edges,
    }
    # Keep "</script>" inside strings from closing the script element
    return json.dumps(data).replace("</", "<\\/")


def render_html(
    diagram: ClassDiagram,
    output_path: Path,
    *,
    settings: Settings | None = None,
    title: str | None = None,
) -> None:
    """Write the interactive HTML class diagram to *output_path*."""
    settings = settings or Settings()
    template = Template(_TEMPLATE_PATH.read_text(encoding="utf-8"))
    page = template.safe_substitute(
        TITLE=html.escape(title or diagram.root_name),
        DATA_JSON=_diagram_to_json(diagram, settings),
    )
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(page, encoding="utf-8")
