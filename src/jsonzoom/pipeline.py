"""Orchestrator: load → extract → analyse → render."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, TextIO

from jsonzoom.analysis import find_cycles, find_dangling_targets, find_name_collisions
from jsonzoom.config import Settings, apply_overrides, load_settings
from jsonzoom.extractors.base import Extractor
from jsonzoom.extractors.classes import ClassExtractor
from jsonzoom.extractors.relationships import RelationshipExtractor
from jsonzoom.loaders import JsonLoadError, load_file, load_text
from jsonzoom.model import ClassDiagram
from jsonzoom.naming import root_name_for
from jsonzoom.renderer.html import render_html
from jsonzoom.renderer.json import render_json

logger = logging.getLogger(__name__)

FORMATS = ("html", "json")


def transform(value: Any, *, settings: Settings | None = None) -> ClassDiagram:
    """Infer classes (no edges) from a parsed JSON *value*."""
    settings = apply_overrides(settings or Settings(), {"with_edges": False})
    return build_diagram(value, settings)


def transform_with_edges(
    value: Any, *, settings: Settings | None = None
) -> ClassDiagram:
    """Infer classes and the edges between them from a parsed JSON *value*."""
    settings = apply_overrides(settings or Settings(), {"with_edges": True})
    return build_diagram(value, settings)


def build_diagram(value: Any, settings: Settings) -> ClassDiagram:
    """Run the extractors selected by *settings* over *value*."""
    diagram = ClassDiagram(
        root_name=root_name_for(
            value,
            root_name=settings.root_name,
            array_root_name=settings.array_root_name,
        )
    )

    extractors: list[Extractor] = [ClassExtractor()]
    if settings.with_edges:
        extractors.append(RelationshipExtractor())

    for ext in extractors:
        ext.extract(value, diagram)

    for name, count in find_name_collisions(diagram.classes).items():
        logger.warning("Class name '%s' was inferred %d times", name, count)

    if diagram.edges is not None:
        diagram.cycles = find_cycles(diagram.classes, diagram.edges)
        logger.debug("Cycles detected: %d", len(diagram.cycles))
        dangling = find_dangling_targets(diagram.classes, diagram.edges)
        if dangling:
            logger.debug("Edge targets without a class: %s", ", ".join(dangling))

    return diagram


def _default_output(source: Path | None, fmt: str) -> Path:
    if source is None:
        return Path.cwd() / f"jsonzoom.{fmt}"
    if fmt == "json":
        # Never overwrite a .json input
        return source.with_name(f"{source.stem}.classes.json")
    return source.with_suffix(f".{fmt}")


def _read_stdin(stdin: TextIO | None) -> str:
    stream = stdin if stdin is not None else sys.stdin
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as e:
        raise JsonLoadError(
            f"Could not read standard input: {e}", source="<stdin>"
        ) from e


def run(
    source: Path | None,
    *,
    output: Path | None = None,
    fmt: str = "html",
    with_edges: bool | None = None,
    title: str | None = None,
    open_browser: bool = False,
    stdin: TextIO | None = None,
) -> Path:
    """Run the full jsonzoom pipeline and return the output path.

    *source* is a JSON or YAML file, or None to read JSON text from *stdin*.
    If the input cannot be loaded, nothing is written and the process exits
    with status 1.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format: {fmt}")

    if source is not None:
        source = source.resolve()
    settings = load_settings(source.parent if source is not None else Path.cwd())
    settings = apply_overrides(settings, {"with_edges": with_edges})

    try:
        if source is None:
            value = load_text(_read_stdin(stdin), source="<stdin>")
        else:
            value = load_file(source)
    except JsonLoadError as e:
        logger.error("%s", e)
        sys.exit(1)

    diagram = build_diagram(value, settings)
    logger.debug(
        "Root: %s, classes: %d, edges: %s",
        diagram.root_name,
        len(diagram.classes),
        "-" if diagram.edges is None else len(diagram.edges),
    )

    out_path = output or _default_output(source, fmt)
    if fmt == "json":
        render_json(diagram, out_path)
    else:
        render_html(
            diagram,
            out_path,
            settings=settings,
            title=title or (source.stem if source is not None else None),
        )

    logger.info("Generated %s", out_path)

    if open_browser:
        import webbrowser

        webbrowser.open(out_path.resolve().as_uri())

    return out_path
