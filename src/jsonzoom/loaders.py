"""Turn raw text or files into a parsed JSON value."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


class JsonLoadError(ValueError):
    """Raised when input text cannot be read or parsed.

    ``str(err)`` is a message suitable for showing to the user.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message)
        self.source = source
        self.line = line
        self.column = column


def load_text(text: str, *, source: str = "<text>") -> Any:
    """Parse *text* as JSON and return the value."""
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError carries a position; digit-limit and nesting errors do not
        line = getattr(e, "lineno", None)
        column = getattr(e, "colno", None)
        detail = getattr(e, "msg", None) or str(e)
        where = f" (line {line}, column {column})" if line is not None else ""
        raise JsonLoadError(
            f"Could not parse JSON from {source}: {detail}{where}",
            source=source,
            line=line,
            column=column,
        ) from e


def load_yaml_text(text: str, *, source: str = "<text>") -> Any:
    """Parse *text* as YAML (a superset of JSON) and return the value."""
    import yaml

    try:
        return yaml.safe_load(text)
    except (yaml.YAMLError, RecursionError) as e:
        mark = getattr(e, "problem_mark", None)
        line = mark.line + 1 if mark is not None else None
        column = mark.column + 1 if mark is not None else None
        where = f" (line {line}, column {column})" if mark is not None else ""
        raise JsonLoadError(
            f"Could not parse YAML from {source}{where}",
            source=source,
            line=line,
            column=column,
        ) from e


def load_file(path: Path) -> Any:
    """Read *path* and parse it; ``.yaml``/``.yml`` files are read as YAML."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise JsonLoadError(f"Could not read {path}: {e}", source=str(path)) from e

    logger.debug("Read %d characters from %s", len(text), path)
    if path.suffix.lower() in _YAML_SUFFIXES:
        return load_yaml_text(text, source=str(path))
    return load_text(text, source=str(path))
