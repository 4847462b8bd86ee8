"""Read optional jsonzoom settings from .jsonzoom.toml or pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path

from jsonzoom.naming import ARRAY_ROOT_NAME, ROOT_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Inference and layout options."""

    root_name: str = ROOT_NAME
    array_root_name: str = ARRAY_ROOT_NAME
    with_edges: bool = True
    columns: int = 5
    page_size: int = 100
    x_spacing: int = 200
    y_spacing: int = 150


def load_settings(directory: Path) -> Settings:
    """Return settings for *directory*, or defaults if none are configured."""
    table = _read_config_table(directory)
    if not isinstance(table, dict) or not table:
        return Settings()
    return apply_overrides(Settings(), table)


def apply_overrides(settings: Settings, overrides: dict) -> Settings:
    """Return *settings* with values from *overrides* applied.

    Unknown keys and values of the wrong type are logged and skipped.
    """
    known = {f.name: f for f in fields(Settings)}
    changes: dict = {}
    for key, value in overrides.items():
        if value is None:
            continue
        if key not in known:
            logger.warning("Ignoring unknown jsonzoom setting '%s'", key)
            continue
        expected = type(getattr(settings, key))
        if type(value) is not expected:
            logger.warning(
                "Ignoring jsonzoom setting '%s': expected %s, got %r",
                key,
                expected.__name__,
                value,
            )
            continue
        if expected is int and value < 1:
            logger.warning("Ignoring jsonzoom setting '%s': must be positive", key)
            continue
        changes[key] = value
    return replace(settings, **changes)


def _read_config_table(directory: Path) -> dict | None:
    """Read the [jsonzoom] table from .jsonzoom.toml or [tool.jsonzoom] in pyproject.toml."""
    # Try .jsonzoom.toml first
    jsonzoom_toml = directory / ".jsonzoom.toml"
    if jsonzoom_toml.exists():
        try:
            with open(jsonzoom_toml, "rb") as f:
                data = tomllib.load(f)
            return data.get("jsonzoom", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not parse %s: %s", jsonzoom_toml, e)

    # Fall back to [tool.jsonzoom] in pyproject.toml
    pyproject = directory / "pyproject.toml"
    if pyproject.exists():
        try:
            with open(pyproject, "rb") as f:
                data = tomllib.load(f)
            tool = data.get("tool")
            if not isinstance(tool, dict):
                return None
            return tool.get("jsonzoom", None)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning("Could not parse %s: %s", pyproject, e)

    return None
