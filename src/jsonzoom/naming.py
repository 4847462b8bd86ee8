"""Class naming rules."""

from __future__ import annotations

from typing import Any

ROOT_NAME = "Root"
ARRAY_ROOT_NAME = "RootArray"


def class_name_for(key: str) -> str:
    """Return the class name for a property *key*: first character upper-cased.

    No collision detection is done, so ``"user"`` and ``"User"`` both map to
    ``"User"``.
    """
    return key[:1].upper() + key[1:]


def root_name_for(
    value: Any,
    *,
    root_name: str = ROOT_NAME,
    array_root_name: str = ARRAY_ROOT_NAME,
) -> str:
    """Return the name given to the top-level class of *value*."""
    if isinstance(value, (list, tuple)):
        return array_root_name
    return root_name
