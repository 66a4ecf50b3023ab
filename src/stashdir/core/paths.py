"""Path normalization and ordering rules.

Pure functions, no filesystem access: paths are cleaned lexically, so
symlinks are never resolved and the paths need not exist.
"""

from __future__ import annotations

import os
from collections.abc import Iterable


def is_case_insensitive_platform() -> bool:
    """Guess filesystem case sensitivity from the path separator.

    Platforms that use a backslash separator (Windows) are treated as
    case-insensitive; everything else as case-sensitive.
    """
    return os.sep == "\\"


def normalize_path(path: str) -> str:
    """Trim *path* and collapse redundant separators and ``.``/``..`` parts.

    Returns ``""`` for blank input rather than the ``"."`` that
    :func:`os.path.normpath` would produce.
    """
    stripped = path.strip()
    if not stripped:
        return ""
    return os.path.normpath(stripped)


def comparison_key(path: str, *, case_insensitive: bool) -> str:
    """Return the form of *path* used for duplicate detection."""
    normalized = normalize_path(path)
    if case_insensitive:
        return normalized.lower()
    return normalized


def sort_paths(paths: Iterable[str]) -> list[str]:
    """Return *paths* in case-insensitive order.

    The sort is stable: entries that differ only by case keep their
    relative order.
    """
    return sorted(paths, key=str.lower)
