"""Core layer — the store and the pure rules it is built on.

Rules
-----
* No ``print()`` calls.
* No direct filesystem, terminal or clipboard access; those are reached
  through the protocols in :mod:`stashdir.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from stashdir.core.models import StashDocument
from stashdir.core.protocols import Chooser, ClipboardWriter, StorageBackend
from stashdir.core.store import Store

__all__: list[str] = [
    "Chooser",
    "ClipboardWriter",
    "StashDocument",
    "StorageBackend",
    "Store",
]
