"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations, so the store can be exercised without a disk, a
terminal or a clipboard.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from stashdir.core.models import StashDocument


class StorageBackend(Protocol):
    """Contract for the persistence backend behind a :class:`Store`."""

    @property
    def location(self) -> Path:
        """Where the document lives (shown by ``stashdir path``)."""
        ...  # pragma: no cover

    def load(self) -> StashDocument:
        """Read the persisted document.

        A backend with nothing persisted yet returns an empty document.

        Raises
        ------
        StoreIOError
            When the storage cannot be prepared or read.
        FormatError
            When the stored data does not match the schema.
        """
        ...  # pragma: no cover

    def save(self, document: StashDocument) -> None:
        """Replace the persisted document with *document*.

        Raises
        ------
        StoreIOError
            When the document cannot be written.
        """
        ...  # pragma: no cover


class Chooser(Protocol):
    """Contract for interactive single-choice selection."""

    def choose(self, message: str, options: Sequence[str]) -> str | None:
        """Let the user pick one of *options*.

        Returns
        -------
        str | None
            The chosen option, or ``None`` when the user cancelled.

        Raises
        ------
        InteractionError
            When the prompt fails for any reason other than cancellation.
        """
        ...  # pragma: no cover


class ClipboardWriter(Protocol):
    """Contract for writing text to the system clipboard."""

    def write(self, text: str) -> None:
        """Place *text* on the clipboard.

        Raises
        ------
        ClipboardError
            When the clipboard is unavailable or the write fails.
        """
        ...  # pragma: no cover
