"""The bookmark store — the explicit handle over the stashed path list.

A :class:`Store` owns the in-memory list for one process invocation and
writes every change through the injected
:class:`~stashdir.core.protocols.StorageBackend`.  There is no module-level
instance: callers open a store and pass it around.

Guarantees
----------
* The list is always in case-insensitive order when observed.
* No two entries compare equal under the platform normalization rule.
* A failed operation leaves both memory and storage untouched.
* Only :class:`~stashdir.exceptions.StashdirError` subclasses escape.
"""

from __future__ import annotations

import logging
from pathlib import Path

from stashdir.core.models import StashDocument
from stashdir.core.paths import (
    comparison_key,
    is_case_insensitive_platform,
    normalize_path,
    sort_paths,
)
from stashdir.core.protocols import Chooser, StorageBackend
from stashdir.exceptions import (
    InteractionError,
    NotFoundError,
    OutOfRangeError,
    StashdirError,
    StoreIOError,
    ValidationError,
)

logger = logging.getLogger(__name__)

SELECT_MESSAGE: str = "Select directory:"


class Store:
    """Ordered, de-duplicated list of stashed directory paths.

    Parameters
    ----------
    storage:
        Backend that persists the document.
    items:
        Initial entries; they are sorted on construction.
    chooser:
        Interactive chooser used by :meth:`select_interactive`.
    case_insensitive:
        Compare paths case-insensitively.  ``None`` uses the platform
        heuristic from :func:`~stashdir.core.paths.is_case_insensitive_platform`.
    """

    def __init__(
        self,
        storage: StorageBackend,
        items: tuple[str, ...] | list[str] = (),
        *,
        chooser: Chooser | None = None,
        case_insensitive: bool | None = None,
    ) -> None:
        self._storage: StorageBackend = storage
        self._chooser: Chooser | None = chooser
        self._case_insensitive: bool = (
            is_case_insensitive_platform() if case_insensitive is None else case_insensitive
        )
        self._items: list[str] = sort_paths(items)

    @classmethod
    def open(
        cls,
        storage: StorageBackend,
        *,
        chooser: Chooser | None = None,
        case_insensitive: bool | None = None,
    ) -> Store:
        """Load the persisted document from *storage* and return a handle.

        Raises
        ------
        StoreIOError
            If the storage cannot be prepared or read.
        FormatError
            If the persisted document is corrupt.
        """
        try:
            document = storage.load()
        except StashdirError:
            raise
        except Exception as exc:
            raise StoreIOError(f"Unable to load database: {exc}") from exc

        logger.debug("Loaded %d entries from %s", len(document), storage.location)
        return cls(
            storage,
            document.items,
            chooser=chooser,
            case_insensitive=case_insensitive,
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def location(self) -> Path:
        """Path of the backing document."""
        return self._storage.location

    @property
    def case_insensitive(self) -> bool:
        return self._case_insensitive

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> list[str]:
        """Return a copy of the stashed paths in display order."""
        return list(self._items)

    def get(self, index: int) -> str:
        """Return the entry at zero-based *index*.

        Raises
        ------
        OutOfRangeError
            If *index* does not address an entry.
        """
        self._check_index(index)
        return self._items[index]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, path: str) -> bool:
        """Stash *path* unless an equivalent entry already exists.

        Returns
        -------
        bool
            ``True`` when the path was added, ``False`` when it was
            already present (nothing is written in that case).

        Raises
        ------
        ValidationError
            If *path* is blank.
        StoreIOError
            If the updated document cannot be written.
        """
        normalized = normalize_path(path)
        if not normalized:
            raise ValidationError(
                "Path must not be empty.",
                hint="Pass a directory path, or omit it to stash the current directory.",
            )

        key = self._key(normalized)
        if any(self._key(existing) == key for existing in self._items):
            logger.debug("Already stashed: %s", normalized)
            return False

        self._commit(sort_paths([*self._items, normalized]))
        logger.debug("Added %s", normalized)
        return True

    def remove_index(self, index: int) -> str:
        """Remove and return the entry at zero-based *index*.

        Raises
        ------
        OutOfRangeError
            If *index* does not address an entry.
        StoreIOError
            If the updated document cannot be written.
        """
        self._check_index(index)
        removed = self._items[index]
        self._commit(self._items[:index] + self._items[index + 1:])
        logger.debug("Removed #%d: %s", index, removed)
        return removed

    def remove_path(self, path: str) -> str:
        """Remove the first entry equivalent to *path* and return it.

        Raises
        ------
        NotFoundError
            If no stored entry matches.
        StoreIOError
            If the updated document cannot be written.
        """
        key = self._key(path)
        for index, existing in enumerate(self._items):
            if self._key(existing) == key:
                return self.remove_index(index)

        raise NotFoundError(
            f"Path not found: {path.strip()}",
            hint="Run 'stashdir list' to see stashed paths.",
        )

    # ------------------------------------------------------------------
    # Interactive selection
    # ------------------------------------------------------------------

    def select_interactive(self) -> str | None:
        """Let the user pick a stashed path.

        Returns
        -------
        str | None
            The chosen path, or ``None`` when the list is empty or the
            user cancelled.

        Raises
        ------
        InteractionError
            If the chooser fails for a reason other than cancellation.
        """
        items = self.list()
        if not items:
            return None

        if self._chooser is None:
            raise InteractionError("Interactive selection is not available.")

        try:
            choice = self._chooser.choose(SELECT_MESSAGE, items)
        except StashdirError:
            raise
        except Exception as exc:
            raise InteractionError(f"Interactive selection failed: {exc}") from exc

        if choice is None:
            logger.debug("Selection cancelled")
            return None
        return choice

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _key(self, path: str) -> str:
        return comparison_key(path, case_insensitive=self._case_insensitive)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            if not self._items:
                raise OutOfRangeError(
                    "Index out of range: nothing is stashed yet.",
                    hint="Add one with 'stashdir add [PATH]'.",
                )
            raise OutOfRangeError(f"Index out of range (1..{len(self._items)}).")

    def _commit(self, items: list[str]) -> None:
        """Persist *items*, then adopt them as the in-memory list."""
        document = StashDocument(items=tuple(items))
        try:
            self._storage.save(document)
        except StashdirError:
            raise
        except Exception as exc:
            raise StoreIOError(f"Unable to save database: {exc}") from exc
        self._items = items
