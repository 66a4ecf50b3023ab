"""Domain model for the persisted bookmark database.

:class:`StashDocument` is a **frozen** dataclass — an immutable value
object.  Conversion to and from the JSON-compatible structure lives here
so that the schema rules are pure and testable without touching disk.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stashdir.exceptions import FormatError

ITEMS_FIELD: str = "items"
"""The only top-level field recognised in the persisted document."""


@dataclass(frozen=True, slots=True)
class StashDocument:
    """Ordered sequence of stashed paths as stored on disk."""

    items: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return len(self.items) > 0

    # ------------------------------------------------------------------
    # JSON mapping
    # ------------------------------------------------------------------

    @classmethod
    def from_json_obj(cls, data: Any) -> StashDocument:
        """Build a document from decoded JSON.

        Unknown top-level fields are ignored and a missing ``items`` field
        reads as an empty list.

        Raises
        ------
        FormatError
            If *data* is not an object, ``items`` is not a list, or any
            entry is not a string.
        """
        if not isinstance(data, dict):
            raise FormatError(
                f"Expected a JSON object at the top level, got {type(data).__name__}.",
            )

        raw_items = data.get(ITEMS_FIELD, [])
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise FormatError(
                f"Field '{ITEMS_FIELD}' must be a list, got {type(raw_items).__name__}.",
            )

        for position, entry in enumerate(raw_items):
            if not isinstance(entry, str):
                raise FormatError(
                    f"Entry {position} in '{ITEMS_FIELD}' is not a string: {entry!r}",
                )

        return cls(items=tuple(raw_items))

    def to_json_obj(self) -> dict[str, list[str]]:
        """Return the JSON-compatible form; ``items`` is always present."""
        return {ITEMS_FIELD: list(self.items)}
