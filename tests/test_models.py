"""Tests for the persisted document model (core/models.py).

The model is a frozen dataclass; these tests verify immutability and the
JSON schema rules applied when reading and writing.
"""

from __future__ import annotations

from typing import Any

import pytest

from stashdir.core.models import StashDocument
from stashdir.exceptions import FormatError


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------

class TestStashDocument:
    def test_defaults_to_empty(self) -> None:
        doc = StashDocument()
        assert doc.items == ()
        assert not doc
        assert len(doc) == 0

    def test_non_empty_is_truthy(self) -> None:
        doc = StashDocument(items=("/a",))
        assert doc
        assert len(doc) == 1

    def test_frozen(self) -> None:
        doc = StashDocument()
        with pytest.raises(AttributeError):
            doc.items = ("/a",)  # type: ignore[misc]

    def test_equality(self) -> None:
        assert StashDocument(items=("/a",)) == StashDocument(items=("/a",))


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

class TestFromJsonObj:
    def test_reads_items_in_file_order(self) -> None:
        doc = StashDocument.from_json_obj({"items": ["/b", "/a"]})
        assert doc.items == ("/b", "/a")

    def test_ignores_unknown_fields(self) -> None:
        doc = StashDocument.from_json_obj({"items": ["/a"], "version": 3, "extra": {}})
        assert doc.items == ("/a",)

    @pytest.mark.parametrize("data", [{}, {"items": None}, {"items": []}])
    def test_missing_or_null_items_is_empty(self, data: dict[str, Any]) -> None:
        assert StashDocument.from_json_obj(data) == StashDocument()

    @pytest.mark.parametrize("data", [[], ["/a"], "items", 42, None])
    def test_non_object_rejected(self, data: Any) -> None:
        with pytest.raises(FormatError, match="JSON object"):
            StashDocument.from_json_obj(data)

    @pytest.mark.parametrize("items", ["/a", {"/a": 1}, 7])
    def test_items_must_be_list(self, items: Any) -> None:
        with pytest.raises(FormatError, match="must be a list"):
            StashDocument.from_json_obj({"items": items})

    def test_entries_must_be_strings(self) -> None:
        with pytest.raises(FormatError, match="Entry 1"):
            StashDocument.from_json_obj({"items": ["/a", 2]})


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

class TestToJsonObj:
    def test_items_always_present(self) -> None:
        assert StashDocument().to_json_obj() == {"items": []}

    def test_only_items_written(self) -> None:
        doc = StashDocument.from_json_obj({"items": ["/a"], "extra": True})
        assert doc.to_json_obj() == {"items": ["/a"]}
