"""Tests for shared data types."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from launchbox.types import FilterResult, Item, ItemKind, RowContent


class TestItemKind:
    """Tests for ItemKind enum."""

    def test_sort_order(self) -> None:
        """Test applications sort before executables before documents."""
        assert ItemKind.APPLICATION < ItemKind.EXECUTABLE < ItemKind.DOCUMENT

    def test_from_name(self) -> None:
        """Test lookup by lowercase name."""
        assert ItemKind.from_name("document") is ItemKind.DOCUMENT

    def test_from_name_unknown(self) -> None:
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown item kind"):
            ItemKind.from_name("folder")


class TestItem:
    """Tests for Item dataclass."""

    def test_match_key_is_lowercase_name(self) -> None:
        """Test match key is derived from the display name."""
        item = Item(kind=ItemKind.APPLICATION, display_name="LibreOffice Writer", command="lowriter")
        assert item.match_key == "libreoffice writer"

    def test_icon_defaults_to_none(self) -> None:
        """Test items render without an icon by default."""
        item = Item(kind=ItemKind.EXECUTABLE, display_name="git", command="xterm -e git")
        assert item.icon_ref is None

    def test_immutable(self) -> None:
        """Test identity fields cannot be changed."""
        item = Item(kind=ItemKind.APPLICATION, display_name="GIMP", command="gimp")
        with pytest.raises(FrozenInstanceError):
            item.display_name = "Inkscape"  # type: ignore[misc]

    def test_empty_name_rejected(self) -> None:
        """Test empty display names are invalid."""
        with pytest.raises(ValueError, match="display_name"):
            Item(kind=ItemKind.APPLICATION, display_name="", command="true")

    def test_kind_must_be_enum(self) -> None:
        """Test plain integers are not accepted as kinds."""
        with pytest.raises(ValueError, match="ItemKind"):
            Item(kind=1, display_name="x11", command="true")  # type: ignore[arg-type]

    def test_sort_key(self) -> None:
        """Test sort key combines kind and folded name."""
        item = Item(kind=ItemKind.DOCUMENT, display_name="Notes.TXT", command="cat")
        assert item.sort_key == (3, "notes.txt")


class TestRowContent:
    """Tests for RowContent."""

    def test_for_item(self) -> None:
        """Test row content copies name, icon and kind."""
        item = Item(kind=ItemKind.APPLICATION, display_name="GIMP", command="gimp", icon_ref="gimp")
        row = RowContent.for_item(item)
        assert row == RowContent(display_name="GIMP", icon_ref="gimp", kind=ItemKind.APPLICATION)


class TestFilterResult:
    """Tests for FilterResult."""

    def test_rejected_is_falsy(self) -> None:
        """Test rejected results evaluate as False."""
        result = FilterResult.rejected()
        assert not result
        assert len(result) == 0

    def test_accepted_empty_is_truthy(self) -> None:
        """Test the empty query on an empty catalog is still accepted."""
        assert FilterResult(accepted=True)

    def test_rejected_cannot_carry_items(self) -> None:
        """Test a rejected result with items is invalid."""
        item = Item(kind=ItemKind.APPLICATION, display_name="GIMP", command="gimp")
        with pytest.raises(ValueError, match="rejected"):
            FilterResult(accepted=False, items=(item,))

    def test_offsets_parallel_to_items(self) -> None:
        """Test offsets must match the number of items."""
        item = Item(kind=ItemKind.APPLICATION, display_name="GIMP", command="gimp")
        with pytest.raises(ValueError, match="parallel"):
            FilterResult(accepted=True, items=(item,), offsets=(0, 1))
