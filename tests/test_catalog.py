"""Tests for catalog module."""

from __future__ import annotations

from unittest.mock import MagicMock

from launchbox.catalog import Catalog
from launchbox.types import Item, ItemKind


def _item(name: str, kind: ItemKind = ItemKind.APPLICATION) -> Item:
    return Item(kind=kind, display_name=name, command=name)


class TestCatalog:
    """Tests for Catalog class."""

    def test_firefox_scenario_order(self, firefox_items: list[Item]) -> None:
        """Test canonical order is kind first, then folded name."""
        catalog = Catalog(firefox_items)
        names = [item.display_name for item in catalog.all()]
        assert names == ["Firefox", "firefox-esr", "file.pdf"]

    def test_sorts_by_folded_name_within_kind(self) -> None:
        """Test names compare case-insensitively inside a kind."""
        catalog = Catalog([_item("zsh"), _item("Atom"), _item("bash")])
        assert [item.display_name for item in catalog.all()] == ["Atom", "bash", "zsh"]

    def test_kind_beats_name(self) -> None:
        """Test a document never sorts before an application."""
        catalog = Catalog([_item("aaa.pdf", ItemKind.DOCUMENT), _item("zzz")])
        assert [item.kind for item in catalog.all()] == [ItemKind.APPLICATION, ItemKind.DOCUMENT]

    def test_identical_keys_keep_insertion_order(self) -> None:
        """Test the sort is stable for identical match keys."""
        first = Item(kind=ItemKind.DOCUMENT, display_name="todo.txt", command="a")
        second = Item(kind=ItemKind.DOCUMENT, display_name="TODO.txt", command="b")
        catalog = Catalog([first, second])
        assert [item.command for item in catalog.all()] == ["a", "b"]

    def test_all_returns_same_sequence(self, sample_items: list[Item]) -> None:
        """Test all() hands out the stored sequence without copying."""
        catalog = Catalog(sample_items)
        assert catalog.all() is catalog.all()

    def test_empty_catalog(self) -> None:
        """Test an empty catalog is valid."""
        catalog = Catalog()
        assert catalog.all() == ()
        assert len(catalog) == 0

    def test_rebuild_replaces_items(self, sample_items: list[Item]) -> None:
        """Test rebuild swaps the whole sequence."""
        catalog = Catalog(sample_items)
        catalog.rebuild([_item("xterm", ItemKind.EXECUTABLE)])
        assert [item.display_name for item in catalog] == ["xterm"]
        assert catalog.generation == 1

    def test_rebuild_notifies_listeners(self) -> None:
        """Test listeners run after the new items are in place."""
        catalog = Catalog([_item("old")])
        seen: list[list[str]] = []
        catalog.subscribe(lambda c: seen.append([item.display_name for item in c.all()]))

        catalog.rebuild([_item("new")])

        assert seen == [["new"]]

    def test_listeners_called_in_order(self) -> None:
        """Test listeners are notified in subscription order."""
        catalog = Catalog()
        parent = MagicMock()
        catalog.subscribe(parent.first)
        catalog.subscribe(parent.second)

        catalog.rebuild([])

        assert [call[0] for call in parent.mock_calls] == ["first", "second"]
