"""Catalog of selectable items in canonical order."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from launchbox.types import Item

logger = logging.getLogger(__name__)

RebuildListener = Callable[["Catalog"], None]


def sort_items(items: Iterable[Item]) -> tuple[Item, ...]:
    """Sort items by kind, then by match key.

    The sort is stable, so identical keys keep their insertion order.
    """
    return tuple(sorted(items, key=lambda item: item.sort_key))


class Catalog:
    """Immutable (until rebuilt) ordered collection of items.

    The order is ``(kind, match_key)`` ascending and is what the empty query
    returns. Dependents that memoize anything derived from the catalog
    register a listener with ``subscribe()`` and are told after each rebuild.
    """

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items = sort_items(items)
        self._generation = 0
        self._listeners: list[RebuildListener] = []

    def all(self) -> tuple[Item, ...]:
        """Return the items in canonical order."""
        return self._items

    @property
    def generation(self) -> int:
        """Number of rebuilds since construction."""
        return self._generation

    def subscribe(self, listener: RebuildListener) -> None:
        """Register a callback invoked after every rebuild."""
        self._listeners.append(listener)

    def rebuild(self, new_items: Iterable[Item]) -> None:
        """Replace every item at once and notify dependents.

        The new sequence is sorted before it becomes visible, so a reader
        never observes a half-built catalog.
        """
        items = sort_items(new_items)
        self._items = items
        self._generation += 1
        logger.info("Catalog rebuilt with %d items", len(items))
        for listener in self._listeners:
            listener(self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)
