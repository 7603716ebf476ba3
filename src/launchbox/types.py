"""Shared data types for launchbox."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

__all__ = ["FilterResult", "Item", "ItemKind", "RowContent"]


class ItemKind(IntEnum):
    """Kind of a catalog entry; the numeric value is the primary sort bucket."""

    APPLICATION = 1
    EXECUTABLE = 2
    DOCUMENT = 3

    @classmethod
    def from_name(cls, name: str) -> ItemKind:
        """Look up a kind by its lowercase name (``"application"`` etc.)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown item kind: {name!r}") from None


@dataclass(frozen=True)
class Item:
    """One selectable entry of the catalog.

    Attributes:
        kind: Application, executable or document.
        display_name: Human-readable text shown in the list.
        command: Opaque command line run verbatim on selection.
        icon_ref: Optional handle to icon data, interpreted by the renderer.
        match_key: Lowercase copy of ``display_name``, derived once.
    """

    kind: ItemKind
    display_name: str
    command: str
    icon_ref: str | None = None
    match_key: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants and derive the match key."""
        if not isinstance(self.kind, ItemKind):
            raise ValueError(f"kind must be an ItemKind, got {self.kind!r}")
        if not self.display_name:
            raise ValueError("display_name cannot be empty")
        object.__setattr__(self, "match_key", self.display_name.lower())

    @property
    def sort_key(self) -> tuple[int, str]:
        """Canonical catalog ordering key."""
        return (int(self.kind), self.match_key)


@dataclass(frozen=True)
class RowContent:
    """What the renderer draws in one visible row."""

    display_name: str
    icon_ref: str | None = None
    kind: ItemKind | None = None

    @classmethod
    def for_item(cls, item: Item) -> RowContent:
        return cls(display_name=item.display_name, icon_ref=item.icon_ref, kind=item.kind)


@dataclass(frozen=True)
class FilterResult:
    """Outcome of one filter attempt.

    ``accepted`` is False for a query with zero matches; ``items`` is then
    empty. The empty query is always accepted, even against an empty
    catalog. ``offsets`` runs parallel to ``items`` and holds the 0-based
    position of the leftmost match of the query in each match key. It is
    only meaningful for the call that produced it.
    """

    accepted: bool
    items: tuple[Item, ...] = ()
    offsets: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not self.accepted and self.items:
            raise ValueError("rejected result cannot carry items")
        if self.offsets and len(self.offsets) != len(self.items):
            raise ValueError("offsets must run parallel to items")

    @classmethod
    def rejected(cls) -> FilterResult:
        return cls(accepted=False)

    def __bool__(self) -> bool:
        return self.accepted

    def __len__(self) -> int:
        return len(self.items)
