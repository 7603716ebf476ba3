"""Protocol definitions for the launcher's collaborators.

The search core never touches the filesystem, the screen or child processes
itself. It talks to these interfaces instead, which keeps it testable with
plain test doubles.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from launchbox.types import Item, RowContent


@runtime_checkable
class CatalogLoader(Protocol):
    """Protocol for building the catalog's item sequence.

    Implementations enumerate applications, executables and documents and may
    keep their own persisted cache.
    """

    def load(self) -> list[Item]:
        """Return the items for the initial catalog.

        Returns:
            Unordered list of items.
        """
        ...

    def rescan(self) -> list[Item] | None:
        """Rebuild the item list from scratch (used by refresh).

        Returns:
            Unordered list of items, or None if nothing usable was found.

        Raises:
            CatalogLoadError: If the rebuild failed.
        """
        ...


@runtime_checkable
class CommandExecutor(Protocol):
    """Protocol for running the selected item's command."""

    def execute(self, command: str) -> None:
        """Start ``command`` and return immediately.

        Args:
            command: Command line stored on the item, used verbatim.
        """
        ...


@runtime_checkable
class RowRenderer(Protocol):
    """Protocol for the widget that shows the visible rows."""

    def draw_rows(self, rows: Sequence[RowContent | None]) -> None:
        """Redraw every visible row.

        Args:
            rows: One entry per row; None renders an empty placeholder.
        """
        ...

    def highlight_row(self, row: int, focused: bool) -> None:
        """Recolor a single row.

        Args:
            row: 1-based row number within the window.
            focused: True to apply the selection colors, False to clear them.
        """
        ...
