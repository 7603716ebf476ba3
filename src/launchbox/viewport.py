"""Fixed-height window over the active result list, with a selection."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from launchbox.types import Item, RowContent

if TYPE_CHECKING:
    from launchbox.protocols import RowRenderer


class Viewport:
    """Maps the (unbounded) active result list onto ``window_size`` rows.

    Indices are 1-based. ``selected_index`` is None while the active list is
    empty. Whenever it is set::

        first_visible_index <= selected_index <= first_visible_index + window_size - 1

    Redraw policy: ``reset()`` and any move that scrolls redraw every row;
    a move inside the window only recolors the previous and the new row.
    """

    def __init__(self, window_size: int, renderer: RowRenderer | None = None) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self.window_size = window_size
        self.renderer = renderer
        self.items: tuple[Item, ...] = ()
        self.first_visible_index = 1
        self.selected_index: int | None = None
        self.focused = False

    # -- queries ---------------------------------------------------------

    @property
    def last_visible_index(self) -> int:
        return self.first_visible_index + self.window_size - 1

    @property
    def selected_item(self) -> Item | None:
        if self.selected_index is None:
            return None
        return self.items[self.selected_index - 1]

    def row_for(self, logical_index: int) -> int:
        """Row number (1-based) that shows ``logical_index``."""
        return logical_index - self.first_visible_index + 1

    def logical_index_for(self, row: int) -> int:
        """Index into the active list shown in ``row``."""
        return self.first_visible_index + row - 1

    def visible_rows(self) -> list[RowContent | None]:
        """Content of every row; rows past the end of the list are None."""
        rows: list[RowContent | None] = []
        for row in range(1, self.window_size + 1):
            index = self.logical_index_for(row)
            if index > len(self.items):
                rows.append(None)
            else:
                rows.append(RowContent.for_item(self.items[index - 1]))
        return rows

    # -- updates ---------------------------------------------------------

    def show(self, items: Sequence[Item]) -> None:
        """Replace the active list and reset the window onto it."""
        self.items = tuple(items)
        self.reset()

    def reset(self) -> None:
        """Scroll to the top, select the first item and redraw everything."""
        self._set_highlight(False)
        self.first_visible_index = 1
        self.selected_index = 1 if self.items else None
        self._redraw()
        self._set_highlight(True)

    def move_up(self) -> bool:
        """Select the previous item, scrolling if needed.

        Returns:
            True if the selection moved.
        """
        if self.selected_index is None or self.selected_index <= 1:
            return False

        self._set_highlight(False)
        self.selected_index -= 1
        if self.selected_index < self.first_visible_index:
            self.first_visible_index = self.selected_index
            self._redraw()
        self._set_highlight(True)
        return True

    def move_down(self) -> bool:
        """Select the next item, scrolling if needed.

        Returns:
            True if the selection moved.
        """
        if self.selected_index is None or self.selected_index >= len(self.items):
            return False

        self._set_highlight(False)
        self.selected_index += 1
        if self.selected_index > self.last_visible_index:
            self.first_visible_index += 1
            self._redraw()
        self._set_highlight(True)
        return True

    def attach(self, renderer: RowRenderer) -> None:
        """Draw through ``renderer`` from now on, starting with a full redraw."""
        self.renderer = renderer
        self._redraw()
        self._set_highlight(True)

    def focus(self) -> None:
        """Show the selection highlight (the owning session is active)."""
        self.focused = True
        self._set_highlight(True)

    def blur(self) -> None:
        """Hide the selection highlight."""
        self._set_highlight(False)
        self.focused = False

    def _redraw(self) -> None:
        if self.renderer is not None:
            self.renderer.draw_rows(self.visible_rows())

    def _set_highlight(self, focused: bool) -> None:
        if not self.focused or self.selected_index is None or self.renderer is None:
            return
        self.renderer.highlight_row(self.row_for(self.selected_index), focused)
