"""Fixed-height item list drawn row by row."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from launchbox.tui._utils import get_kind_glyphs, sanitize_terminal_text
from launchbox.types import RowContent


class ItemRow(Static):
    """One visible row: an icon glyph and the item name."""

    DEFAULT_CSS = """
    ItemRow {
        height: 1;
        padding: 0 1;
        color: $text;
    }
    ItemRow.-highlight {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(
        self,
        highlight_fg: str | None = None,
        highlight_bg: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__("", **kwargs)
        self.row_content: RowContent | None = None
        self.is_highlighted = False
        self._highlight_fg = highlight_fg
        self._highlight_bg = highlight_bg

    def set_highlight(self, focused: bool) -> None:
        """Apply or clear the selection colors."""
        self.is_highlighted = focused
        self.set_class(focused, "-highlight")
        if self._highlight_fg:
            self.styles.color = self._highlight_fg if focused else None
        if self._highlight_bg:
            self.styles.background = self._highlight_bg if focused else None


class ItemList(Vertical):
    """Exactly ``window_size`` rows showing part of the result list.

    This is the renderer the launcher session draws through: it redraws all
    rows on ``draw_rows()`` and recolors single rows on ``highlight_row()``.
    Satisfies the RowRenderer protocol structurally.
    """

    MAX_NAME_LENGTH = 80

    DEFAULT_CSS = """
    ItemList {
        height: auto;
        border: solid $primary-background;
        background: $surface;
    }
    """

    def __init__(
        self,
        window_size: int,
        show_icons: bool = True,
        highlight_fg: str | None = None,
        highlight_bg: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.window_size = window_size
        self.show_icons = show_icons
        self.row_widgets = [
            ItemRow(highlight_fg=highlight_fg, highlight_bg=highlight_bg, classes="item-row")
            for _ in range(window_size)
        ]
        self.redraw_count = 0
        self._glyphs = get_kind_glyphs()

    def compose(self) -> ComposeResult:
        yield from self.row_widgets

    def draw_rows(self, rows: Sequence[RowContent | None]) -> None:
        """Redraw every row; None leaves the row empty."""
        self.redraw_count += 1
        for widget, content in zip(self.row_widgets, rows):
            widget.row_content = content
            widget.update(self._format(content))

    def highlight_row(self, row: int, focused: bool) -> None:
        """Recolor the 1-based ``row``."""
        self.row_widgets[row - 1].set_highlight(focused)

    def row_texts(self) -> list[str]:
        """Plain names currently shown, empty string for empty rows."""
        return [row.row_content.display_name if row.row_content else "" for row in self.row_widgets]

    def _format(self, content: RowContent | None) -> Text:
        if content is None:
            return Text("")
        name = sanitize_terminal_text(content.display_name, max_length=self.MAX_NAME_LENGTH)
        if not self.show_icons:
            return Text(name)
        # Items without an icon keep the column so names stay aligned.
        glyph = self._glyphs.get(content.kind, " ") if content.icon_ref and content.kind else " "
        return Text(f"{glyph} {name}")
