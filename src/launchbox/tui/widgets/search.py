"""Filter bar showing the typed query."""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label


class FilterBar(Horizontal):
    """Query display with a search icon and a block cursor.

    The launcher shows it while keys are being typed and hides it again
    after a short idle period.
    """

    CURSOR = "\u258d"  # ▍

    DEFAULT_CSS = """
    FilterBar {
        height: 1;
        padding: 0 1;
        background: $surface;
        display: none;
    }
    FilterBar.visible {
        display: block;
    }
    FilterBar #filter-icon {
        width: 3;
        color: $text-muted;
    }
    FilterBar #filter-query {
        width: 1fr;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.query_text = ""

    def compose(self) -> ComposeResult:
        yield Label("\U0001f50d", id="filter-icon")  # magnifier
        yield Label(self.CURSOR, id="filter-query")

    def set_query(self, query: str) -> None:
        self.query_text = query
        self.query_one("#filter-query", Label).update(Text(query + self.CURSOR))

    @property
    def is_shown(self) -> bool:
        return self.has_class("visible")

    def set_shown(self, shown: bool) -> None:
        self.set_class(shown, "visible")
