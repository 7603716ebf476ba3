"""Scroll indicator widget."""

from __future__ import annotations

from typing import Any

from textual.widgets import Static


class ScrollIndicator(Static):
    """Shows whether results exist above or below the visible rows."""

    DEFAULT_CSS = """
    ScrollIndicator {
        height: 1;
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.indicator_text = ""

    def update_position(self, first_visible: int, window_size: int, total: int) -> None:
        """Update from the 1-based first visible index of the result list."""
        parts = []
        if first_visible > 1:
            parts.append(f"\u2191 {first_visible - 1} above")
        below = total - (first_visible + window_size - 1)
        if below > 0:
            parts.append(f"\u2193 {below} below")
        self.indicator_text = " | ".join(parts)
        self.update(self.indicator_text)
