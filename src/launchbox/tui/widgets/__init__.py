"""TUI widgets package."""

from launchbox.tui.widgets.item_list import ItemList, ItemRow
from launchbox.tui.widgets.scroll_indicator import ScrollIndicator
from launchbox.tui.widgets.search import FilterBar

__all__ = [
    "FilterBar",
    "ItemList",
    "ItemRow",
    "ScrollIndicator",
]
