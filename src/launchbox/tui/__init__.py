"""TUI package for launchbox.

This package provides both the interactive (Textual-based) launcher and the
non-interactive (Rich-based) output used by the command line.
"""

from launchbox.tui.app import LaunchboxApp
from launchbox.tui.console import TUI, console
from launchbox.tui.widgets import FilterBar, ItemList, ItemRow, ScrollIndicator

__all__ = [
    # App
    "LaunchboxApp",
    # Console
    "TUI",
    "console",
    # Widgets
    "FilterBar",
    "ItemList",
    "ItemRow",
    "ScrollIndicator",
]
