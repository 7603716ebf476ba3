"""Main launchbox TUI application."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.timer import Timer
from textual.widgets import Static

from launchbox.session import KeyEvent, KeyKind, Session
from launchbox.tui.styles import APP_CSS
from launchbox.tui.widgets.item_list import ItemList
from launchbox.tui.widgets.scroll_indicator import ScrollIndicator
from launchbox.tui.widgets.search import FilterBar

if TYPE_CHECKING:
    from launchbox.context import AppContext

# Terminal key names mapped to session events
KEY_EVENTS = {
    "escape": KeyKind.CANCEL,
    "up": KeyKind.UP,
    "down": KeyKind.DOWN,
    "enter": KeyKind.CONFIRM,
    "f5": KeyKind.REFRESH,
    "backspace": KeyKind.BACKSPACE,
}


class LaunchboxApp(App):
    """Keyboard-driven application launcher."""

    TITLE = "launchbox"

    CSS = APP_CSS

    def __init__(
        self, context: AppContext, session: Session | None = None, **kwargs: Any
    ) -> None:
        """Initialize the app.

        Args:
            context: Application dependencies.
            session: Session to drive; loaded from the context if omitted.

        Raises:
            CatalogLoadError: If the session has to be loaded and loading fails.
        """
        super().__init__(**kwargs)
        self.app_context = context
        self.launcher_config = context.config
        self.session = session if session is not None else context.create_session()
        self._filter_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="launcher"):
            yield Static(self.launcher_config.name, id="app-title")
            yield ItemList(
                self.launcher_config.window_size,
                show_icons=not self.launcher_config.disable_icons,
                highlight_fg=self.launcher_config.highlight_fg,
                highlight_bg=self.launcher_config.highlight_bg,
                id="item-list",
            )
            yield FilterBar(id="filter-bar")
            yield ScrollIndicator(id="scroll-indicator")
            yield Static("", id="status-bar")

    def on_mount(self) -> None:
        """Draw the catalog and start the session."""
        self.session.viewport.attach(self.query_one(ItemList))
        self.session.init_list()
        self.session.start(self.exit)
        self._update_status()

    def on_key(self, event: events.Key) -> None:
        """Translate terminal keys into session events."""
        if not self.session.is_active:
            return

        kind = KEY_EVENTS.get(event.key)
        if kind is not None:
            key_event = KeyEvent(kind)
        elif event.is_printable and event.character and len(event.character) == 1:
            key_event = KeyEvent.character(event.character)
        else:
            return

        event.stop()
        event.prevent_default()

        if key_event.kind in (KeyKind.CHARACTER, KeyKind.BACKSPACE):
            self._show_filter()
        self.session.handle(key_event)
        if self.session.is_active:
            self._update_status()

    def _show_filter(self) -> None:
        """Show the filter bar until no key has been pressed for a while."""
        self.query_one(FilterBar).set_shown(True)
        if self._filter_timer is None:
            self._filter_timer = self.set_timer(
                self.launcher_config.filter_display_seconds, self._hide_filter
            )
        else:
            self._filter_timer.reset()

    def _hide_filter(self) -> None:
        self.query_one(FilterBar).set_shown(False)
        self._filter_timer = None

    def _update_status(self) -> None:
        """Sync the query, scroll indicator and counts with the session."""
        session = self.session
        viewport = session.viewport
        self.query_one(FilterBar).set_query(session.query)
        self.query_one(ScrollIndicator).update_position(
            viewport.first_visible_index, viewport.window_size, len(viewport.items)
        )
        self.query_one("#status-bar", Static).update(
            f"{len(session.results)} of {len(session.catalog)} items"
        )
