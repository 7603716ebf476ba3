"""Keystroke-driven launcher session.

A session owns the catalog, the filter engine, the query history and the
viewport, and is the only piece that talks to the outside world: it asks
the loader for a new catalog on refresh, hands the selected command to the
executor on confirm, and calls the done-callback when it stops on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from launchbox.catalog import Catalog
from launchbox.discovery import CatalogLoadError
from launchbox.filtering import FilterEngine
from launchbox.history import QueryHistory
from launchbox.types import FilterResult, Item
from launchbox.viewport import Viewport

if TYPE_CHECKING:
    from launchbox.protocols import CatalogLoader, CommandExecutor, RowRenderer

logger = logging.getLogger(__name__)

DoneCallback = Callable[[], None]


class SessionState(Enum):
    """Whether the session is consuming key events."""

    IDLE = "idle"
    ACTIVE = "active"


class KeyKind(Enum):
    """Abstract key events understood by the session."""

    CHARACTER = "character"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    REFRESH = "refresh"
    CANCEL = "cancel"


@dataclass(frozen=True)
class KeyEvent:
    """A key press, already decoded by the caller."""

    kind: KeyKind
    char: str = ""

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHARACTER and len(self.char) != 1:
            raise ValueError("character events carry exactly one character")

    @classmethod
    def character(cls, char: str) -> KeyEvent:
        return cls(KeyKind.CHARACTER, char)


class Session:
    """Interaction state machine of one launcher.

    States are IDLE and ACTIVE. ``start()`` enters ACTIVE; cancel, confirm
    and ``stop()`` return to IDLE. Key events are ignored while IDLE.
    ``init_list()`` resets the query and the window independently of the
    state, so a caller can get a clean slate without stopping.
    """

    def __init__(
        self,
        items: list[Item] | tuple[Item, ...],
        window_size: int,
        renderer: RowRenderer | None = None,
        loader: CatalogLoader | None = None,
        executor: CommandExecutor | None = None,
        name: str = "launchbox",
    ) -> None:
        """Initialize the session.

        Args:
            items: Initial catalog contents, in any order.
            window_size: Number of visible rows.
            renderer: Widget that draws the rows.
            loader: Source of a fresh item list on refresh.
            executor: Runs the command of the confirmed item.
            name: Label used in log messages.
        """
        self.name = name
        self.catalog = Catalog(items)
        self.engine = FilterEngine(self.catalog)
        self.history = QueryHistory()
        self.viewport = Viewport(window_size, renderer)
        self.loader = loader
        self.executor = executor
        self.state = SessionState.IDLE
        self._done_callback: DoneCallback | None = None
        self.catalog.subscribe(self._on_rebuild)
        self.init_list()

    # -- state -----------------------------------------------------------

    @property
    def is_active(self) -> bool:
        return self.state is SessionState.ACTIVE

    @property
    def query(self) -> str:
        return self.history.current

    @property
    def results(self) -> tuple[Item, ...]:
        """The active result list."""
        return self.viewport.items

    @property
    def selected_item(self) -> Item | None:
        return self.viewport.selected_item

    def start(self, done_callback: DoneCallback | None = None) -> None:
        """Begin consuming key events and show the current highlight."""
        self._done_callback = done_callback
        self.state = SessionState.ACTIVE
        self.viewport.focus()
        logger.debug("Session %s started", self.name)

    def stop(self) -> None:
        """Stop consuming key events. Stopping an idle session does nothing."""
        if self.state is SessionState.IDLE:
            return
        self.state = SessionState.IDLE
        self.viewport.blur()
        logger.debug("Session %s stopped", self.name)

    def init_list(self) -> None:
        """Clear the query and history and show the whole catalog."""
        self.history.reset()
        self.viewport.show(self.catalog.all())

    # -- key handling ----------------------------------------------------

    def handle(self, event: KeyEvent) -> bool:
        """Apply one key event.

        Returns:
            True if the event was consumed. Events are not consumed while
            the session is idle.
        """
        if not self.is_active:
            return False

        if event.kind is KeyKind.CHARACTER:
            self.type_character(event.char)
        elif event.kind is KeyKind.BACKSPACE:
            self.remove_last_character()
        elif event.kind is KeyKind.UP:
            self.viewport.move_up()
        elif event.kind is KeyKind.DOWN:
            self.viewport.move_down()
        elif event.kind is KeyKind.CONFIRM:
            self.confirm()
        elif event.kind is KeyKind.REFRESH:
            self.refresh()
        elif event.kind is KeyKind.CANCEL:
            self.cancel()
        return True

    def type_character(self, char: str) -> FilterResult:
        """Append ``char`` to the query if the longer query has matches.

        A rejected character changes nothing: query, history and window stay
        exactly as they were.
        """
        previous = self.history.current
        new_query = previous + char.lower()
        result = self.engine.filter(new_query, previous)
        if result:
            self.history.push(new_query)
            self.viewport.show(result.items)
        else:
            logger.debug("Rejected query %r", new_query)
        return result

    def remove_last_character(self) -> bool:
        """Return to the previously accepted query.

        The previous query was accepted before, so its result is always
        cached and no search runs.

        Returns:
            False if there was nothing to remove.

        Raises:
            CacheConsistencyError: If the history holds a query the filter
                cache does not know.
        """
        previous = self.history.peek()
        if previous is None:
            return False
        result = self.engine.recall(previous)
        self.history.pop()
        self.viewport.show(result.items)
        return True

    def confirm(self) -> Item | None:
        """Stop and launch the selected item.

        Returns:
            The launched item, or None if nothing is selected.
        """
        item = self.viewport.selected_item
        if item is None:
            return None
        self._finish()
        logger.info("Launching %s: %s", item.display_name, item.command)
        if self.executor is not None:
            self.executor.execute(item.command)
        return item

    def cancel(self) -> None:
        """Stop without launching anything."""
        self._finish()

    def refresh(self) -> bool:
        """Rebuild the catalog from the loader.

        The existing catalog, caches, history and window are only replaced
        when the loader returns a complete item list.

        Returns:
            True if the catalog was rebuilt.
        """
        if self.loader is None:
            logger.warning("Session %s has no loader, refresh ignored", self.name)
            return False

        logger.info("Session %s: refreshing item list", self.name)
        try:
            items = self.loader.rescan()
        except (CatalogLoadError, OSError):
            logger.exception("Refreshing %s failed, keeping current catalog", self.name)
            return False
        if items is None:
            logger.warning("Loader returned no items, keeping current catalog")
            return False

        self.catalog.rebuild(items)
        return True

    def _on_rebuild(self, catalog: Catalog) -> None:
        # The filter engine has cleared itself already; reset what we own.
        self.init_list()

    def _finish(self) -> None:
        self.stop()
        if self._done_callback is not None:
            self._done_callback()
