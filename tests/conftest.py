"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from launchbox.config import LaunchboxConfig
from launchbox.context import AppContext
from launchbox.session import Session
from launchbox.types import Item, ItemKind


def make_item(name: str, kind: ItemKind = ItemKind.APPLICATION, icon: str | None = None) -> Item:
    """Create an item whose command is derived from its name."""
    return Item(kind=kind, display_name=name, command=f"run {name}", icon_ref=icon)


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


# ============================================================================
# Item Fixtures
# ============================================================================


@pytest.fixture
def firefox_items() -> list[Item]:
    """Firefox, firefox-esr and file.pdf, deliberately out of order."""
    return [
        make_item("file.pdf", ItemKind.DOCUMENT),
        make_item("firefox-esr", ItemKind.EXECUTABLE),
        make_item("Firefox", ItemKind.APPLICATION),
    ]


@pytest.fixture
def sample_items() -> list[Item]:
    """A mixed catalog of a dozen entries."""
    return [
        make_item("Firefox", ItemKind.APPLICATION, "firefox"),
        make_item("Files", ItemKind.APPLICATION, "org.gnome.Nautilus"),
        make_item("GIMP", ItemKind.APPLICATION, "gimp"),
        make_item("Terminal", ItemKind.APPLICATION),
        make_item("Text Editor", ItemKind.APPLICATION, "gedit"),
        make_item("firefox-esr", ItemKind.EXECUTABLE, "applications-all"),
        make_item("grep", ItemKind.EXECUTABLE, "applications-all"),
        make_item("git", ItemKind.EXECUTABLE, "applications-all"),
        make_item("top", ItemKind.EXECUTABLE, "applications-all"),
        make_item("file.pdf", ItemKind.DOCUMENT, "gnome-documents"),
        make_item("notes.txt", ItemKind.DOCUMENT, "gnome-documents"),
        make_item("report-final.odt", ItemKind.DOCUMENT, "gnome-documents"),
    ]


# ============================================================================
# Collaborator Fixtures
# ============================================================================


@pytest.fixture
def mock_renderer() -> MagicMock:
    """Create a mock RowRenderer recording draw and highlight calls."""
    return MagicMock(spec=["draw_rows", "highlight_row"])


@pytest.fixture
def mock_executor() -> MagicMock:
    """Create a mock CommandExecutor."""
    return MagicMock(spec=["execute"])


@pytest.fixture
def mock_loader(sample_items: list[Item]) -> MagicMock:
    """Create a mock CatalogLoader serving the sample items."""
    loader = MagicMock(spec=["load", "rescan"])
    loader.load.return_value = list(sample_items)
    loader.rescan.return_value = list(sample_items)
    return loader


@pytest.fixture
def session(
    sample_items: list[Item],
    mock_renderer: MagicMock,
    mock_loader: MagicMock,
    mock_executor: MagicMock,
) -> Session:
    """An active session over the sample items with a 3-row window."""
    session = Session(
        sample_items,
        window_size=3,
        renderer=mock_renderer,
        loader=mock_loader,
        executor=mock_executor,
    )
    session.start()
    return session


@pytest.fixture
def mock_context(mock_loader: MagicMock, mock_executor: MagicMock) -> AppContext:
    """Create an AppContext with mock collaborators."""
    return AppContext(
        config=LaunchboxConfig(window_size=3),
        loader=mock_loader,
        executor=mock_executor,
    )
