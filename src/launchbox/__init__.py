"""Keystroke-driven incremental search for a launcher of applications, executables and documents."""

__version__ = "0.1.0"

# Export the search core and collaborator protocols
from launchbox.catalog import Catalog
from launchbox.filtering import CacheConsistencyError, FilterEngine
from launchbox.protocols import CatalogLoader, CommandExecutor, RowRenderer
from launchbox.session import KeyEvent, KeyKind, Session, SessionState
from launchbox.types import FilterResult, Item, ItemKind, RowContent
from launchbox.viewport import Viewport

__all__ = [
    "__version__",
    "CacheConsistencyError",
    "Catalog",
    "CatalogLoader",
    "CommandExecutor",
    "FilterEngine",
    "FilterResult",
    "Item",
    "ItemKind",
    "KeyEvent",
    "KeyKind",
    "RowContent",
    "RowRenderer",
    "Session",
    "SessionState",
    "Viewport",
]
