"""Discovery of applications, executables and documents on disk."""

from __future__ import annotations

import configparser
import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from launchbox.item_cache import ItemCacheError
from launchbox.types import Item, ItemKind

if TYPE_CHECKING:
    from launchbox.config import LaunchboxConfig
    from launchbox.item_cache import ItemCacheFile

logger = logging.getLogger(__name__)

APP_FALLBACK_ICON = "applications-other"
DOCUMENT_ICON = "gnome-documents"
EXECUTABLE_ICON = "applications-all"

_FIELD_CODE = re.compile(r"%(.)")


class CatalogLoadError(Exception):
    """Items could not be enumerated."""

    pass


@dataclass
class DesktopEntry:
    """The parts of a ``.desktop`` file the launcher uses."""

    name: str
    cmdline: str
    icon: str | None = None
    show: bool = True


def strip_field_codes(exec_line: str) -> str:
    """Remove ``%f``-style field codes from an Exec value; ``%%`` becomes ``%``."""

    def replace(match: re.Match[str]) -> str:
        return "%" if match.group(1) == "%" else ""

    return " ".join(_FIELD_CODE.sub(replace, exec_line).split())


def parse_desktop_file(path: Path, terminal: str = "xterm") -> DesktopEntry | None:
    """Parse a freedesktop ``.desktop`` file.

    Args:
        path: Path to the file.
        terminal: Terminal used for ``Terminal=true`` entries.

    Returns:
        The parsed entry, or None if the file has no usable Desktop Entry.
    """
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    parser.optionxform = str  # keys are case-sensitive
    try:
        parser.read_string(path.read_text(errors="replace"), source=str(path))
    except (configparser.Error, OSError) as e:
        logger.debug("Skipping unreadable desktop file %s: %s", path, e)
        return None

    if not parser.has_section("Desktop Entry"):
        return None
    section = parser["Desktop Entry"]

    name = section.get("Name", "").strip()
    exec_line = section.get("Exec", "").strip()
    if not name or not exec_line:
        return None

    cmdline = strip_field_codes(exec_line)
    if section.get("Terminal", "false").strip().lower() == "true":
        cmdline = f"{terminal} -e {cmdline}"

    hidden = any(
        section.get(key, "false").strip().lower() == "true" for key in ("NoDisplay", "Hidden")
    )
    show = not hidden and section.get("Type", "Application").strip() == "Application"

    return DesktopEntry(
        name=name,
        cmdline=cmdline,
        icon=section.get("Icon", "").strip() or None,
        show=show,
    )


def split_dirs(dirs: list[str]) -> tuple[list[Path], set[Path]]:
    """Split a directory list into roots and excluded directories.

    Entries prefixed with ``-`` are excluded from recursion instead of
    being scanned.
    """
    roots: list[Path] = []
    excluded: set[Path] = set()
    for entry in dirs:
        if entry.startswith("-"):
            excluded.add(Path(entry[1:]).expanduser())
        else:
            roots.append(Path(entry).expanduser())
    return roots, excluded


def iter_files(
    dirs: list[str],
    extensions: list[str] | None = None,
    recursive: bool = True,
) -> Iterator[Path]:
    """Yield regular files below ``dirs``.

    Args:
        dirs: Directories to scan; ``-``-prefixed entries are excluded.
        extensions: Only yield files with one of these extensions (no dot).
        recursive: Descend into subdirectories.

    Raises:
        CatalogLoadError: If a root directory exists but cannot be listed.
    """
    roots, excluded = split_dirs(dirs)
    wanted = set(extensions) if extensions else None

    def walk(directory: Path, is_root: bool) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir())
        except FileNotFoundError:
            logger.debug("Directory %s does not exist", directory)
            return
        except OSError as e:
            if is_root:
                raise CatalogLoadError(f"Cannot read directory {directory}: {e}") from e
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return

        for entry in entries:
            if entry.is_file():
                if wanted is None or entry.suffix[1:] in wanted:
                    yield entry
            elif recursive and entry.is_dir() and not entry.is_symlink():
                if entry not in excluded:
                    yield from walk(entry, is_root=False)

    for root in roots:
        yield from walk(root, is_root=True)


class Discovery:
    """Builds the unordered item list from the configured directories."""

    def __init__(self, config: LaunchboxConfig) -> None:
        self.config = config

    @classmethod
    def create(cls, config: LaunchboxConfig) -> "Discovery":
        return cls(config)

    def discover_all(self) -> list[Item]:
        """Scan every enabled source.

        Raises:
            CatalogLoadError: If a configured directory cannot be read.
        """
        items: list[Item] = []
        if not self.config.disable_apps:
            items.extend(self.discover_applications())
        if self.config.doc_dirs:
            items.extend(self.discover_documents())
        if self.config.bin_dirs:
            items.extend(self.discover_executables())

        if self.config.disable_icons:
            items = [
                Item(kind=item.kind, display_name=item.display_name, command=item.command)
                for item in items
            ]
        logger.info("Discovered %d items", len(items))
        return items

    def discover_applications(self) -> list[Item]:
        """Applications from ``.desktop`` files.

        Later directories override earlier ones: an entry with the same Name
        replaces the earlier entry, or removes it if the later one is hidden.
        """
        by_name: dict[str, Item] = {}
        for path in iter_files(self.config.app_dirs, ["desktop"]):
            entry = parse_desktop_file(path, self.config.terminal)
            if entry is None:
                continue
            if not entry.show:
                by_name.pop(entry.name, None)
                continue
            by_name[entry.name] = Item(
                kind=ItemKind.APPLICATION,
                display_name=entry.name,
                command=entry.cmdline,
                icon_ref=entry.icon or APP_FALLBACK_ICON,
            )
        return list(by_name.values())

    def discover_documents(self) -> list[Item]:
        """Documents below ``doc_dirs``, opened with xdg-open."""
        return [
            Item(
                kind=ItemKind.DOCUMENT,
                display_name=path.name,
                command=f'xdg-open "{path}"',
                icon_ref=DOCUMENT_ICON,
            )
            for path in iter_files(self.config.doc_dirs or [], self.config.doc_ext)
        ]

    def discover_executables(self) -> list[Item]:
        """Executables directly inside ``bin_dirs``, run in a terminal.

        Single-character names are skipped and only the first file with a
        given name is kept, so /bin and /usr/bin do not duplicate each other.
        """
        items: list[Item] = []
        seen: set[str] = set()
        files = iter_files(self.config.bin_dirs or [], self.config.bin_ext, recursive=False)
        for path in files:
            if len(path.name) == 1:
                logger.debug("Skipping one-character executable %s", path)
                continue
            if path.name in seen:
                continue
            seen.add(path.name)
            items.append(
                Item(
                    kind=ItemKind.EXECUTABLE,
                    display_name=path.name,
                    command=f"{self.config.terminal} -e {path}",
                    icon_ref=EXECUTABLE_ICON,
                )
            )
        return items


class CatalogProvider:
    """Catalog loader backed by discovery and the persisted item cache.

    Satisfies the CatalogLoader protocol structurally.
    """

    def __init__(
        self,
        discovery: Discovery,
        cache_file: ItemCacheFile | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            discovery: Scanner used on cache misses and refresh.
            cache_file: Persisted item list; None disables caching.
        """
        self.discovery = discovery
        self.cache_file = cache_file

    def load(self) -> list[Item]:
        """Return cached items if available, otherwise scan."""
        if self.cache_file is not None and self.cache_file.exists():
            try:
                return self.cache_file.read()
            except (ItemCacheError, OSError) as e:
                logger.warning("Ignoring unusable item cache %s: %s", self.cache_file.path, e)
        return self.rescan()

    def rescan(self) -> list[Item]:
        """Scan all sources and rewrite the cache."""
        items = self.discovery.discover_all()
        if self.cache_file is not None:
            try:
                self.cache_file.write(items)
            except (ItemCacheError, OSError) as e:
                logger.warning("Could not write item cache %s: %s", self.cache_file.path, e)
        return items
