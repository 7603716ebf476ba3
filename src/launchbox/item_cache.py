"""Persisted item list, one ``field:value,`` line per item.

The format has no escaping, so items whose values contain ``,`` or ``:``
cannot be cached at all: writing them is refused and the stale file removed,
which makes the next load a cache miss.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from launchbox.types import Item, ItemKind

logger = logging.getLogger(__name__)

FIELDS = ("type", "name", "name_lower", "cmdline", "icon_path")
REQUIRED_FIELDS = ("type", "name", "cmdline")

_TOKEN = re.compile(r"([^,:]+):([^,:]+),")
_SEPARATORS = frozenset(",:")


class ItemCacheError(Exception):
    """Cache file content could not be parsed."""

    pass


def format_item(item: Item) -> str:
    """Serialize one item as a cache line (without newline).

    Raises:
        ItemCacheError: If a value contains a separator character.
    """
    values = {
        "type": str(int(item.kind)),
        "name": item.display_name,
        "name_lower": item.match_key,
        "cmdline": item.command,
        "icon_path": item.icon_ref,
    }
    for key, value in values.items():
        if value and _SEPARATORS.intersection(value):
            raise ItemCacheError(f"Cannot cache {key} {value!r}: contains , or :")
    return "".join(f"{key}:{values[key]}," for key in FIELDS if values[key])


def parse_line(line: str) -> Item:
    """Parse one cache line.

    Raises:
        ItemCacheError: If a required field is missing or malformed.
    """
    fields = dict(_TOKEN.findall(line))
    missing = [key for key in REQUIRED_FIELDS if key not in fields]
    if missing:
        raise ItemCacheError(f"Missing fields {', '.join(missing)} in line {line!r}")

    try:
        kind = ItemKind(int(fields["type"]))
    except ValueError as e:
        raise ItemCacheError(f"Invalid item type {fields['type']!r}") from e

    # name_lower is stored for compatibility only; the match key is derived.
    return Item(
        kind=kind,
        display_name=fields["name"],
        command=fields["cmdline"],
        icon_ref=fields.get("icon_path"),
    )


class ItemCacheFile:
    """Reads and writes the persisted item list."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> list[Item]:
        """Load all items.

        Raises:
            ItemCacheError: If any line is malformed.
            OSError: If the file cannot be read.
        """
        logger.info("Reading item cache %s", self.path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ItemCacheError(f"Cache file {self.path} is not valid UTF-8: {e}") from e

        items = []
        for line in text.splitlines():
            if not line.strip():
                continue
            items.append(parse_line(line))
        return items

    def write(self, items: Iterable[Item]) -> None:
        """Replace the cache file with ``items``.

        Raises:
            ItemCacheError: If an item cannot be represented; any existing
                file is removed first.
            OSError: If the file cannot be written.
        """
        logger.info("Writing item cache %s", self.path)
        try:
            lines = [format_item(item) + "\n" for item in items]
        except ItemCacheError:
            self.path.unlink(missing_ok=True)
            raise
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("".join(lines), encoding="utf-8")
