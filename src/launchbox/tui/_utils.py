"""Shared utility functions for TUI components."""

from __future__ import annotations

import locale
import re
import sys

from launchbox.types import ItemKind


def sanitize_terminal_text(text: str, max_length: int = 100) -> str:
    """Sanitize text for safe terminal rendering.

    Item names come from desktop files and file names, so they may contain
    escape sequences or control characters.

    Removes:
    - ANSI escape sequences (\\x1b[...)
    - Control characters (including newlines and tabs)
    - Unicode directional overrides (RLO, LRO)

    Args:
        text: The text to sanitize.
        max_length: Maximum length for the output (default 100).

    Returns:
        Single-line text safe for terminal display.
    """
    text = re.sub(r"\x1b\[[0-9;]*[a-zA-Z]", "", text)  # CSI sequences
    text = re.sub(r"\x1b\][^\x07]*(?:\x07|\x1b\\)", "", text)  # OSC sequences
    text = re.sub(r"\x1b[P_][^\x1b]*\x1b\\", "", text)  # APC/DCS sequences

    # Rows are one line high; this also drops directional overrides
    text = "".join(char for char in text if char.isprintable())

    if len(text) > max_length:
        text = text[: max_length - 3] + "..."

    return text


def supports_utf8() -> bool:
    """Whether stdout can encode non-ASCII glyphs."""
    try:
        encoding = getattr(sys.stdout, "encoding", None) or locale.getpreferredencoding()
    except (AttributeError, TypeError):
        encoding = "utf-8"
    return encoding.lower() in ("utf-8", "utf8")


def get_kind_glyphs() -> dict[ItemKind, str]:
    """Glyph drawn in place of an item's icon, per item kind.

    Returns:
        Dict keyed by ItemKind, falling back to ASCII without UTF-8.
    """
    if supports_utf8():
        return {
            ItemKind.APPLICATION: "\u25c6",  # ◆
            ItemKind.EXECUTABLE: "\u25b8",  # ▸
            ItemKind.DOCUMENT: "\u25a1",  # □
        }
    return {
        ItemKind.APPLICATION: "*",
        ItemKind.EXECUTABLE: ">",
        ItemKind.DOCUMENT: "#",
    }
