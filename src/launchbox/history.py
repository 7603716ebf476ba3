"""Accepted query plus the stack of queries it was typed through."""

from __future__ import annotations


class QueryHistory:
    """Append-only query state with an undo stack.

    ``current`` only ever grows by one character (``push``) or returns to
    the previous accepted query (``pop``); there is no arbitrary editing.
    """

    def __init__(self) -> None:
        self.current = ""
        self._stack: list[str] = []

    def push(self, new_query: str) -> None:
        """Accept ``new_query``, remembering the query it replaces."""
        self._stack.append(self.current)
        self.current = new_query

    def pop(self) -> str | None:
        """Return to the previous accepted query.

        Returns:
            The restored query, or None when there is nothing to undo.
        """
        if not self._stack:
            return None
        self.current = self._stack.pop()
        return self.current

    def peek(self) -> str | None:
        """The query ``pop()`` would restore, without restoring it."""
        return self._stack[-1] if self._stack else None

    def reset(self) -> None:
        self.current = ""
        self._stack.clear()

    def snapshot(self) -> tuple[str, ...]:
        """Previously accepted queries, oldest first."""
        return tuple(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)
