"""Tests for history module."""

from __future__ import annotations

from launchbox.history import QueryHistory


class TestQueryHistory:
    """Tests for QueryHistory."""

    def test_initial_state(self) -> None:
        """Test a new history is empty with an empty query."""
        history = QueryHistory()
        assert history.current == ""
        assert not history
        assert history.pop() is None

    def test_push_records_previous(self) -> None:
        """Test push stacks the query being replaced."""
        history = QueryHistory()
        history.push("f")
        history.push("fi")
        assert history.current == "fi"
        assert history.snapshot() == ("", "f")

    def test_pop_restores_in_reverse(self) -> None:
        """Test pops walk back through the accepted queries."""
        history = QueryHistory()
        for query in ("g", "gi", "git"):
            history.push(query)

        assert history.pop() == "gi"
        assert history.pop() == "g"
        assert history.pop() == ""
        assert history.pop() is None
        assert history.current == ""

    def test_peek_does_not_change_state(self) -> None:
        """Test peek reports the next pop without applying it."""
        history = QueryHistory()
        history.push("a")
        assert history.peek() == ""
        assert history.current == "a"
        assert len(history) == 1

    def test_reset(self) -> None:
        """Test reset clears query and stack."""
        history = QueryHistory()
        history.push("a")
        history.push("ab")
        history.reset()
        assert history.current == ""
        assert history.snapshot() == ()
