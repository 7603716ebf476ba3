"""Incremental substring filtering with memoized results."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from launchbox.catalog import Catalog
from launchbox.types import FilterResult, Item

logger = logging.getLogger(__name__)


class CacheConsistencyError(Exception):
    """A query expected in the result cache was missing.

    Raised when the query history and the filter cache disagree. This is an
    internal bug, not a user error.
    """

    pass


@dataclass
class FilterStats:
    """Counters describing how queries were answered."""

    scans: int = 0
    items_scanned: int = 0
    hits: int = 0
    negative_hits: int = 0

    def reset(self) -> None:
        self.scans = 0
        self.items_scanned = 0
        self.hits = 0
        self.negative_hits = 0


class FilterCache:
    """Positive and negative memo of every query seen since the last rebuild."""

    def __init__(self) -> None:
        self._results: dict[str, FilterResult] = {}
        self._no_results: set[str] = set()

    def get(self, query: str) -> FilterResult | None:
        return self._results.get(query)

    def put(self, query: str, result: FilterResult) -> None:
        self._results[query] = result

    def is_negative(self, query: str) -> bool:
        return query in self._no_results

    def add_negative(self, query: str) -> None:
        self._no_results.add(query)

    def clear(self) -> None:
        """Drop both maps together."""
        self._results.clear()
        self._no_results.clear()

    def __contains__(self, query: object) -> bool:
        return query in self._results

    @property
    def queries(self) -> frozenset[str]:
        return frozenset(self._results)

    @property
    def negative_queries(self) -> frozenset[str]:
        return frozenset(self._no_results)


class FilterEngine:
    """Turns a query into the ordered list of items whose name contains it.

    Every distinct query is cached, including the ones with no matches. A
    query that is not cached yet is searched within the cached result of the
    query it was typed from, falling back to the full catalog. This relies on
    queries only ever growing by one appended character.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self.cache = FilterCache()
        self.stats = FilterStats()
        self._seed()
        catalog.subscribe(self._on_rebuild)

    def _seed(self) -> None:
        self.cache.put("", FilterResult(accepted=True, items=self.catalog.all()))

    def _on_rebuild(self, catalog: Catalog) -> None:
        self.clear()

    def clear(self) -> None:
        """Forget every cached query and re-seed the empty query."""
        self.cache.clear()
        self._seed()
        logger.debug("Filter cache cleared")

    def filter(self, query: str, previous_query: str = "") -> FilterResult:
        """Filter the catalog by ``query``.

        Args:
            query: Lowercase query string.
            previous_query: The query ``query`` was derived from by appending
                one character; its cached result is used as the search space.

        Returns:
            An accepted result with the matching items, or a rejected one
            when nothing matches.
        """
        if self.cache.is_negative(query):
            self.stats.negative_hits += 1
            logger.debug("Query %r known to have no results", query)
            return FilterResult.rejected()

        cached = self.cache.get(query)
        if cached is not None:
            self.stats.hits += 1
            logger.debug("Query %r answered from cache", query)
            return cached

        base = self.cache.get(previous_query)
        candidates = base.items if base is not None else self.catalog.all()
        logger.debug(
            "Scanning %d items for %r (base %r)",
            len(candidates),
            query,
            previous_query if base is not None else None,
        )

        result = self._scan(query, candidates)
        if not result:
            self.cache.add_negative(query)
            return result

        self.cache.put(query, result)
        return result

    def recall(self, query: str) -> FilterResult:
        """Return the cached result for a query that must already be cached.

        Raises:
            CacheConsistencyError: If ``query`` has no cached result.
        """
        cached = self.cache.get(query)
        if cached is None:
            raise CacheConsistencyError(f"No cached result for query {query!r}")
        self.stats.hits += 1
        return cached

    def _scan(self, query: str, candidates: tuple[Item, ...]) -> FilterResult:
        self.stats.scans += 1
        self.stats.items_scanned += len(candidates)

        matches: list[tuple[int, str, Item]] = []
        for item in candidates:
            offset = item.match_key.find(query)
            if offset >= 0:
                matches.append((offset, item.match_key, item))

        if not matches:
            return FilterResult.rejected()

        # Earliest match first, then by folded name; a prefix sorts first.
        matches.sort(key=lambda match: (match[0], match[1]))
        return FilterResult(
            accepted=True,
            items=tuple(match[2] for match in matches),
            offsets=tuple(match[0] for match in matches),
        )
