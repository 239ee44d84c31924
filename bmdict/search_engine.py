"""
Tiered search engine for dictionary lookups.

Turns one keystroke's worth of query text into a ranked, capped suggestion
list over the loaded word list.

Pipeline (word mode):
    1. Empty query → no results, cache untouched
    2. Cache lookup on (normalized query, mode)
    3. Tier 1: exact + prefix matches (≤ 20)
    4. If tier 1 found ≥ 10 words, return them as-is
    5. Tier 2: approximate matches from the fuzzy index (≤ 30)
    6. Merge tier 1 then tier 2, dropping tier 2 words already shown
    7. Truncate to 50, store in cache, return

Definition mode replaces steps 3-6 with a substring scan over definitions
(tier 3, ≤ 30).

Usage:
    engine = TieredSearchEngine()
    engine.initialize(entries)
    engine.search("kaks", SearchMode.WORD)
"""

import logging
import time
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from . import matchers
from .candidate_generator import ApproximateIndex
from .config import Settings
from .models import SearchMode, WordEntry
from .normalizer import normalize
from .search_cache import ResultCache

logger = logging.getLogger(__name__)

TIER2_TRIGGER = 10  # below this many tier 1 results, consult the fuzzy index
TIER2_LIMIT = 30
MAX_RESULTS = 50


@dataclass
class SearchStats:
    """Bookkeeping for the most recent search call."""
    query: str
    mode: SearchMode
    cache_hit: bool
    tier1_count: int = 0
    tier2_count: int = 0
    definition_count: int = 0
    result_count: int = 0
    latency_ms: float = 0.0


class TieredSearchEngine:
    """Exact/prefix, fuzzy and definition search over a fixed word list."""

    def __init__(
        self,
        cache: Optional[ResultCache] = None,
        fuzzy_threshold: float = 0.4,
        fuzzy_max_edits: Optional[int] = None,
        slow_search_ms: float = 50.0,
        show_progress: bool = False,
    ):
        """
        Args:
            cache: Result cache owned by this engine (a 100-entry cache if None)
            fuzzy_threshold: Maximum dissimilarity for tier 2 matches
            fuzzy_max_edits: Hard cap on tier 2 edits (None = threshold only)
            slow_search_ms: Log a warning for searches slower than this
            show_progress: Show a progress bar while building the fuzzy index
        """
        self.cache = cache if cache is not None else ResultCache()
        self.fuzzy_threshold = fuzzy_threshold
        self.fuzzy_max_edits = fuzzy_max_edits
        self.slow_search_ms = slow_search_ms
        self.show_progress = show_progress

        self.entries: Tuple[WordEntry, ...] = ()
        self._normalized_words: Tuple[str, ...] = ()
        self._index: Optional[ApproximateIndex] = None
        self._ready = False
        self.last_stats: Optional[SearchStats] = None

    @classmethod
    def from_settings(cls, settings: Settings, show_progress: bool = False) -> "TieredSearchEngine":
        return cls(
            cache=ResultCache(settings.cache_size),
            fuzzy_threshold=settings.fuzzy_threshold,
            fuzzy_max_edits=settings.fuzzy_max_edits,
            slow_search_ms=settings.slow_search_ms,
            show_progress=show_progress,
        )

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def index(self) -> Optional[ApproximateIndex]:
        return self._index

    def initialize(self, entries: Iterable[WordEntry]) -> bool:
        """
        Install the word list and build the fuzzy index.

        Re-initializing with an equal list is a no-op; a different list
        resets the index and the cache.

        Returns:
            True once the engine is ready to search
        """
        entries = tuple(entries)
        for entry in entries:
            if not isinstance(entry, WordEntry):
                raise TypeError(f"initialize() expects WordEntry items, got {type(entry).__name__}")

        if self._ready and entries == self.entries:
            return True

        self.entries = entries
        self._normalized_words = tuple(normalize(entry.word) for entry in entries)
        self._index = None
        self.cache.clear()
        self._ready = True
        self.ensure_index()
        logger.info(f"Search engine ready with {len(entries):,} words")
        return True

    def ensure_index(self) -> bool:
        """
        Build the fuzzy index if the word list is non-empty and no index
        exists yet. Safe to call repeatedly.

        Returns:
            Whether an index is available
        """
        if self._index is None and self.entries:
            start = time.time()
            self._index = ApproximateIndex.build(
                self.entries,
                threshold=self.fuzzy_threshold,
                max_edits=self.fuzzy_max_edits,
                show_progress=self.show_progress,
            )
            logger.info(f"Fuzzy index built in {(time.time() - start) * 1000:.1f}ms")
        return self._index is not None

    @staticmethod
    def cache_key(query: str, mode: Union[SearchMode, str]) -> Tuple[str, SearchMode]:
        """
        Cache key for a query: the text as the active mode's matcher compares
        it, plus the mode.

        Word search is diacritic-insensitive, so its key is normalize(query).
        Definition search compares lowercase text only, so its key keeps the
        diacritics ("café" and "cafe" are different definition queries).
        """
        mode = SearchMode.coerce(mode)
        value = query.strip()
        if mode is SearchMode.WORD:
            return normalize(value).lower(), mode
        return value.lower(), mode

    def search(self, query: str, mode: Union[SearchMode, str] = SearchMode.WORD) -> Tuple[WordEntry, ...]:
        """
        Ranked suggestions for a query.

        Args:
            query: Raw text from the search box
            mode: SearchMode.WORD or SearchMode.DEFINITION (or their values)

        Returns:
            Tuple of at most 50 entries, best first; empty for a blank query
            or before initialize()
        """
        if not isinstance(query, str):
            raise TypeError(f"search() expects a str query, got {type(query).__name__}")
        mode = SearchMode.coerce(mode)

        value = query.strip()
        if not value:
            return ()
        if not self._ready:
            logger.debug(f"Search for '{value}' before the word list is ready")
            return ()

        start = time.time()
        key = self.cache_key(value, mode)
        cached = self.cache.get(key)
        if cached is not None:
            stats = SearchStats(query=value, mode=mode, cache_hit=True, result_count=len(cached))
            self._finish(stats, start)
            return cached

        stats = SearchStats(query=value, mode=mode, cache_hit=False)
        if mode is SearchMode.DEFINITION:
            results = matchers.definition_search(value, self.entries)
            stats.definition_count = len(results)
        else:
            results = self._word_search(value, stats)

        stats.result_count = len(results)
        self.cache.put(key, results)
        self._finish(stats, start)
        return results

    def _word_search(self, value: str, stats: SearchStats) -> Tuple[WordEntry, ...]:
        tier1 = matchers.exact_and_prefix(value, self.entries, self._normalized_words)
        stats.tier1_count = len(tier1)
        if len(tier1) >= TIER2_TRIGGER:
            return tier1

        tier2 = []
        if self.ensure_index():
            tier2 = [match.entry for match in self._index.search(value, limit=TIER2_LIMIT)]
        stats.tier2_count = len(tier2)

        seen = set()
        merged = []
        for entry in tier1:
            seen.add(entry.word.lower())
            merged.append(entry)
        for entry in tier2:
            word = entry.word.lower()
            if word not in seen:
                seen.add(word)
                merged.append(entry)

        return tuple(merged[:MAX_RESULTS])

    def _finish(self, stats: SearchStats, start: float) -> None:
        stats.latency_ms = (time.time() - start) * 1000
        self.last_stats = stats
        if stats.latency_ms > self.slow_search_ms:
            logger.warning(
                f"Search took {stats.latency_ms:.1f}ms (target: <{self.slow_search_ms:.0f}ms): "
                f"'{stats.query}' mode={stats.mode.value} "
                f"tier1={stats.tier1_count} tier2={stats.tier2_count}"
            )

    def statistics(self) -> dict:
        """Cache and index statistics for diagnostics."""
        return {
            'words': len(self.entries),
            'index_built': self._index is not None,
            'index': self._index.calculate_statistics() if self._index is not None else {},
            'cache': self.cache.stats(),
        }
