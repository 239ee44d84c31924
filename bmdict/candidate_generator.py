"""
Approximate (fuzzy) word matching for the second search tier.

Scores dictionary headwords against a query by bounded edit distance, so
that typos such as "kaski" or "kksi" still surface "kaksi". Matching is
case-insensitive and diacritic-insensitive (both sides are normalized) and
position-insensitive: the query may match anywhere inside the headword.

Scoring:
    score = best edit distance between the query and any window of the word
            ─────────────────────────────────────────────────────────────────
                                 len(query)

    0.0 is a perfect (substring) match. A word is a candidate when its score
    is within the threshold (0.4 by default, i.e. roughly 40% of the query's
    characters may differ).

Architecture:
    Build time:
        1. IndexBuilder builds bigram/unigram postings over normalized words
    Query time:
        1. Normalize query: "Kaski" → "kaski"
        2. Edit budget: floor(threshold * len(query)), optionally capped
        3. Look up candidate positions in the inverted index when the bigram
           filter cannot drop a match within the budget, otherwise scan all
        4. Score candidates with Levenshtein distance over word windows
        5. Sort by (score, length difference, list position), return top N

Usage:
    index = ApproximateIndex.build(entries)
    matches = index.search("kaski", limit=30)
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set

import Levenshtein

from .index_builder import IndexBuilder
from .models import WordEntry
from .normalizer import normalize, extract_bigrams_set

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 30


@dataclass(frozen=True)
class FuzzyMatch:
    """Single approximate match."""
    entry: WordEntry
    score: float  # 0.0 = perfect, higher = more dissimilar
    distance: int
    position: int  # index in the word list


class ApproximateIndex:
    """Fuzzy-match index over a fixed word list."""

    def __init__(
        self,
        entries: Sequence[WordEntry],
        builder: IndexBuilder,
        threshold: float = 0.4,
        max_edits: Optional[int] = None,
    ):
        """
        Wrap a built IndexBuilder. Use ApproximateIndex.build() instead of
        calling this directly.

        Args:
            entries: Word list the builder was built from
            builder: IndexBuilder after build_index()
            threshold: Maximum accepted score (0.0-1.0)
            max_edits: Hard cap on edits per match (None = threshold only)
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {threshold}")
        self.entries = tuple(entries)
        self.builder = builder
        self.threshold = threshold
        self.max_edits = max_edits
        self._last_timings: Dict[str, float] = {}

    @classmethod
    def build(
        cls,
        entries: Sequence[WordEntry],
        threshold: float = 0.4,
        max_edits: Optional[int] = None,
        show_progress: bool = False,
    ) -> "ApproximateIndex":
        """Build the n-gram index over `entries` and return a ready index."""
        builder = IndexBuilder(use_unigrams=True)
        builder.build_index(entries, show_progress=show_progress)
        return cls(entries, builder, threshold=threshold, max_edits=max_edits)

    def __len__(self) -> int:
        return len(self.entries)

    def edit_budget(self, query_length: int) -> int:
        """Maximum edits allowed for a normalized query of this length."""
        # small epsilon so 0.4 * 5 is not rounded down to 1
        budget = int(self.threshold * query_length + 1e-9)
        if self.max_edits is not None:
            budget = min(budget, self.max_edits)
        return budget

    def _candidate_positions(self, query: str, budget: int) -> Optional[Set[int]]:
        """
        Positions worth scoring, or None when every entry must be scored.

        Each edit destroys at most two of the query's bigrams, so when
        len(query) - 1 > 2 * budget at least one bigram survives in any
        match and the bigram postings are a complete candidate set.
        """
        index = self.builder.inverted_index

        if budget == 0:
            # exact substring: every n-gram of the query has to be present
            grams = [query] if len(query) == 1 else extract_bigrams_set(query, normalize_first=False)
            positions: Optional[Set[int]] = None
            for gram in grams:
                postings = set(index.get(gram, ()))
                positions = postings if positions is None else positions & postings
                if not positions:
                    return set()
            return positions if positions is not None else set()

        if len(query) - 1 > 2 * budget:
            positions = set()
            for gram in extract_bigrams_set(query, normalize_first=False):
                positions.update(index.get(gram, ()))
            return positions

        return None

    @staticmethod
    def window_distance(query: str, word: str, budget: int) -> Optional[int]:
        """
        Smallest edit distance between `query` and any substring of `word`.

        Only windows whose length is within `budget` of the query length are
        considered. Returns None when no window is within the budget.

        Examples:
            >>> ApproximateIndex.window_distance("kaks", "kaksia", 1)
            0
            >>> ApproximateIndex.window_distance("kasi", "kaksi", 1)
            1
        """
        m = len(query)
        n = len(word)
        best: Optional[int] = None

        for length in range(max(1, m - budget), min(n, m + budget) + 1):
            for start in range(n - length + 1):
                dist = Levenshtein.distance(query, word[start:start + length], score_cutoff=budget)
                if dist <= budget and (best is None or dist < best):
                    best = dist
                    if best == 0:
                        return 0
        return best

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> List[FuzzyMatch]:
        """
        Find approximate matches for a query.

        Args:
            query: Raw user query (normalized internally)
            limit: Maximum number of matches to return

        Returns:
            List of FuzzyMatch, best match first
        """
        timings = {}
        start_time = time.time()

        query_normalized = normalize(query)
        if not query_normalized or not self.entries or limit <= 0:
            return []

        m = len(query_normalized)
        budget = self.edit_budget(m)

        t0 = time.time()
        positions = self._candidate_positions(query_normalized, budget)
        if positions is None:
            candidates = range(len(self.entries))
        else:
            candidates = sorted(positions)
        timings['candidates'] = time.time() - t0

        t0 = time.time()
        words = self.builder.normalized_words
        scored = []
        for position in candidates:
            word = words[position]
            dist = self.window_distance(query_normalized, word, budget)
            if dist is None:
                continue
            score = dist / m
            if score > self.threshold:
                continue
            scored.append((score, abs(len(word) - m), position, dist))
        timings['scoring'] = time.time() - t0

        scored.sort()
        result = [
            FuzzyMatch(entry=self.entries[position], score=score, distance=dist, position=position)
            for score, _, position, dist in scored[:limit]
        ]

        timings['total'] = time.time() - start_time
        self._last_timings = timings
        logger.debug(
            f"Fuzzy '{query}': budget={budget}, "
            f"scored {len(candidates)} of {len(self.entries)} words, {len(scored)} matched"
        )
        return result

    def get_last_timings(self) -> Dict[str, float]:
        """
        Timing breakdown (seconds) from the last search call:
        candidates, scoring, total.
        """
        return dict(self._last_timings)

    def calculate_statistics(self) -> Dict:
        return self.builder.calculate_statistics()
