"""
Linear-scan matchers for the word list.

exact_and_prefix (tier 1): headwords equal to, then starting with, the query
definition_search (tier 3): definitions containing the query

Both preserve word-list order within a pass. The list holds a few thousand
entries, so a scan is cheaper than maintaining another index.
"""

from typing import List, Optional, Sequence, Tuple

from .models import WordEntry
from .normalizer import normalize, compile_prefix_pattern

TIER1_LIMIT = 20
DEFINITION_LIMIT = 30


def exact_and_prefix(
    query: str,
    entries: Sequence[WordEntry],
    normalized_words: Optional[Sequence[str]] = None,
    limit: int = TIER1_LIMIT,
) -> Tuple[WordEntry, ...]:
    """
    Exact and prefix matches for a query, exact matches first.

    The prefix pass compiles the raw query into a diacritic alternation
    pattern and tests it against the raw headword, so "kaks" finds "Kâksia"
    while the returned entry keeps its original spelling.

    Args:
        query: Raw query text (already stripped by the caller)
        entries: Word list
        normalized_words: normalize(e.word) for each entry, if precomputed
        limit: Maximum number of results

    Returns:
        Tuple of matching entries, at most `limit` long
    """
    query_normalized = normalize(query)
    if not query_normalized or not entries or limit <= 0:
        return ()

    if normalized_words is None:
        normalized_words = [normalize(entry.word) for entry in entries]

    seen = set()
    results: List[WordEntry] = []

    # 1. Exact matches
    for position, word in enumerate(normalized_words):
        if word == query_normalized:
            seen.add(position)
            results.append(entries[position])
            if len(results) >= limit:
                return tuple(results)

    # 2. Prefix matches
    pattern = compile_prefix_pattern(query)
    for position, entry in enumerate(entries):
        if position in seen:
            continue
        if pattern.match(entry.word) or normalized_words[position].startswith(query_normalized):
            seen.add(position)
            results.append(entry)
            if len(results) >= limit:
                break

    return tuple(results)


def definition_search(
    query: str,
    entries: Sequence[WordEntry],
    limit: int = DEFINITION_LIMIT,
) -> Tuple[WordEntry, ...]:
    """Entries whose definition contains the query (case-insensitive), in list order."""
    query_lower = query.lower()
    if not query_lower or limit <= 0:
        return ()

    results: List[WordEntry] = []
    for entry in entries:
        if query_lower in entry.definition.lower():
            results.append(entry)
            if len(results) >= limit:
                break
    return tuple(results)
