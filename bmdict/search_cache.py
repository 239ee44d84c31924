"""Bounded memoization of search results."""

import logging
from collections import OrderedDict
from typing import Dict, Hashable, Optional, Tuple

from .models import WordEntry

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100

Result = Tuple[WordEntry, ...]


class ResultCache:
    """
    Search result cache with first-in, first-out eviction.

    When the cache is full, storing a new key drops the key that was inserted
    earliest. Reads do not change eviction order, and overwriting an existing
    key keeps its original slot.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._entries: "OrderedDict[Hashable, Result]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, key: Hashable) -> Optional[Result]:
        result = self._entries.get(key)
        if result is None:
            self.misses += 1
        else:
            self.hits += 1
        return result

    def put(self, key: Hashable, result: Result) -> None:
        if key in self._entries:
            self._entries[key] = tuple(result)
            return
        if len(self._entries) >= self.capacity:
            oldest, _ = self._entries.popitem(last=False)
            self.evictions += 1
            logger.debug(f"Evicted cached results for {oldest!r}")
        self._entries[key] = tuple(result)

    def clear(self) -> None:
        self._entries.clear()

    def stats(self) -> Dict[str, int]:
        return {
            'size': len(self._entries),
            'capacity': self.capacity,
            'hits': self.hits,
            'misses': self.misses,
            'evictions': self.evictions,
        }

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
