"""
N-gram inverted index builder for approximate word matching.

The index is built once, in memory, over the loaded word list. It maps
character n-grams of each normalized headword to the list positions of the
entries containing them, so the approximate matcher only has to score
entries that can possibly be within its edit budget.

Architecture:
    Build time (once, after the word list is loaded):
        1. For each entry: normalize(word)
        2. Extract bigrams (and single characters for 1-letter queries)
        3. Build inverted index: n-gram → [position_1, position_2, ...]

    Index structure:
        {
            "ka": [0, 1, 17, ...],    # entries whose word contains "ka"
            "ak": [0, 1, ...],
            "k":  [0, 1, 17, 230, ...],
            ...
        }

Usage:
    builder = IndexBuilder()
    builder.build_index(entries)
    builder.inverted_index["ka"]
"""

import logging
from collections import defaultdict
from typing import Dict, List, Sequence

from tqdm import tqdm

from .models import WordEntry
from .normalizer import normalize, extract_ngrams

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Build an n-gram inverted index over dictionary headwords."""

    def __init__(self, use_unigrams: bool = True):
        """
        Initialize index builder.

        Args:
            use_unigrams: Whether to index single characters in addition to
                bigrams (needed to look up one-character queries)
        """
        self.use_unigrams = use_unigrams
        self.inverted_index: Dict[str, List[int]] = defaultdict(list)
        self.normalized_words: List[str] = []

    def build_index(self, entries: Sequence[WordEntry], show_progress: bool = False) -> None:
        """
        Build the inverted index from entries.

        For each entry:
        1. Normalize the headword
        2. Extract bigrams (and unigrams if enabled)
        3. Add n-gram → position mappings

        Args:
            entries: Word list, in display order
            show_progress: Show a tqdm progress bar (used by the CLI)
        """
        self.inverted_index = defaultdict(list)
        self.normalized_words = []

        for position, entry in enumerate(tqdm(entries, desc="Indexing", disable=not show_progress)):
            normalized = normalize(entry.word)
            self.normalized_words.append(normalized)

            ngrams = extract_ngrams(normalized, 2, normalize_first=False)
            if self.use_unigrams:
                ngrams.extend(normalized)

            for ngram in set(ngrams):  # one posting per entry
                self.inverted_index[ngram].append(position)

        logger.info(
            f"Built index with {len(self.inverted_index):,} unique n-grams "
            f"over {len(self.normalized_words):,} words"
        )

    def calculate_statistics(self) -> Dict:
        """
        Calculate index statistics.

        Returns:
            Dictionary of statistics
        """
        posting_counts = [len(positions) for positions in self.inverted_index.values()]

        return {
            'total_ngrams': len(self.inverted_index),
            'total_words': len(self.normalized_words),
            'avg_words_per_ngram': sum(posting_counts) / len(posting_counts) if posting_counts else 0,
            'max_words_per_ngram': max(posting_counts) if posting_counts else 0,
            'min_words_per_ngram': min(posting_counts) if posting_counts else 0,
        }
