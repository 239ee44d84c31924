"""
BM Dictionary search package

Incremental lookup over the Bishnupriya Manipuri → English word list.

Main Components:
    - diacritics: Base letter ↔ diacritic variant tables
    - normalizer: Diacritic folding and prefix pattern compilation
    - index_builder: In-memory n-gram inverted index
    - candidate_generator: Approximate (fuzzy) matching over the index
    - matchers: Exact/prefix and definition scans
    - search_cache: Bounded result cache
    - search_engine: Tiered search orchestration
    - dictionary_service: Loading state and search mode for the UI

Quick Start:
    from bmdict import DictionaryService

    service = DictionaryService()
    service.load("wordnet.json")

    results = service.search("kaks")
"""

__version__ = "0.1.0"

from .models import WordEntry, SearchMode
from .normalizer import normalize
from .candidate_generator import ApproximateIndex, FuzzyMatch
from .search_cache import ResultCache
from .search_engine import TieredSearchEngine, SearchStats
from .dictionary_service import DictionaryService, ServiceStatus
from .word_loader import filter_records, load_word_list
from .exceptions import BMDictError, WordListLoadError

__all__ = [
    "WordEntry",
    "SearchMode",
    "normalize",
    "ApproximateIndex",
    "FuzzyMatch",
    "ResultCache",
    "TieredSearchEngine",
    "SearchStats",
    "DictionaryService",
    "ServiceStatus",
    "filter_records",
    "load_word_list",
    "BMDictError",
    "WordListLoadError",
]
