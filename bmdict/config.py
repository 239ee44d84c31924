"""
Runtime settings for BM Dictionary.

Values come from the environment (a `.env` file in the working directory is
loaded first):

    BMDICT_WORDLIST          Path or http(s) URL of the JSON word list
    BMDICT_CACHE_SIZE        Distinct queries kept in the result cache
    BMDICT_FUZZY_THRESHOLD   Max dissimilarity (0-1) for approximate matches
    BMDICT_FUZZY_MAX_EDITS   Hard cap on edits per approximate match
    BMDICT_SLOW_SEARCH_MS    Searches slower than this are logged as warnings
    BMDICT_HTTP_TIMEOUT      Seconds to wait when fetching a remote word list
    BMDICT_LOG_LEVEL         Log level used by the command line tool
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WORDLIST = "wordnet.json"
DEFAULT_CACHE_SIZE = 100
DEFAULT_FUZZY_THRESHOLD = 0.4
DEFAULT_SLOW_SEARCH_MS = 50.0
DEFAULT_HTTP_TIMEOUT = 10.0


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Search engine and loader configuration."""
    wordlist: str = DEFAULT_WORDLIST
    cache_size: int = DEFAULT_CACHE_SIZE
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD
    fuzzy_max_edits: Optional[int] = None
    slow_search_ms: float = DEFAULT_SLOW_SEARCH_MS
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = "INFO"

    def __post_init__(self):
        if self.cache_size < 1:
            raise ValueError(f"cache_size must be at least 1, got {self.cache_size}")
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise ValueError(f"fuzzy_threshold must be between 0 and 1, got {self.fuzzy_threshold}")
        if self.fuzzy_max_edits is not None and self.fuzzy_max_edits < 0:
            raise ValueError(f"fuzzy_max_edits must be non-negative, got {self.fuzzy_max_edits}")

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from BMDICT_* environment variables."""
        load_dotenv()
        return cls(
            wordlist=os.getenv("BMDICT_WORDLIST", DEFAULT_WORDLIST),
            cache_size=_env_int("BMDICT_CACHE_SIZE", DEFAULT_CACHE_SIZE),
            fuzzy_threshold=_env_float("BMDICT_FUZZY_THRESHOLD", DEFAULT_FUZZY_THRESHOLD),
            fuzzy_max_edits=_env_int("BMDICT_FUZZY_MAX_EDITS", None),
            slow_search_ms=_env_float("BMDICT_SLOW_SEARCH_MS", DEFAULT_SLOW_SEARCH_MS),
            http_timeout=_env_float("BMDICT_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
            log_level=os.getenv("BMDICT_LOG_LEVEL", "INFO").upper(),
        )
