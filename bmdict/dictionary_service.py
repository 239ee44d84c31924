"""Dictionary lookup service used by the UI layer."""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, Optional, Tuple, Union

from .config import Settings
from .exceptions import WordListLoadError
from .models import SearchMode, WordEntry
from .search_engine import TieredSearchEngine
from .word_loader import filter_records, load_word_list

logger = logging.getLogger(__name__)


class ServiceStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class DictionaryService:
    """
    Owns the search engine and the active search mode for one session.

    Until a word list has been delivered the service is LOADING and every
    search returns no results. A failed load leaves it FAILED with an empty
    word list, which is still safe to search.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        engine: Optional[TieredSearchEngine] = None,
        status_callback: Optional[Callable[[ServiceStatus, str], None]] = None,
    ):
        """
        Args:
            settings: Configuration (Settings.from_env() if None)
            engine: Search engine (built from settings if None)
            status_callback: Called with (status, message) on every status change
        """
        self.settings = settings if settings is not None else Settings.from_env()
        self.engine = engine if engine is not None else TieredSearchEngine.from_settings(self.settings)
        self._status_callback = status_callback
        self._status = ServiceStatus.LOADING
        self._mode = SearchMode.WORD
        self.last_error: Optional[str] = None

    @property
    def status(self) -> ServiceStatus:
        return self._status

    @property
    def is_ready(self) -> bool:
        return self._status is ServiceStatus.READY

    @property
    def mode(self) -> SearchMode:
        return self._mode

    def _set_status(self, status: ServiceStatus, message: str) -> None:
        self._status = status
        if self._status_callback:
            self._status_callback(status, message)

    def initialize(self, records: Iterable[Any]) -> bool:
        """
        Hand the word list to the engine.

        Args:
            records: Raw dict records or WordEntry objects; dicts without a
                string `word` are dropped

        Returns:
            True when the service is ready
        """
        entries = filter_records(records)
        self.engine.initialize(entries)
        self.last_error = None
        self._set_status(ServiceStatus.READY, f"Loaded {len(entries):,} words")
        return True

    def load(self, source: Optional[Union[str, Path]] = None) -> bool:
        """
        Load the word list from a file or URL and initialize the engine.

        Args:
            source: Path or URL (settings.wordlist if None)

        Returns:
            True on success; False if loading failed (status becomes FAILED)
        """
        source = source if source is not None else self.settings.wordlist
        self._set_status(ServiceStatus.LOADING, f"Loading words from {source}...")
        try:
            entries = load_word_list(source, timeout=self.settings.http_timeout)
        except WordListLoadError as e:
            logger.error(str(e))
            self.last_error = str(e)
            self.engine.initialize(())
            self._set_status(ServiceStatus.FAILED, str(e))
            return False
        return self.initialize(entries)

    def set_mode(self, mode: Union[SearchMode, str]) -> SearchMode:
        """Switch between word and definition search. Does not search."""
        self._mode = SearchMode.coerce(mode)
        return self._mode

    def search(self, query: str, mode: Optional[Union[SearchMode, str]] = None) -> Tuple[WordEntry, ...]:
        """
        Suggestions for a query in the given mode (the active mode if None).

        Returns an empty tuple while the word list is still loading.
        """
        if not isinstance(query, str):
            raise TypeError(f"search() expects a str query, got {type(query).__name__}")
        active = SearchMode.coerce(mode) if mode is not None else self._mode
        if self._status is ServiceStatus.LOADING:
            return ()
        return self.engine.search(query, active)
