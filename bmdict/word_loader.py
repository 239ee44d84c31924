"""
Word list loading.

The dictionary ships as a JSON array of objects:

    [
        {"word": "kaksi", "pos": "n", "definition": "a basket"},
        ...
    ]

Only `word` is required. Records without a non-blank string `word` are
dropped, since a blank headword can never be looked up; everything else is
kept in file order.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Union

import requests

from .config import DEFAULT_HTTP_TIMEOUT
from .exceptions import WordListLoadError
from .models import WordEntry

logger = logging.getLogger(__name__)


def _text_field(record: dict, name: str) -> str:
    value = record.get(name)
    return value if isinstance(value, str) else ""


def _has_headword(word: Any) -> bool:
    return isinstance(word, str) and bool(word.strip())


def filter_records(records: Iterable[Any]) -> List[WordEntry]:
    """
    Convert raw records into WordEntry objects, preserving order.

    Dict records need a non-blank string `word`; `pos` and `definition`
    default to '' when missing or not strings. WordEntry instances with a
    non-blank word pass through. Anything else, including empty or
    whitespace-only words, is dropped.
    """
    entries: List[WordEntry] = []
    dropped = 0
    for record in records:
        if isinstance(record, WordEntry) and _has_headword(record.word):
            entries.append(record)
        elif isinstance(record, dict) and _has_headword(record.get("word")):
            entries.append(WordEntry(
                word=record["word"],
                pos=_text_field(record, "pos"),
                definition=_text_field(record, "definition"),
            ))
        else:
            dropped += 1

    if dropped:
        logger.debug(f"Dropped {dropped} word list records without a usable 'word'")
    return entries


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _fetch(source: str, timeout: float) -> Any:
    try:
        r = requests.get(source, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise WordListLoadError(source, str(e)) from e
    try:
        return r.json()
    except ValueError as e:
        raise WordListLoadError(source, f"invalid JSON ({e})") from e


def _read(path: Path) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except OSError as e:
        raise WordListLoadError(str(path), str(e)) from e
    except UnicodeDecodeError as e:
        raise WordListLoadError(str(path), f"invalid encoding ({e})") from e
    except json.JSONDecodeError as e:
        raise WordListLoadError(str(path), f"invalid JSON ({e})") from e


def load_word_list(source: Union[str, Path], timeout: float = DEFAULT_HTTP_TIMEOUT) -> List[WordEntry]:
    """
    Load and filter a word list from a local file or an http(s) URL.

    Args:
        source: File path or URL of the JSON array
        timeout: Request timeout in seconds for URLs

    Returns:
        List of WordEntry in file order

    Raises:
        WordListLoadError: The source could not be read or is not a JSON array
    """
    if isinstance(source, str) and _is_url(source):
        data = _fetch(source, timeout)
    else:
        data = _read(Path(source))

    if not isinstance(data, list):
        raise WordListLoadError(str(source), f"expected a JSON array, got {type(data).__name__}")

    entries = filter_records(data)
    logger.info(f"Loaded {len(entries):,} words from {source}")
    return entries
