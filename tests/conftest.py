"""Shared fixtures for bmdict tests."""

import json

import pytest

from bmdict.models import WordEntry
from bmdict.search_engine import TieredSearchEngine
from bmdict.word_loader import filter_records

SAMPLE_RECORDS = [
    {"word": "kaksi", "pos": "n", "definition": "a basket"},
    {"word": "kaksia", "pos": "n", "definition": "baskets"},
    {"word": "ককসি", "pos": "n", "definition": "..."},
]


@pytest.fixture
def sample_entries():
    return filter_records(SAMPLE_RECORDS)


@pytest.fixture
def engine(sample_entries):
    eng = TieredSearchEngine()
    eng.initialize(sample_entries)
    return eng


@pytest.fixture
def wordlist_file(tmp_path):
    path = tmp_path / "wordnet.json"
    path.write_text(json.dumps(SAMPLE_RECORDS, ensure_ascii=False), encoding="utf-8")
    return path


def make_entries(words, pos="n"):
    return [WordEntry(word=w, pos=pos, definition=f"definition of {w}") for w in words]
