# tests/test_index.py
"""Tests for the n-gram index and approximate matching."""

import pytest

from bmdict.candidate_generator import ApproximateIndex
from bmdict.index_builder import IndexBuilder

from .conftest import make_entries


@pytest.fixture
def index(sample_entries):
    return ApproximateIndex.build(sample_entries)


def test_index_builder_postings(sample_entries):
    builder = IndexBuilder()
    builder.build_index(sample_entries)

    assert builder.normalized_words == ["kaksi", "kaksia", "ককসি"]
    assert builder.inverted_index["ka"] == [0, 1]
    assert builder.inverted_index["ia"] == [1]
    assert builder.inverted_index["ক"] == [2]
    assert builder.inverted_index["k"] == [0, 1]


def test_index_builder_statistics(sample_entries):
    builder = IndexBuilder(use_unigrams=False)
    builder.build_index(sample_entries)
    stats = builder.calculate_statistics()

    assert stats["total_words"] == 3
    assert stats["max_words_per_ngram"] == 2
    assert "k" not in builder.inverted_index


def test_window_distance():
    assert ApproximateIndex.window_distance("kaks", "kaksia", 1) == 0
    assert ApproximateIndex.window_distance("kasi", "kaksi", 1) == 1
    assert ApproximateIndex.window_distance("kaksi", "ককসি", 2) is None
    assert ApproximateIndex.window_distance("kaksi", "ka", 2) is None


def test_edit_budget():
    index = ApproximateIndex.build(make_entries(["kaksi"]))
    assert index.edit_budget(5) == 2
    assert index.edit_budget(4) == 1
    assert index.edit_budget(2) == 0

    capped = ApproximateIndex.build(make_entries(["kaksi"]), max_edits=1)
    assert capped.edit_budget(5) == 1


def test_transposition_is_found(index):
    matches = index.search("kaski")
    assert [m.entry.word for m in matches] == ["kaksi", "kaksia"]
    assert matches[0].score == pytest.approx(0.4)
    assert matches[0].distance == 2


def test_results_sorted_by_score():
    index = ApproximateIndex.build(make_entries(["kaxsi", "kaksi", "zzzzz"]))
    matches = index.search("kaksi")
    assert [m.entry.word for m in matches] == ["kaksi", "kaxsi"]
    assert [m.score for m in matches] == pytest.approx([0.0, 0.2])
    assert [m.position for m in matches] == [1, 0]


def test_ties_prefer_closer_length_then_list_order():
    index = ApproximateIndex.build(make_entries(["kaksiaaa", "kaksia", "kaksi", "kaksib"]))
    assert [m.entry.word for m in index.search("kaksi")] == ["kaksi", "kaksia", "kaksib", "kaksiaaa"]


def test_case_diacritic_and_position_insensitive(index):
    assert index.search("KÁKSI")[0].entry.word == "kaksi"
    ksia = index.search("ksia")
    assert ksia[0].entry.word == "kaksia"
    assert ksia[0].score == 0.0


def test_unrelated_words_excluded(index):
    assert index.search("zebra") == []
    assert index.search("") == []


def test_max_edits_zero_requires_substring(sample_entries):
    strict = ApproximateIndex.build(sample_entries, max_edits=0)
    assert strict.search("kaski") == []
    assert [m.entry.word for m in strict.search("aks")] == ["kaksi", "kaksia"]


def test_limit():
    index = ApproximateIndex.build(make_entries([f"kaksu{i}" for i in range(40)]))
    assert len(index.search("kaksi")) == 30
    assert len(index.search("kaksi", limit=5)) == 5


def test_candidate_filter(index):
    # long enough query: bigram postings are a complete candidate set
    assert index._candidate_positions("kaksia", 2) == {0, 1}
    # too many edits for the bigram filter: scan everything
    assert index._candidate_positions("kaksi", 2) is None
    # no edits: every bigram must be present
    assert index._candidate_positions("sia", 0) == {1}
    assert index._candidate_positions("ক", 0) == {2}


def test_invalid_threshold(sample_entries):
    with pytest.raises(ValueError):
        ApproximateIndex.build(sample_entries, threshold=1.5)
