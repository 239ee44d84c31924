# tests/test_normalizer.py
"""Tests for diacritic tables and normalization."""

import pytest

from bmdict.diacritics import BASE_FOR_VARIANT, DIACRITIC_VARIANTS, base_letter, variants_of
from bmdict.normalizer import (
    compile_prefix_pattern,
    extract_bigrams,
    extract_ngrams,
    normalize,
    variant_pattern,
)


@pytest.mark.parametrize(
    "inp, expected",
    [
        ("Kaksi", "kaksi"),
        ("Kâksí", "kaksi"),
        ("ÇÅFÉ", "cafe"),
        ("Łódź", "lodz"),
        ("ককসি", "ককসি"),
        ("İstanbul", "istanbul"),
        ("Å", "a"),  # Angstrom sign lowercases to å
        ("", ""),
    ],
)
def test_normalize_examples(inp, expected):
    assert normalize(inp) == expected


@pytest.mark.parametrize(
    "text",
    ["Kâksi", "ÇÅFÉ", "ẖ", "ß", "K", "Å", "İ", "ককসি", "MiXeD cAsE 123", "ǰ ŉ ẘ"],
)
def test_normalize_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_every_variant_folds_to_its_base():
    for base, variants in DIACRITIC_VARIANTS.items():
        assert base in variants
        assert base.upper() in variants
        for variant in variants:
            assert normalize(variant) == base, (base, variant)
            assert normalize(variant * 3) == base * 3


def test_reverse_index_matches_forward_table():
    for base, variants in DIACRITIC_VARIANTS.items():
        for variant in variants:
            assert BASE_FOR_VARIANT[variant] == base
    assert set(DIACRITIC_VARIANTS) == set("abcdefghijklmnopqrstuvwxyz")


def test_base_letter_and_variants_of():
    assert base_letter("é") == "e"
    assert base_letter("ক") == ""
    assert "á" in variants_of("a")
    assert "á" in variants_of("Ä")
    assert variants_of("ক") == frozenset({"ক"})


def test_normalize_rejects_non_strings():
    with pytest.raises(TypeError):
        normalize(None)


def test_prefix_pattern_matches_diacritic_words():
    assert compile_prefix_pattern("kaks").match("Kâksia")
    assert compile_prefix_pattern("ká").match("kaksi")
    assert compile_prefix_pattern("ককস").match("ককসি")
    assert not compile_prefix_pattern("aks").match("kaksi")


def test_variant_pattern_escapes_unmapped_characters():
    assert variant_pattern("1.") == r"1\."
    assert not compile_prefix_pattern("a.").match("ab")
    assert compile_prefix_pattern("a.").match("á.b")


def test_extract_ngrams():
    assert extract_bigrams("Kaksi") == ["ka", "ak", "ks", "si"]
    assert extract_ngrams("k", 2) == ["k"]
    assert extract_ngrams("", 2) == []
    assert extract_ngrams("Kâk", 1) == ["k", "a", "k"]
