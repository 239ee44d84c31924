"""
Text normalization for BM Dictionary search.

This module folds dictionary words and user queries to a comparable form
before matching. Normalization makes a plain-ASCII query match a headword
written with diacritics ("kaksi" vs "kâksi") without touching the original
text that is displayed to the user.

Functions:
    normalize(text: str) -> str: Fold diacritics to base letters and lowercase
    variant_pattern(query: str) -> str: Per-character diacritic alternation
    compile_prefix_pattern(query: str) -> Pattern: Anchored, case-insensitive
    extract_ngrams(text: str, n: int) -> List[str]: Character n-grams
    extract_bigrams(text: str) -> List[str]: Character bigrams
"""

import re
from functools import lru_cache
from typing import List, Pattern, Set

from .diacritics import BASE_FOR_VARIANT, variants_of


def normalize(text: str) -> str:
    """
    Normalize text for matching.

    Every character found in the diacritic table is replaced by its lowercase
    base letter; any other character is lowercased as-is. The result is
    stable under repeated application.

    Args:
        text: Raw word or query

    Returns:
        Normalized text string

    Examples:
        >>> normalize("Kâksi")
        'kaksi'

        >>> normalize("ককসি")
        'ককসি'
    """
    if not isinstance(text, str):
        raise TypeError(f"normalize() expects str, got {type(text).__name__}")

    folded = []
    for char in text:
        base = BASE_FOR_VARIANT.get(char)
        if base is not None:
            folded.append(base)
            continue
        # Lowercasing can itself produce a table character (e.g. the
        # Angstrom sign lowercases to 'å'), so fold the lowered text too.
        for lowered in char.lower():
            folded.append(BASE_FOR_VARIANT.get(lowered, lowered))
    return ''.join(folded)


def variant_pattern(query: str) -> str:
    """
    Translate a query into a regex where each character matches any of its
    diacritic variants.

    Args:
        query: Raw (non-normalized) query text

    Returns:
        Regex source, not anchored

    Examples:
        >>> variant_pattern("k1")  # doctest: +ELLIPSIS
        '[...]1'
    """
    parts = []
    for char in query:
        variants = variants_of(char)
        if len(variants) == 1:
            lowered = char.lower()
            if lowered != char and lowered in BASE_FOR_VARIANT:
                variants = variants_of(lowered)
        if len(variants) == 1:
            parts.append(re.escape(char))
        else:
            parts.append('[' + ''.join(re.escape(v) for v in sorted(variants)) + ']')
    return ''.join(parts)


@lru_cache(maxsize=256)
def compile_prefix_pattern(query: str) -> Pattern[str]:
    """
    Compile the diacritic-aware prefix matcher for `query`.

    The pattern is anchored with `\\A` and case-insensitive, so use it with
    `pattern.match(word)` against the raw headword.
    """
    return re.compile(r'\A' + variant_pattern(query), re.IGNORECASE)


def extract_ngrams(text: str, n: int = 2, normalize_first: bool = True) -> List[str]:
    """
    Extract character n-grams from text.

    Args:
        text: Text to extract n-grams from
        n: Size of n-grams (1 for characters, 2 for bigrams)
        normalize_first: Whether to normalize text before extraction

    Returns:
        List of n-gram strings; text shorter than `n` yields itself
    """
    if normalize_first:
        text = normalize(text)

    if len(text) < n:
        return [text] if text else []

    return [text[i:i+n] for i in range(len(text) - n + 1)]


def extract_bigrams(text: str, normalize_first: bool = True) -> List[str]:
    """
    Extract character bigrams from text.

    Example: "kaksi" → ["ka", "ak", "ks", "si"]
    """
    return extract_ngrams(text, 2, normalize_first)


def extract_bigrams_set(text: str, normalize_first: bool = True) -> Set[str]:
    """Same as extract_bigrams() but returns a set for postings lookups."""
    return set(extract_bigrams(text, normalize_first))


if __name__ == "__main__":
    print("=== Normalization Tests ===")

    for text in ["Kaksi", "Kâksi", "ÇÅFÉ", "ককসি", "Łódź"]:
        normalized = normalize(text)
        print(f"{text:12s} → {normalized:12s} bigrams={extract_bigrams(text)}")
