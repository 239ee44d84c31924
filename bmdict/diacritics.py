"""
Diacritic table for BM Dictionary lookups.

Maps each lowercase base letter to every diacritic variant that should be
treated as the same letter when searching. Entries are written in lowercase;
the uppercase forms are derived when the table is built, and the base letter
itself (both cases) is always a member of its own variant set.

Tables:
    DIACRITIC_VARIANTS: base letter -> frozenset of variant characters
    BASE_FOR_VARIANT: variant character -> base letter (reverse index)
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping


_LOWERCASE_VARIANTS = {
    'a': "àáâãäåāăąǎǟǡǻȁȃȧạảấầẩẫậắằẳẵặḁⱥ",
    'b': "ḃḅḇƀɓ",
    'c': "çćĉċčḉƈȼ",
    'd': "ďđḋḍḏḑḓɗð",
    'e': "èéêëēĕėęěȅȇȩḕḗḙḛḝẹẻẽếềểễệɇ",
    'f': "ḟƒ",
    'g': "ĝğġģǧǵḡǥɠ",
    'h': "ĥħȟḣḥḧḩḫẖ",
    'i': "ìíîïĩīĭįıǐȉȋḭḯỉịɨ",
    'j': "ĵǰɉ",
    'k': "ķǩḱḳḵƙ",
    'l': "ĺļľŀłḷḹḻḽƚ",
    'm': "ḿṁṃ",
    'n': "ñńņňǹṅṇṉṋŉ",
    'o': "òóôõöøōŏőơǒǫǭǿȍȏȫȭȯȱṍṏṑṓọỏốồổỗộớờởỡợ",
    'p': "ṕṗƥ",
    'q': "ɋ",
    'r': "ŕŗřȑȓṙṛṝṟɍ",
    's': "śŝşšșṡṣṥṧṩſ",
    't': "ţťŧțṫṭṯṱẗ",
    'u': "ùúûüũūŭůűųưǔǖǘǚǜȕȗṳṵṷṹṻụủứừửữựʉ",
    'v': "ṽṿʋ",
    'w': "ŵẁẃẅẇẉẘ",
    'x': "ẋẍ",
    'y': "ýÿŷȳẏẙỳỵỷỹɏƴ",
    'z': "źżžẑẓẕƶȥ",
}

# Uppercase forms with no single-character lowercase counterpart.
_EXTRA_UPPERCASE = {
    'i': "İ",
}


def _with_case_variants(base: str, lowercase: str) -> FrozenSet[str]:
    """
    Expand a lowercase variant string into the full variant set for `base`.

    Characters whose uppercase form is more than one code point (e.g. 'ẖ')
    contribute only their lowercase form.
    """
    variants = {base, base.upper()}
    for char in lowercase + _EXTRA_UPPERCASE.get(base, ""):
        variants.add(char)
        upper = char.upper()
        if len(upper) == 1:
            variants.add(upper)
    return frozenset(variants)


def _build_tables():
    forward: Dict[str, FrozenSet[str]] = {}
    reverse: Dict[str, str] = {}
    for base, lowercase in _LOWERCASE_VARIANTS.items():
        variants = _with_case_variants(base, lowercase)
        forward[base] = variants
        for char in variants:
            existing = reverse.get(char)
            if existing is not None and existing != base:
                raise ValueError(
                    f"Variant {char!r} is listed under both {existing!r} and {base!r}"
                )
            reverse[char] = base
    return MappingProxyType(forward), MappingProxyType(reverse)


DIACRITIC_VARIANTS: Mapping[str, FrozenSet[str]]
BASE_FOR_VARIANT: Mapping[str, str]
DIACRITIC_VARIANTS, BASE_FOR_VARIANT = _build_tables()


def base_letter(char: str) -> str:
    """Return the base letter for `char`, or '' if it is not in the table."""
    return BASE_FOR_VARIANT.get(char, "")


def variants_of(char: str) -> FrozenSet[str]:
    """
    All known variants sharing a base letter with `char`.

    Unmapped characters return a set containing only themselves.
    """
    base = BASE_FOR_VARIANT.get(char)
    if base is None:
        return frozenset((char,))
    return DIACRITIC_VARIANTS[base]
