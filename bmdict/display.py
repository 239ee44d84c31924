"""
Plain-text rendering of suggestions for the command line tool.

The matched part of a suggestion is wrapped in brackets:

    >>> format_suggestion(WordEntry("kaksia", "n", "baskets"), "aks")
    'k[aks]ia (n)'
"""

from typing import Optional, Tuple

from .models import WordEntry

SUGGESTION_DISPLAY_LIMIT = 10


def highlight_match(word: str, query: str) -> Optional[Tuple[str, str, str]]:
    """
    Split `word` around the first case-insensitive occurrence of `query`.

    Returns:
        (before, match, after), or None when the query does not occur
        (e.g. a fuzzy match)
    """
    value = query.strip()
    if not value:
        return None
    start = word.lower().find(value.lower())
    if start == -1:
        return None
    end = start + len(value)
    return word[:start], word[start:end], word[end:]


def format_suggestion(entry: WordEntry, query: str) -> str:
    parts = highlight_match(entry.word, query)
    text = f"{parts[0]}[{parts[1]}]{parts[2]}" if parts else entry.word
    if entry.pos:
        text += f" ({entry.pos})"
    return text


def format_entry(entry: WordEntry) -> str:
    """Detail view of a selected entry."""
    lines = [entry.word]
    if entry.pos:
        lines.append(f"  part of speech: {entry.pos}")
    lines.append(f"  {entry.definition or '(no definition)'}")
    return "\n".join(lines)
