"""Core data types shared by the search tiers."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class WordEntry:
    """Single dictionary entry as shown in the suggestion list."""
    word: str
    pos: str = ""
    definition: str = ""


class SearchMode(str, Enum):
    """Which field of a WordEntry participates in matching."""
    WORD = "word"
    DEFINITION = "definition"

    @classmethod
    def coerce(cls, mode: Union["SearchMode", str]) -> "SearchMode":
        """Accept a SearchMode or its string value ("word" / "definition")."""
        if isinstance(mode, cls):
            return mode
        try:
            return cls(mode)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown search mode {mode!r} (expected one of: {valid})") from None
