"""Exceptions raised by bmdict."""


class BMDictError(Exception):
    """Base class for dictionary errors."""


class WordListLoadError(BMDictError):
    """The word list could not be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to load word list from {source}: {reason}")
        self.source = source
        self.reason = reason
