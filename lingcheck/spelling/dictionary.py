"""
Dictionary Lookup Contract
==========================
The speller rule only sees this two-operation interface. How words are
stored on disk is up to each back end.
"""

from abc import abstractmethod
from typing import List

from ..base import IntegrationBase


class DictionaryLookup(IntegrationBase):
    """Word recognition and suggestion service for one language variant."""

    INTEGRATION_NAME = "Dictionary"

    @abstractmethod
    def contains(self, word: str) -> bool:
        """Return True if ``word`` is a known spelling."""
        pass

    @abstractmethod
    def suggest(self, word: str) -> List[str]:
        """Return replacement candidates for ``word``, best first."""
        pass


def match_case(word: str, suggestion: str) -> str:
    """Give ``suggestion`` the capitalisation pattern of ``word``."""
    if word.isupper() and len(word) > 1:
        return suggestion.upper()
    if word[:1].isupper():
        return suggestion[:1].upper() + suggestion[1:]
    return suggestion
