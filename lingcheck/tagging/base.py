"""
Tagger Contract
===============
Every language supplies one Tagger. ``tag()`` is total: one reading per
input token, in input order, with start offsets equal to the running sum
of token lengths.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from config_logging import get_logger
from ..tokens import AnalyzedToken, AnalyzedTokenReadings, place_tokens

logger = get_logger('lingcheck.tagging')


class Tagger(ABC):
    """
    Abstract base class for part-of-speech taggers.

    Subclasses implement ``_analyze`` and return, for each token, the
    tuple of its analyses (empty when the token is unknown).
    """

    TAGGER_NAME: str = "Tagger"

    @abstractmethod
    def _analyze(self, tokens: Sequence[str]) -> List[Tuple[AnalyzedToken, ...]]:
        """
        Analyze a token sequence.

        Args:
            tokens: Raw tokens, whitespace tokens included

        Returns:
            One tuple of analyses per token
        """
        pass

    def tag(self, tokens: Sequence[str]) -> List[AnalyzedTokenReadings]:
        """
        Tag a sentence.

        Args:
            tokens: Raw tokens of one sentence, whitespace included

        Returns:
            One AnalyzedTokenReadings per token
        """
        tokens = list(tokens)
        placed = place_tokens(tokens)
        analyses = self._analyze(tokens)
        if len(analyses) != len(tokens):
            logger.warning(
                "Tagger returned wrong number of analyses, using null readings",
                tagger=self.TAGGER_NAME,
                expected=len(tokens),
                got=len(analyses),
            )
            return [self.create_null_token(token.text, token.start) for token in placed]

        return [
            AnalyzedTokenReadings(token.text, token.start, tuple(token_analyses))
            for token, token_analyses in zip(placed, analyses)
        ]

    def create_null_token(self, token: str, start_pos: int) -> AnalyzedTokenReadings:
        """Build a reading with no grammatical analysis."""
        return AnalyzedTokenReadings(token, start_pos, ())

    def create_token(self, token: str, pos_tag: Optional[str], lemma: Optional[str] = None) -> AnalyzedToken:
        """Build one analyzed form with an explicit tag."""
        return AnalyzedToken(token, pos_tag, lemma)


class UntaggedTagger(Tagger):
    """
    Tagger for languages without morphological resources.

    Every token gets an unknown reading.
    """

    TAGGER_NAME = "Untagged"

    def _analyze(self, tokens: Sequence[str]) -> List[Tuple[AnalyzedToken, ...]]:
        return [() for _ in tokens]
