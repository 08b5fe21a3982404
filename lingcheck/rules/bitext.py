"""
Bitext Rules
============
Heuristic translation QA checks over aligned sentence pairs.

Both rules compare surface text only and keep no state between pairs.
"""

from typing import List

from ..tokens import AnalyzedSentence
from .base import BitextRule, RuleMatch


def _whole_target(rule: BitextRule, target: AnalyzedSentence, message: str) -> List[RuleMatch]:
    """One match spanning the target from its first to its last token."""
    tokens = target.tokens
    if not tokens:
        return []
    return [rule.create_match(tokens[0].start_pos, tokens[-1].end_pos, message)]


class SameTranslationRule(BitextRule):
    """
    Flags a target identical to its source.

    Segments of more than three tokens are rarely the same in two
    languages, so an identical target usually means the translator left
    the segment untranslated.
    """

    RULE_ID = "SAME_TRANSLATION"
    DESCRIPTION = "Check if translation is the same as source"
    MESSAGE = "Source and target translation are the same!"

    MIN_SOURCE_TOKENS = 3

    def match_pair(self, source: AnalyzedSentence, target: AnalyzedSentence) -> List[RuleMatch]:
        if len(source.tokens_without_whitespace) <= self.MIN_SOURCE_TOKENS:
            return []
        if source.pure_text != target.pure_text:
            return []
        return _whole_target(self, target, self.MESSAGE)


class DifferentLengthRule(BitextRule):
    """Flags a target much longer or much shorter than its source."""

    RULE_ID = "TRANSLATION_LENGTH"
    DESCRIPTION = "Check if translation length is similar to source length"
    MESSAGE = "Source and target translation lengths are very different!"

    # Source length as a percentage of target length
    MAX_SKEW = 250.0
    MIN_SKEW = 30.0

    def match_pair(self, source: AnalyzedSentence, target: AnalyzedSentence) -> List[RuleMatch]:
        source_text = source.pure_text.strip()
        target_text = target.pure_text.strip()
        if not source_text or not target_text:
            return []
        if not self.is_length_different(source_text, target_text):
            return []
        return _whole_target(self, target, self.MESSAGE)

    def is_length_different(self, source_text: str, target_text: str) -> bool:
        skew = len(source_text) / len(target_text) * 100.0
        return skew > self.MAX_SKEW or skew < self.MIN_SKEW
