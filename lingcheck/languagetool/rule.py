"""
LanguageTool Rule
=================
Runs the LanguageTool engine as one more lingcheck rule.

Off by default: the engine needs Java and a large download. Enable it
with ``-e LANGUAGETOOL``.
"""

from typing import List, Optional

from ..rules.base import Rule, RuleMatch
from ..tokens import AnalyzedSentence
from .client import GrammarMatch, LanguageToolClient


class LanguageToolRule(Rule):
    """Delegates a sentence to LanguageTool and converts its matches."""

    RULE_ID = "LANGUAGETOOL"
    DESCRIPTION = "Grammar and style checks from LanguageTool"
    DEFAULT_ENABLED = False

    def __init__(self, language: str = 'en-US', client: Optional[LanguageToolClient] = None):
        """
        Args:
            language: LanguageTool language code
            client: Client to use instead of the shared one for ``language``
        """
        self.language = language
        self._client = client

    @property
    def client(self) -> LanguageToolClient:
        if self._client is None:
            from . import get_client
            self._client = get_client(self.language)
        return self._client

    @property
    def is_available(self) -> bool:
        return self.client.is_available

    @property
    def error(self) -> Optional[str]:
        return self.client.error

    def match(self, sentence: AnalyzedSentence) -> List[RuleMatch]:
        text = sentence.text
        matches = []
        for grammar_match in self.client.check(text):
            converted = self._convert(grammar_match, len(text))
            if converted is not None:
                matches.append(converted)
        matches.sort(key=lambda m: m.start)
        return matches

    def _convert(self, grammar_match: GrammarMatch, text_length: int) -> Optional[RuleMatch]:
        """Convert a LanguageTool match, dropping spans outside the sentence."""
        start = grammar_match.offset
        end = start + grammar_match.length
        if start < 0 or end > text_length:
            return None
        return RuleMatch(
            rule_id=self.id,
            start=start,
            end=end,
            message=grammar_match.message,
            suggestions=tuple(grammar_match.replacements),
            short_message=grammar_match.category,
            description=f"LanguageTool {grammar_match.rule_id}",
        )
