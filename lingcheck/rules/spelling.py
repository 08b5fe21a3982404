"""
Speller Rules
=============
Dictionary-backed spelling rules, one subclass per language variant.

Each variant has its own rule id and dictionary resource, so spelling
can be switched off for one variant without touching the others. The
dictionary is opened on first use and reused for the rule's lifetime.
Ranking of suggestions is left entirely to the dictionary.
"""

from typing import List, Optional

from config_logging import get_logger
from ..spelling import DictionaryLookup, open_dictionary
from ..tokens import AnalyzedSentence
from .base import Rule, RuleMatch

logger = get_logger('lingcheck.rules')


class SpellerRule(Rule):
    """
    Flags every word the dictionary does not know.

    Subclasses set RULE_ID and DICTIONARY_NAME.
    """

    RULE_ID = "SPELLER_RULE"
    DESCRIPTION = "Possible spelling mistake"
    MESSAGE = "Possible spelling mistake found."
    SHORT_MESSAGE = "Spelling mistake"

    # Enchant language tag of the variant's dictionary
    DICTIONARY_NAME: str = ""

    def __init__(
        self,
        dictionary: Optional[DictionaryLookup] = None,
        max_suggestions: int = 5,
        word_list: Optional[str] = None,
        max_edit_distance: int = 2,
        personal_dict: Optional[str] = None
    ):
        """
        Initialize the rule.

        Args:
            dictionary: Dictionary to use instead of the variant's default
            max_suggestions: Number of suggestions kept per match
            word_list: Word list replacing the system dictionary
            max_edit_distance: Edit distance for word-list suggestions
            personal_dict: Personal word list for the system dictionary
        """
        self._dictionary = dictionary
        self.max_suggestions = max_suggestions
        self.word_list = word_list
        self.max_edit_distance = max_edit_distance
        self.personal_dict = personal_dict

    @property
    def dictionary(self) -> DictionaryLookup:
        """The dictionary, opened on first access."""
        if self._dictionary is None:
            self._dictionary = open_dictionary(
                self.DICTIONARY_NAME, self.word_list, self.max_edit_distance,
                self.personal_dict
            )
            if not self._dictionary.is_available:
                logger.warning("Spelling dictionary unavailable", rule=self.id,
                               error=self._dictionary.error)
        return self._dictionary

    @property
    def is_available(self) -> bool:
        return self.dictionary.is_available

    @property
    def error(self) -> Optional[str]:
        return self.dictionary.error

    def match(self, sentence: AnalyzedSentence) -> List[RuleMatch]:
        """
        Check the words of a sentence against the dictionary.

        Args:
            sentence: Tagged sentence

        Returns:
            One match per unknown word, suggestions best first
        """
        dictionary = self.dictionary
        if not dictionary.is_available:
            return []

        matches = []
        for token in sentence.tokens:
            if not token.is_word:
                continue
            if dictionary.contains(token.token):
                continue
            suggestions = dictionary.suggest(token.token)[:self.max_suggestions]
            matches.append(self.match_token(
                token, self.MESSAGE, suggestions, self.SHORT_MESSAGE
            ))
        return matches

    def is_misspelled(self, word: str) -> bool:
        return not self.dictionary.contains(word)


class AmericanEnglishSpellerRule(SpellerRule):
    RULE_ID = "SPELLER_RULE_EN_US"
    DICTIONARY_NAME = "en_US"


class BritishEnglishSpellerRule(SpellerRule):
    RULE_ID = "SPELLER_RULE_EN_GB"
    DICTIONARY_NAME = "en_GB"


class GermanyGermanSpellerRule(SpellerRule):
    RULE_ID = "SPELLER_RULE_DE_DE"
    DICTIONARY_NAME = "de_DE"


class AustrianGermanSpellerRule(SpellerRule):
    RULE_ID = "SPELLER_RULE_DE_AT"
    DICTIONARY_NAME = "de_AT"


class SwissGermanSpellerRule(SpellerRule):
    RULE_ID = "SPELLER_RULE_DE_CH"
    DICTIONARY_NAME = "de_CH"
