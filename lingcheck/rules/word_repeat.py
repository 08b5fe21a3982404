"""
Word Repetition Rules
=====================
- WordRepeatRule: the same word twice in a row ("the the")
- WordRepeatBeginningRule: successive sentences opening with the same word
"""

from typing import Iterable, List, Optional

from ..tokens import AnalyzedSentence
from .base import Rule, RuleMatch


class WordRepeatRule(Rule):
    """
    Flags a word immediately repeated after whitespace.

    The match covers both words; the suggestion keeps one.
    """

    RULE_ID = "WORD_REPEAT_RULE"
    DESCRIPTION = "Word repetition (e.g. 'will will')"
    MESSAGE = "Possible typo: you repeated a word"
    SHORT_MESSAGE = "Word repetition"

    def __init__(self, allowed_repeats: Iterable[str] = ()):
        """
        Args:
            allowed_repeats: Lower-case words that may legitimately repeat
                (e.g. English "had had")
        """
        self.allowed_repeats = {w.lower() for w in allowed_repeats}

    def match(self, sentence: AnalyzedSentence) -> List[RuleMatch]:
        matches = []
        previous = None
        for token in sentence.tokens:
            if token.is_whitespace:
                continue
            if (
                previous is not None
                and token.is_word
                and previous.is_word
                and token.token.lower() == previous.token.lower()
                and token.token.lower() not in self.allowed_repeats
            ):
                matches.append(self.create_match(
                    previous.start_pos, token.end_pos, self.MESSAGE,
                    [previous.token], self.SHORT_MESSAGE
                ))
            previous = token
        return matches


class WordRepeatBeginningRule(Rule):
    """
    Flags a sentence that starts with the same word as the two before it.

    Keeps the opening words of previous sentences, so it must be reset
    between documents.
    """

    RULE_ID = "WORD_REPEAT_BEGINNING_RULE"
    DESCRIPTION = "Successive sentences beginning with the same word"
    MESSAGE = ("Three successive sentences begin with the same word. Consider "
               "rewording the sentence or use a thesaurus to find a synonym.")

    REPEATS_BEFORE_MATCH = 2

    def __init__(self):
        self._last_word: Optional[str] = None
        self._repeat_count = 0

    def reset(self):
        self._last_word = None
        self._repeat_count = 0

    def match(self, sentence: AnalyzedSentence) -> List[RuleMatch]:
        words = sentence.words
        if not words:
            return []

        first = words[0]
        word = first.token.lower()
        if word == self._last_word:
            self._repeat_count += 1
        else:
            self._last_word = word
            self._repeat_count = 0

        if self._repeat_count >= self.REPEATS_BEFORE_MATCH:
            return [self.match_token(first, self.MESSAGE)]
        return []
