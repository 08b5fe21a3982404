"""
False Friend Rule
=================
Hints for words that look like a word of the writer's mother tongue but
mean something else. Only active when a mother tongue is configured and
a table exists for the (text language, mother tongue) pair.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from ..tokens import AnalyzedSentence
from .base import Rule, RuleMatch

# word (lower case) -> (its meaning in the mother tongue, suggested words)
FalseFriendTable = Dict[str, Tuple[str, Sequence[str]]]

FALSE_FRIENDS: Dict[Tuple[str, str], FalseFriendTable] = {
    ('en', 'de'): {
        'become': ('werden', ['get', 'receive']),
        'gift': ('Geschenk', ['poison']),
        'handy': ('praktisch', ['mobile phone']),
        'chef': ('Koch', ['boss']),
        'eventually': ('schließlich', ['possibly', 'perhaps']),
        'actual': ('tatsächlich', ['current']),
        'sensible': ('vernünftig', ['sensitive']),
        'brave': ('mutig', ['well-behaved']),
        'map': ('Landkarte', ['folder']),
    },
    ('de', 'en'): {
        'bekommen': ('get, receive', ['werden']),
        'gift': ('poison', ['Geschenk']),
        'eventuell': ('possibly', ['schließlich']),
        'aktuell': ('current', ['tatsächlich']),
        'sensibel': ('sensitive', ['vernünftig']),
        'chef': ('boss', ['Koch']),
        'handy': ('mobile phone', ['praktisch']),
    },
}


def get_false_friends(language: str, mother_tongue: str) -> Optional[FalseFriendTable]:
    """Return the table for a language pair, or None if there is none."""
    return FALSE_FRIENDS.get((language, mother_tongue))


class FalseFriendRule(Rule):
    """Flags words with a misleading look-alike in the mother tongue."""

    RULE_ID = "FALSE_FRIENDS"
    DESCRIPTION = "False friends: words that look alike in two languages"
    SHORT_MESSAGE = "False friend"

    def __init__(
        self,
        table: FalseFriendTable,
        language_name: str,
        mother_tongue_name: str
    ):
        """
        Args:
            table: Entries for one (text language, mother tongue) pair
            language_name: Display name of the text language
            mother_tongue_name: Display name of the mother tongue
        """
        self.table = {word.lower(): entry for word, entry in table.items()}
        self.language_name = language_name
        self.mother_tongue_name = mother_tongue_name

    def match(self, sentence: AnalyzedSentence) -> List[RuleMatch]:
        matches = []
        for token in sentence.words:
            entry = self.table.get(token.token.lower())
            if entry is None:
                continue
            meaning, suggestions = entry
            message = (
                f'Hint: "{token.token}" ({self.language_name}) means "{meaning}" '
                f'({self.mother_tongue_name}). Did you mean '
                + ' or '.join(f'"{s}"' for s in suggestions) + '?'
            )
            matches.append(self.match_token(token, message, suggestions, self.SHORT_MESSAGE))
        return matches
