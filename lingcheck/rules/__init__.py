"""
Rules for lingcheck
===================
- Rule / BitextRule: the two rule contracts
- RuleMatch: what a rule reports
- Concrete rules: word repetition, false friends, spelling, bitext QA

The LanguageTool rule lives in ``lingcheck.languagetool``.
"""

__version__ = "1.0.0"

from .base import Rule, BitextRule, RuleMatch
from .bitext import SameTranslationRule, DifferentLengthRule
from .false_friends import FalseFriendRule, get_false_friends
from .spelling import (
    SpellerRule,
    AmericanEnglishSpellerRule,
    BritishEnglishSpellerRule,
    GermanyGermanSpellerRule,
    AustrianGermanSpellerRule,
    SwissGermanSpellerRule,
)
from .word_repeat import WordRepeatRule, WordRepeatBeginningRule

__all__ = [
    'Rule',
    'BitextRule',
    'RuleMatch',
    'SameTranslationRule',
    'DifferentLengthRule',
    'FalseFriendRule',
    'get_false_friends',
    'SpellerRule',
    'AmericanEnglishSpellerRule',
    'BritishEnglishSpellerRule',
    'GermanyGermanSpellerRule',
    'AustrianGermanSpellerRule',
    'SwissGermanSpellerRule',
    'WordRepeatRule',
    'WordRepeatBeginningRule',
]
