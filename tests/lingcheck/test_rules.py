"""
Tests for Rules
===============
Tests for RuleMatch, the speller rules, word repetition, false friends,
the bitext rules and the LanguageTool rule.
"""

from typing import List

import pytest

from lingcheck.languagetool.client import GrammarMatch
from lingcheck.languagetool.rule import LanguageToolRule
from lingcheck.rules import (
    AmericanEnglishSpellerRule,
    DifferentLengthRule,
    FalseFriendRule,
    GermanyGermanSpellerRule,
    RuleMatch,
    SameTranslationRule,
    SwissGermanSpellerRule,
    WordRepeatBeginningRule,
    WordRepeatRule,
    get_false_friends,
)
from lingcheck.spelling.dictionary import DictionaryLookup
from lingcheck.spelling.symspell import WordListDictionary

from .conftest import analyze


class UnavailableDictionary(DictionaryLookup):
    """Dictionary whose resource could not be opened."""

    def __init__(self):
        super().__init__()
        self._error = "no such dictionary"

    def get_status(self):
        return {'available': False}

    def contains(self, word):
        return False

    def suggest(self, word):
        return []


class FakeLanguageToolClient:
    """Stands in for a running LanguageTool server."""

    is_available = True
    error = None

    def __init__(self, matches: List[GrammarMatch]):
        self.matches = matches

    def check(self, text):
        return self.matches


class TestRuleMatch:
    """Tests for RuleMatch."""

    def test_rejects_negative_start(self):
        with pytest.raises(ValueError):
            RuleMatch("X", -1, 2, "msg")

    def test_rejects_end_before_start(self):
        with pytest.raises(ValueError):
            RuleMatch("X", 5, 4, "msg")

    def test_empty_span_allowed(self):
        assert RuleMatch("X", 3, 3, "msg").length == 0

    def test_shifted(self):
        match = RuleMatch("X", 1, 4, "msg", ["a"]).shifted(10)
        assert (match.start, match.end) == (11, 14)
        assert match.suggestions == ("a",)

    def test_overlaps(self):
        assert RuleMatch("X", 0, 5, "m").overlaps(RuleMatch("Y", 4, 6, "m"))
        assert not RuleMatch("X", 0, 5, "m").overlaps(RuleMatch("Y", 5, 6, "m"))

    def test_to_dict(self):
        data = RuleMatch("X", 2, 6, "msg", ("b",)).to_dict()
        assert data['rule_id'] == "X"
        assert data['length'] == 4
        assert data['suggestions'] == ["b"]


class TestSpellerRule:
    """Tests for the speller rules."""

    @pytest.fixture
    def rule(self):
        return AmericanEnglishSpellerRule(dictionary=WordListDictionary(words=["hello", "world"]))

    def test_flags_unknown_word(self, rule):
        matches = rule.match(analyze("hello wrold"))
        assert len(matches) == 1
        match = matches[0]
        assert (match.start, match.end) == (6, 11)
        assert match.suggestions == ("world",)
        assert match.message == "Possible spelling mistake found."
        assert match.rule_id == "SPELLER_RULE_EN_US"

    def test_known_words_pass(self, rule):
        assert rule.match(analyze("Hello world.")) == []

    def test_numbers_and_punctuation_are_not_words(self, rule):
        assert rule.match(analyze("hello, 12345 world!")) == []

    def test_suggestions_truncated(self):
        dictionary = WordListDictionary(words=["cat", "bat", "hat", "rat"])
        rule = AmericanEnglishSpellerRule(dictionary=dictionary, max_suggestions=2)
        match = rule.match(analyze("zat"))[0]
        assert len(match.suggestions) == 2

    def test_unavailable_dictionary(self):
        rule = GermanyGermanSpellerRule(dictionary=UnavailableDictionary())
        assert not rule.is_available
        assert rule.error == "no such dictionary"
        assert rule.match(analyze("irgendwas")) == []

    def test_variants_have_distinct_ids(self):
        assert GermanyGermanSpellerRule.RULE_ID != SwissGermanSpellerRule.RULE_ID
        assert SwissGermanSpellerRule.DICTIONARY_NAME == "de_CH"

    def test_dictionary_opened_lazily_from_word_list(self, word_list):
        rule = AmericanEnglishSpellerRule(word_list=word_list)
        assert rule.is_available
        assert rule.is_misspelled("wrold")
        assert not rule.is_misspelled("world")


class TestWordRepeatRule:
    """Tests for WordRepeatRule."""

    def test_repeated_word(self):
        matches = WordRepeatRule().match(analyze("This is is a test."))
        assert len(matches) == 1
        assert (matches[0].start, matches[0].end) == (5, 10)
        assert matches[0].suggestions == ("is",)

    def test_match_spans_both_words(self):
        sentence = analyze("Then the the house.")
        match = WordRepeatRule().match(sentence)[0]
        assert sentence.text[match.start:match.end] == "the the"
        fixed = sentence.text[:match.start] + match.suggestions[0] + sentence.text[match.end:]
        assert fixed == "Then the house."

    def test_case_insensitive(self):
        matches = WordRepeatRule().match(analyze("The the house."))
        assert matches[0].suggestions == ("The",)

    def test_allowed_repeat(self):
        assert WordRepeatRule(["had"]).match(analyze("He had had enough.")) == []

    def test_punctuation_between(self):
        assert WordRepeatRule().match(analyze("Well, well.")) == []


class TestWordRepeatBeginningRule:
    """Tests for WordRepeatBeginningRule."""

    def test_third_sentence_flagged(self):
        rule = WordRepeatBeginningRule()
        results = [rule.match(analyze(s)) for s in ("Then he left.", "Then she came.", "Then they went.")]
        assert results[0] == [] and results[1] == []
        assert len(results[2]) == 1
        assert (results[2][0].start, results[2][0].end) == (0, 4)

    def test_reset_clears_history(self):
        rule = WordRepeatBeginningRule()
        rule.match(analyze("Then he left."))
        rule.match(analyze("Then she came."))
        rule.reset()
        assert rule.match(analyze("Then they went.")) == []

    def test_different_word_restarts_count(self):
        rule = WordRepeatBeginningRule()
        for text in ("Then he left.", "Then she came.", "She went.", "Then they went."):
            assert rule.match(analyze(text)) == []


class TestFalseFriendRule:
    """Tests for FalseFriendRule."""

    def test_hint(self):
        rule = FalseFriendRule(get_false_friends("en", "de"), "English", "German")
        matches = rule.match(analyze("I will become a coffee."))
        assert len(matches) == 1
        assert (matches[0].start, matches[0].end) == (7, 13)
        assert matches[0].suggestions == ("get", "receive")
        assert '"become" (English) means "werden" (German)' in matches[0].message

    def test_no_table_for_pair(self):
        assert get_false_friends("en", "be") is None


class TestSameTranslationRule:
    """Tests for SameTranslationRule."""

    def test_long_identical_segment(self):
        text = "This is a long sentence."
        matches = SameTranslationRule().match(analyze(text), analyze(text))
        assert len(matches) == 1
        assert (matches[0].start, matches[0].end) == (0, len(text))
        assert matches[0].message == "Source and target translation are the same!"

    def test_short_segment(self):
        assert SameTranslationRule().match(analyze("Hi."), analyze("Hi.")) == []

    def test_translated_segment(self):
        assert SameTranslationRule().match(
            analyze("Das ist ein langer Satz."), analyze("This is a long sentence.")
        ) == []

    def test_without_target(self):
        assert SameTranslationRule().match(analyze("This is a long sentence.")) == []


class TestDifferentLengthRule:
    """Tests for DifferentLengthRule."""

    def test_target_much_longer(self):
        matches = DifferentLengthRule().match(
            analyze("Hello."), analyze("Hello there, my dear friend, how are you today?")
        )
        assert len(matches) == 1

    def test_target_much_shorter(self):
        matches = DifferentLengthRule().match(
            analyze("Hello there, my dear friend, how are you today?"), analyze("Hi.")
        )
        assert len(matches) == 1

    def test_similar_length(self):
        assert DifferentLengthRule().match(analyze("Guten Morgen."), analyze("Good morning.")) == []

    def test_empty_target(self):
        assert DifferentLengthRule().match(analyze("Hello."), analyze("")) == []


class TestLanguageToolRule:
    """Tests for LanguageToolRule with a stand-in client."""

    def test_off_by_default(self):
        assert LanguageToolRule.DEFAULT_ENABLED is False

    def test_converts_matches(self):
        client = FakeLanguageToolClient([
            GrammarMatch("Use 'an'", 8, 1, "EN_A_VS_AN", "GRAMMAR", ["an"]),
        ])
        rule = LanguageToolRule(client=client)
        matches = rule.match(analyze("This is a apple."))
        assert len(matches) == 1
        match = matches[0]
        assert (match.start, match.end) == (8, 9)
        assert match.rule_id == "LANGUAGETOOL"
        assert match.suggestions == ("an",)
        assert "EN_A_VS_AN" in match.description

    def test_drops_out_of_range_matches(self):
        client = FakeLanguageToolClient([GrammarMatch("x", 50, 3, "R", "MISC")])
        assert LanguageToolRule(client=client).match(analyze("Short.")) == []

    def test_real_server(self):
        pytest.importorskip("language_tool_python")
        from lingcheck.languagetool.client import LanguageToolClient
        client = LanguageToolClient("en-US")
        if not client.is_available:
            pytest.skip(f"LanguageTool not available: {client.error}")
        try:
            matches = LanguageToolRule(client=client).match(analyze("This is a apple."))
            assert any("an" in m.suggestions for m in matches)
        finally:
            client.close()
