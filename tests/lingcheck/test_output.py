"""
Tests for Output Formatting
===========================
"""

from xml.etree import ElementTree as ET

from lingcheck.languages import get_language
from lingcheck.aggregator import ApplyResult
from lingcheck.output import (
    format_apply_result,
    format_profile,
    format_reading,
    format_tagged_sentences,
    format_text_report,
    format_xml,
    get_context,
    line_and_column,
)
from lingcheck.pipeline import CheckResult
from lingcheck.rules.base import RuleMatch
from lingcheck.tokens import AnalyzedToken, AnalyzedTokenReadings

from .conftest import analyze


class TestPositions:
    """Tests for line/column and context helpers."""

    def test_first_line(self):
        assert line_and_column("abc", 2) == (0, 2)

    def test_later_line(self):
        assert line_and_column("ab\ncd\nef", 7) == (2, 1)

    def test_context_short_text(self):
        context, offset = get_context("Hello world.", 6, 11)
        assert context == "Hello world."
        assert offset == 6

    def test_context_truncated(self):
        text = "x" * 100 + "ERROR" + "y" * 100
        context, offset = get_context(text, 100, 105, context_size=10)
        assert context == "..." + "x" * 10 + "ERROR" + "y" * 10 + "..."
        assert context[offset:offset + 5] == "ERROR"

    def test_context_on_one_line(self):
        context, _ = get_context("one\ntwo", 4, 7)
        assert context == "one two"


class TestTextReport:
    """Tests for format_text_report()."""

    def test_no_matches(self):
        assert format_text_report(CheckResult(text="Fine.")) == "No errors found."

    def test_match_entry(self):
        text = "Line one.\nIt is is here."
        match = RuleMatch("WORD_REPEAT_RULE", 13, 18, "Repeated word", ("is",))
        report = format_text_report(CheckResult(text=text, matches=[match]))
        lines = report.splitlines()
        assert lines[0] == "1.) Line 2, column 4, Rule ID: WORD_REPEAT_RULE"
        assert lines[1] == "Message: Repeated word"
        assert lines[2] == "Suggestion: is"
        assert lines[4] == " " * 13 + "^" * 5


class TestApplyResult:
    """Tests for format_apply_result()."""

    def test_clean_apply_is_just_the_text(self):
        assert format_apply_result(ApplyResult(text="Fixed."), "Fixd.") == "Fixed."

    def test_residual_matches_and_conflicts(self):
        text = "It is is here. So so."
        residual = RuleMatch("STYLE", 15, 17, "Weak opener")
        lost = RuleMatch("OTHER", 6, 10, "Overlap", ("x",))
        rendered = format_apply_result(
            ApplyResult(text="It is here. So so.", unapplied=[residual], conflicts=[lost]),
            text,
        )
        assert rendered.startswith("It is here. So so.\n\nMatches without a suggestion:")
        # Residual positions refer to the input text
        assert "1.) Line 1, column 16, Rule ID: STYLE" in rendered
        assert rendered.endswith("Conflicts: 1 overlapping suggestions not applied")


class TestXml:
    """Tests for format_xml()."""

    def test_attributes(self):
        text = "ab\ncd teh"
        match = RuleMatch("SPELLER_RULE_EN_US", 6, 9, "Possible spelling mistake found.",
                          ("the", "ten"), "Spelling mistake", "Possible spelling mistake")
        xml = format_xml(CheckResult(text=text, matches=[match]), get_language('en-US'))
        root = ET.fromstring(xml.split('\n', 1)[1])
        assert root.tag == 'matches'
        assert root.get('language') == 'en-US'
        error = root.find('error')
        assert error.get('fromy') == "1"
        assert error.get('fromx') == "3"
        assert error.get('toy') == "1"
        assert error.get('tox') == "6"
        assert error.get('replacements') == "the#ten"
        assert error.get('shortmsg') == "Spelling mistake"
        assert error.get('context') == "ab cd teh"
        assert error.get('contextoffset') == "6"

    def test_escaping(self):
        match = RuleMatch("R", 0, 1, 'Use "quotes" & <tags>')
        xml = format_xml(CheckResult(text="x", matches=[match]))
        root = ET.fromstring(xml.split('\n', 1)[1])
        assert root.find('error').get('msg') == 'Use "quotes" & <tags>'

    def test_empty(self):
        xml = format_xml(CheckResult(text="ok"))
        root = ET.fromstring(xml.split('\n', 1)[1])
        assert root.findall('error') == []


class TestTaggedOutput:
    """Tests for tagger-only rendering."""

    def test_reading_with_lemma(self):
        reading = AnalyzedTokenReadings("walks", 0, (
            AnalyzedToken("walks", "VBZ", "walk"),
            AnalyzedToken("walks", "NNS", "walk"),
        ))
        assert format_reading(reading) == "walks[walk/VBZ,walk/NNS]"

    def test_reading_without_lemma(self):
        reading = AnalyzedTokenReadings("the", 0, (AnalyzedToken("the", "DT"),))
        assert format_reading(reading) == "the[DT]"

    def test_sentences(self):
        output = format_tagged_sentences([analyze("Hi there."), analyze("Bye.")])
        assert output == "Hi[?] there[?] .[?]\nBye[?] .[?]"


class TestProfile:
    """Tests for format_profile()."""

    def test_slowest_first(self):
        result = CheckResult(text="abc", sentences=[analyze("abc")],
                             timings={'FAST': 0.001, 'SLOW': 0.01})
        lines = format_profile(result).splitlines()
        assert lines[0] == "Profile: 1 sentences, 3 characters"
        assert lines[1].strip().startswith("SLOW")
        assert lines[-1].strip() == "total: 11.00 ms"
