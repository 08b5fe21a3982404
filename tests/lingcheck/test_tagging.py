"""
Tests for Taggers
=================
Tests for the tagger contract, the lexicon tagger and the spaCy tagger.
"""

import pytest

from lingcheck.tagging import LexiconTagger, Tagger, UntaggedTagger


@pytest.fixture
def lexicon_tagger() -> LexiconTagger:
    """Lexicon tagger with an ambiguous entry."""
    return LexiconTagger(entries=[
        ("the", "the", "DT"),
        ("walks", "walk", "VBZ"),
        ("walks", "walk", "NNS"),
    ])


class BrokenTagger(Tagger):
    """Returns one analysis too few."""

    def _analyze(self, tokens):
        return [() for _ in tokens][1:]

    def __init__(self):
        self.null_tokens = []

    def create_null_token(self, token, start_pos):
        self.null_tokens.append((token, start_pos))
        return super().create_null_token(token, start_pos)


class TestTaggerContract:
    """Tests shared by every tagger."""

    def test_one_reading_per_token(self):
        readings = UntaggedTagger().tag(["Hello", " ", "world", "."])
        assert [r.token for r in readings] == ["Hello", " ", "world", "."]

    def test_offsets_are_running_sum(self):
        readings = UntaggedTagger().tag(["Hello", " ", "world", "."])
        assert [r.start_pos for r in readings] == [0, 5, 6, 11]

    def test_untagged_readings_are_unknown(self):
        readings = UntaggedTagger().tag(["Hello", " ", "world"])
        assert all(r.is_unknown for r in readings)

    def test_wrong_analysis_count_degrades_to_null_readings(self):
        tagger = BrokenTagger()
        readings = tagger.tag(["a", " ", "b"])
        assert len(readings) == 3
        assert all(r.is_unknown for r in readings)
        assert tagger.null_tokens == [("a", 0), (" ", 1), ("b", 2)]

    def test_empty_punctuation_and_unknown_tokens(self):
        readings = UntaggedTagger().tag(["", ".", "xyzzy"])
        assert [r.token for r in readings] == ["", ".", "xyzzy"]
        assert [r.start_pos for r in readings] == [0, 0, 1]
        assert all(r.is_unknown for r in readings)

    def test_empty_input(self):
        assert UntaggedTagger().tag([]) == []

    def test_token_factories(self):
        tagger = UntaggedTagger()
        assert tagger.create_null_token("x", 3).is_unknown
        token = tagger.create_token("runs", "VBZ", "run")
        assert (token.pos_tag, token.lemma) == ("VBZ", "run")


class TestLexiconTagger:
    """Tests for LexiconTagger."""

    def test_exact_lookup(self, lexicon_tagger):
        reading = lexicon_tagger.tag(["the"])[0]
        assert reading.pos_tags == ["DT"]

    def test_lower_case_fallback(self, lexicon_tagger):
        reading = lexicon_tagger.tag(["The"])[0]
        assert reading.pos_tags == ["DT"]
        assert reading.analyses[0].token == "The"

    def test_ambiguous_form(self, lexicon_tagger):
        reading = lexicon_tagger.tag(["walks"])[0]
        assert reading.pos_tags == ["VBZ", "NNS"]
        assert reading.lemmas == ["walk", "walk"]

    def test_empty_punctuation_and_unknown_tokens(self, lexicon_tagger):
        lexicon_tagger.add_entry(".", ".", "SENT")
        readings = lexicon_tagger.tag(["", ".", "xyzzy"])
        assert len(readings) == 3
        assert readings[0].is_unknown
        assert readings[1].pos_tags == ["SENT"]
        assert readings[2].is_unknown

    def test_unknown_and_whitespace(self, lexicon_tagger):
        readings = lexicon_tagger.tag(["blorf", " "])
        assert readings[0].is_unknown
        assert readings[1].is_unknown

    def test_load_file_skips_malformed_lines(self, tmp_path):
        path = tmp_path / "lexicon.tsv"
        path.write_text(
            "# form\tlemma\ttag\n"
            "houses\thouse\tNNS\n"
            "broken line\n"
            "\n"
            "went\tgo\tVBD\n",
            encoding="utf-8",
        )
        tagger = LexiconTagger(lexicon_file=path)
        assert len(tagger) == 2
        assert tagger.tag(["went"])[0].lemmas == ["go"]

    def test_duplicate_entries_collapse(self):
        tagger = LexiconTagger(entries=[("a", "a", "DT"), ("a", "a", "DT")])
        assert len(tagger.tag(["a"])[0].analyses) == 1


class TestSpacyTagger:
    """Tests for SpacyTagger (skipped without spaCy)."""

    def test_tag_keeps_alignment(self):
        pytest.importorskip("spacy")
        from lingcheck.tagging import get_spacy_tagger
        tagger = get_spacy_tagger("en")
        if not tagger.is_available:
            pytest.skip("No spaCy pipeline for English")

        readings = tagger.tag(["The", " ", "house", " ", "stands", "."])
        assert [r.start_pos for r in readings] == [0, 3, 4, 9, 10, 16]
        assert readings[1].is_unknown
        if not tagger.is_blank:
            assert not readings[2].is_unknown

    def test_empty_punctuation_and_unknown_tokens(self):
        pytest.importorskip("spacy")
        from lingcheck.tagging import get_spacy_tagger
        tagger = get_spacy_tagger("en")
        if not tagger.is_available:
            pytest.skip("No spaCy pipeline for English")

        readings = tagger.tag(["", ".", "xyzzy"])
        assert [r.start_pos for r in readings] == [0, 0, 1]
        assert readings[0].is_unknown
        if tagger.is_blank:
            assert readings[2].is_unknown

    def test_status(self):
        pytest.importorskip("spacy")
        from lingcheck.tagging import get_spacy_tagger
        status = get_spacy_tagger("en").get_status()
        assert 'available' in status
        assert 'model' in status
