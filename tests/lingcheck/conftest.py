"""Shared fixtures: offline settings and small analyzed sentences."""

import pytest

from lingcheck import spelling
from lingcheck.config import LingCheckSettings, SpellingConfig, TaggingConfig
from lingcheck.tagging import UntaggedTagger
from lingcheck.tokenizing import WordTokenizer
from lingcheck.tokens import AnalyzedSentence

WORDS = [
    "this", "is", "a", "test", "hello", "world", "the", "house",
    "then", "he", "left", "she", "came", "they", "went", "ok",
]


@pytest.fixture(autouse=True)
def fresh_dictionaries():
    """Dictionaries are shared per process; start every test without them."""
    spelling.clear_cache()
    yield
    spelling.clear_cache()


@pytest.fixture
def word_list(tmp_path):
    """Path of a small English word list."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def settings(word_list) -> LingCheckSettings:
    """Settings that need no spaCy model and no system dictionary."""
    return LingCheckSettings(
        tagging=TaggingConfig(use_spacy=False),
        spelling=SpellingConfig(word_list=word_list),
    )


def analyze(text: str, offset: int = 0, tagger=None) -> AnalyzedSentence:
    """Tokenize and tag one sentence."""
    tagger = tagger or UntaggedTagger()
    readings = tagger.tag(WordTokenizer().tokenize(text))
    return AnalyzedSentence(tuple(readings), offset, text)
