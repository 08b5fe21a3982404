"""
Tagging for lingcheck
=====================
Per-language taggers behind one contract:
- UntaggedTagger: unknown readings only
- LexiconTagger: full-form lexicon lookup
- SpacyTagger: spaCy POS tags and lemmas

Requires (SpacyTagger only): pip install spacy
"""

__version__ = "1.0.0"

from .base import Tagger, UntaggedTagger
from .lexicon import LexiconTagger

# Shared spaCy taggers, one per (language, model)
_spacy_taggers = {}


def get_spacy_tagger(language: str, model_name: str = None):
    """Get the shared SpacyTagger for a language (lazy loaded)."""
    key = (language, model_name)
    if key not in _spacy_taggers:
        from .spacy import SpacyTagger
        _spacy_taggers[key] = SpacyTagger(language, model_name)
    return _spacy_taggers[key]


def is_available() -> bool:
    """Check if spaCy tagging is available."""
    try:
        import spacy  # noqa: F401
        return True
    except ImportError:
        return False


def get_status() -> dict:
    """Get tagging integration status."""
    return {
        'available': is_available(),
        'loaded': {
            f"{language}:{model or 'default'}": tagger.get_status()
            for (language, model), tagger in _spacy_taggers.items()
        },
    }


__all__ = [
    'Tagger',
    'UntaggedTagger',
    'LexiconTagger',
    'get_spacy_tagger',
    'is_available',
    'get_status',
]
