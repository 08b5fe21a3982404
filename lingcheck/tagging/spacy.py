"""
spaCy Tagger
============
Part-of-speech tagging and lemmatization through a spaCy pipeline.

Features:
- Lazy model loading with fallback models per language
- Blank pipeline fallback (no tags, every token unknown)
- Pre-tokenized input: spaCy never re-tokenizes, so readings stay aligned

Requires: pip install spacy && python -m spacy download en_core_web_sm
"""

from typing import Dict, List, Optional, Sequence, Tuple, Any

from config_logging import get_logger
from ..base import IntegrationBase
from ..tokens import AnalyzedToken
from .base import Tagger

logger = get_logger('lingcheck.tagging')


class SpacyTagger(Tagger, IntegrationBase):
    """
    spaCy-based tagger.

    Designed for offline operation with locally installed models.
    """

    TAGGER_NAME = "spaCy"
    INTEGRATION_NAME = "spaCy"
    INTEGRATION_VERSION = "1.0.0"

    # Model preference order per language (medium first for speed/accuracy balance)
    DEFAULT_MODELS: Dict[str, List[str]] = {
        'en': ["en_core_web_md", "en_core_web_sm", "en_core_web_lg"],
        'de': ["de_core_news_md", "de_core_news_sm", "de_core_news_lg"],
    }

    def __init__(self, language: str = 'en', model_name: Optional[str] = None):
        """
        Initialize SpacyTagger for a language.

        Args:
            language: ISO language code used for model selection and blank fallback
            model_name: spaCy model to try first (e.g., 'en_core_web_sm')
        """
        IntegrationBase.__init__(self)
        self.language = language
        self.model_name = model_name
        self.is_blank = False
        self._nlp = None
        self._spacy = None
        self._load_model()

    def _load_model(self):
        """Load a spaCy model, falling back to a blank pipeline."""
        try:
            import spacy
            self._spacy = spacy
        except ImportError:
            self._error = "spaCy not installed. Run: pip install spacy"
            return

        candidates = list(self.DEFAULT_MODELS.get(self.language, []))
        if self.model_name:
            candidates = [self.model_name] + [m for m in candidates if m != self.model_name]

        for model in candidates:
            try:
                self._nlp = spacy.load(model)
                self.model_name = model
                self._available = True
                return
            except OSError:
                continue

        try:
            self._nlp = spacy.blank(self.language)
        except (ImportError, KeyError, OSError) as e:
            self._error = f"No spaCy model or blank pipeline for '{self.language}': {e}"
            return

        self.model_name = f"blank:{self.language}"
        self.is_blank = True
        self._available = True
        logger.warning(
            "No spaCy model found, tokens will be left untagged",
            language=self.language,
            tried=', '.join(candidates) or 'none',
        )

    @property
    def is_available(self) -> bool:
        """Check if spaCy is available and a pipeline is loaded."""
        return self._available and self._nlp is not None

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the spaCy integration."""
        status = {
            'available': self.is_available,
            'model': self.model_name if self.is_available else None,
            'blank': self.is_blank,
            'version': self._spacy.__version__ if self._spacy else None,
            'error': self._error,
        }

        if self.is_available:
            status['pipeline'] = list(self._nlp.pipe_names)

        return status

    def _analyze(self, tokens: Sequence[str]) -> List[Tuple[AnalyzedToken, ...]]:
        analyses: List[Tuple[AnalyzedToken, ...]] = [() for _ in tokens]
        if not self.is_available:
            return analyses

        # Whitespace and empty tokens never reach spaCy
        positions = [i for i, t in enumerate(tokens) if t and not t.isspace()]
        if not positions:
            return analyses

        from spacy.tokens import Doc
        words = [tokens[i] for i in positions]
        doc = Doc(self._nlp.vocab, words=words, spaces=[False] * len(words))
        for _, component in self._nlp.pipeline:
            doc = component(doc)

        for index, spacy_token in zip(positions, doc):
            tag = spacy_token.tag_ or spacy_token.pos_
            if not tag:
                continue
            lemma = spacy_token.lemma_ or None
            analyses[index] = (AnalyzedToken(tokens[index], tag, lemma),)

        return analyses
