"""
Lexicon Tagger
==============
Dictionary-driven tagger backed by a full-form lexicon.

Lexicon file format: one ``form<TAB>lemma<TAB>tag`` entry per line,
``#`` starts a comment. A form may appear on several lines; each line
adds one analysis.
"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from config_logging import get_logger
from ..tokens import AnalyzedToken
from .base import Tagger

logger = get_logger('lingcheck.tagging')

LexiconEntries = Iterable[Tuple[str, str, str]]


class LexiconTagger(Tagger):
    """
    Tag tokens by lexicon lookup.

    The exact surface form is looked up first, then its lower-case form
    (for sentence-initial capitals). Anything else is unknown.
    """

    TAGGER_NAME = "Lexicon"

    def __init__(
        self,
        entries: Optional[LexiconEntries] = None,
        lexicon_file: Optional[Union[str, Path]] = None
    ):
        """
        Initialize the tagger.

        Args:
            entries: (form, lemma, tag) triples
            lexicon_file: Path to a tab-separated lexicon
        """
        self._lexicon: Dict[str, List[Tuple[str, str]]] = defaultdict(list)
        if entries:
            for form, lemma, tag in entries:
                self.add_entry(form, lemma, tag)
        if lexicon_file:
            self.load(lexicon_file)

    def load(self, lexicon_file: Union[str, Path]):
        """Load entries from a tab-separated lexicon file."""
        path = Path(lexicon_file)
        count = 0
        with open(path, 'r', encoding='utf-8') as f:
            for line_no, line in enumerate(f, start=1):
                line = line.rstrip('\n')
                if not line.strip() or line.startswith('#'):
                    continue
                parts = line.split('\t')
                if len(parts) != 3:
                    logger.warning("Skipping malformed lexicon line",
                                   file=str(path), line=line_no)
                    continue
                self.add_entry(*parts)
                count += 1
        logger.debug("Lexicon loaded", file=str(path), entries=count)

    def add_entry(self, form: str, lemma: str, tag: str):
        analysis = (lemma, tag)
        if analysis not in self._lexicon[form]:
            self._lexicon[form].append(analysis)

    def __len__(self) -> int:
        return len(self._lexicon)

    def _lookup(self, token: str) -> Tuple[AnalyzedToken, ...]:
        entries = self._lexicon.get(token)
        if not entries and token != token.lower():
            entries = self._lexicon.get(token.lower())
        if not entries:
            return ()
        return tuple(AnalyzedToken(token, tag, lemma) for lemma, tag in entries)

    def _analyze(self, tokens: Sequence[str]) -> List[Tuple[AnalyzedToken, ...]]:
        return [() if token.isspace() else self._lookup(token) for token in tokens]
