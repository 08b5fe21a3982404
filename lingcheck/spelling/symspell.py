"""
SymSpell Word-List Dictionary
=============================
Dictionary lookup over a plain word list, with SymSpell providing the
ranked suggestions.

Features:
- Edit distance suggestions ranked by distance, then word frequency
- Word list file support (``word`` or ``word<TAB>count`` per line)
- Case-insensitive recognition of sentence-initial capitals

Requires: pip install symspellpy
"""

from typing import Dict, Iterable, List, Optional, Any, Set, Union
from pathlib import Path

from config_logging import get_logger
from .dictionary import DictionaryLookup, match_case

logger = get_logger('lingcheck.spelling')


class WordListDictionary(DictionaryLookup):
    """
    SymSpell-backed dictionary built from a word list.
    """

    INTEGRATION_NAME = "SymSpell"
    INTEGRATION_VERSION = "1.0.0"

    DEFAULT_FREQUENCY = 1

    def __init__(
        self,
        words: Optional[Iterable[str]] = None,
        word_file: Optional[Union[str, Path]] = None,
        max_edit_distance: int = 2,
        prefix_length: int = 7
    ):
        """
        Initialize the dictionary.

        Args:
            words: Words to load directly
            word_file: Path to a word list file
            max_edit_distance: Maximum edit distance for suggestions (1-3)
            prefix_length: Length of prefix SymSpell indexes
        """
        super().__init__()
        self.max_edit_distance = max_edit_distance
        self.prefix_length = prefix_length
        self.word_file = Path(word_file) if word_file else None

        self._sym_spell = None
        self._words: Set[str] = set()
        self._load(words or ())

    def _load(self, words: Iterable[str]):
        """Create the SymSpell index and load the words."""
        try:
            from symspellpy import SymSpell, Verbosity
            self._Verbosity = Verbosity

            self._sym_spell = SymSpell(
                max_dictionary_edit_distance=self.max_edit_distance,
                prefix_length=self.prefix_length
            )
        except ImportError as e:
            self._error = f"symspellpy not installed: {e}"
            self._available = False
            return

        for word in words:
            self.add_word(word)

        if self.word_file:
            self._load_word_file()

        self._available = True

    def _load_word_file(self):
        """Load a word list, one entry per line, optional tab-separated count."""
        with open(self.word_file, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                word, _, count = line.partition('\t')
                frequency = int(count) if count.strip().isdigit() else self.DEFAULT_FREQUENCY
                self.add_word(word, frequency)
        logger.debug("Word list loaded", file=str(self.word_file), words=len(self._words))

    def add_word(self, word: str, frequency: int = DEFAULT_FREQUENCY):
        """
        Add a word to the dictionary.

        Args:
            word: Word to add
            frequency: Word frequency (higher = ranked earlier among equal distances)
        """
        word = word.strip()
        if not word:
            return
        self._words.add(word)
        if self._sym_spell is not None:
            self._sym_spell.create_dictionary_entry(word.lower(), frequency)

    def __len__(self) -> int:
        return len(self._words)

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the SymSpell dictionary."""
        return {
            'available': self.is_available,
            'error': self._error,
            'max_edit_distance': self.max_edit_distance,
            'word_file': str(self.word_file) if self.word_file else None,
            'dictionary_size': len(self._words),
        }

    def contains(self, word: str) -> bool:
        """
        Check if a word is in the dictionary.

        Exact form first, then the lower-case form for capitalised words.
        """
        if word in self._words:
            return True
        return word[:1].isupper() and word.lower() in self._words

    def suggest(self, word: str) -> List[str]:
        """
        Get ranked suggestions for a word.

        Args:
            word: Word to look up

        Returns:
            Suggestions ordered by edit distance, then frequency
        """
        if not self.is_available or not word:
            return []

        suggestions = self._sym_spell.lookup(
            word.lower(),
            self._Verbosity.ALL,
            max_edit_distance=self.max_edit_distance,
        )

        results: List[str] = []
        for item in suggestions:
            if item.distance == 0:
                continue
            candidate = match_case(word, item.term)
            if candidate not in results:
                results.append(candidate)
        return results
