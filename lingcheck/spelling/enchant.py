"""
Enchant Dictionary
==================
Dictionary lookup over the system spelling dictionaries (Hunspell,
Aspell, ...) through PyEnchant.

Features:
- One dictionary per language tag (en_US, de_DE, de_CH, ...)
- Personal word list support

Requires: pip install pyenchant
Note: macOS may need: brew install enchant
"""

from typing import Dict, List, Optional, Any, Set, Union
from pathlib import Path

from .dictionary import DictionaryLookup


class EnchantDictionary(DictionaryLookup):
    """
    Wraps one PyEnchant dictionary.
    """

    INTEGRATION_NAME = "PyEnchant"
    INTEGRATION_VERSION = "1.0.0"

    def __init__(
        self,
        language_tag: str = 'en_US',
        personal_dict: Optional[Union[str, Path]] = None
    ):
        """
        Initialize the dictionary.

        Args:
            language_tag: Enchant dictionary tag (e.g. 'de_DE')
            personal_dict: Path to a personal word list
        """
        super().__init__()
        self.language_tag = language_tag
        self.personal_dict = Path(personal_dict) if personal_dict else None

        self._enchant = None
        self._dict = None
        self._personal_words: Set[str] = set()

        self._initialize()

    def _initialize(self):
        """Initialize PyEnchant and open the dictionary."""
        try:
            import enchant
            self._enchant = enchant
        except ImportError as e:
            self._error = f"pyenchant not installed: {e}"
            self._available = False
            return

        try:
            if not enchant.dict_exists(self.language_tag):
                self._error = f"No Enchant dictionary installed for '{self.language_tag}'"
                self._available = False
                return
            self._dict = enchant.Dict(self.language_tag)
        except enchant.errors.Error as e:
            self._error = f"Failed to open dictionary '{self.language_tag}': {e}"
            self._available = False
            return

        if self.personal_dict and self.personal_dict.exists():
            self._load_personal_dictionary()

        self._available = True

    def _load_personal_dictionary(self):
        """Load personal word list."""
        with open(self.personal_dict, 'r', encoding='utf-8') as f:
            for line in f:
                word = line.strip()
                if word and not word.startswith('#'):
                    self._personal_words.add(word)

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the PyEnchant integration."""
        status = {
            'available': self.is_available,
            'error': self._error,
            'language': self.language_tag,
            'personal_words_count': len(self._personal_words),
        }

        if self._enchant is not None:
            status['available_languages'] = self._enchant.list_languages()

        return status

    def contains(self, word: str) -> bool:
        """
        Check if a word is spelled correctly.

        Args:
            word: Word to check

        Returns:
            True if word is in the personal list or the system dictionary
        """
        if word in self._personal_words:
            return True
        if not self.is_available:
            return False
        return self._dict.check(word)

    def suggest(self, word: str) -> List[str]:
        """
        Get spelling suggestions for a word.

        Args:
            word: Misspelled word

        Returns:
            Suggestions in Enchant's order
        """
        if not self.is_available or not word:
            return []
        return list(self._dict.suggest(word))
