"""
Spelling Dictionaries for lingcheck
===================================
Dictionary Lookup back ends used by the speller rules.

Features:
- PyEnchant: system Hunspell/Aspell dictionaries per language variant
- SymSpell: custom word lists with fast edit-distance suggestions

Requires: pip install symspellpy pyenchant
"""

__version__ = "1.0.0"

from .dictionary import DictionaryLookup

# Dictionaries are opened once and shared; lookups are read-only
_dictionaries = {}


def open_dictionary(
    name: str,
    word_list: str = None,
    max_edit_distance: int = 2,
    personal_dict: str = None
):
    """
    Get the shared dictionary for a resource name (lazy loaded).

    Args:
        name: Enchant language tag (e.g. 'de_DE')
        word_list: Optional word list path; when given it replaces the
            system dictionary with a SymSpell word-list dictionary
        personal_dict: Words accepted on top of the system dictionary

    Returns:
        A DictionaryLookup, possibly unavailable (check ``is_available``)
    """
    key = (name, word_list, personal_dict)
    if key not in _dictionaries:
        if word_list:
            from .symspell import WordListDictionary
            _dictionaries[key] = WordListDictionary(
                word_file=word_list, max_edit_distance=max_edit_distance
            )
        else:
            from .enchant import EnchantDictionary
            _dictionaries[key] = EnchantDictionary(name, personal_dict)
    return _dictionaries[key]


def clear_cache():
    """Forget all shared dictionaries (for testing)."""
    _dictionaries.clear()


def is_available() -> bool:
    """Check if at least one dictionary back end can be imported."""
    for module in ('symspellpy', 'enchant'):
        try:
            __import__(module)
            return True
        except ImportError:
            continue
    return False


def get_status() -> dict:
    """Get spelling integration status."""
    return {
        'available': is_available(),
        'dictionaries': {
            f"{name}{' (' + word_list + ')' if word_list else ''}": dictionary.get_status()
            for (name, word_list, _), dictionary in _dictionaries.items()
        },
    }


__all__ = ['DictionaryLookup', 'open_dictionary', 'clear_cache', 'is_available', 'get_status']
