"""
lingcheck
=========
Version: 1.0.0

Rule-based linguistic checking: tag text, run grammar, style and
spelling rules over it, and report position-accurate matches with
suggestions. Supports monotext checking and bitext translation QA.

Integrations:
- spaCy: part-of-speech tags and lemmas
- SymSpell/Enchant: spelling dictionaries
- LanguageTool: optional extra grammar rules

Uses lazy loading - integrations only import when accessed.
"""

__version__ = "1.0.0"
__author__ = "lingcheck"

_MODULES = {
    'tagging': 'lingcheck.tagging',
    'spelling': 'lingcheck.spelling',
    'languagetool': 'lingcheck.languagetool',
}

_EXPORTS = {
    'Pipeline': 'lingcheck.pipeline',
    'CheckResult': 'lingcheck.pipeline',
    'CheckingConfiguration': 'lingcheck.config',
    'LanguageProfile': 'lingcheck.languages',
    'get_language': 'lingcheck.languages',
    'MatchAggregator': 'lingcheck.aggregator',
    'ApplyResult': 'lingcheck.aggregator',
    'RuleMatch': 'lingcheck.rules.base',
}

_loaded_modules = {}


def __getattr__(name):
    """Lazy load submodules and main classes on first access."""
    import importlib
    if name in _MODULES:
        if name not in _loaded_modules:
            _loaded_modules[name] = importlib.import_module(_MODULES[name])
        return _loaded_modules[name]
    if name in _EXPORTS:
        return getattr(importlib.import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module 'lingcheck' has no attribute '{name}'")


def __dir__():
    return list(_MODULES) + list(_EXPORTS) + ['get_status']


def get_status():
    """
    Get status of all integrations.

    Returns dict with availability info for each module.
    """
    status = {
        'version': __version__,
        'modules': {}
    }
    for name in _MODULES:
        status['modules'][name] = __getattr__(name).get_status()
    return status
