"""
LanguageTool Integration for lingcheck
======================================
Optional grammar checking with LanguageTool's rule set, exposed to the
pipeline as the LANGUAGETOOL rule.

Requires: pip install language-tool-python
Note: First run downloads the LanguageTool JAR (~200MB)
"""

__version__ = "1.0.0"

# Lazy imports - one client (and one Java server) per language
_clients = {}


def get_client(language: str = 'en-US'):
    """Get the shared LanguageToolClient for a language (lazy loaded)."""
    if language not in _clients:
        from .client import LanguageToolClient
        from .. import config
        _clients[language] = LanguageToolClient(
            language,
            skip_rules=config.get('languagetool.skip_rules', []),
            max_replacements=config.get('languagetool.max_replacements', 5),
        )
    return _clients[language]


def close_clients():
    """Shut down every LanguageTool server started by this process."""
    for client in _clients.values():
        client.close()
    _clients.clear()


def is_available() -> bool:
    """Check if language-tool-python can be imported."""
    try:
        import language_tool_python  # noqa: F401
        return True
    except ImportError:
        return False


def get_status() -> dict:
    """Get LanguageTool integration status."""
    return {
        'available': is_available(),
        'clients': {language: client.get_status() for language, client in _clients.items()},
    }


def get_rule_class():
    """Get the LanguageToolRule class."""
    from .rule import LanguageToolRule
    return LanguageToolRule
