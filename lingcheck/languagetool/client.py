"""
LanguageTool Client for lingcheck
=================================
Wraps the language_tool_python library.

Features:
- One local server per language, started on first use
- Rule filtering (LanguageTool rule ids to skip)
- Match conversion to a plain dataclass

Requires: pip install language-tool-python
Note: First run downloads the LanguageTool JAR (~200MB) and needs Java
"""

from typing import List, Dict, Any, Iterable, Set
from dataclasses import dataclass, field

from config_logging import get_logger
from ..base import IntegrationBase

logger = get_logger('lingcheck.languagetool')


@dataclass
class GrammarMatch:
    """Represents a grammar issue found by LanguageTool."""
    message: str
    offset: int
    length: int
    rule_id: str
    category: str
    replacements: List[str] = field(default_factory=list)
    context: str = ""


class LanguageToolClient(IntegrationBase):
    """
    LanguageTool integration for one language.

    Runs a local Java server, no internet required after installation.
    """

    INTEGRATION_NAME = "LanguageTool"
    INTEGRATION_VERSION = "1.0.0"

    # Already covered by lingcheck's own rules
    DEFAULT_SKIP_RULES: Set[str] = {
        'WHITESPACE_RULE',
        'ENGLISH_WORD_REPEAT_RULE',
        'GERMAN_WORD_REPEAT_RULE',
        'ENGLISH_WORD_REPEAT_BEGINNING_RULE',
        'GERMAN_WORD_REPEAT_BEGINNING_RULE',
    }

    def __init__(
        self,
        language: str = 'en-US',
        skip_rules: Iterable[str] = (),
        max_replacements: int = 5
    ):
        """
        Initialize LanguageTool client.

        Args:
            language: LanguageTool language code (e.g. 'en-US', 'de-CH')
            skip_rules: Additional LanguageTool rule ids to drop
            max_replacements: Replacements kept per match
        """
        super().__init__()
        self.language = language
        self.max_replacements = max_replacements
        self.skip_rules = set(self.DEFAULT_SKIP_RULES) | set(skip_rules)
        self._tool = None
        self._init_tool()

    def _init_tool(self):
        """Initialize LanguageTool (starts local Java server)."""
        try:
            import language_tool_python
        except ImportError as e:
            self._error = f"language-tool-python not installed: {e}"
            return

        try:
            self._tool = language_tool_python.LanguageTool(
                self.language,
                config={'cacheSize': 1000, 'pipelineCaching': True}
            )
            self._available = True
        except Exception as e:
            # Missing Java, failed download, unsupported language...
            self._error = f"LanguageTool initialization failed: {e}"
            logger.warning("LanguageTool unavailable", language=self.language, error=str(e))

    @property
    def is_available(self) -> bool:
        return self._available and self._tool is not None

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the LanguageTool integration."""
        return {
            'available': self.is_available,
            'language': self.language if self.is_available else None,
            'error': self._error,
            'skipped_rules': sorted(self.skip_rules),
        }

    def check(self, text: str) -> List[GrammarMatch]:
        """
        Check text for grammar issues.

        Args:
            text: Text to check

        Returns:
            List of GrammarMatch objects, offsets relative to ``text``
        """
        if not self.is_available or not text.strip():
            return []

        issues = []
        for match in self._tool.check(text):
            if match.ruleId in self.skip_rules:
                continue
            issues.append(GrammarMatch(
                message=match.message,
                offset=match.offset,
                length=match.errorLength,
                rule_id=match.ruleId,
                category=getattr(match, 'category', None) or 'MISC',
                replacements=list(match.replacements or [])[:self.max_replacements],
                context=getattr(match, 'context', '') or '',
            ))
        return issues

    def close(self):
        """Shut down the LanguageTool server."""
        if self._tool is not None:
            self._tool.close()
            self._tool = None
            self._available = False
