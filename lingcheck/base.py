"""
Integration Base Classes
========================
Common interface for wrappers around third-party NLP libraries
(spaCy, SymSpell, PyEnchant, LanguageTool).

A wrapper never raises because its library is missing. It records the
problem in ``error`` and reports ``is_available == False``; callers decide
what to do with an unavailable integration.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

__version__ = "1.0.0"


class IntegrationBase(ABC):
    """
    Abstract base class for NLP tool integrations.

    Wraps external NLP libraries (spaCy, LanguageTool, etc.).
    """

    INTEGRATION_NAME: str = "NLP Integration"
    INTEGRATION_VERSION: str = "1.0.0"

    def __init__(self):
        self._available = False
        self._error: Optional[str] = None

    @property
    def is_available(self) -> bool:
        """Check if the integration is available and working."""
        return self._available

    @property
    def error(self) -> Optional[str]:
        """Get initialization error if any."""
        return self._error

    @abstractmethod
    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the integration."""
        pass
