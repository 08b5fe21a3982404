"""
lingcheck Configuration Module
==============================
Two layers of configuration:

1. Settings for the integrations (tagging, spelling, LanguageTool,
   logging), set via:
   - Environment variables (LINGCHECK_SPELLING_WORD_LIST=words.txt)
   - Config file (lingcheck_config.json)
   - Direct API calls (config.set('spelling.max_suggestions', 3))
2. CheckingConfiguration: what one checking session does (language,
   rule toggles, mode flags). Built by the command line or a host
   program and validated before any text is touched.

All settings have defaults that work offline.
"""

import os
import json
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional
from dataclasses import dataclass, field, asdict

from config_logging import ConfigurationError, get_logger

__version__ = "1.0.0"

logger = get_logger('lingcheck.config')

# Default configuration path (override with LINGCHECK_CONFIG_FILE)
CONFIG_FILE = Path(os.environ.get('LINGCHECK_CONFIG_FILE', 'lingcheck_config.json'))


@dataclass
class TaggingConfig:
    """Tagger configuration."""
    use_spacy: bool = True
    spacy_model: Optional[str] = None  # None = per-language default list
    lexicon_file: Optional[str] = None  # replaces spaCy when set


@dataclass
class SpellingConfig:
    """Speller rule configuration."""
    enabled: bool = True
    max_suggestions: int = 5
    max_edit_distance: int = 2
    word_list: Optional[str] = None  # SymSpell word list instead of Enchant
    personal_dictionary: Optional[str] = None  # extra accepted words (Enchant)


@dataclass
class LanguageToolConfig:
    """LanguageTool configuration."""
    skip_rules: list = field(default_factory=list)
    max_replacements: int = 5


@dataclass
class LoggingConfig:
    """Logging overrides applied on top of LINGCHECK_LOG_* settings."""
    level: Optional[str] = None


@dataclass
class LingCheckSettings:
    """Master settings."""
    tagging: TaggingConfig = field(default_factory=TaggingConfig)
    spelling: SpellingConfig = field(default_factory=SpellingConfig)
    languagetool: LanguageToolConfig = field(default_factory=LanguageToolConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global settings instance
_settings: Optional[LingCheckSettings] = None


def get_settings() -> LingCheckSettings:
    """Get the global settings."""
    global _settings
    if _settings is None:
        _settings = _load_settings()
    return _settings


def _load_settings() -> LingCheckSettings:
    """Load settings from file and environment."""
    settings = LingCheckSettings()

    if CONFIG_FILE.exists():
        try:
            with open(CONFIG_FILE, 'r', encoding='utf-8') as f:
                file_config = json.load(f)
            _apply_dict_to_settings(settings, file_config)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load config file", file=str(CONFIG_FILE), error=str(e))

    _apply_env_to_settings(settings)

    return settings


def _apply_dict_to_settings(settings: LingCheckSettings, data: Dict[str, Any]):
    """Apply dictionary values to the settings object."""
    for section_name, section_data in data.items():
        if hasattr(settings, section_name) and isinstance(section_data, dict):
            section = getattr(settings, section_name)
            for key, value in section_data.items():
                if hasattr(section, key):
                    setattr(section, key, value)


def _apply_env_to_settings(settings: LingCheckSettings):
    """Apply environment variables to the settings."""
    env_mappings = {
        'LINGCHECK_TAGGING_USE_SPACY': ('tagging', 'use_spacy', _parse_bool),
        'LINGCHECK_TAGGING_SPACY_MODEL': ('tagging', 'spacy_model', str),
        'LINGCHECK_TAGGING_LEXICON': ('tagging', 'lexicon_file', str),
        'LINGCHECK_SPELLING_ENABLED': ('spelling', 'enabled', _parse_bool),
        'LINGCHECK_SPELLING_MAX_SUGGESTIONS': ('spelling', 'max_suggestions', int),
        'LINGCHECK_SPELLING_MAX_EDIT_DISTANCE': ('spelling', 'max_edit_distance', int),
        'LINGCHECK_SPELLING_WORD_LIST': ('spelling', 'word_list', str),
        'LINGCHECK_SPELLING_PERSONAL_DICTIONARY': ('spelling', 'personal_dictionary', str),
        'LINGCHECK_LANGUAGETOOL_SKIP_RULES': ('languagetool', 'skip_rules', _parse_list),
    }

    for env_var, (section, key, converter) in env_mappings.items():
        value = os.environ.get(env_var)
        if value is not None:
            try:
                setattr(getattr(settings, section), key, converter(value))
            except ValueError as e:
                logger.warning("Invalid environment variable", variable=env_var,
                               value=value, error=str(e))


def _parse_bool(value: str) -> bool:
    """Parse boolean from string."""
    return value.lower() in ('true', '1', 'yes', 'on')


def _parse_list(value: str) -> list:
    return [item.strip() for item in value.split(',') if item.strip()]


def get(key: str, default: Any = None) -> Any:
    """
    Get a setting by dot-notation key.

    Example: get('spelling.max_suggestions') -> 5
    """
    obj = get_settings()
    for part in key.split('.'):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            return default
    return obj


def set(key: str, value: Any):
    """
    Set a setting by dot-notation key.

    Example: set('tagging.use_spacy', False)
    """
    settings = get_settings()
    parts = key.split('.')

    if len(parts) != 2:
        raise ValueError(f"Key must be in format 'section.key': {key}")

    section_name, attr_name = parts
    if not hasattr(settings, section_name):
        raise ValueError(f"Unknown config section: {section_name}")
    section = getattr(settings, section_name)
    if not hasattr(section, attr_name):
        raise ValueError(f"Unknown config key: {attr_name}")
    setattr(section, attr_name, value)


def save_settings(path: Optional[Path] = None):
    """Save current settings to file."""
    path = path or CONFIG_FILE
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(asdict(get_settings()), f, indent=2)


def reset_config():
    """Reset settings to defaults."""
    global _settings
    _settings = LingCheckSettings()


@dataclass
class CheckingConfiguration:
    """
    Options for one checking session.

    ``enabled_rules`` and ``disabled_rules`` are mutually exclusive: an
    enable list means "run only these rules".
    """
    language: str = 'en-US'
    mother_tongue: Optional[str] = None
    enabled_rules: FrozenSet[str] = frozenset()
    disabled_rules: FrozenSet[str] = frozenset()
    tagger_only: bool = False
    bitext: bool = False
    apply_suggestions: bool = False
    api_format: bool = False
    verbose: bool = False
    profile: bool = False
    list_unknown: bool = False
    recursive: bool = False
    xml_filter: bool = False
    single_line_break_marks_paragraph: bool = False
    encoding: Optional[str] = None
    input_path: Optional[str] = None

    def __post_init__(self):
        self.enabled_rules = frozenset(self.enabled_rules)
        self.disabled_rules = frozenset(self.disabled_rules)
        self._check_rule_toggles()

    def _check_rule_toggles(self):
        if self.enabled_rules and self.disabled_rules:
            raise ConfigurationError(
                "You cannot specify both enabled and disabled rules",
                option='enable/disable'
            )

    def validate(self) -> 'CheckingConfiguration':
        """
        Reject contradictory option combinations.

        Returns:
            self, so calls can be chained

        Raises:
            ConfigurationError: naming the first conflict found
        """
        from .languages import get_language

        self._check_rule_toggles()
        if self.tagger_only and (self.list_unknown or self.apply_suggestions):
            raise ConfigurationError(
                "You cannot list unknown words or apply suggestions when tagging only",
                option='taggeronly'
            )
        if self.apply_suggestions and self.api_format:
            raise ConfigurationError(
                "API format makes no sense for automatic application of suggestions",
                option='apply'
            )
        if self.profile and (self.api_format or self.apply_suggestions or self.tagger_only):
            raise ConfigurationError(
                "Profiling can be only run in text mode",
                option='profile'
            )
        if self.bitext and not self.mother_tongue:
            raise ConfigurationError(
                "Bitext checking needs the source language given as mother tongue",
                option='bitext'
            )
        if self.bitext and (self.apply_suggestions or self.tagger_only):
            raise ConfigurationError(
                "Bitext checking cannot apply suggestions or run the tagger only",
                option='bitext'
            )

        get_language(self.language)
        if self.mother_tongue:
            get_language(self.mother_tongue)
        return self
