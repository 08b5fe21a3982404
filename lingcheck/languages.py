"""
Languages and Language Profiles
===============================
- Language: identifier plus the per-language resources lingcheck knows
- LanguageProfile: one session's tagger and ordered rule registry

A profile accepts rule toggles until its first check. From then on the
active rule list is fixed, and further toggles raise ConfigurationError.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type

from config_logging import ConfigurationError, FileError, get_logger
from .config import LingCheckSettings, get_settings
from .rules import (
    BitextRule,
    DifferentLengthRule,
    FalseFriendRule,
    Rule,
    SameTranslationRule,
    SpellerRule,
    AmericanEnglishSpellerRule,
    BritishEnglishSpellerRule,
    GermanyGermanSpellerRule,
    AustrianGermanSpellerRule,
    SwissGermanSpellerRule,
    WordRepeatBeginningRule,
    WordRepeatRule,
    get_false_friends,
)
from .tagging import LexiconTagger, Tagger, UntaggedTagger, get_spacy_tagger

logger = get_logger('lingcheck.languages')


@dataclass(frozen=True)
class Language:
    """A language or language variant lingcheck can check."""
    code: str
    name: str
    short_code: str
    country: Optional[str] = None
    variant: Optional[str] = None
    speller_rule: Optional[Type[SpellerRule]] = None
    # spaCy language for tagging; None = no morphological resources
    spacy_language: Optional[str] = None
    allowed_repeats: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


_ENGLISH_REPEATS = ('had', 'that')
_GERMAN_REPEATS = ('der', 'die', 'das')

LANGUAGES: Dict[str, Language] = {
    language.code: language for language in (
        Language('en', 'English', 'en',
                 spacy_language='en', allowed_repeats=_ENGLISH_REPEATS),
        Language('en-US', 'English (US)', 'en', country='US',
                 speller_rule=AmericanEnglishSpellerRule,
                 spacy_language='en', allowed_repeats=_ENGLISH_REPEATS),
        Language('en-GB', 'English (GB)', 'en', country='GB',
                 speller_rule=BritishEnglishSpellerRule,
                 spacy_language='en', allowed_repeats=_ENGLISH_REPEATS),
        Language('de', 'German', 'de',
                 spacy_language='de', allowed_repeats=_GERMAN_REPEATS),
        Language('de-DE', 'German (Germany)', 'de', country='DE',
                 speller_rule=GermanyGermanSpellerRule,
                 spacy_language='de', allowed_repeats=_GERMAN_REPEATS),
        Language('de-AT', 'German (Austria)', 'de', country='AT',
                 speller_rule=AustrianGermanSpellerRule,
                 spacy_language='de', allowed_repeats=_GERMAN_REPEATS),
        Language('de-CH', 'German (Swiss)', 'de', country='CH',
                 speller_rule=SwissGermanSpellerRule,
                 spacy_language='de', allowed_repeats=_GERMAN_REPEATS),
        Language('be', 'Belarusian', 'be'),
    )
}


def get_language(code: str) -> Language:
    """
    Look up a language by code.

    Codes match case-insensitively, and ``_`` is accepted for ``-``.

    Raises:
        ConfigurationError: for an unknown code, listing the supported ones
    """
    normalized = (code or '').replace('_', '-').lower()
    for language in LANGUAGES.values():
        if language.code.lower() == normalized:
            return language
    supported = ', '.join(sorted(LANGUAGES))
    raise ConfigurationError(
        f"'{code}' is not a language code known to lingcheck. "
        f"Supported language codes are: {supported}",
        option='language',
        supported=sorted(LANGUAGES),
    )


def list_languages() -> List[Language]:
    """All supported languages, ordered by code."""
    return [LANGUAGES[code] for code in sorted(LANGUAGES)]


def build_tagger(language: Language, settings: LingCheckSettings) -> Tagger:
    """Pick the tagger for a language from the tagging settings."""
    lexicon_file = settings.tagging.lexicon_file
    if lexicon_file:
        try:
            return LexiconTagger(lexicon_file=lexicon_file)
        except OSError as e:
            raise FileError(f"Cannot read lexicon: {e}", filename=lexicon_file) from e

    if language.spacy_language and settings.tagging.use_spacy:
        tagger = get_spacy_tagger(language.spacy_language, settings.tagging.spacy_model)
        if tagger.is_available:
            return tagger
        logger.warning("spaCy tagger unavailable, tokens will be left untagged",
                       language=language.code, error=tagger.error)

    return UntaggedTagger()


def build_rules(
    language: Language,
    mother_tongue: Optional[Language],
    settings: LingCheckSettings
) -> List[Rule]:
    """Monotext rules for a language, in registration order."""
    from .languagetool import get_rule_class

    rules: List[Rule] = [
        WordRepeatRule(language.allowed_repeats),
        WordRepeatBeginningRule(),
    ]

    if mother_tongue is not None:
        table = get_false_friends(language.short_code, mother_tongue.short_code)
        if table:
            rules.append(FalseFriendRule(table, language.name, mother_tongue.name))

    if language.speller_rule is not None and settings.spelling.enabled:
        rules.append(language.speller_rule(
            max_suggestions=settings.spelling.max_suggestions,
            word_list=settings.spelling.word_list,
            max_edit_distance=settings.spelling.max_edit_distance,
            personal_dict=settings.spelling.personal_dictionary,
        ))

    rules.append(get_rule_class()(language.code))
    return rules


def build_bitext_rules() -> List[BitextRule]:
    return [SameTranslationRule(), DifferentLengthRule()]


class LanguageProfile:
    """
    Everything one session needs to check a language.

    Owns exactly one tagger and an ordered registry of monotext and
    bitext rules. Registration order breaks ties between matches that
    start at the same offset.
    """

    def __init__(
        self,
        language: Language,
        mother_tongue: Optional[Language] = None,
        settings: Optional[LingCheckSettings] = None,
        tagger: Optional[Tagger] = None,
        rules: Optional[Sequence[Rule]] = None,
        bitext_rules: Optional[Sequence[BitextRule]] = None
    ):
        """
        Initialize the profile.

        Args:
            language: Language of the checked text
            mother_tongue: The writer's native language (false friends, and
                the source language in bitext mode)
            settings: Integration settings (defaults to the global ones)
            tagger: Tagger to use instead of the configured one
            rules: Monotext rules to use instead of the language's own
            bitext_rules: Bitext rules to use instead of the default pair
        """
        settings = settings or get_settings()
        self.language = language
        self.mother_tongue = mother_tongue
        self.tagger = tagger if tagger is not None else build_tagger(language, settings)
        self._rules: List[Rule] = list(
            rules if rules is not None else build_rules(language, mother_tongue, settings)
        )
        self._bitext_rules: List[BitextRule] = list(
            bitext_rules if bitext_rules is not None else build_bitext_rules()
        )
        self._enabled: set = set()
        self._disabled: set = set()
        self._active: Optional[List[Rule]] = None
        self._active_bitext: Optional[List[BitextRule]] = None

    @property
    def all_rules(self) -> List[Rule]:
        """Every registered rule, monotext first, active or not."""
        return self._rules + self._bitext_rules

    @property
    def frozen(self) -> bool:
        return self._active is not None

    def rule_ids(self) -> List[str]:
        return [rule.id for rule in self.all_rules]

    def _check_not_frozen(self):
        if self.frozen:
            raise ConfigurationError(
                "Rules cannot be enabled or disabled after checking has started",
                option='rules'
            )

    def _warn_unknown(self, rule_ids: Iterable[str]):
        known = set(self.rule_ids())
        for rule_id in rule_ids:
            if rule_id not in known:
                logger.warning("Unknown rule id ignored", rule=rule_id,
                               language=self.language.code)

    def enable_rules(self, rule_ids: Iterable[str]):
        """Run only the given rules (plus any enabled before)."""
        self._check_not_frozen()
        rule_ids = list(rule_ids)
        self._warn_unknown(rule_ids)
        self._enabled.update(rule_ids)

    def disable_rules(self, rule_ids: Iterable[str]):
        """Do not run the given rules."""
        self._check_not_frozen()
        rule_ids = list(rule_ids)
        self._warn_unknown(rule_ids)
        self._disabled.update(rule_ids)

    def _is_selected(self, rule: Rule) -> bool:
        if self._enabled:
            return rule.id in self._enabled
        if rule.id in self._disabled:
            return False
        return rule.DEFAULT_ENABLED

    def _select(self, rules: Sequence[Rule]) -> list:
        selected = []
        for rule in rules:
            if not self._is_selected(rule):
                continue
            if not rule.is_available:
                logger.warning("Rule unavailable, skipping", rule=rule.id, error=rule.error)
                continue
            selected.append(rule)
        return selected

    def freeze(self):
        """Fix the active rule list. Called by the pipeline before the first check."""
        if self.frozen:
            return
        self._active = self._select(self._rules)
        self._active_bitext = self._select(self._bitext_rules)
        logger.debug("Rules activated", language=self.language.code,
                     rules=','.join(rule.id for rule in self._active + self._active_bitext))

    @property
    def active_rules(self) -> List[Rule]:
        self.freeze()
        return list(self._active)

    @property
    def active_bitext_rules(self) -> List[BitextRule]:
        self.freeze()
        return list(self._active_bitext)

    def reset_rules(self):
        """Reset the cross-sentence state of every rule before a new document."""
        for rule in self.all_rules:
            rule.reset()
