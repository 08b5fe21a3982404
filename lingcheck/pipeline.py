"""
Checking Pipeline
=================
Drives one session: text -> sentences -> tokens -> tagged sentences ->
rules -> ordered matches (or corrected text, or tagger output).

Modes (chosen by CheckingConfiguration):
- check:   report the matches of every active rule
- apply:   replace matches with their first suggestion
- tag:     tagger output only, no rules
- bitext:  check translations against their source segments

Rules are reset at the start of every document. A document either
produces a complete result or raises.
"""

import re
import time
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from config_logging import ProcessingError, StructuredLogger, get_logger
from .aggregator import ApplyResult, MatchAggregator
from .config import CheckingConfiguration, LingCheckSettings, get_settings
from .languages import LanguageProfile, build_tagger, get_language
from .rules.base import RuleMatch
from .tagging import Tagger
from .tokenizing import SentenceTokenizer, WordTokenizer
from .tokens import AnalyzedSentence

logger = get_logger('lingcheck.pipeline')

_XML_TAG = re.compile(r'<[^>]+>')


@dataclass
class CheckResult:
    """Matches of one checked document."""
    text: str
    matches: List[RuleMatch] = field(default_factory=list)
    sentences: List[AnalyzedSentence] = field(default_factory=list)
    unknown_words: List[str] = field(default_factory=list)
    # rule id -> seconds, filled when profiling
    timings: Dict[str, float] = field(default_factory=dict)
    source_text: Optional[str] = None

    @property
    def match_count(self) -> int:
        return len(self.matches)


def strip_xml(text: str) -> str:
    """Remove XML/HTML tags, keeping the text between them."""
    return _XML_TAG.sub('', text)


def parse_bitext(text: str) -> List[Tuple[str, str]]:
    """
    Read aligned segments from tab-separated text.

    Each non-empty line holds ``source<TAB>target``.

    Raises:
        ProcessingError: for a line without a tab
    """
    pairs = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        if '\t' not in line:
            raise ProcessingError(
                f"Line {line_no} is not a tab-separated source/target pair",
                stage='bitext', line=line_no
            )
        source, target = line.split('\t', 1)
        pairs.append((source, target))
    return pairs


class Pipeline:
    """
    Checking session for one language.

    Usage:
        pipeline = Pipeline(CheckingConfiguration(language='en-US'))
        result = pipeline.check_text("This is is a test.")
        for match in result.matches:
            print(match.start, match.message)
    """

    def __init__(
        self,
        config: CheckingConfiguration,
        settings: Optional[LingCheckSettings] = None,
        profile: Optional[LanguageProfile] = None
    ):
        """
        Validate the configuration and build the language profile.

        Args:
            config: Session options
            settings: Integration settings (defaults to the global ones)
            profile: Ready-made profile to use instead of building one

        Raises:
            ConfigurationError: for contradictory options or unknown languages
        """
        config.validate()
        self.config = config
        self.settings = settings or get_settings()
        self.language = get_language(config.language)
        self.mother_tongue = get_language(config.mother_tongue) if config.mother_tongue else None

        self.profile = profile or LanguageProfile(self.language, self.mother_tongue, self.settings)
        if config.enabled_rules:
            self.profile.enable_rules(config.enabled_rules)
        if config.disabled_rules:
            self.profile.disable_rules(config.disabled_rules)

        self.aggregator = MatchAggregator()
        self.word_tokenizer = WordTokenizer()
        self.sentence_tokenizer = SentenceTokenizer(config.single_line_break_marks_paragraph)
        self._source_tagger: Optional[Tagger] = None

    @property
    def source_tagger(self) -> Tagger:
        """Tagger of the source language in bitext mode."""
        if self._source_tagger is None:
            self._source_tagger = build_tagger(self.mother_tongue, self.settings)
        return self._source_tagger

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------

    def analyze_sentence(self, sentence: str, offset: int = 0,
                         tagger: Optional[Tagger] = None) -> AnalyzedSentence:
        """Tokenize and tag one sentence."""
        tagger = tagger or self.profile.tagger
        readings = tagger.tag(self.word_tokenizer.tokenize(sentence))
        analyzed = AnalyzedSentence(tuple(readings), offset, sentence)
        if self.config.verbose:
            logger.info("Tagged sentence", offset=offset, tokens=len(analyzed),
                        unknown=len(analyzed.unknown_words()))
        return analyzed

    def tag_text(self, text: str) -> List[AnalyzedSentence]:
        """
        Split text into sentences and tag them.

        Args:
            text: Document text

        Returns:
            Tagged sentences; their offsets locate them in ``text``
        """
        sentences = []
        offset = 0
        for sentence in self.sentence_tokenizer.tokenize(text):
            sentences.append(self.analyze_sentence(sentence, offset))
            offset += len(sentence)
        return sentences

    # -------------------------------------------------------------------------
    # Checking
    # -------------------------------------------------------------------------

    def _run_rules(self, rules, sentence, per_rule, timings, source=None):
        for index, rule in enumerate(rules):
            started = time.perf_counter()
            if source is None:
                found = rule.match(sentence)
            else:
                found = rule.match(source, sentence)
            if self.config.profile:
                timings[rule.id] += time.perf_counter() - started
            per_rule[index].extend(match.shifted(sentence.offset) for match in found)

    def _finish(self, text: str, sentences: List[AnalyzedSentence],
                per_rule, timings, source_text: Optional[str] = None) -> CheckResult:
        matches = self.aggregator.collect(per_rule)
        for match in matches:
            if match.end > len(text):
                raise ProcessingError(
                    f"Rule {match.rule_id} reported a match past the end of the document",
                    stage='check', rule=match.rule_id
                )

        unknown = []
        if self.config.list_unknown:
            unknown = sorted({word for s in sentences for word in s.unknown_words()})

        logger.info("Document checked", sentences=len(sentences), matches=len(matches))
        return CheckResult(
            text=text,
            matches=matches,
            sentences=sentences,
            unknown_words=unknown,
            timings=dict(timings),
            source_text=source_text,
        )

    def check_text(self, text: str) -> CheckResult:
        """
        Check one document with the active monotext rules.

        Args:
            text: Document text

        Returns:
            CheckResult with document-relative matches
        """
        StructuredLogger.new_correlation_id()
        self.profile.reset_rules()
        rules = self.profile.active_rules

        with logger.log_operation('check_text', language=self.language.code):
            sentences = self.tag_text(text)
            per_rule = [[] for _ in rules]
            timings = defaultdict(float)
            for sentence in sentences:
                self._run_rules(rules, sentence, per_rule, timings)
            return self._finish(text, sentences, per_rule, timings)

    def check_bitext(self, pairs: Sequence[Tuple[str, str]]) -> CheckResult:
        """
        Check translated segments against their sources.

        Every target segment is checked as one sentence by the monotext
        rules and, together with its source, by the bitext rules.

        Args:
            pairs: (source, target) segments; the source is in the mother
                tongue, the target in the checked language

        Returns:
            CheckResult over the target document (segments joined by newlines)
        """
        if self.mother_tongue is None:
            raise ProcessingError("Bitext checking needs a source language", stage='bitext')

        StructuredLogger.new_correlation_id()
        self.profile.reset_rules()
        rules = self.profile.active_rules
        bitext_rules = self.profile.active_bitext_rules

        with logger.log_operation('check_bitext', language=self.language.code,
                                  source_language=self.mother_tongue.code):
            per_rule = [[] for _ in rules]
            per_bitext_rule = [[] for _ in bitext_rules]
            timings = defaultdict(float)
            sentences = []
            offset = 0
            for source, target in pairs:
                source_sentence = self.analyze_sentence(source, 0, self.source_tagger)
                target_sentence = self.analyze_sentence(target, offset)
                sentences.append(target_sentence)
                self._run_rules(rules, target_sentence, per_rule, timings)
                self._run_rules(bitext_rules, target_sentence, per_bitext_rule, timings,
                                source=source_sentence)
                offset += len(target) + 1

            target_text = '\n'.join(target for _, target in pairs)
            source_text = '\n'.join(source for source, _ in pairs)
            return self._finish(target_text, sentences, per_rule + per_bitext_rule,
                                timings, source_text)

    def apply_suggestions(self, text: str) -> ApplyResult:
        """
        Check a document and apply the first suggestion of every match.

        Args:
            text: Document text

        Returns:
            ApplyResult with the corrected text
        """
        result = self.check_text(text)
        return self.aggregator.apply(text, result.matches)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def process(self, text: str) -> str:
        """
        Run the mode selected by the configuration and render its output.

        Args:
            text: Document text (tab-separated pairs in bitext mode)

        Returns:
            The report, corrected text or tagger output
        """
        from . import output

        if self.config.xml_filter:
            text = strip_xml(text)

        if self.config.tagger_only:
            return output.format_tagged_sentences(self.tag_text(text))

        if self.config.bitext:
            result = self.check_bitext(parse_bitext(text))
        else:
            result = self.check_text(text)

        if self.config.apply_suggestions:
            applied = self.aggregator.apply(text, result.matches)
            parts = [output.format_apply_result(applied, text)]
        elif self.config.api_format:
            return output.format_xml(result, self.language)
        else:
            parts = [output.format_text_report(result)]
        if self.config.list_unknown:
            parts.append(output.format_unknown_words(result.unknown_words))
        if self.config.profile:
            parts.append(output.format_profile(result))
        return '\n'.join(part for part in parts if part)
