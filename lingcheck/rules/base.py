"""
Rule Base Classes
=================
Interfaces every rule implements, and the match value object they report.

- Rule: matches one tagged sentence
- BitextRule: matches an aligned (source, target) sentence pair
- RuleMatch: span, message, suggestions, originating rule id

Rules report matches in non-decreasing start order. They may overlap;
resolving overlaps is the aggregator's job.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional, Sequence, Tuple
from dataclasses import dataclass, replace

from ..tokens import AnalyzedSentence, AnalyzedTokenReadings

__version__ = "1.0.0"


@dataclass(frozen=True)
class RuleMatch:
    """
    Represents an issue found by a rule.

    ``start``/``end`` form a half-open character span. Positions are
    relative to the sentence while a rule reports them and relative to
    the document once the pipeline has shifted them.
    """
    rule_id: str
    start: int
    end: int
    message: str
    suggestions: Tuple[str, ...] = ()
    short_message: str = ""
    description: str = ""

    def __post_init__(self):
        if not isinstance(self.suggestions, tuple):
            object.__setattr__(self, 'suggestions', tuple(self.suggestions))
        if self.start < 0 or self.end < self.start:
            raise ValueError(
                f"Invalid match span [{self.start}, {self.end}) for rule {self.rule_id}"
            )

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: 'RuleMatch') -> bool:
        return self.start < other.end and other.start < self.end

    def shifted(self, offset: int) -> 'RuleMatch':
        """Return a copy moved ``offset`` characters to the right."""
        return replace(self, start=self.start + offset, end=self.end + offset)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format for structured output."""
        return {
            'rule_id': self.rule_id,
            'start': self.start,
            'end': self.end,
            'length': self.length,
            'message': self.message,
            'short_message': self.short_message,
            'description': self.description,
            'suggestions': list(self.suggestions),
        }


class Rule(ABC):
    """
    Abstract base class for monotext rules.

    Rules that keep state across the sentences of a document override
    ``reset()``; the pipeline calls it before every new document.
    """

    RULE_ID: str = "RULE"
    DESCRIPTION: str = ""
    DEFAULT_ENABLED: bool = True

    @property
    def id(self) -> str:
        return self.RULE_ID

    @property
    def description(self) -> str:
        return self.DESCRIPTION

    @property
    def is_available(self) -> bool:
        """False when a resource the rule needs could not be loaded."""
        return True

    @property
    def error(self) -> Optional[str]:
        return None

    @abstractmethod
    def match(self, sentence: AnalyzedSentence) -> List[RuleMatch]:
        """
        Check one tagged sentence.

        Args:
            sentence: The sentence to check

        Returns:
            Matches in non-decreasing start order, sentence-relative
        """
        pass

    def reset(self):
        """Forget cross-sentence state before an unrelated document."""
        pass

    def create_match(
        self,
        start: int,
        end: int,
        message: str,
        suggestions: Sequence[str] = (),
        short_message: str = ""
    ) -> RuleMatch:
        """Helper to create a RuleMatch stamped with this rule's metadata."""
        return RuleMatch(
            rule_id=self.id,
            start=start,
            end=end,
            message=message,
            suggestions=tuple(suggestions),
            short_message=short_message,
            description=self.description,
        )

    def match_token(
        self,
        token: AnalyzedTokenReadings,
        message: str,
        suggestions: Sequence[str] = (),
        short_message: str = ""
    ) -> RuleMatch:
        """Create a match spanning exactly one token."""
        return self.create_match(token.start_pos, token.end_pos, message,
                                 suggestions, short_message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class BitextRule(Rule):
    """
    Abstract base class for translation QA rules.

    Called with a (source, target) pair, offsets refer to the target.
    Called with a single sentence, a bitext rule has nothing to compare
    and reports no matches.
    """

    def match(
        self,
        source: AnalyzedSentence,
        target: Optional[AnalyzedSentence] = None
    ) -> List[RuleMatch]:
        if target is None:
            return []
        return self.match_pair(source, target)

    @abstractmethod
    def match_pair(self, source: AnalyzedSentence, target: AnalyzedSentence) -> List[RuleMatch]:
        """
        Check an aligned sentence pair.

        Args:
            source: Sentence in the source language
            target: Its translation (the side being proofread)

        Returns:
            Matches with target-relative offsets
        """
        pass
