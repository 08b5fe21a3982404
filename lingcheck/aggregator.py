"""
Match Aggregator
================
Merges per-rule matches into one ordered list, and applies suggestions
to produce corrected text.

Ordering: start offset, then rule registration order, then the order in
which the rule reported the match. Python's sort is stable, so sorting
the concatenated per-rule lists by start offset gives exactly that.
"""

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from config_logging import ProcessingError, get_logger
from .rules.base import RuleMatch

logger = get_logger('lingcheck.aggregator')


@dataclass
class ApplyResult:
    """Outcome of applying suggestions to one document."""
    text: str
    applied: List[RuleMatch] = field(default_factory=list)
    unapplied: List[RuleMatch] = field(default_factory=list)
    conflicts: List[RuleMatch] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.applied)


class MatchAggregator:
    """Collects, orders and applies rule matches for one document."""

    def collect(self, per_rule_matches: Sequence[Sequence[RuleMatch]]) -> List[RuleMatch]:
        """
        Merge the matches of several rules.

        Args:
            per_rule_matches: One list per rule, in rule registration order

        Returns:
            All matches ordered by start offset
        """
        merged = [match for matches in per_rule_matches for match in matches]
        merged.sort(key=lambda m: m.start)
        return merged

    def resolve_overlaps(self, matches: Sequence[RuleMatch]) -> Tuple[List[RuleMatch], List[RuleMatch]]:
        """
        Drop matches that overlap an earlier kept match.

        Args:
            matches: Matches ordered by start offset

        Returns:
            (kept, discarded)
        """
        kept, discarded = [], []
        consumed = 0
        for match in matches:
            if kept and match.start < consumed:
                discarded.append(match)
                continue
            kept.append(match)
            consumed = max(consumed, match.end)
        return kept, discarded

    def apply(self, text: str, matches: Sequence[RuleMatch]) -> ApplyResult:
        """
        Replace every suggestion-bearing match with its first suggestion.

        Args:
            text: The document the matches were found in
            matches: Document-relative matches ordered by start offset

        Returns:
            ApplyResult with the corrected text. Matches without a
            suggestion are returned in ``unapplied``; overlapping ones
            that lost to an earlier match in ``conflicts``.

        Raises:
            ProcessingError: if a match lies outside the document
        """
        self._check_bounds(text, matches)

        with_suggestion = [m for m in matches if m.suggestions]
        unapplied = [m for m in matches if not m.suggestions]
        kept, conflicts = self.resolve_overlaps(with_suggestion)

        if conflicts:
            logger.debug("Overlapping suggestions skipped", count=len(conflicts))

        pieces = []
        position = 0
        for match in kept:
            pieces.append(text[position:match.start])
            pieces.append(match.suggestions[0])
            position = match.end
        pieces.append(text[position:])

        return ApplyResult(
            text=''.join(pieces),
            applied=kept,
            unapplied=unapplied,
            conflicts=conflicts,
        )

    def _check_bounds(self, text: str, matches: Sequence[RuleMatch]):
        for match in matches:
            if match.end > len(text):
                raise ProcessingError(
                    f"Match of rule {match.rule_id} ends at {match.end}, "
                    f"past the end of the document ({len(text)})",
                    stage='apply'
                )
