"""
Output Formatting
=================
Renders check results for people (text report) and for programs (XML).

Positions in the XML are given both as document offsets and as 0-based
line/column pairs. The text report uses 1-based lines and columns.
"""

from typing import List, Sequence, Tuple
from xml.etree import ElementTree as ET

from .rules.base import RuleMatch
from .tokens import AnalyzedSentence

# Characters of context shown on each side of a match
CONTEXT_SIZE = 40
UNKNOWN_READING = '?'


def line_and_column(text: str, offset: int) -> Tuple[int, int]:
    """0-based (line, column) of a document offset."""
    line = text.count('\n', 0, offset)
    line_start = text.rfind('\n', 0, offset) + 1
    return line, offset - line_start


def get_context(text: str, start: int, end: int, context_size: int = CONTEXT_SIZE) -> Tuple[str, int]:
    """
    Cut the text around a match.

    Line breaks become spaces so the context fits on one line; cut-off
    ends are marked with "...".

    Returns:
        (context, offset of the match inside the context)
    """
    context_start = max(0, start - context_size)
    context_end = min(len(text), end + context_size)
    prefix = '...' if context_start > 0 else ''
    suffix = '...' if context_end < len(text) else ''
    context = prefix + text[context_start:context_end] + suffix
    context = context.replace('\r', ' ').replace('\n', ' ')
    return context, len(prefix) + start - context_start


def format_match(number: int, match: RuleMatch, text: str) -> str:
    """One numbered entry of the text report."""
    line, column = line_and_column(text, match.start)
    context, context_offset = get_context(text, match.start, match.end)
    lines = [
        f"{number}.) Line {line + 1}, column {column + 1}, Rule ID: {match.rule_id}",
        f"Message: {match.message}",
    ]
    if match.suggestions:
        lines.append(f"Suggestion: {'; '.join(match.suggestions)}")
    lines.append(context)
    lines.append(' ' * context_offset + '^' * max(1, match.length))
    return '\n'.join(lines)


def format_text_report(result) -> str:
    """
    Human-readable report of a CheckResult.

    Args:
        result: CheckResult of one document

    Returns:
        Numbered matches separated by blank lines, or a "no errors" line
    """
    if not result.matches:
        return "No errors found."
    entries = [format_match(i, match, result.text) for i, match in enumerate(result.matches, start=1)]
    return '\n\n'.join(entries) + '\n'


def format_apply_result(applied, text: str) -> str:
    """
    Corrected text followed by what could not be applied.

    Args:
        applied: ApplyResult of one document
        text: The input text; residual match positions refer to it

    Returns:
        The corrected text, then the matches without a suggestion and the
        number of overlapping suggestions that were skipped
    """
    parts = [applied.text]
    if applied.unapplied:
        entries = [format_match(i, match, text) for i, match in enumerate(applied.unapplied, start=1)]
        parts.append("Matches without a suggestion:\n\n" + '\n\n'.join(entries))
    if applied.conflicts:
        parts.append(f"Conflicts: {len(applied.conflicts)} overlapping suggestions not applied")
    return '\n\n'.join(parts)


def format_xml(result, language=None, software: str = 'lingcheck') -> str:
    """
    XML report of a CheckResult.

    Args:
        result: CheckResult of one document
        language: Language checked, recorded on the root element
        software: Name recorded on the root element

    Returns:
        XML document with one <error> element per match
    """
    from . import __version__

    root = ET.Element('matches', {'software': software, 'version': __version__})
    if language is not None:
        root.set('language', language.code)

    text = result.text
    for match in result.matches:
        from_line, from_column = line_and_column(text, match.start)
        to_line, to_column = line_and_column(text, match.end)
        context, context_offset = get_context(text, match.start, match.end)
        ET.SubElement(root, 'error', {
            'fromy': str(from_line),
            'fromx': str(from_column),
            'toy': str(to_line),
            'tox': str(to_column),
            'offset': str(match.start),
            'length': str(match.length),
            'ruleId': match.rule_id,
            'msg': match.message,
            'shortmsg': match.short_message,
            'description': match.description,
            'replacements': '#'.join(match.suggestions),
            'context': context,
            'contextoffset': str(context_offset),
            'errorlength': str(match.length),
        })

    body = ET.tostring(root, encoding='unicode')
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + '\n'


def format_reading(token) -> str:
    """``token[lemma/TAG,...]`` for one tagged token."""
    if token.is_unknown:
        return f"{token.token}[{UNKNOWN_READING}]"
    readings = []
    for analysis in token.analyses:
        tag = analysis.pos_tag or UNKNOWN_READING
        readings.append(f"{analysis.lemma}/{tag}" if analysis.lemma else tag)
    return f"{token.token}[{','.join(readings)}]"


def format_tagged_sentences(sentences: Sequence[AnalyzedSentence]) -> str:
    """Tagger output, one line per sentence, whitespace tokens omitted."""
    lines = []
    for sentence in sentences:
        tokens = sentence.tokens_without_whitespace
        if tokens:
            lines.append(' '.join(format_reading(token) for token in tokens))
    return '\n'.join(lines)


def format_unknown_words(words: List[str]) -> str:
    return f"Unknown words: [{', '.join(words)}]"


def format_profile(result) -> str:
    """Per-rule run times of a profiled check, slowest first."""
    timings = result.timings
    lines = [f"Profile: {len(result.sentences)} sentences, {len(result.text)} characters"]
    for rule_id, seconds in sorted(timings.items(), key=lambda item: item[1], reverse=True):
        lines.append(f"  {rule_id}: {seconds * 1000:.2f} ms")
    total = sum(timings.values())
    lines.append(f"  total: {total * 1000:.2f} ms")
    return '\n'.join(lines)
