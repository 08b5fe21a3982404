"""
Default Tokenizers
==================
Regex-based word and sentence tokenizers.

Both are lossless: joining the returned pieces gives back the input
exactly, which keeps character offsets aligned with token boundaries.
A language can swap these for its own implementation.
"""

import re
from typing import List

# Words (with inner apostrophes/hyphens), whitespace runs, any other single char
_WORD_PATTERN = re.compile(r"\w+(?:['’\-]\w+)*|\s+|[^\w\s]", re.UNICODE)

# Sentence end: terminal punctuation (optionally followed by closing quotes or
# brackets) and the whitespace after it
_SENTENCE_END = re.compile(r"[.!?…]+[\"'”’)\]]*\s+")
_PARAGRAPH_ONE = re.compile(r"\n")
_PARAGRAPH_TWO = re.compile(r"\n\s*\n")


class WordTokenizer:
    """Split a sentence into words, whitespace runs and punctuation."""

    def tokenize(self, text: str) -> List[str]:
        return _WORD_PATTERN.findall(text)


class SentenceTokenizer:
    """
    Split text into sentences.

    Trailing whitespace stays attached to the sentence it follows, so the
    concatenation of sentences equals the input.

    Args:
        single_line_break_marks_paragraph: treat one newline as a paragraph
            (and therefore sentence) boundary instead of requiring a blank line
    """

    def __init__(self, single_line_break_marks_paragraph: bool = False):
        self.single_line_break_marks_paragraph = single_line_break_marks_paragraph

    def tokenize(self, text: str) -> List[str]:
        if not text:
            return []

        paragraph_end = _PARAGRAPH_ONE if self.single_line_break_marks_paragraph else _PARAGRAPH_TWO
        boundaries = set()
        for pattern in (_SENTENCE_END, paragraph_end):
            for match in pattern.finditer(text):
                boundaries.add(match.end())
        boundaries.discard(len(text))

        sentences = []
        start = 0
        for boundary in sorted(boundaries):
            if boundary > start:
                sentences.append(text[start:boundary])
                start = boundary
        sentences.append(text[start:])
        return sentences
