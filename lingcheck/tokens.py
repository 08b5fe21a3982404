"""
Token Model
===========
Immutable value types passed between the tokenizer, the taggers and the
rules.

- Token: raw surface string with its start offset in the sentence
- AnalyzedToken: one (token, POS tag, lemma) interpretation
- AnalyzedTokenReadings: a token with all of its interpretations
- AnalyzedSentence: the ordered readings of one sentence

A reading with an empty ``analyses`` tuple is unknown/unanalyzed. It is
never represented by ``None``.
"""

from typing import Iterable, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Token:
    """A raw token and its start offset within the owning sentence."""
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def place_tokens(texts: Iterable[str]) -> List[Token]:
    """Give raw tokens their start offsets: the running sum of token lengths."""
    tokens = []
    position = 0
    for text in texts:
        tokens.append(Token(text, position))
        position += len(text)
    return tokens


@dataclass(frozen=True)
class AnalyzedToken:
    """One interpretation of a token."""
    token: str
    pos_tag: Optional[str] = None
    lemma: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.lemma or self.token}/{self.pos_tag}"


@dataclass(frozen=True)
class AnalyzedTokenReadings:
    """
    A token paired with zero or more analyses.

    ``start_pos`` is the character offset of the token inside its sentence.
    """
    token: str
    start_pos: int = 0
    analyses: Tuple[AnalyzedToken, ...] = ()

    def __post_init__(self):
        # Accept any iterable of analyses but always store a tuple
        if not isinstance(self.analyses, tuple):
            object.__setattr__(self, 'analyses', tuple(self.analyses))

    @property
    def end_pos(self) -> int:
        return self.start_pos + len(self.token)

    @property
    def is_unknown(self) -> bool:
        """True when the tagger produced no analysis for this token."""
        return not self.analyses

    @property
    def is_whitespace(self) -> bool:
        return self.token.isspace()

    @property
    def is_word(self) -> bool:
        """True for tokens that contain at least one letter."""
        return any(ch.isalpha() for ch in self.token)

    @property
    def pos_tags(self) -> List[str]:
        return [a.pos_tag for a in self.analyses if a.pos_tag]

    @property
    def lemmas(self) -> List[str]:
        return [a.lemma for a in self.analyses if a.lemma]

    def has_pos_tag(self, pos_tag: str) -> bool:
        return pos_tag in self.pos_tags

    def has_lemma(self, lemma: str) -> bool:
        return lemma in self.lemmas


@dataclass(frozen=True)
class AnalyzedSentence:
    """
    Ordered readings of one sentence.

    Concatenating the readings' tokens reproduces ``text`` exactly.
    ``offset`` is the position of the sentence inside its document.
    """
    tokens: Tuple[AnalyzedTokenReadings, ...] = ()
    offset: int = 0
    text: str = field(default="")

    def __post_init__(self):
        if not isinstance(self.tokens, tuple):
            object.__setattr__(self, 'tokens', tuple(self.tokens))
        joined = ''.join(t.token for t in self.tokens)
        if not self.text:
            object.__setattr__(self, 'text', joined)
        elif self.text != joined:
            raise ValueError(
                "Sentence text does not match its tokens: "
                f"{self.text!r} != {joined!r}"
            )

    def __iter__(self) -> Iterator[AnalyzedTokenReadings]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    @property
    def end(self) -> int:
        """Length of the sentence text (end offset relative to the sentence)."""
        return len(self.text)

    @property
    def tokens_without_whitespace(self) -> Tuple[AnalyzedTokenReadings, ...]:
        return tuple(t for t in self.tokens if not t.is_whitespace)

    @property
    def words(self) -> Tuple[AnalyzedTokenReadings, ...]:
        return tuple(t for t in self.tokens if t.is_word)

    @property
    def pure_text(self) -> str:
        """Concatenated token text (identical to ``text`` by construction)."""
        return ''.join(t.token for t in self.tokens)

    def unknown_words(self) -> List[str]:
        """Word tokens that received no analysis."""
        return [t.token for t in self.tokens if t.is_word and t.is_unknown]
