# src/linefinder/models.py
"""
Data models for the line finder.

- LineProfile: one normalized line plus the word and character counts that
  the scorer compares.
- IndexEntry: one non-empty document line with its original line number.
- FindResult: what a search hands back to callers.

Profiles are built once and never mutated. A new query always produces a
new profile.
"""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .normalize import normalize, split_words


@dataclass(frozen=True, slots=True)
class LineProfile:
    """
    The "word set" view of a line.

    Attributes
    ----------
    canonical : str
        Lowercase text with words separated by exactly one space.
    word_counts : Mapping[str, int]
        Occurrences of each word of ``canonical``.
    char_counts : Mapping[str, int]
        Occurrences of each character of ``canonical``, spaces included.
    """
    canonical: str
    word_counts: Mapping[str, int] = field(compare=False, repr=False)
    char_counts: Mapping[str, int] = field(compare=False, repr=False)

    @classmethod
    def from_canonical(cls, canonical: str) -> "LineProfile":
        """Build the count tables from text that is already normalized."""
        words = Counter(split_words(canonical))
        chars = Counter(canonical)
        return cls(
            canonical=canonical,
            word_counts=MappingProxyType(dict(words)),
            char_counts=MappingProxyType(dict(chars)),
        )

    @classmethod
    def from_text(cls, raw: str) -> "LineProfile":
        """Normalize a raw line and profile it."""
        return cls.from_canonical(normalize(raw))

    def __reduce__(self):
        # mappingproxy does not pickle; rebuild from the text (process pools)
        return (LineProfile.from_canonical, (self.canonical,))

    def __len__(self) -> int:
        return len(self.canonical)


@dataclass(frozen=True)
class IndexEntry:
    line_no: int          # 0-based line number in the source document
    original: str         # raw line as read
    profile: LineProfile


@dataclass(frozen=True, slots=True)
class FindResult:
    """
    Result of a best-match search.

    ``score`` is the best similarity found, in [-1, 1] for realistic input.
    ``exact`` is set when the line matched the query's canonical text.
    """
    line_no: int
    line: str
    score: float
    exact: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "line_no": self.line_no,
            "line": self.line,
            "score": self.score,
            "exact": self.exact,
        }
