"""
Similarity between two line profiles.

The score mixes four measures, each in [-1, 1]:

  words      how well the query's words are contained in the candidate
  runes      the same containment over single characters
  full       longest shared run of characters between the two lines
  word       average best shared run for each query word against any
             candidate word

Word order is ignored on purpose: a remembered fragment is often reordered
or paraphrased, so "he is" and "is he" look the same here. The shared-run
measures work on characters so that inflected forms ("make", "making") still
score without stemming.
"""
from __future__ import annotations
from typing import Hashable, Iterable, Mapping, TypeVar

from .models import LineProfile

K = TypeVar("K", bound=Hashable)

PERFECT = 1.0


def measure_containment(reference: Mapping[K, int], query: Mapping[K, int]) -> float:
    """
    How well the items of ``query`` are found in ``reference``.

    Both sides start at 1 so the ratio is always defined and tiny tables do not
    swing to the extremes. A found item adds the smaller count to ``found`` and
    the larger to ``possible``, so overshooting and undershooting the count
    both cost something. A missing item is subtracted from ``found``.

    Returns 1.0 for identical tables. The lower bound is not clamped: heavily
    repeated missing items can push the ratio below -1.
    """
    found = 1.0
    possible = 1.0
    if reference == query:
        return found / possible

    for item, wanted in query.items():
        have = reference.get(item)
        if have is not None:
            if wanted <= have:
                found += wanted
                possible += have
            else:
                found += have
                possible += wanted
        else:
            found -= wanted
            possible += wanted
    return found / possible


def count_shared(a: str, b: str) -> int:
    """Length of the longest common substring of ``a`` and ``b``."""
    longest = 0
    len_a, len_b = len(a), len(b)
    for i in range(len_a):
        # no run starting here can beat the current best
        if len_a - i <= longest:
            break
        for j in range(len_b):
            if len_b - j <= longest:
                break
            length = 0
            while i + length < len_a and j + length < len_b and a[i + length] == b[j + length]:
                length += 1
            if length > longest:
                longest = length
    return longest


def measure_shared(a: str, b: str) -> float:
    """
    Longest shared run divided by the average length of the two strings, in
    [0, 1]. Dividing by the shorter length would call any substring a perfect
    match.
    """
    size_sum = len(a) + len(b)
    if size_sum == 0:
        return PERFECT
    return 2 * count_shared(a, b) / size_sum


def _best_shared(candidates: Iterable[str], word: str) -> float:
    best = 0.0
    for cand in candidates:
        shared = measure_shared(cand, word)
        if shared > best:
            best = shared
    return best


def measure_word_shared(candidate_words: Mapping[str, int], query_words: Mapping[str, int]) -> float:
    """
    Average, over the distinct query words, of the best ``measure_shared``
    against any single candidate word. In [0, 1]; 0.5 (neutral once rescaled)
    when the query has no words.
    """
    if not query_words:
        return 0.5
    total = 0.0
    for word in query_words:
        total += _best_shared(candidate_words, word)
    return total / len(query_words)


def score(candidate: LineProfile, query: LineProfile) -> float:
    """
    Similarity of ``query`` to ``candidate`` in [-1, 1]; 1.0 is a perfect match.

    Not symmetric: the containment measures look for the query inside the
    candidate.
    """
    if candidate.canonical == query.canonical:
        return PERFECT

    words = measure_containment(candidate.word_counts, query.word_counts)
    runes = measure_containment(candidate.char_counts, query.char_counts)

    full_shared = measure_shared(candidate.canonical, query.canonical) * 2 - 1
    word_shared = measure_word_shared(candidate.word_counts, query.word_counts) * 2 - 1

    return (words + runes + full_shared + word_shared) / 4
