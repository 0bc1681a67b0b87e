import dataclasses
import pickle

import pytest

from linefinder.models import LineProfile, FindResult


def test_profile_counts_words_and_characters():
    p = LineProfile.from_text("The cat, the hat")
    assert p.canonical == "the cat the hat"
    assert dict(p.word_counts) == {"the": 2, "cat": 1, "hat": 1}
    assert p.char_counts[" "] == 3
    assert p.char_counts["t"] == 4
    assert p.char_counts["h"] == 3
    assert sum(p.char_counts.values()) == len(p.canonical)


def test_empty_line_has_empty_tables():
    p = LineProfile.from_text(" ,.; ")
    assert p.canonical == ""
    assert len(p.word_counts) == 0
    assert len(p.char_counts) == 0
    assert len(p) == 0


def test_profile_is_immutable():
    p = LineProfile.from_text("a b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.canonical = "c"  # type: ignore[misc]
    with pytest.raises(TypeError):
        p.word_counts["a"] = 5  # type: ignore[index]


def test_profiles_compare_by_canonical_text():
    assert LineProfile.from_text("A  b!") == LineProfile.from_text("a b")


def test_profile_pickles_for_process_pools():
    p = LineProfile.from_text("his head a flag")
    q = pickle.loads(pickle.dumps(p))
    assert q == p
    assert dict(q.word_counts) == dict(p.word_counts)
    assert dict(q.char_counts) == dict(p.char_counts)


def test_find_result_as_dict():
    r = FindResult(line_no=3, line="x", score=0.5, exact=False)
    assert r.as_dict() == {"line_no": 3, "line": "x", "score": 0.5, "exact": False}
