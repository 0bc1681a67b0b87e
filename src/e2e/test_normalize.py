# src/e2e/test_normalize.py
import pytest

from linefinder.normalize import normalize, split_words, breaks_word


@pytest.mark.parametrize("raw, expected", [
    ("The Quick Fox", "the quick fox"),
    ("  (hello),  world!  ", "hello world"),
    ('“Don John of Austria,”  he said!', "don john of austria he said"),
    ("strong—gongs groaning", "strong gongs groaning"),
    ("it’s a ‘flag’", "it s a flag"),
    ('a "quoted" word; then: more.', "a quoted word then more"),
])
def test_collapses_breaks_and_lowercases(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", ["", " ", "...!!", '“”—(),.:;"'])
def test_all_breaking_input_normalizes_to_empty(raw):
    assert normalize(raw) == ""


def test_non_breaking_punctuation_is_kept():
    # hyphen, apostrophe and question mark are not word breaks
    assert normalize("Half-attained, isn't it?") == "half-attained isn't it?"


def test_normalize_is_idempotent_on_canonical_text():
    canonical = "white founts falling in the courts of the sun"
    assert normalize(canonical) == canonical
    assert normalize(normalize("  White founts, FALLING!  ")) == normalize("  White founts, FALLING!  ")


def test_non_ascii_is_stable():
    assert normalize("Café Naïve") == normalize("Café Naïve")
    assert normalize("Café Naïve") == "café naïve"


def test_split_words():
    assert split_words("") == []
    assert split_words("a b a") == ["a", "b", "a"]


def test_breaks_word():
    assert breaks_word(" ") and breaks_word("—") and breaks_word("“")
    assert not breaks_word("a") and not breaks_word("-") and not breaks_word("\t")
