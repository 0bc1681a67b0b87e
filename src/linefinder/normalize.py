from __future__ import annotations
from .config import WORD_BREAKS


def breaks_word(ch: str) -> bool:
    """True if the character separates words."""
    return ch in WORD_BREAKS


def normalize(text: str) -> str:
    """
    Lowercase the text and collapse every run of word-breaking characters
    into one space. Leading and trailing breaks are dropped, so the result
    never has empty words:

        normalize('“Don John of Austria,”  he said!') == 'don john of austria he said'
    """
    out: list[str] = []
    pending_break = False

    for ch in text.lower():
        if breaks_word(ch):
            # only emit the space once the next word starts
            pending_break = bool(out)
            continue
        if pending_break:
            out.append(" ")
            pending_break = False
        out.append(ch)

    return "".join(out)


def split_words(canonical: str) -> list[str]:
    """Words of an already normalized string."""
    if not canonical:
        return []
    return canonical.split(" ")
