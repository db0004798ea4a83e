"""Word tokenization shared by recall, archive and indexing lookups."""

from __future__ import annotations

import re

_WORD_RE = re.compile(r"[A-Za-z0-9'-]+")


def extract_words(text: str) -> list[str]:
    return _WORD_RE.findall(str(text or ""))


def nth_word(text: str, position: int) -> str | None:
    """Return the 1-based ``position``-th word of ``text``, or None when out of range."""
    if position < 1:
        return None
    words = extract_words(text)
    if position > len(words):
        return None
    return words[position - 1]


__all__ = ["extract_words", "nth_word"]
