"""Transmission verification: recall a word from an earlier spoken answer."""

from __future__ import annotations

import re
import logging

from src.text.words import nth_word, extract_words
from src.state.payloads import Payload, SpeakText

from .context import FastPathContext

logger = logging.getLogger(__name__)

_VERIFICATION_RE = re.compile(r"transmission\s+verification|earlier\s+you\s+transmitted", re.IGNORECASE)
_NTH_WORD_RE = re.compile(
    r"speak\s+the\s+(\d+)(?:st|nd|rd|th)?\s+word\s+of\s+that\s+transmission",
    re.IGNORECASE,
)
_TOPIC_RE = re.compile(
    r"earlier\s+you\s+transmitted\s+your\s+crew\s+member['’]?s\s+(.+?)\.\s+speak\s+the",
    re.IGNORECASE,
)


def pick_prior_transmission(topic: str, candidates: list[str]) -> str | None:
    """Best keyword match for ``topic``; ties go to the earliest, no match to the latest."""
    if not candidates:
        return None
    keywords = [word for word in extract_words(topic.lower()) if len(word) > 2]

    best_text: str | None = None
    best_score = -1
    for text in candidates:
        lowered = text.lower()
        score = sum(1 for keyword in keywords if keyword in lowered)
        if score > best_score:
            best_score = score
            best_text = text

    if best_score <= 0:
        return candidates[-1]
    return best_text


async def verification_rule(sentence: str, ctx: FastPathContext) -> Payload | None:
    if not _VERIFICATION_RE.search(sentence):
        return None
    position_match = _NTH_WORD_RE.search(sentence)
    if not position_match:
        return None
    position = int(position_match.group(1))
    if position < 1:
        return None

    topic_match = _TOPIC_RE.search(sentence)
    topic = topic_match.group(1) if topic_match else ""

    source = pick_prior_transmission(topic, await ctx.history.spoken_texts())
    if source is None:
        logger.info("fastpath: no prior speak_text to verify against")
        return None
    word = nth_word(source, position)
    if not word:
        return None
    return SpeakText(text=word)


__all__ = ["pick_prior_transmission", "verification_rule"]
