"""Intent cues read from the active challenge sentence."""

from __future__ import annotations

import re

_POUND_RE = re.compile(r"pound\s+key|#", re.IGNORECASE)
_SPEAK_RE = re.compile(r"\b(speak|transmit)\b", re.IGNORECASE)
_RECALL_RE = re.compile(
    r"\b(recall|earlier|previous|history|word\s+from\s+one\s+of\s+its\s+earlier)\b",
    re.IGNORECASE,
)


def requires_pound(sentence: str) -> bool:
    return bool(_POUND_RE.search(sentence or ""))


def asks_to_speak(sentence: str) -> bool:
    return bool(_SPEAK_RE.search(sentence or ""))


def asks_for_recall(sentence: str) -> bool:
    return bool(_RECALL_RE.search(sentence or ""))


__all__ = ["asks_for_recall", "asks_to_speak", "requires_pound"]
