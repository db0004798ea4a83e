"""Crew manifest checkpoints answered from prepared texts."""

from __future__ import annotations

import re

from src.text.cues import asks_to_speak
from src.state.settings import ManifestSettings
from src.text.validator import validate_speak_text
from src.state.payloads import Payload, SpeakText

from .context import FastPathContext

_VERIFICATION_RE = re.compile(
    r"transmission\s+verification|earlier\s+you\s+transmitted|word\s+of\s+that\s+transmission",
    re.IGNORECASE,
)
_MANIFEST_RE = re.compile(r"crew\s+manifest|crew\s+member", re.IGNORECASE)

# Priority order: the first topic whose cue matches wins.
_TOPICS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("project", re.compile(r"best\s+project|project\s*\(work\s+or\s+personal\)|notable\s+project", re.IGNORECASE)),
    ("skills", re.compile(r"\bskills\b|technical\s+skills|core\s+strengths", re.IGNORECASE)),
    ("education", re.compile(r"education|degree|university|school|certifications?", re.IGNORECASE)),
    ("experience", re.compile(r"work\s+experience|employment|recent\s+deployment|recent\s+role|roles?", re.IGNORECASE)),
    ("fit", re.compile(r"granted\s+access|good\s+fit|convince\s+us|fit\s+for\s+the\s+mission", re.IGNORECASE)),
)


def select_topic(sentence: str) -> str | None:
    for name, pattern in _TOPICS:
        if pattern.search(sentence):
            return name
    return None


def manifest_text(manifest: ManifestSettings, topic: str) -> str:
    return getattr(manifest, topic)


async def manifest_rule(sentence: str, ctx: FastPathContext) -> Payload | None:
    if _VERIFICATION_RE.search(sentence):
        return None
    if not (_MANIFEST_RE.search(sentence) and asks_to_speak(sentence)):
        return None

    topic = select_topic(sentence)
    if topic is None:
        return None
    text = manifest_text(ctx.manifest, topic)
    if not validate_speak_text(text, sentence).valid:
        return None
    return SpeakText(text=text)


__all__ = ["manifest_rule", "select_topic"]
