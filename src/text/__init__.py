from .cues import asks_to_speak, requires_pound, asks_for_recall
from .words import extract_words, nth_word
from .validator import validate_speak_text
from .constraints import parse_constraints

__all__ = [
    "asks_for_recall",
    "asks_to_speak",
    "extract_words",
    "nth_word",
    "parse_constraints",
    "requires_pound",
    "validate_speak_text",
]
