"""Length constraints phrased in natural language ("between 10 and 40 characters")."""

from __future__ import annotations

import re
from collections.abc import Callable

from src.state.validation import Constraint

# Up to two words may sit between the number and "characters" ("total", "total text").
_GAP = r"\s+(?:[a-z]+\s+){0,2}?characters?"
_N = r"(\d+)"

_BETWEEN_RE = re.compile(rf"between\s+{_N}\s+and\s+{_N}{_GAP}", re.IGNORECASE)
_EXACT_RE = re.compile(rf"exactly\s+{_N}{_GAP}", re.IGNORECASE)
_AT_LEAST_RE = re.compile(rf"at\s+least\s+{_N}{_GAP}", re.IGNORECASE)
_AT_MOST_RE = re.compile(rf"at\s+most\s+{_N}{_GAP}", re.IGNORECASE)
_LESS_THAN_RE = re.compile(rf"(?:less|fewer)\s+than\s+{_N}{_GAP}", re.IGNORECASE)
_MORE_THAN_RE = re.compile(rf"more\s+than\s+{_N}{_GAP}", re.IGNORECASE)
_UNDER_RE = re.compile(rf"\bunder\s+{_N}{_GAP}", re.IGNORECASE)
_OVER_RE = re.compile(rf"\bover\s+{_N}{_GAP}", re.IGNORECASE)


def _between(sentence: str) -> Constraint | None:
    match = _BETWEEN_RE.search(sentence)
    if match is None:
        return None
    return Constraint(min=int(match.group(1)), max=int(match.group(2)))


def _exact(sentence: str) -> Constraint | None:
    match = _EXACT_RE.search(sentence)
    if match is None:
        return None
    return Constraint(exact=int(match.group(1)))


def _at_least_at_most(sentence: str) -> Constraint | None:
    low = _AT_LEAST_RE.search(sentence)
    high = _AT_MOST_RE.search(sentence)
    if low is None and high is None:
        return None
    return Constraint(
        min=int(low.group(1)) if low else None,
        max=int(high.group(1)) if high else None,
    )


def _exclusive_upper(pattern: re.Pattern[str]) -> Callable[[str], Constraint | None]:
    def rule(sentence: str) -> Constraint | None:
        match = pattern.search(sentence)
        if match is None:
            return None
        return Constraint(max=int(match.group(1)) - 1)

    return rule


def _exclusive_lower(pattern: re.Pattern[str]) -> Callable[[str], Constraint | None]:
    def rule(sentence: str) -> Constraint | None:
        match = pattern.search(sentence)
        if match is None:
            return None
        return Constraint(min=int(match.group(1)) + 1)

    return rule


# Order matters: first match wins.
CONSTRAINT_RULES: tuple[tuple[str, Callable[[str], Constraint | None]], ...] = (
    ("between", _between),
    ("exactly", _exact),
    ("at_least_at_most", _at_least_at_most),
    ("less_than", _exclusive_upper(_LESS_THAN_RE)),
    ("more_than", _exclusive_lower(_MORE_THAN_RE)),
    ("under", _exclusive_upper(_UNDER_RE)),
    ("over", _exclusive_lower(_OVER_RE)),
)


def parse_constraints(sentence: str) -> Constraint:
    text = str(sentence or "")
    for _name, rule in CONSTRAINT_RULES:
        constraint = rule(text)
        if constraint is not None:
            return constraint
    return Constraint()


__all__ = ["CONSTRAINT_RULES", "parse_constraints"]
