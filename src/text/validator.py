"""Validate a candidate speak_text answer against its challenge sentence."""

from __future__ import annotations

from src.state.validation import Validation

from .constraints import parse_constraints


def validate_speak_text(text: str, sentence: str) -> Validation:
    candidate = str(text or "")
    length = len(candidate)
    constraints = parse_constraints(sentence)

    if constraints.exact is not None:
        if length != constraints.exact:
            return Validation(
                valid=False,
                length=length,
                constraints=constraints,
                reason=f"Text length must be exactly {constraints.exact} characters, but got {length}.",
            )
        return Validation(valid=True, length=length, constraints=constraints)

    if constraints.min is not None and length < constraints.min:
        return Validation(
            valid=False,
            length=length,
            constraints=constraints,
            reason=f"Text length must be at least {constraints.min} characters, but got {length}.",
        )

    if constraints.max is not None and length > constraints.max:
        return Validation(
            valid=False,
            length=length,
            constraints=constraints,
            reason=f"Text length must be at most {constraints.max} characters, but got {length}.",
        )

    return Validation(valid=True, length=length, constraints=constraints)


__all__ = ["validate_speak_text"]
