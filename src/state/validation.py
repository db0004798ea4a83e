"""Speak-text length constraints and validation results (dataclasses only)."""

from __future__ import annotations

from typing import Any
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Constraint:
    exact: int | None = None
    min: int | None = None
    max: int | None = None

    def to_dict(self) -> dict[str, int]:
        out: dict[str, int] = {}
        if self.exact is not None:
            out["exact"] = self.exact
        if self.min is not None:
            out["min"] = self.min
        if self.max is not None:
            out["max"] = self.max
        return out


@dataclass(frozen=True, slots=True)
class Validation:
    valid: bool
    length: int
    constraints: Constraint
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "valid": self.valid,
            "length": self.length,
            "constraints": self.constraints.to_dict(),
        }
        if self.reason is not None:
            out["reason"] = self.reason
        return out


__all__ = ["Constraint", "Validation"]
