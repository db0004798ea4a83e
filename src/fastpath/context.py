"""Inputs shared by every fast-path rule."""

from __future__ import annotations

from dataclasses import dataclass

from src.history import TransmissionLog
from src.state.settings import ManifestSettings


@dataclass(frozen=True, slots=True)
class FastPathContext:
    neon_code: str
    history: TransmissionLog
    manifest: ManifestSettings


__all__ = ["FastPathContext"]
