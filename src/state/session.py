"""Single-slot session state shared by every handler."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING
from dataclasses import field, dataclass

if TYPE_CHECKING:
    from src.oracle.session import OracleSession


@dataclass(slots=True)
class SessionContext:
    # Vessel Authorization Code as configured; may contain non-digits.
    neon_code: str = ""
    # Most recently reassembled challenge sentence.
    current_challenge: str = ""
    oracle_session: OracleSession | None = None
    pending_prompts: deque[str] = field(default_factory=deque)
    started: bool = False

    @property
    def oracle_ready(self) -> bool:
        return self.oracle_session is not None


__all__ = ["SessionContext"]
