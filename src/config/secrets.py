"""Secrets configuration (env names only)."""

from __future__ import annotations

# Vessel Authorization Code. May contain non-numeric characters.
ENV_NEON_CODE = "NEON_CODE"
ENV_GROQ_API_KEY = "GROQ_API_KEY"

__all__ = ["ENV_GROQ_API_KEY", "ENV_NEON_CODE"]
