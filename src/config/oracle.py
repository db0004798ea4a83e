"""Reasoning backend (oracle) configuration."""

from __future__ import annotations

ENV_ORACLE_MODEL = "ORACLE_MODEL"
DEFAULT_ORACLE_MODEL = "openai/gpt-oss-120b"

ENV_ORACLE_TEMPERATURE = "ORACLE_TEMPERATURE"
DEFAULT_ORACLE_TEMPERATURE = 0.0

# Bounded wait for session creation and the briefing prompt.
ENV_ORACLE_BOOTSTRAP_TIMEOUT_S = "ORACLE_BOOTSTRAP_TIMEOUT_S"
DEFAULT_ORACLE_BOOTSTRAP_TIMEOUT_S = 120.0

# Upper bound on oracle round trips (tool chains + follow-ups) within one turn.
ENV_ORACLE_MAX_ROUNDS = "ORACLE_MAX_ROUNDS"
DEFAULT_ORACLE_MAX_ROUNDS = 12

# Comma-separated file paths attached to briefing and tool-result prompts.
ENV_ORACLE_ATTACHMENTS = "ORACLE_ATTACHMENTS"
DEFAULT_ORACLE_ATTACHMENTS = "data/resume/resume.summary.txt"

ORACLE_MODE_IMMEDIATE = "immediate"

__all__ = [
    "DEFAULT_ORACLE_ATTACHMENTS",
    "DEFAULT_ORACLE_BOOTSTRAP_TIMEOUT_S",
    "DEFAULT_ORACLE_MAX_ROUNDS",
    "DEFAULT_ORACLE_MODEL",
    "DEFAULT_ORACLE_TEMPERATURE",
    "ENV_ORACLE_ATTACHMENTS",
    "ENV_ORACLE_BOOTSTRAP_TIMEOUT_S",
    "ENV_ORACLE_MAX_ROUNDS",
    "ENV_ORACLE_MODEL",
    "ENV_ORACLE_TEMPERATURE",
    "ORACLE_MODE_IMMEDIATE",
]
