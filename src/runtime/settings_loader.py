"""Environment parsing for runtime settings."""

from __future__ import annotations

import os
import json
import logging
from typing import Any
from pathlib import Path

from src.config.secrets import ENV_NEON_CODE, ENV_GROQ_API_KEY
from src.config.files import (
    ENV_NEON_RESUME_DIR,
    ENV_NEON_HISTORY_PATH,
    DEFAULT_NEON_RESUME_DIR,
    DEFAULT_NEON_HISTORY_PATH,
)
from src.config.neon import (
    ENV_NEON_URL,
    DEFAULT_NEON_URL,
    ENV_NEON_OPEN_TIMEOUT_S,
    DEFAULT_NEON_OPEN_TIMEOUT_S,
)
from src.config.archive import (
    ENV_ARCHIVE_TIMEOUT_S,
    ENV_ARCHIVE_BASE_URL,
    ENV_ARCHIVE_USER_AGENT,
    DEFAULT_ARCHIVE_TIMEOUT_S,
    DEFAULT_ARCHIVE_BASE_URL,
    DEFAULT_ARCHIVE_USER_AGENT,
)
from src.config.manifest import (
    DEFAULT_MANIFEST_FIT,
    ENV_NEON_MANIFEST_PATH,
    DEFAULT_MANIFEST_SKILLS,
    DEFAULT_MANIFEST_PROJECT,
    DEFAULT_MANIFEST_EDUCATION,
    DEFAULT_MANIFEST_EXPERIENCE,
)
from src.state.settings import (
    AppSettings,
    FileSettings,
    NeonSettings,
    OracleSettings,
    ArchiveSettings,
    ManifestSettings,
)
from src.config.oracle import (
    ENV_ORACLE_MODEL,
    DEFAULT_ORACLE_MODEL,
    ENV_ORACLE_MAX_ROUNDS,
    ENV_ORACLE_ATTACHMENTS,
    ENV_ORACLE_TEMPERATURE,
    DEFAULT_ORACLE_MAX_ROUNDS,
    DEFAULT_ORACLE_ATTACHMENTS,
    DEFAULT_ORACLE_TEMPERATURE,
    ENV_ORACLE_BOOTSTRAP_TIMEOUT_S,
    DEFAULT_ORACLE_BOOTSTRAP_TIMEOUT_S,
)

logger = logging.getLogger(__name__)

MANIFEST_KEYS = ("project", "skills", "education", "experience", "fit")


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _path_env(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def _parse_paths(raw: str) -> tuple[Path, ...]:
    return tuple(Path(part.strip()).expanduser() for part in raw.split(",") if part.strip())


def _load_neon_settings() -> NeonSettings:
    # The code is kept verbatim; it may contain non-digit characters.
    code = (os.getenv(ENV_NEON_CODE) or "").strip()
    if not code:
        logger.warning("settings: %s is not set", ENV_NEON_CODE)
    return NeonSettings(
        url=_str_env(ENV_NEON_URL, DEFAULT_NEON_URL),
        code=code,
        open_timeout_s=_float_env(ENV_NEON_OPEN_TIMEOUT_S, DEFAULT_NEON_OPEN_TIMEOUT_S),
    )


def _load_oracle_settings() -> OracleSettings:
    return OracleSettings(
        api_key=(os.getenv(ENV_GROQ_API_KEY) or "").strip(),
        model=_str_env(ENV_ORACLE_MODEL, DEFAULT_ORACLE_MODEL),
        temperature=_float_env(ENV_ORACLE_TEMPERATURE, DEFAULT_ORACLE_TEMPERATURE),
        bootstrap_timeout_s=_float_env(ENV_ORACLE_BOOTSTRAP_TIMEOUT_S, DEFAULT_ORACLE_BOOTSTRAP_TIMEOUT_S),
        max_rounds=max(1, _int_env(ENV_ORACLE_MAX_ROUNDS, DEFAULT_ORACLE_MAX_ROUNDS)),
        attachments=_parse_paths(_str_env(ENV_ORACLE_ATTACHMENTS, DEFAULT_ORACLE_ATTACHMENTS)),
    )


def _load_archive_settings() -> ArchiveSettings:
    return ArchiveSettings(
        base_url=_str_env(ENV_ARCHIVE_BASE_URL, DEFAULT_ARCHIVE_BASE_URL),
        timeout_s=_float_env(ENV_ARCHIVE_TIMEOUT_S, DEFAULT_ARCHIVE_TIMEOUT_S),
        user_agent=_str_env(ENV_ARCHIVE_USER_AGENT, DEFAULT_ARCHIVE_USER_AGENT),
    )


def _load_file_settings() -> FileSettings:
    return FileSettings(
        history_path=_path_env(ENV_NEON_HISTORY_PATH, DEFAULT_NEON_HISTORY_PATH),
        resume_dir=_path_env(ENV_NEON_RESUME_DIR, DEFAULT_NEON_RESUME_DIR),
    )


def _read_manifest_overrides(path: Path) -> dict[str, Any]:
    try:
        parsed = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ValueError(f"{ENV_NEON_MANIFEST_PATH} could not be loaded from {path}: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ValueError(f"{ENV_NEON_MANIFEST_PATH} must point at a JSON object")
    unknown = set(parsed) - set(MANIFEST_KEYS)
    if unknown:
        raise ValueError(f"{ENV_NEON_MANIFEST_PATH} has unknown keys: {sorted(unknown)}")
    return parsed


def _load_manifest_settings() -> ManifestSettings:
    texts: dict[str, Any] = {
        "project": DEFAULT_MANIFEST_PROJECT,
        "skills": DEFAULT_MANIFEST_SKILLS,
        "education": DEFAULT_MANIFEST_EDUCATION,
        "experience": DEFAULT_MANIFEST_EXPERIENCE,
        "fit": DEFAULT_MANIFEST_FIT,
    }
    raw = os.getenv(ENV_NEON_MANIFEST_PATH)
    if raw and raw.strip():
        for key, value in _read_manifest_overrides(Path(raw.strip()).expanduser()).items():
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{ENV_NEON_MANIFEST_PATH}: {key!r} must be a non-empty string")
            texts[key] = value.strip()
    return ManifestSettings(**texts)


def load_settings() -> AppSettings:
    return AppSettings(
        neon=_load_neon_settings(),
        oracle=_load_oracle_settings(),
        archive=_load_archive_settings(),
        files=_load_file_settings(),
        manifest=_load_manifest_settings(),
    )


__all__ = ["load_settings"]
