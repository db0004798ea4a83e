"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NeonSettings:
    url: str
    code: str
    open_timeout_s: float


@dataclass(frozen=True, slots=True)
class OracleSettings:
    api_key: str
    model: str
    temperature: float
    bootstrap_timeout_s: float
    max_rounds: int
    attachments: tuple[Path, ...]


@dataclass(frozen=True, slots=True)
class ArchiveSettings:
    base_url: str
    timeout_s: float
    user_agent: str


@dataclass(frozen=True, slots=True)
class FileSettings:
    history_path: Path
    resume_dir: Path


@dataclass(frozen=True, slots=True)
class ManifestSettings:
    project: str
    skills: str
    education: str
    experience: str
    fit: str


@dataclass(frozen=True, slots=True)
class AppSettings:
    neon: NeonSettings
    oracle: OracleSettings
    archive: ArchiveSettings
    files: FileSettings
    manifest: ManifestSettings


__all__ = [
    "AppSettings",
    "ArchiveSettings",
    "FileSettings",
    "ManifestSettings",
    "NeonSettings",
    "OracleSettings",
]
