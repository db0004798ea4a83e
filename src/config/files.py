"""On-disk locations for the transmission log and crew manifest sources."""

from __future__ import annotations

from pathlib import Path

ENV_NEON_HISTORY_PATH = "NEON_HISTORY_PATH"
DEFAULT_NEON_HISTORY_PATH = Path("data") / "history.txt"

ENV_NEON_RESUME_DIR = "NEON_RESUME_DIR"
DEFAULT_NEON_RESUME_DIR = Path("data") / "resume"

RESUME_PROJECTS_FILENAME = "resume.projects.txt"
RESUME_EDUCATION_SKILLS_FILENAME = "resume.education_skills.txt"
RESUME_EXPERIENCE_FILENAME = "resume.experience.txt"
RESUME_SUMMARY_FILENAME = "resume.summary.txt"

__all__ = [
    "DEFAULT_NEON_HISTORY_PATH",
    "DEFAULT_NEON_RESUME_DIR",
    "ENV_NEON_HISTORY_PATH",
    "ENV_NEON_RESUME_DIR",
    "RESUME_EDUCATION_SKILLS_FILENAME",
    "RESUME_EXPERIENCE_FILENAME",
    "RESUME_PROJECTS_FILENAME",
    "RESUME_SUMMARY_FILENAME",
]
