"""Crew manifest (resume) sections with a read-through in-memory cache."""

from __future__ import annotations

import re
import asyncio
import logging
from pathlib import Path

from src.errors import ResumeUnavailableError
from src.config.files import (
    RESUME_SUMMARY_FILENAME,
    RESUME_PROJECTS_FILENAME,
    RESUME_EXPERIENCE_FILENAME,
    RESUME_EDUCATION_SKILLS_FILENAME,
)

logger = logging.getLogger(__name__)

SECTION_FILES: dict[str, str] = {
    "projects": RESUME_PROJECTS_FILENAME,
    "education_skills": RESUME_EDUCATION_SKILLS_FILENAME,
    "experience": RESUME_EXPERIENCE_FILENAME,
    "summary": RESUME_SUMMARY_FILENAME,
}

# First match wins; anything else falls back to the summary.
_SECTION_CUES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("projects", re.compile(r"project|work\s+or\s+personal", re.IGNORECASE)),
    (
        "education_skills",
        re.compile(r"education|degree|university|school|certifications?|skills?", re.IGNORECASE),
    ),
    (
        "experience",
        re.compile(r"work|experience|employment|job|role|recent\s+deployment", re.IGNORECASE),
    ),
)


def select_section(sentence: str) -> str:
    for name, pattern in _SECTION_CUES:
        if pattern.search(sentence or ""):
            return name
    return "summary"


class ResumeStore:
    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)
        self._cache: dict[str, str] = {}

    def path_for(self, section: str) -> Path:
        return self._directory / SECTION_FILES[section]

    async def read(self, section: str) -> str:
        cached = self._cache.get(section)
        if cached is not None:
            return cached
        path = self.path_for(section)
        try:
            content = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as exc:
            raise ResumeUnavailableError(section=section, path=str(path)) from exc
        self._cache[section] = content
        logger.debug("resume: cached section=%s chars=%d", section, len(content))
        return content


__all__ = ["SECTION_FILES", "ResumeStore", "select_section"]
