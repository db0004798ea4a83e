"""Prepared crew manifest answers (env override path and defaults)."""

from __future__ import annotations

# Optional JSON file with keys project/skills/education/experience/fit.
ENV_NEON_MANIFEST_PATH = "NEON_MANIFEST_PATH"

DEFAULT_MANIFEST_PROJECT = (
    "Her best project automated asset intake workflows with Python and Power Automate, "
    "cutting manual processing time and making records consistent across teams."
)
DEFAULT_MANIFEST_SKILLS = (
    "She is skilled in Python, JavaScript, React, Node.js, PostgreSQL, AWS microservices "
    "and REST API design, with steady delivery on client systems."
)
DEFAULT_MANIFEST_EDUCATION = (
    "She holds a B.S. in Business Administration and certifications in JavaScript "
    "algorithms, front-end libraries and Node.js development."
)
DEFAULT_MANIFEST_EXPERIENCE = (
    "She works as a freelance full stack developer after years in asset management, "
    "combining software delivery with process automation."
)
DEFAULT_MANIFEST_FIT = (
    "She pairs API engineering and automation expertise with proven delivery for client "
    "teams, a reliable operator who integrates quickly and solves complex NEON workflows."
)

__all__ = [
    "DEFAULT_MANIFEST_EDUCATION",
    "DEFAULT_MANIFEST_EXPERIENCE",
    "DEFAULT_MANIFEST_FIT",
    "DEFAULT_MANIFEST_PROJECT",
    "DEFAULT_MANIFEST_SKILLS",
    "ENV_NEON_MANIFEST_PATH",
]
