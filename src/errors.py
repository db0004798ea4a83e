"""Shared error types for the NEON co-pilot."""

from __future__ import annotations

from dataclasses import dataclass


class ToolError(Exception):
    """Base for tool failures that are reported back to the oracle as a tool result."""


@dataclass(slots=True, eq=False)
class CalculationError(ToolError):
    """Raised when an arithmetic request cannot produce a finite number."""

    reason: str
    expression: str = ""

    def __str__(self) -> str:
        if self.expression:
            return f"{self.reason}: {self.expression}"
        return self.reason


@dataclass(slots=True, eq=False)
class ArchiveLookupError(ToolError):
    """Raised when the knowledge archive cannot answer a lookup."""

    reason: str
    title: str = ""

    def __str__(self) -> str:
        if self.title:
            return f"{self.reason} (title={self.title!r})"
        return self.reason


@dataclass(slots=True, eq=False)
class ToolArgumentError(ToolError):
    tool: str
    reason: str

    def __str__(self) -> str:
        return f"{self.tool}: {self.reason}"


@dataclass(slots=True, eq=False)
class ResumeUnavailableError(ToolError):
    section: str
    path: str

    def __str__(self) -> str:
        return f"resume section {self.section!r} is unavailable at {self.path}"


@dataclass(slots=True, eq=False)
class ChannelError(ToolError):
    url: str
    reason: str

    def __str__(self) -> str:
        return f"could not open NEON channel at {self.url}: {self.reason}"


@dataclass(slots=True, eq=False)
class SessionBootstrapError(Exception):
    """Raised when the reasoning session cannot be established at startup."""

    reason: str

    def __str__(self) -> str:
        return self.reason


__all__ = [
    "ArchiveLookupError",
    "CalculationError",
    "ChannelError",
    "ResumeUnavailableError",
    "SessionBootstrapError",
    "ToolArgumentError",
    "ToolError",
]
