"""
Data models for the change review pipeline.

Defines all types passed between the collector, the synthesizers and the
report writer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CommitType(str, Enum):
    """Conventional commit categories."""

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    CHORE = "chore"


@dataclass(frozen=True)
class FileChange:
    """A changed file with its line count and diff text."""

    path: str
    line_change_count: int = 0
    diff_text: str = ""

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("FileChange path must not be empty")
        if self.line_change_count < 0:
            raise ValueError(
                f"line_change_count must be >= 0, got {self.line_change_count}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for tool responses."""
        return {
            "path": self.path,
            "line_change_count": self.line_change_count,
            "diff_text": self.diff_text,
        }


@dataclass
class ReviewResult:
    """Complete review output."""

    changes: list[FileChange] = field(default_factory=list)
    summary: str = ""
    suggestions: list[str] = field(default_factory=list)
    commit_message: str | None = None
    report_path: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for tool responses."""
        return {
            "changes": [c.to_dict() for c in self.changes],
            "summary": self.summary,
            "suggestions": list(self.suggestions),
            "commit_message": self.commit_message,
            "report_path": self.report_path,
        }


@dataclass
class BranchInfo:
    """Current branch plus ahead/behind counts against upstream."""

    current: str
    branches: list[str] = field(default_factory=list)
    ahead: int = 0
    behind: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": self.current,
            "branches": list(self.branches),
            "ahead": self.ahead,
            "behind": self.behind,
        }
