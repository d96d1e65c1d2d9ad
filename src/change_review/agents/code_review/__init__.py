"""
Code Review Agent Module

Collects pending git changes, drafts a commit message, synthesizes review
suggestions and writes markdown reports.
"""

from .collector import collect_changes
from .commit_message import detect_commit_type, synthesize_commit_message
from .errors import (
    ChangeReviewError,
    CollectionFailedError,
    GitCommandError,
    NotARepositoryError,
    ReportWriteFailedError,
    ReviewFailedError,
    SynthesisFailedError,
    ToolValidationError,
)
from .exclusion import EXCLUDED_PATTERNS, is_excluded
from .git_client import GitClient
from .models import BranchInfo, CommitType, FileChange, ReviewResult
from .report import write_report
from .reviewer import get_branch_info, get_staged_diff, perform_review
from .synthesis import synthesize_review

__all__ = [
    "BranchInfo",
    "ChangeReviewError",
    "CollectionFailedError",
    "CommitType",
    "EXCLUDED_PATTERNS",
    "FileChange",
    "GitClient",
    "GitCommandError",
    "NotARepositoryError",
    "ReportWriteFailedError",
    "ReviewFailedError",
    "ReviewResult",
    "SynthesisFailedError",
    "ToolValidationError",
    "collect_changes",
    "detect_commit_type",
    "get_branch_info",
    "get_staged_diff",
    "is_excluded",
    "perform_review",
    "synthesize_commit_message",
    "synthesize_review",
    "write_report",
]
