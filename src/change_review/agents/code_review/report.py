"""
Report Writer

Persists review content as a markdown document.
"""

from collections.abc import Sequence
from datetime import date, datetime
from pathlib import Path

import structlog

from .errors import ReportWriteFailedError
from .models import FileChange

logger = structlog.get_logger(__name__)

DEFAULT_REPORT_DIR = "./code-reviews"
REPORT_TITLE = "# Code Review Report"
REPORT_FOOTER = "*Generated by Code Review Agent*"


def default_report_name(today: date | None = None) -> str:
    """Report file name for a calendar date."""
    return f"code-review-{(today or date.today()).isoformat()}.md"


def render_report(content: str, generated_at: datetime) -> str:
    """Full markdown document around the review content."""
    return "\n".join(
        [
            REPORT_TITLE,
            "",
            f"**Date:** {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Review Summary",
            "",
            content,
            "",
            "---",
            REPORT_FOOTER,
        ]
    )


def write_report(
    content: str,
    output_dir: str | Path | None = None,
    file_name: str | None = None,
    *,
    now: datetime | None = None,
) -> str:
    """
    Write review content to a markdown file.

    Args:
        content: Markdown body placed under "Review Summary"
        output_dir: Target directory, created if missing
        file_name: File name; defaults to code-review-<date>.md
        now: Timestamp to record (defaults to the current time)

    Returns:
        Path of the written report

    Raises:
        ReportWriteFailedError: the directory or file could not be written
    """
    now = now or datetime.now()
    full_path = Path(output_dir or DEFAULT_REPORT_DIR) / (
        file_name or default_report_name(now.date())
    )

    try:
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(render_report(content, now), encoding="utf-8")
    except OSError as e:
        raise ReportWriteFailedError(f"Failed to write markdown report: {e}") from e

    logger.info("Markdown report written", path=str(full_path))
    return str(full_path)


def format_file_changes(changes: Sequence[FileChange]) -> str:
    """One markdown bullet per changed file."""
    return "\n".join(f"- `{c.path}` ({c.line_change_count} changes)" for c in changes)


def compose_review_content(
    summary: str,
    suggestions: Sequence[str],
    commit_message: str,
    changes: Sequence[FileChange] = (),
) -> str:
    """Report body for a completed review."""
    sections = [f"## Changes Summary\n{summary}"]
    if changes:
        sections.append(f"## Changed Files\n{format_file_changes(changes)}")
    sections.append("## Suggestions\n" + "\n".join(f"- {s}" for s in suggestions))
    sections.append(f"## Commit Message\n`{commit_message}`")
    return "\n\n".join(sections)
