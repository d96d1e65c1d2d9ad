"""
Change Reviewer

Chains collection, commit message and review synthesis, and optional report
writing into a single review operation. Also hosts the direct git queries.
"""

from pathlib import Path

import structlog

from .collector import DEFAULT_BATCH_SIZE, collect_changes
from .commit_message import MAX_COMMIT_MESSAGE_LENGTH, synthesize_commit_message
from .errors import ReviewFailedError
from .git_client import GitClient
from .models import BranchInfo, ReviewResult
from .report import compose_review_content, write_report
from .synthesis import synthesize_review

logger = structlog.get_logger(__name__)

NO_CHANGES_SUMMARY = "No changes detected for review"
NO_CHANGES_SUGGESTION = "No changes to review"


async def perform_review(
    root_dir: str | Path,
    exclude_patterns: list[str] | None = None,
    output_report: bool = False,
    *,
    report_dir: str | Path | None = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
    max_message_length: int = MAX_COMMIT_MESSAGE_LENGTH,
) -> ReviewResult:
    """
    Review pending changes in a working directory.

    Args:
        root_dir: Git working directory to review
        exclude_patterns: Extra substrings/prefixes to ignore
        output_report: Write a markdown report and attach its path
        report_dir: Directory for the report (writer default when None)
        batch_size: Concurrent diff fetches per batch
        max_message_length: Commit message length limit

    Returns:
        ReviewResult with changes, summary, suggestions and commit message

    Raises:
        ReviewFailedError: any step failed; the cause is chained
    """
    try:
        changes = await collect_changes(root_dir, exclude_patterns, batch_size=batch_size)

        if not changes:
            return ReviewResult(
                changes=[],
                summary=NO_CHANGES_SUMMARY,
                suggestions=[NO_CHANGES_SUGGESTION],
            )

        commit_message = synthesize_commit_message(changes, max_length=max_message_length)
        summary, suggestions = synthesize_review(changes)
        result = ReviewResult(
            changes=changes,
            summary=summary,
            suggestions=suggestions,
            commit_message=commit_message,
        )

        if output_report:
            content = compose_review_content(summary, suggestions, commit_message, changes)
            result.report_path = write_report(content, report_dir)

    except Exception as e:
        logger.error("Code review failed", root_dir=str(root_dir), error=str(e))
        raise ReviewFailedError(f"Failed to perform code review: {e}") from e

    logger.info(
        "Code review completed",
        root_dir=str(root_dir),
        files=len(result.changes),
        report_path=result.report_path,
    )
    return result


async def get_staged_diff(root_dir: str | Path) -> str:
    """Diff of changes staged for the next commit."""
    return await GitClient(root_dir).staged_diff()


async def get_branch_info(root_dir: str | Path) -> BranchInfo:
    """Current branch, all branches, and ahead/behind counts."""
    git = GitClient(root_dir)
    current, branches = await git.branches()
    ahead, behind = await git.ahead_behind()
    return BranchInfo(current=current, branches=branches, ahead=ahead, behind=behind)
