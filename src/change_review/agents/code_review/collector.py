"""
Change Collector

Enumerates changed files in a working directory and fetches their diffs in
fixed-size batches.
"""

import asyncio
from pathlib import Path

import structlog

from .errors import CollectionFailedError, GitCommandError, NotARepositoryError
from .exclusion import exclusion_set, is_excluded
from .git_client import GitClient
from .models import FileChange

logger = structlog.get_logger(__name__)

DEFAULT_BATCH_SIZE = 10


def make_batches(items: list, batch_size: int) -> list[list]:
    """Split items into consecutive batches of at most batch_size."""
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    return [items[i : i + batch_size] for i in range(0, len(items), batch_size)]


async def collect_changes(
    root_dir: str | Path,
    exclude_patterns: list[str] | None = None,
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    git: GitClient | None = None,
) -> list[FileChange]:
    """
    Collect changed files with their diffs, largest change first.

    Args:
        root_dir: Git working directory to inspect
        exclude_patterns: Extra substrings/prefixes to ignore
        batch_size: Number of diffs fetched concurrently per batch
        git: Client to use (defaults to one bound to root_dir)

    Returns:
        FileChange list sorted by line_change_count descending (stable)

    Raises:
        NotARepositoryError: root_dir is missing or not under git
        CollectionFailedError: the change summary could not be read
    """
    git = git or GitClient(root_dir)

    if not await git.check_is_repo():
        raise NotARepositoryError(str(root_dir))

    patterns = exclusion_set(exclude_patterns)

    try:
        summary = await git.diff_summary()
    except Exception as e:
        raise CollectionFailedError(f"Failed to get file changes: {e}") from e

    to_process = [(path, n) for path, n in summary if path and not is_excluded(path, patterns)]
    logger.debug(
        "Collected diff summary",
        root_dir=str(root_dir),
        files=len(summary),
        excluded=len(summary) - len(to_process),
    )

    async def fetch(path: str, changes: int) -> FileChange | None:
        try:
            diff = await git.diff_file(path)
        except GitCommandError as e:
            logger.warning("Failed to get diff for file", path=path, error=str(e))
            return None
        return FileChange(path=path, line_change_count=changes, diff_text=diff)

    collected: list[FileChange] = []
    for batch in make_batches(to_process, batch_size):
        results = await asyncio.gather(*(fetch(path, n) for path, n in batch))
        collected.extend(r for r in results if r is not None)

    # sorted() is stable, so equal counts keep git's reporting order
    return sorted(collected, key=lambda c: c.line_change_count, reverse=True)
