"""
Review Synthesizer

Heuristic summary and suggestions for a set of file changes. No LLM calls.
"""

from collections.abc import Callable, Sequence
from pathlib import PurePosixPath

from .errors import SynthesisFailedError
from .models import FileChange

SOURCE_EXTENSIONS = (".py", ".pyi", ".ts", ".tsx", ".js", ".jsx")
MAX_FILES_PER_COMMIT = 5

TYPE_ANNOTATIONS_SUGGESTION = "Consider adding type annotations if missing"
TEST_COVERAGE_SUGGESTION = "Verify test coverage for the implemented changes"
SPLIT_COMMITS_SUGGESTION = "Consider breaking this into smaller, focused commits"
FALLBACK_SUGGESTION = "Changes look good. Consider adding comments for complex logic"

# Each rule is checked independently, in this order
SUGGESTION_RULES: list[tuple[Callable[[Sequence[FileChange]], bool], str]] = [
    (
        lambda changes: any(c.path.endswith(SOURCE_EXTENSIONS) for c in changes),
        TYPE_ANNOTATIONS_SUGGESTION,
    ),
    (
        lambda changes: any("test" in c.path or "spec" in c.path for c in changes),
        TEST_COVERAGE_SUGGESTION,
    ),
    (lambda changes: len(changes) > MAX_FILES_PER_COMMIT, SPLIT_COMMITS_SUGGESTION),
]


def file_extensions(changes: Sequence[FileChange]) -> list[str]:
    """Distinct extensions in first-seen order, ignoring extensionless files."""
    seen: dict[str, None] = {}
    for change in changes:
        suffix = PurePosixPath(change.path).suffix
        if suffix:
            seen.setdefault(suffix, None)
    return list(seen)


def summarize_changes(changes: Sequence[FileChange]) -> str:
    total = sum(c.line_change_count for c in changes)
    types = ", ".join(file_extensions(changes)) or "various"
    return f"Reviewed {len(changes)} files with {total} total changes. File types: {types}"


def suggest(changes: Sequence[FileChange]) -> list[str]:
    suggestions = [text for applies, text in SUGGESTION_RULES if applies(changes)]
    if not suggestions:
        suggestions.append(FALLBACK_SUGGESTION)
    return suggestions


def synthesize_review(changes: Sequence[FileChange]) -> tuple[str, list[str]]:
    """
    Summarize changes and produce review suggestions.

    Returns:
        Tuple of (summary, suggestions); suggestions always has an entry

    Raises:
        SynthesisFailedError: the summary could not be composed
    """
    try:
        return summarize_changes(changes), suggest(changes)
    except Exception as e:
        raise SynthesisFailedError(f"Failed to synthesize review: {e}") from e
