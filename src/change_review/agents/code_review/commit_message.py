"""
Commit Message Synthesizer

Builds a conventional commit header from a list of file changes using
path heuristics.
"""

from collections.abc import Callable, Sequence
from pathlib import PurePosixPath

from .errors import SynthesisFailedError
from .models import CommitType, FileChange

MAX_COMMIT_MESSAGE_LENGTH = 72
NO_CHANGES_MESSAGE = "chore: no changes detected"
ELLIPSIS = "..."

TEST_MARKERS = (".test.", ".spec.")
TEST_DIRS = {"test", "tests", "__tests__", "spec"}


def looks_like_test(path: str) -> bool:
    """Whether a path is a test or spec file."""
    parts = PurePosixPath(path).parts
    name = parts[-1] if parts else path
    if any(marker in name for marker in TEST_MARKERS):
        return True
    if name.startswith("test_") or PurePosixPath(name).stem.endswith("_test"):
        return True
    return any(part in TEST_DIRS for part in parts[:-1])


def _any_path(predicate: Callable[[str], bool]) -> Callable[[Sequence[FileChange]], bool]:
    return lambda changes: any(predicate(c.path) for c in changes)


# Evaluated top to bottom, first match wins
COMMIT_TYPE_RULES: list[tuple[Callable[[Sequence[FileChange]], bool], CommitType]] = [
    (_any_path(looks_like_test), CommitType.TEST),
    (_any_path(lambda p: "README" in p or "docs/" in p), CommitType.DOCS),
    (_any_path(lambda p: "fix" in p or "bug" in p), CommitType.FIX),
]


def detect_commit_type(changes: Sequence[FileChange]) -> CommitType:
    """Infer the commit type from changed paths."""
    for matches, commit_type in COMMIT_TYPE_RULES:
        if matches(changes):
            return commit_type
    return CommitType.FEAT


def build_message_body(changes: Sequence[FileChange]) -> str:
    """Describe the change by its primary non-test, non-README file."""
    main_files = [
        c
        for c in changes
        if "test" not in c.path and "spec" not in c.path and "README" not in c.path
    ]

    if not main_files:
        return "update documentation and tests"

    name = PurePosixPath(main_files[0].path).stem
    count = len(changes)
    return f"update {name} with {count} file{'s' if count > 1 else ''} changed"


def truncate_message(message: str, max_length: int = MAX_COMMIT_MESSAGE_LENGTH) -> str:
    """Cut a message to max_length, ending it with an ellipsis if shortened."""
    if max_length < len(ELLIPSIS):
        raise ValueError(f"max_length must be >= {len(ELLIPSIS)}, got {max_length}")
    if len(message) <= max_length:
        return message
    return message[: max_length - len(ELLIPSIS)] + ELLIPSIS


def synthesize_commit_message(
    changes: Sequence[FileChange],
    commit_type: CommitType | str | None = None,
    scope: str | None = None,
    *,
    max_length: int = MAX_COMMIT_MESSAGE_LENGTH,
) -> str:
    """
    Generate a conventional commit message for a set of changes.

    Args:
        changes: Files included in the commit
        commit_type: Explicit type; overrides detection when given
        scope: Optional scope, e.g. a component name
        max_length: Maximum message length including the ellipsis

    Returns:
        "<type>(<scope>): <body>", or the no-changes sentinel

    Raises:
        SynthesisFailedError: the message could not be composed
    """
    if not changes:
        return NO_CHANGES_MESSAGE

    try:
        final_type = CommitType(commit_type) if commit_type else detect_commit_type(changes)
        body = build_message_body(changes)
        header = f"{final_type.value}({scope})" if scope else final_type.value
        return truncate_message(f"{header}: {body}", max_length)
    except Exception as e:
        raise SynthesisFailedError(f"Failed to generate commit message: {e}") from e
