"""
Exceptions raised by the change review pipeline.

Every failure that leaves the package is one of these. External errors
(git subprocess failures, OS errors, schema validation) are normalized into
this hierarchy where they are caught, with the original exception chained
as ``__cause__``.
"""


class ChangeReviewError(RuntimeError):
    """Base class for all change review failures."""


class ToolValidationError(ChangeReviewError):
    """Raised when tool arguments fail schema validation, before execution."""

    def __init__(self, tool_name: str, message: str):
        super().__init__(f"Invalid arguments for {tool_name}: {message}")
        self.tool_name = tool_name


class GitCommandError(ChangeReviewError):
    """Raised when a git invocation exits non-zero or cannot be started."""

    def __init__(self, command: list[str], message: str, returncode: int | None = None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class NotARepositoryError(ChangeReviewError):
    """Raised when the target directory is not inside a git work tree."""

    def __init__(self, root_dir: str):
        super().__init__(f"Directory {root_dir} is not a git repository")
        self.root_dir = root_dir


class CollectionFailedError(ChangeReviewError):
    """Raised when changed files cannot be enumerated."""


class SynthesisFailedError(ChangeReviewError):
    """Raised when a commit message or review summary cannot be composed."""


class ReportWriteFailedError(ChangeReviewError):
    """Raised when the markdown report cannot be persisted."""


class ReviewFailedError(ChangeReviewError):
    """Raised when any step of the orchestrated review fails."""
