"""Tool registry for the change review agent.

Maps each tool name to its input schema and handler. Arguments are
validated against the schema before the handler runs, so handlers only
ever see well-formed input.
"""

import os
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ValidationError

from change_review.agents.code_review import (
    ToolValidationError,
    collect_changes,
    get_branch_info,
    get_staged_diff,
    perform_review,
    synthesize_commit_message,
    write_report,
)
from change_review.mcp.config import ReviewConfig, config as default_config
from change_review.mcp.models import (
    CodeReviewInput,
    CommitMessageInput,
    FileChangesInput,
    MarkdownReportInput,
    RootDirInput,
)

logger = structlog.get_logger(__name__)

Handler = Callable[[Any], Awaitable[Any]]


def resolve_directory(path: str) -> str:
    """Absolute form of a directory path without trailing separators."""
    resolved = str(Path(path).expanduser().resolve())
    stripped = resolved.rstrip("/\\")
    # Keep the filesystem root intact
    return stripped or os.sep


@dataclass(frozen=True)
class ToolSpec:
    """A named tool with its input schema and handler."""

    name: str
    description: str
    input_model: type[BaseModel]
    handler: Handler

    def json_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()


class ToolRegistry:
    """Fixed mapping from tool name to schema-validated handler."""

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    def register(self, spec: ToolSpec) -> None:
        if spec.name in self._tools:
            raise ValueError(f"Tool already registered: {spec.name}")
        self._tools[spec.name] = spec

    def get(self, name: str) -> ToolSpec:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolValidationError(name, "unknown tool") from None

    @property
    def names(self) -> list[str]:
        return list(self._tools)

    def schemas(self) -> dict[str, dict[str, Any]]:
        """Description and JSON schema per tool, for orchestrators."""
        return {
            spec.name: {"description": spec.description, "input_schema": spec.json_schema()}
            for spec in self._tools.values()
        }

    def validate(self, name: str, arguments: dict[str, Any] | None) -> BaseModel:
        """Parse arguments against the tool's schema."""
        spec = self.get(name)
        try:
            return spec.input_model.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolValidationError(name, str(e)) from e

    async def call(self, name: str, arguments: dict[str, Any] | None = None) -> Any:
        """Validate arguments and run the tool."""
        params = self.validate(name, arguments)
        logger.debug("Calling tool", tool=name)
        return await self.get(name).handler(params)


def build_registry(cfg: ReviewConfig | None = None) -> ToolRegistry:
    """Registry with every change review tool wired to cfg."""
    cfg = cfg or default_config
    registry = ToolRegistry()

    async def get_file_changes_in_directory(params: FileChangesInput) -> list[dict[str, Any]]:
        changes = await collect_changes(
            resolve_directory(params.root_dir),
            params.exclude_patterns,
            batch_size=cfg.max_concurrent_diffs,
        )
        return [c.to_dict() for c in changes]

    async def generate_commit_message(params: CommitMessageInput) -> str:
        return synthesize_commit_message(
            [c.to_file_change() for c in params.changes],
            params.commit_type,
            params.scope,
            max_length=cfg.max_commit_message_length,
        )

    async def write_markdown_report(params: MarkdownReportInput) -> str:
        path = write_report(
            params.review_content,
            params.output_path or cfg.report_dir,
            params.file_name,
        )
        return f"Markdown report saved to: {path}"

    async def perform_code_review(params: CodeReviewInput) -> dict[str, Any]:
        result = await perform_review(
            resolve_directory(params.root_dir),
            params.exclude_patterns,
            params.output_report,
            report_dir=cfg.report_dir,
            batch_size=cfg.max_concurrent_diffs,
            max_message_length=cfg.max_commit_message_length,
        )
        return result.to_dict()

    async def get_staged_changes(params: RootDirInput) -> str:
        return await get_staged_diff(resolve_directory(params.root_dir))

    async def get_current_branch_info(params: RootDirInput) -> dict[str, Any]:
        info = await get_branch_info(resolve_directory(params.root_dir))
        return info.to_dict()

    for spec in (
        ToolSpec(
            "get_file_changes_in_directory",
            "Gets code changes made in a git repository directory",
            FileChangesInput,
            get_file_changes_in_directory,
        ),
        ToolSpec(
            "generate_commit_message",
            "Generates a conventional commit message based on file changes",
            CommitMessageInput,
            generate_commit_message,
        ),
        ToolSpec(
            "write_markdown_report",
            "Writes code review content to a markdown file",
            MarkdownReportInput,
            write_markdown_report,
        ),
        ToolSpec(
            "perform_code_review",
            "Performs comprehensive code review including changes analysis, "
            "suggestions, and report generation",
            CodeReviewInput,
            perform_code_review,
        ),
        ToolSpec(
            "get_staged_changes",
            "Gets currently staged changes in the git repository",
            RootDirInput,
            get_staged_changes,
        ),
        ToolSpec(
            "get_branch_info",
            "Gets information about current git branch",
            RootDirInput,
            get_current_branch_info,
        ),
    ):
        registry.register(spec)

    return registry
