"""Pydantic input schemas for the change review tools."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from change_review.agents.code_review.models import CommitType, FileChange


class ToolInput(BaseModel):
    """Base for tool arguments; accepts camelCase or snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class RootDirInput(ToolInput):
    """Arguments for the direct git queries."""

    root_dir: str = Field(min_length=1, description="The git working directory to query")


class FileChangesInput(ToolInput):
    root_dir: str = Field(min_length=1, description="The root directory to analyze for changes")
    exclude_patterns: list[str] = Field(
        default_factory=list, description="Additional files/directories to exclude"
    )


class FileChangeInput(ToolInput):
    """A file change as supplied by a caller."""

    path: str = Field(min_length=1)
    line_change_count: int = Field(default=0, ge=0)
    diff_text: str = ""

    def to_file_change(self) -> FileChange:
        return FileChange(
            path=self.path,
            line_change_count=self.line_change_count,
            diff_text=self.diff_text,
        )


class CommitMessageInput(ToolInput):
    changes: list[FileChangeInput] = Field(
        description="Array of file changes to generate commit message for"
    )
    commit_type: CommitType | None = Field(default=None, description="Type of commit")
    scope: str | None = Field(
        default=None, description="Scope of the changes (e.g., component name)"
    )


class MarkdownReportInput(ToolInput):
    review_content: str = Field(description="The code review content to write to markdown")
    output_path: str | None = Field(
        default=None, description="Directory where the markdown file should be saved"
    )
    file_name: str | None = Field(default=None, description="Name of the markdown file")


class CodeReviewInput(ToolInput):
    root_dir: str = Field(min_length=1, description="The root directory to review")
    exclude_patterns: list[str] = Field(default_factory=list)
    output_report: bool = Field(default=False, description="Whether to generate a markdown report")
