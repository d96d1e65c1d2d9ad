"""Change Review MCP Server.

FastMCP server exposing the change review tools to MCP clients. Each tool
is a thin adapter that forwards its arguments to the tool registry, which
validates them and runs the handler.

Usage:
    python -m change_review.mcp.server
"""

import logging
import sys
from typing import Any

import structlog
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from change_review.agents.code_review import ChangeReviewError
from change_review.mcp.config import config
from change_review.mcp.registry import build_registry

logger = structlog.get_logger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Initialize structured logging on stderr (stdout carries the MCP stream)."""
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


registry = build_registry(config)

# Initialize FastMCP server
mcp = FastMCP(config.server_name)


async def dispatch(name: str, arguments: dict[str, Any]) -> Any:
    """Run a registry tool, surfacing failures as MCP tool errors."""
    try:
        return await registry.call(name, arguments)
    except ChangeReviewError as e:
        logger.warning("Tool failed", tool=name, error=str(e))
        raise ToolError(str(e)) from e


# =============================================================================
# MCP Tools
# =============================================================================


@mcp.tool()
async def get_file_changes_in_directory(
    root_dir: str,
    exclude_patterns: list[str] | None = None,
) -> list[dict[str, Any]]:
    """Gets code changes made in a git repository directory.

    Args:
        root_dir: The root directory to analyze for changes
        exclude_patterns: Additional files/directories to exclude

    Returns:
        Changed files (path, line_change_count, diff_text), largest first
    """
    return await dispatch(
        "get_file_changes_in_directory",
        {"root_dir": root_dir, "exclude_patterns": exclude_patterns or []},
    )


@mcp.tool()
async def generate_commit_message(
    changes: list[dict[str, Any]],
    commit_type: str | None = None,
    scope: str | None = None,
) -> str:
    """Generates a conventional commit message based on file changes.

    Args:
        changes: File changes, each with path, line_change_count and diff_text
        commit_type: feat, fix, docs, style, refactor, test or chore
        scope: Scope of the changes (e.g., component name)
    """
    return await dispatch(
        "generate_commit_message",
        {"changes": changes, "commit_type": commit_type, "scope": scope},
    )


@mcp.tool()
async def write_markdown_report(
    review_content: str,
    output_path: str | None = None,
    file_name: str | None = None,
) -> str:
    """Writes code review content to a markdown file.

    Args:
        review_content: The code review content to write to markdown
        output_path: Directory where the markdown file should be saved
        file_name: Name of the markdown file
    """
    return await dispatch(
        "write_markdown_report",
        {"review_content": review_content, "output_path": output_path, "file_name": file_name},
    )


@mcp.tool()
async def perform_code_review(
    root_dir: str,
    exclude_patterns: list[str] | None = None,
    output_report: bool = False,
) -> dict[str, Any]:
    """Performs comprehensive code review including changes analysis,
    suggestions, and report generation.

    Args:
        root_dir: The root directory to review
        exclude_patterns: Additional files/directories to exclude
        output_report: Whether to generate a markdown report
    """
    return await dispatch(
        "perform_code_review",
        {
            "root_dir": root_dir,
            "exclude_patterns": exclude_patterns or [],
            "output_report": output_report,
        },
    )


@mcp.tool()
async def get_staged_changes(root_dir: str) -> str:
    """Gets currently staged changes in the git repository."""
    return await dispatch("get_staged_changes", {"root_dir": root_dir})


@mcp.tool()
async def get_branch_info(root_dir: str) -> dict[str, Any]:
    """Gets information about current git branch."""
    return await dispatch("get_branch_info", {"root_dir": root_dir})


def main() -> None:
    configure_logging(config.log_level)
    logger.info("Starting change review MCP server", tools=registry.names)
    mcp.run()


if __name__ == "__main__":
    main()
