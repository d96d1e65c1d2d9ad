"""Tests for the FastMCP adapter."""

import pytest
import structlog
from fastmcp.exceptions import ToolError

from change_review.agents.code_review.errors import NotARepositoryError, ToolValidationError
from change_review.mcp import server


class TestDispatch:

    @pytest.mark.asyncio
    async def test_success_returns_handler_result(self):
        message = await server.dispatch(
            "generate_commit_message",
            {"changes": [{"path": "src/parser.py", "line_change_count": 3}]},
        )
        assert message == "feat: update parser with 1 file changed"

    @pytest.mark.asyncio
    async def test_validation_error_becomes_tool_error(self):
        with pytest.raises(ToolError) as exc_info:
            await server.dispatch("get_branch_info", {})
        assert isinstance(exc_info.value.__cause__, ToolValidationError)

    @pytest.mark.asyncio
    async def test_runtime_error_becomes_tool_error(self, not_a_repo):
        with pytest.raises(ToolError, match="is not a git repository") as exc_info:
            await server.dispatch("get_file_changes_in_directory", {"root_dir": str(not_a_repo)})
        assert isinstance(exc_info.value.__cause__, NotARepositoryError)


class TestServerSetup:

    def test_registry_exposes_every_tool(self):
        assert len(server.registry.names) == 6

    def test_configure_logging_accepts_unknown_level(self):
        try:
            server.configure_logging("verbose")
            server.configure_logging("debug")
            assert structlog.is_configured()
        finally:
            structlog.reset_defaults()
