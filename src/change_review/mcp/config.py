"""Configuration management for the change review MCP server."""

import os
from dataclasses import dataclass


@dataclass
class ReviewConfig:
    """Change review server configuration."""

    # Server identity
    server_name: str = "change-review"

    # Where markdown reports land when the caller gives no path
    report_dir: str = "./code-reviews"

    # Diffs fetched concurrently per batch
    max_concurrent_diffs: int = 10

    # Conventional commit header limit
    max_commit_message_length: int = 72

    # structlog minimum level
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ReviewConfig":
        """Create configuration from environment variables."""
        return cls(
            server_name=os.getenv("CHANGE_REVIEW_SERVER_NAME", "change-review"),
            report_dir=os.getenv("CHANGE_REVIEW_REPORT_DIR", "./code-reviews"),
            max_concurrent_diffs=int(os.getenv("CHANGE_REVIEW_MAX_CONCURRENT_DIFFS", "10")),
            log_level=os.getenv("CHANGE_REVIEW_LOG_LEVEL", "INFO").upper(),
        )


# Global configuration instance
config = ReviewConfig.from_env()
