"""Tests for environment-driven configuration."""

from change_review.mcp.config import ReviewConfig


class TestReviewConfig:

    def test_defaults(self, monkeypatch):
        for name in (
            "CHANGE_REVIEW_SERVER_NAME",
            "CHANGE_REVIEW_REPORT_DIR",
            "CHANGE_REVIEW_MAX_CONCURRENT_DIFFS",
            "CHANGE_REVIEW_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        cfg = ReviewConfig.from_env()

        assert cfg.server_name == "change-review"
        assert cfg.report_dir == "./code-reviews"
        assert cfg.max_concurrent_diffs == 10
        assert cfg.max_commit_message_length == 72
        assert cfg.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CHANGE_REVIEW_REPORT_DIR", "/var/reviews")
        monkeypatch.setenv("CHANGE_REVIEW_MAX_CONCURRENT_DIFFS", "4")
        monkeypatch.setenv("CHANGE_REVIEW_LOG_LEVEL", "debug")

        cfg = ReviewConfig.from_env()

        assert cfg.report_dir == "/var/reviews"
        assert cfg.max_concurrent_diffs == 4
        assert cfg.log_level == "DEBUG"
