"""
Tests for the review data models.
"""

import pytest

from change_review.agents.code_review.models import BranchInfo, FileChange, ReviewResult


class TestFileChange:

    def test_defaults(self):
        change = FileChange("src/app.py")
        assert change.line_change_count == 0
        assert change.diff_text == ""

    @pytest.mark.parametrize("kwargs", [
        {"path": ""},
        {"path": "a.py", "line_change_count": -1},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            FileChange(**kwargs)


class TestReviewResult:

    def test_to_dict_has_exactly_the_response_fields(self):
        result = ReviewResult(
            changes=[FileChange("src/app.py", 4, "diff --git a/src/app.py b/src/app.py")],
            summary="Reviewed 1 files with 4 total changes. File types: .py",
            suggestions=["Consider adding type annotations if missing"],
            commit_message="feat: update app with 1 file changed",
        )

        assert result.to_dict() == {
            "changes": [{
                "path": "src/app.py",
                "line_change_count": 4,
                "diff_text": "diff --git a/src/app.py b/src/app.py",
            }],
            "summary": "Reviewed 1 files with 4 total changes. File types: .py",
            "suggestions": ["Consider adding type annotations if missing"],
            "commit_message": "feat: update app with 1 file changed",
            "report_path": None,
        }

    def test_to_dict_copies_suggestions(self):
        result = ReviewResult(suggestions=["a"])
        result.to_dict()["suggestions"].append("b")
        assert result.suggestions == ["a"]


def test_branch_info_to_dict():
    info = BranchInfo("main", ["main", "dev"], ahead=2)
    assert info.to_dict() == {"current": "main", "branches": ["main", "dev"], "ahead": 2, "behind": 0}
