"""
Shared fixtures for change review tests.

Provides real temporary git repositories plus sample FileChange lists.
"""

import subprocess
from pathlib import Path
from typing import Callable, Generator

import pytest

from change_review.agents.code_review.models import FileChange


# =============================================================================
# GIT REPOSITORY FIXTURES
# =============================================================================

def run_git(repo_path: Path, *args: str) -> str:
    """Run a git command in repo_path and return stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo_path,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout


def init_repo(repo_path: Path, files: dict[str, str]) -> Path:
    """Initialize a repository and commit the given files."""
    repo_path.mkdir(parents=True, exist_ok=True)
    run_git(repo_path, "init")
    run_git(repo_path, "config", "user.email", "test@test.com")
    run_git(repo_path, "config", "user.name", "Test User")
    run_git(repo_path, "config", "commit.gpgsign", "false")

    for path, content in files.items():
        file_path = repo_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)

    run_git(repo_path, "add", ".")
    run_git(repo_path, "commit", "-m", "Initial commit")
    return repo_path


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Create a minimal temporary git repository.

    Yields:
        Path to the initialized git repository
    """
    yield init_repo(tmp_path / "test_repo", {"initial.py": "# Initial file\n"})


@pytest.fixture
def realistic_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Create a repository with typical project structure, all committed.

    Yields:
        Path to the initialized git repository
    """
    files = {
        "src/main.py": "# Main entry point\ndef main(): pass\n",
        "src/api/users.py": "# Users API\ndef get_user(id): pass\n",
        "src/auth/login.py": "# Login handler\ndef login(u, p): pass\n",
        "tests/test_main.py": "# Tests\ndef test_main(): assert True\n",
        "docs/guide.md": "# Project Documentation\n",
        "dist/bundle.js": "console.log('built');\n",
        "package.json": '{"name": "project", "version": "1.0.0"}\n',
    }
    yield init_repo(tmp_path / "project", files)


@pytest.fixture
def modify() -> Callable[[Path, str, int], None]:
    """Append n lines to a tracked file, leaving the change unstaged."""

    def _modify(repo_path: Path, path: str, n: int) -> None:
        file_path = repo_path / path
        with file_path.open("a") as f:
            for i in range(n):
                f.write(f"# change {i}\n")

    return _modify


@pytest.fixture
def not_a_repo(tmp_path: Path) -> Path:
    """A plain directory outside any git work tree."""
    path = tmp_path / "plain"
    path.mkdir()
    (path / "file.txt").write_text("hello\n")
    return path


# =============================================================================
# SAMPLE DATA
# =============================================================================

@pytest.fixture
def auth_and_readme_changes() -> list[FileChange]:
    """Source change plus README edit."""
    return [
        FileChange(path="src/auth.ts", line_change_count=40),
        FileChange(path="README.md", line_change_count=2),
    ]


@pytest.fixture
def seven_file_changes() -> list[FileChange]:
    """Seven distinct non-test, non-source files."""
    return [
        FileChange(path=f"config/settings_{i}.yaml", line_change_count=i + 1)
        for i in range(7)
    ]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Integration tests requiring a git binary"
    )
