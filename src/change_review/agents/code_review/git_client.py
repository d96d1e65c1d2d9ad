"""
Git Client

Thin async wrapper over the git CLI providing the queries the review
pipeline needs: repository check, numstat summary, per-file diff, staged
diff, branch listing and ahead/behind status.
"""

import asyncio
import re
from pathlib import Path

import structlog

from .errors import GitCommandError

logger = structlog.get_logger(__name__)


class GitClient:
    """Run read-only git queries against a working directory."""

    # "<added>\t<deleted>\t<path>", binary files report "-\t-\t<path>".
    # Renames leave the path empty and put source and destination in the
    # next two NUL-separated fields.
    NUMSTAT_RECORD = re.compile(r"^(\d+|-)\t(\d+|-)\t(.*)$", re.DOTALL)
    # "## main...origin/main [ahead 2, behind 1]"
    STATUS_HEADER = re.compile(r"^## .*?(?:\[(?P<tracking>[^\]]*)\])?$")
    AHEAD = re.compile(r"ahead (\d+)")
    BEHIND = re.compile(r"behind (\d+)")

    def __init__(self, repo_path: str | Path, git_binary: str = "git"):
        """Initialize client for a repository path."""
        self.repo_path = Path(repo_path)
        self.git_binary = git_binary

    async def check_is_repo(self) -> bool:
        """Whether repo_path is inside a git work tree."""
        if not self.repo_path.is_dir():
            return False
        try:
            output = await self._run_git(["rev-parse", "--is-inside-work-tree"])
        except GitCommandError:
            return False
        return output.strip() == "true"

    async def diff_summary(self) -> list[tuple[str, int]]:
        """Changed paths with insertions + deletions, in git's order.

        Paths are relative to repo_path and limited to changes beneath it.
        NUL-terminated output keeps non-ASCII paths unquoted.
        """
        output = await self._run_git(["diff", "--numstat", "-z", "--relative"])
        return self._parse_numstat(output)

    async def diff_file(self, path: str) -> str:
        """Textual diff for a single path as reported by diff_summary."""
        return await self._run_git(["diff", "--relative", "--", f":(literal){path}"])

    async def staged_diff(self) -> str:
        """Textual diff of everything staged for the next commit."""
        return await self._run_git(["diff", "--staged"])

    async def branches(self) -> tuple[str, list[str]]:
        """Current branch name and every known branch name."""
        output = await self._run_git(["branch", "--all", "--no-color"])
        current = ""
        names: list[str] = []

        for line in output.split("\n"):
            if not line.strip() or " -> " in line:
                # Skip symbolic refs like "remotes/origin/HEAD -> origin/main"
                continue
            is_current = line.startswith("*")
            name = line[2:].strip()
            if is_current:
                current = name
            names.append(name)

        if not current:
            # Unborn branch: no commits yet, so `git branch` lists nothing
            current = (await self._run_git(["symbolic-ref", "--short", "HEAD"])).strip()

        return current, names

    async def ahead_behind(self) -> tuple[int, int]:
        """Commits ahead of and behind the upstream branch (0 when untracked)."""
        output = await self._run_git(["status", "--porcelain", "--branch"])
        header = output.split("\n", 1)[0]
        return self._parse_tracking(header)

    def _parse_numstat(self, output: str) -> list[tuple[str, int]]:
        """Parse git diff --numstat -z output."""
        files: list[tuple[str, int]] = []
        fields = iter(output.split("\0"))

        for record in fields:
            match = self.NUMSTAT_RECORD.match(record)
            if not match:
                continue
            added, deleted, path = match.groups()
            if not path:
                next(fields, None)
                path = next(fields, "")
            if not path:
                continue
            changes = (0 if added == "-" else int(added)) + (
                0 if deleted == "-" else int(deleted)
            )
            files.append((path, changes))

        return files

    def _parse_tracking(self, header: str) -> tuple[int, int]:
        """Parse the ahead/behind bracket of a porcelain status header."""
        match = self.STATUS_HEADER.match(header)
        if not match or not match.group("tracking"):
            return 0, 0

        tracking = match.group("tracking")
        ahead = self.AHEAD.search(tracking)
        behind = self.BEHIND.search(tracking)
        return (
            int(ahead.group(1)) if ahead else 0,
            int(behind.group(1)) if behind else 0,
        )

    async def _run_git(self, args: list[str]) -> str:
        """Run git command and return output."""
        cmd = [self.git_binary, "-C", str(self.repo_path)] + args

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise GitCommandError(cmd, f"Unable to run git: {e}") from e

        stdout, stderr = await proc.communicate()

        if proc.returncode != 0:
            error_msg = stderr.decode(errors="replace").strip()
            logger.debug(
                "Git command failed",
                args=args,
                returncode=proc.returncode,
                error=error_msg,
            )
            raise GitCommandError(
                cmd,
                f"Git command failed: {error_msg or 'exit code ' + str(proc.returncode)}",
                returncode=proc.returncode,
            )

        return stdout.decode(errors="replace")
