"""Git client backed by the git command line."""

import logging
import subprocess
from typing import List, Optional

from .base import VcsClient, VcsError

logger = logging.getLogger('prj')


class GitClient(VcsClient):
    """VcsClient that shells out to git."""

    def __init__(self, executable: str = "git"):
        """Initialize git client.

        Args:
            executable: Name or path of the git binary
        """
        self.executable = executable

    def _run(self, repo_path: str, args: List[str], timeout: Optional[float] = None) -> str:
        """Run a git command in repo_path and return its stripped stdout.

        Raises:
            VcsError: If git is missing, exits non-zero or times out
        """
        command = [self.executable, *args]
        try:
            result = subprocess.run(
                command,
                cwd=repo_path,
                capture_output=True,
                text=True,
                check=True,
                timeout=timeout
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise VcsError(f"git {' '.join(args)} failed in {repo_path}: {stderr or e}") from e
        except subprocess.TimeoutExpired as e:
            raise VcsError(f"git {' '.join(args)} timed out after {timeout}s in {repo_path}") from e
        except (FileNotFoundError, NotADirectoryError) as e:
            raise VcsError(f"Could not run git in {repo_path}: {e}") from e
        return result.stdout.strip()

    def current_branch(self, repo_path: str) -> str:
        branch = self._run(repo_path, ["rev-parse", "--abbrev-ref", "HEAD"])
        if not branch:
            raise VcsError(f"Empty branch name in {repo_path}")
        return branch

    def fetch(self, repo_path: str, timeout: Optional[float] = None) -> None:
        logger.debug(f"Fetching {repo_path}")
        self._run(repo_path, ["fetch", "--quiet"], timeout=timeout)

    def tracking_ref(self, repo_path: str) -> Optional[str]:
        try:
            return self._run(repo_path, ["rev-parse", "--abbrev-ref", "@{upstream}"]) or None
        except VcsError:
            return None

    def ref_exists(self, repo_path: str, ref: str) -> bool:
        try:
            self._run(repo_path, ["rev-parse", "--verify", "--quiet", ref])
            return True
        except VcsError:
            return False

    def count_commits(self, repo_path: str, base: str, head: str) -> int:
        output = self._run(repo_path, ["rev-list", "--count", f"{base}..{head}"])
        try:
            return int(output)
        except ValueError as e:
            raise VcsError(f"Unexpected rev-list output in {repo_path}: {output!r}") from e

    def changed_files(self, repo_path: str) -> int:
        output = self._run(repo_path, ["status", "--porcelain"])
        return len([line for line in output.splitlines() if line.strip()])

    def stash_count(self, repo_path: str) -> int:
        output = self._run(repo_path, ["stash", "list"])
        return len([line for line in output.splitlines() if line.strip()])
