"""Run git via subprocess: create a commit and read back HEAD."""

import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ..exceptions import GitCommandError, GitNotFoundError
from ..logging_config import get_logger
from ..scoring import is_valid_hash
from .models import CommitInfo

logger = get_logger(__name__)

# Fields of `git log -1`, NUL separated so the subject may contain anything.
_LOG_FORMAT = "%h%x00%H%x00%ct%x00%s"


class GitClient:
    """Thin wrapper over the git executable for one working directory."""

    def __init__(self, cwd: Optional[str] = None, executable: str = "git"):
        self.cwd = str(Path(cwd or ".").resolve())
        self.executable = executable

    def commit(self, args: Sequence[str]) -> None:
        """Run ``git commit <args>`` attached to the user's terminal.

        Raises:
            GitNotFoundError: git could not be started
            GitCommandError: git exited non-zero
        """
        cmd = [self.executable, "commit", *args]
        logger.debug("Running %s in %s", cmd, self.cwd)
        try:
            result = subprocess.run(cmd, cwd=self.cwd)
        except OSError as e:
            raise GitNotFoundError(self.executable, str(e)) from e

        if result.returncode != 0:
            raise GitCommandError(cmd, result.returncode)

    def latest_commit(self) -> CommitInfo:
        """Describe the commit HEAD points at.

        Raises:
            GitNotFoundError: git could not be started
            GitCommandError: not a repository, no commits yet, or output
                that does not look like a commit
        """
        repo = self._run(["rev-parse", "--show-toplevel"]).strip()
        raw = self._run(["log", "-1", f"--format={_LOG_FORMAT}"]).rstrip("\n")

        parts = raw.split("\x00", 3)
        if len(parts) != 4:
            raise GitCommandError(
                [self.executable, "log"], 0, f"unexpected log output: {raw!r}"
            )
        short_hash, full_hash, timestamp, subject = parts
        short_hash = short_hash.lower()
        if not is_valid_hash(short_hash) or not timestamp.isdigit():
            raise GitCommandError(
                [self.executable, "log"], 0, f"unexpected log output: {raw!r}"
            )

        info = CommitInfo(
            repo=str(Path(repo).resolve()),
            short_hash=short_hash,
            full_hash=full_hash,
            date=int(timestamp),
            summary=subject or None,
        )
        logger.debug("Latest commit %s in %s", info.short_hash, info.repo)
        return info

    def _run(self, args: Sequence[str]) -> str:
        cmd = [self.executable, *args]
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except OSError as e:
            raise GitNotFoundError(self.executable, str(e)) from e
        except subprocess.TimeoutExpired as e:
            raise GitCommandError(cmd, -1, "timed out") from e

        if result.returncode != 0:
            logger.warning("git %s failed: %s", args[0], result.stderr.strip())
            raise GitCommandError(cmd, result.returncode, result.stderr)
        return result.stdout
