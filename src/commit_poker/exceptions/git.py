"""Version-control exceptions: missing executable, failed commands."""

from typing import List, Optional

from .base import CommitPokerError


class GitError(CommitPokerError):
    """Base class for errors raised while talking to git."""

    pass


class GitNotFoundError(GitError):
    """Raised when the git executable cannot be located or started."""

    def __init__(self, executable: str, reason: str):
        super().__init__(
            "Could not find git on path",
            details={"executable": executable},
            cause=reason,
        )
        self.executable = executable
        self.reason = reason


class GitCommandError(GitError):
    """Raised when a git command runs but reports failure."""

    def __init__(self, command: List[str], returncode: int, stderr: Optional[str] = None):
        details = {"command": " ".join(command), "returncode": str(returncode)}
        if stderr:
            details["stderr"] = stderr.strip()

        super().__init__(f"Git {command[1] if len(command) > 1 else 'command'} failed", details=details)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
