"""Thin wrapper mapping named git steps onto command lines."""

import logging
from pathlib import Path

from ..errors import CommandFailureError, ToolNotFoundError
from ..models import CommandResult
from .runner import CommandRunner

logger = logging.getLogger(__name__)


class GitClient:
    """Runs git subcommands inside one working directory."""

    def __init__(self, runner: CommandRunner, cwd: Path, executable: str = "git") -> None:
        """
        Initialize the client.

        Args:
            runner: Command runner used for every invocation
            cwd: Working directory (the upload source root)
            executable: git executable name or path
        """
        self.runner = runner
        self.cwd = cwd
        self.executable = executable

    def _run(self, *args: str) -> CommandResult:
        return self.runner.run([self.executable, *args], self.cwd)

    def version(self) -> CommandResult:
        """Query the git version, confirming the executable is usable.

        Raises:
            ToolNotFoundError: git is missing or the query exits nonzero.
        """
        try:
            result = self._run("--version")
        except CommandFailureError as e:
            raise ToolNotFoundError(
                f"Git is not installed or not found in PATH ({self.executable}): {e}"
            ) from e
        logger.debug("Using %s", result.output.strip())
        return result

    def init(self) -> CommandResult:
        """Create an empty repository."""
        return self._run("init")

    def checkout_new_branch(self, branch: str) -> CommandResult:
        """Create a branch and switch to it."""
        return self._run("checkout", "-b", branch)

    def add_remote(self, name: str, url: str) -> CommandResult:
        """Register a remote."""
        return self._run("remote", "add", name, url)

    def add(self, path: str) -> CommandResult:
        """Stage one path, given relative to the working directory.

        The path is passed after "--" with pathspec magic disabled, so names
        such as "-notes.txt" or "?env" stage exactly that file.
        """
        return self._run("--literal-pathspecs", "add", "--", path)

    def commit(self, message: str) -> CommandResult:
        """Commit the staged changes."""
        return self._run("commit", "-m", message)

    def push(self, remote: str, branch: str) -> CommandResult:
        """Push a branch and set it as upstream."""
        return self._run("push", "-u", remote, branch)
