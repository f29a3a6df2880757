"""Execution of external commands."""

import logging
import subprocess
import sys
from pathlib import Path
from typing import Protocol, TextIO

from ..errors import CommandFailureError
from ..models import CommandResult

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Interface for running one external command to completion.

    Implementations must block until the command exits, return its
    CommandResult on exit status zero and raise CommandFailureError
    otherwise. The subprocess runner is the production implementation;
    tests substitute a recording fake.
    """

    def run(self, args: list[str], cwd: Path) -> CommandResult:
        """Run a command in cwd.

        Args:
            args: Argument vector, executable first
            cwd: Working directory for the command

        Returns:
            The result of a command that exited with status zero.

        Raises:
            CommandFailureError: The command could not start or exited nonzero.
        """
        ...


class SubprocessRunner:
    """Runs commands as child processes, streaming their output.

    stdout and stderr are merged. Each line is written to ``echo`` as it
    arrives and captured for the returned CommandResult. There is no
    timeout: a command that never exits blocks the caller.
    """

    def __init__(self, echo: TextIO | None = None) -> None:
        self._echo = echo

    @property
    def echo(self) -> TextIO:
        # Resolved lazily so output follows sys.stdout replacements (e.g. capsys)
        return self._echo if self._echo is not None else sys.stdout

    def run(self, args: list[str], cwd: Path) -> CommandResult:
        logger.debug("Running command in %s: %s", cwd, " ".join(args))
        lines: list[str] = []
        try:
            with subprocess.Popen(
                args,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                bufsize=1,
            ) as process:
                if process.stdout is None:
                    raise CommandFailureError(args, reason="no output pipe")
                for line in process.stdout:
                    self.echo.write(line)
                    self.echo.flush()
                    lines.append(line)
                returncode = process.wait()
        except OSError as e:
            raise CommandFailureError(args, reason=str(e)) from e

        result = CommandResult(args=list(args), returncode=returncode, output="".join(lines))
        if not result.ok:
            logger.debug("Command exited with status %d: %s", returncode, result.command_line)
            raise CommandFailureError(result.args, result=result)
        return result
