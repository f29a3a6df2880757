"""External command results."""

from dataclasses import dataclass


@dataclass
class CommandResult:
    """Exit status and combined stdout/stderr of one external command."""

    args: list[str]
    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        """Whether the command exited with status zero."""
        return self.returncode == 0

    @property
    def command_line(self) -> str:
        """The command as a single printable line."""
        return " ".join(self.args)
