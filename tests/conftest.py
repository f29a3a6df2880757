"""Shared fixtures."""

import logging
from pathlib import Path

import pytest

from safe_upload.errors import CommandFailureError
from safe_upload.models import CommandResult


def _subcommand(args: list[str]) -> str:
    """The git subcommand, skipping global options such as --literal-pathspecs."""
    return next((arg for arg in args[1:] if not arg.startswith("-")), args[1])


class FakeRunner:
    """Command runner that records argv lists instead of running them."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.cwds: list[Path] = []
        self.fail_on: set[str] = set()  # git subcommands that exit nonzero
        self.missing = False  # behave as if the executable does not exist

    def run(self, args: list[str], cwd: Path) -> CommandResult:
        self.calls.append(list(args))
        self.cwds.append(cwd)
        if self.missing:
            raise CommandFailureError(list(args), reason="No such file or directory")
        if _subcommand(args) in self.fail_on:
            result = CommandResult(args=list(args), returncode=1, output="fatal: simulated\n")
            raise CommandFailureError(list(args), result=result)
        output = "git version 2.43.0\n" if _subcommand(args) == "--version" else ""
        return CommandResult(args=list(args), returncode=0, output=output)

    @property
    def subcommands(self) -> list[str]:
        """git subcommand of each call, in order."""
        return [_subcommand(call) for call in self.calls]


@pytest.fixture
def runner() -> FakeRunner:
    """Create a recording runner."""
    return FakeRunner()


@pytest.fixture
def source(tmp_path: Path) -> Path:
    """Create a source directory with a mix of clean and junk files."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / ".DS_Store").write_text("junk")
    (root / "sub").mkdir()
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "Thumbs.db").write_text("junk")
    return root


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("safe_upload")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
