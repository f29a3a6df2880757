"""git integration."""

from .client import GitClient
from .runner import CommandRunner, SubprocessRunner

__all__ = [
    "CommandRunner",
    "GitClient",
    "SubprocessRunner",
]
