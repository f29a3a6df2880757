"""Service for binding a directory to a remote git repository."""

import logging
from pathlib import Path

from ..git import GitClient

logger = logging.getLogger(__name__)


class RepositoryService:
    """Service for initializing a working copy once."""

    def __init__(self, git: GitClient, metadata_dir: str = ".git", remote_name: str = "origin") -> None:
        self.git = git
        self.metadata_dir = metadata_dir
        self.remote_name = remote_name

    def is_initialized(self, root: Path) -> bool:
        """Check if root already holds repository metadata."""
        return (root / self.metadata_dir).exists()

    def ensure(self, root: Path, remote: str, branch: str) -> bool:
        """
        Make root a working copy on branch with remote registered.

        When the metadata directory exists nothing is run, and the existing
        remote and branch are not compared with the requested ones.
        Otherwise runs init, branch creation and remote registration in
        that order; a failing step raises and later steps are not run.

        Returns:
            True if the repository was initialized by this call
        """
        if self.is_initialized(root):
            logger.info("Repository already initialized: %s", root)
            logger.debug(
                "Existing remote and branch not verified against %s %s",
                remote,
                branch,
            )
            return False

        logger.info("Initializing repository: %s", root)
        self.git.init()
        self.git.checkout_new_branch(branch)
        self.git.add_remote(self.remote_name, remote)
        logger.info("Created branch %s with remote %s -> %s", branch, self.remote_name, remote)
        return True
