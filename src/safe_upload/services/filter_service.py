"""Service for classifying filenames and selecting files to upload."""

import logging
import os
import stat
from collections.abc import Sequence
from pathlib import Path

from ..errors import PathInspectionError
from ..models import FileCandidate, FilterRule

logger = logging.getLogger(__name__)

# System and metadata files that are never uploaded
DEFAULT_FILTER_RULES: tuple[FilterRule, ...] = (
    FilterRule.literal(".DS_Store"),
    FilterRule.literal("Thumbs.db"),
    FilterRule.literal("_MACOSX"),
    FilterRule.regex(r"^\._.*"),  # AppleDouble resource forks
    FilterRule.regex(r"^\..*"),  # Any dotfile
)


class FilterService:
    """Service for classifying filenames and scanning a directory tree."""

    def __init__(
        self,
        rules: Sequence[FilterRule] = DEFAULT_FILTER_RULES,
        metadata_dir: str | None = ".git",
    ) -> None:
        """
        Initialize the service.

        Args:
            rules: Exclusion rules; a filename matching any of them is excluded
            metadata_dir: Directory name under the root that is never walked
        """
        self.rules = tuple(rules)
        self.metadata_dir = metadata_dir

    def is_excluded(self, filename: str) -> bool:
        """Check if a bare filename matches any exclusion rule."""
        return any(rule.matches(filename) for rule in self.rules)

    def is_included(self, filename: str) -> bool:
        """Check if a bare filename matches no exclusion rule."""
        return not self.is_excluded(filename)

    def scan(self, root: Path) -> list[FileCandidate]:
        """
        Walk root and return the regular files that pass every rule.

        Order follows the directory walk and is not sorted. Directories are
        traversed but never returned; symbolic links are neither returned
        nor followed. A path that cannot be inspected is logged and skipped.

        Args:
            root: Absolute path of the directory to scan

        Returns:
            Candidates in traversal order.
        """
        candidates: list[FileCandidate] = []

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            current = Path(dirpath)

            # Prune in place so os.walk does not descend
            for name in list(dirnames):
                path = current / name
                if path.is_symlink() or (current == root and name == self.metadata_dir):
                    logger.info("Skipped: %s", path)
                    dirnames.remove(name)

            for name in filenames:
                path = current / name
                try:
                    regular = self._is_regular_file(path)
                except PathInspectionError as e:
                    logger.warning("%s", e)
                    continue

                if regular and self.is_included(name):
                    candidates.append(FileCandidate.from_path(root, path))
                else:
                    logger.info("Skipped: %s", path)

        logger.debug("Scan of %s selected %d file(s)", root, len(candidates))
        return candidates

    def _is_regular_file(self, path: Path) -> bool:
        """Check the path is a regular file without following symlinks."""
        try:
            mode = path.lstat().st_mode
        except OSError as e:
            raise PathInspectionError(path, e.strerror or str(e)) from e
        return stat.S_ISREG(mode)

    def _on_walk_error(self, error: OSError) -> None:
        """Log a directory that could not be listed; the walk continues."""
        path = Path(error.filename) if error.filename else Path()
        logger.warning("%s", PathInspectionError(path, error.strerror or str(error)))
