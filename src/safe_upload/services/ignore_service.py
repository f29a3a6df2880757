"""Service for generating the repository's ignore file."""

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

# Written once into new working copies. Kept separate from the scan rules
# in filter_service; the two lists are not required to agree.
DEFAULT_IGNORE_PATTERNS: tuple[str, ...] = (
    ".DS_Store",
    "Thumbs.db",
    "*.log",
    "target/",
    "bin/",
    "*.class",
    ".idea/",
    ".vscode/",
    "*.iml",
)


class IgnoreFileService:
    """Service for creating the ignore file when it does not exist."""

    def __init__(
        self,
        patterns: Sequence[str] = DEFAULT_IGNORE_PATTERNS,
        filename: str = ".gitignore",
    ) -> None:
        self.patterns = tuple(patterns)
        self.filename = filename

    def path_for(self, root: Path) -> Path:
        """Location of the ignore file under root."""
        return root / self.filename

    def render(self) -> str:
        """Ignore file content, one pattern per line."""
        return "\n".join(self.patterns) + "\n"

    def ensure(self, root: Path) -> bool:
        """
        Create the ignore file under root unless it already exists.

        An existing file is never modified, merged or appended to.

        Returns:
            True if the file was created, False if it already existed
        """
        path = self.path_for(root)
        if path.exists():
            logger.debug("Ignore file exists, leaving it untouched: %s", path)
            return False

        path.write_text(self.render(), encoding="utf-8")
        logger.info("Created ignore file: %s", path)
        return True
