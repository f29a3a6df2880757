"""Files selected for upload."""

from pathlib import Path

from pydantic import BaseModel


class FileCandidate(BaseModel):
    """A regular file that passed every filter rule."""

    path: Path  # Absolute path
    relative_path: str  # Root-relative, forward slashes (what `git add` receives)

    model_config = {"frozen": True}

    @classmethod
    def from_path(cls, root: Path, path: Path) -> "FileCandidate":
        """Build a candidate for path, relative to root."""
        return cls(path=path, relative_path=path.relative_to(root).as_posix())
