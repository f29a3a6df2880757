"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_COMMIT_MESSAGE = "Safe upload of clean files"


class Settings(BaseSettings):
    """Application settings."""

    log_file: Path = Field(
        default=Path("upload.log"),
        description="Append-only log file, relative to the working directory",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=file only, 1=INFO on stderr, 2+=DEBUG)",
    )

    git_executable: str = Field(
        default="git",
        description="git executable name or path",
    )

    remote_name: str = Field(
        default="origin",
        description="Name the remote is registered under",
    )

    commit_message: str = Field(
        default=DEFAULT_COMMIT_MESSAGE,
        description="Message used for the upload commit",
    )

    metadata_dir: str = Field(
        default=".git",
        description="Repository metadata directory marking an initialized working copy",
    )

    ignore_file: str = Field(
        default=".gitignore",
        description="Name of the generated exclusion manifest",
    )

    model_config = {
        "env_prefix": "SAFE_UPLOAD_",
    }
