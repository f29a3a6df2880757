"""Upload workflow configuration, states and results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, field_validator

from .candidate import FileCandidate


class WorkflowConfig(BaseModel):
    """Effective inputs for one upload run."""

    source: Path  # Absolute path of the directory to upload
    remote: str
    branch: str
    dry_run: bool = False

    model_config = {"frozen": True}

    @field_validator("source")
    @classmethod
    def validate_source(cls, v: Path) -> Path:
        """Source must be an absolute path."""
        if not v.is_absolute():
            raise ValueError(f"source must be an absolute path, got '{v}'")
        return v

    @field_validator("remote", "branch")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Remote and branch must not be empty."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v


class WorkflowState(str, Enum):
    """States of the upload workflow."""

    PARSING_ARGS = "parsing_args"
    VALIDATING_TOOL = "validating_tool"
    FILTERING = "filtering"
    DRY_RUN_EXIT = "dry_run_exit"  # Terminal
    INITIALIZING = "initializing"
    STAGING = "staging"
    COMMITTING = "committing"
    PUSHING = "pushing"
    DONE = "done"  # Terminal
    FAILED = "failed"  # Terminal

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition is possible."""
        return self in (WorkflowState.DRY_RUN_EXIT, WorkflowState.DONE, WorkflowState.FAILED)


@dataclass
class UploadResult:
    """Result of an upload run."""

    state: WorkflowState = WorkflowState.PARSING_ARGS
    history: list[WorkflowState] = field(default_factory=list)  # States visited, in order
    candidates: list[FileCandidate] = field(default_factory=list)
    dry_run: bool = False
    ignore_file_created: bool = False
    initialized: bool = False  # Whether this run ran `git init`

    @property
    def file_count(self) -> int:
        """Number of files selected for upload."""
        return len(self.candidates)

    @property
    def succeeded(self) -> bool:
        """Whether the run reached a successful terminal state."""
        return self.state in (WorkflowState.DONE, WorkflowState.DRY_RUN_EXIT)
