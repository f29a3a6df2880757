"""Data models."""

from .candidate import FileCandidate
from .command import CommandResult
from .rules import FilterRule, RuleKind
from .workflow import UploadResult, WorkflowConfig, WorkflowState

__all__ = [
    "CommandResult",
    "FileCandidate",
    "FilterRule",
    "RuleKind",
    "UploadResult",
    "WorkflowConfig",
    "WorkflowState",
]
