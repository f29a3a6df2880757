"""Tests for data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from safe_upload.models import (
    CommandResult,
    FileCandidate,
    FilterRule,
    RuleKind,
    UploadResult,
    WorkflowConfig,
    WorkflowState,
)


class TestFilterRule:
    """Tests for FilterRule matching."""

    def test_literal_exact_match(self):
        """Literal rule matches only the exact name."""
        rule = FilterRule.literal("Thumbs.db")
        assert rule.kind == RuleKind.LITERAL
        assert rule.matches("Thumbs.db")
        assert not rule.matches("thumbs.db")
        assert not rule.matches("Thumbs.db.bak")

    def test_literal_ignore_case(self):
        """Case-insensitive literal rule folds case."""
        rule = FilterRule.literal("Thumbs.db", ignore_case=True)
        assert rule.matches("THUMBS.DB")

    def test_regex_must_match_whole_name(self):
        """Regex rules use full matching."""
        rule = FilterRule.regex(r"[a-z]+\.tmp")
        assert rule.matches("cache.tmp")
        assert not rule.matches("cache.tmp.txt")

    def test_regex_is_case_insensitive_by_default(self):
        """Regex rules ignore case unless told otherwise."""
        assert FilterRule.regex(r"^\._.*").matches("._Foo.TXT")
        assert not FilterRule.regex(r"abc", ignore_case=False).matches("ABC")

    def test_regex_spans_newlines(self):
        """A dotfile whose name contains a newline is still a dotfile."""
        assert FilterRule.regex(r"^\..*").matches(".a\nb")

    def test_rule_is_frozen(self):
        """Rules cannot be modified after creation."""
        rule = FilterRule.literal(".DS_Store")
        with pytest.raises(ValidationError):
            rule.pattern = "other"


class TestFileCandidate:
    """Tests for FileCandidate."""

    def test_from_path_uses_posix_relative_path(self, tmp_path: Path):
        """Relative path is computed from the root with forward slashes."""
        path = tmp_path / "sub" / "deep" / "file.txt"
        candidate = FileCandidate.from_path(tmp_path, path)

        assert candidate.path == path
        assert candidate.relative_path == "sub/deep/file.txt"


class TestWorkflowConfig:
    """Tests for WorkflowConfig validation."""

    def test_valid_config(self, tmp_path: Path):
        """Absolute source with remote and branch is accepted."""
        config = WorkflowConfig(source=tmp_path, remote="git@example.com:me/repo.git", branch="main")
        assert config.dry_run is False

    def test_relative_source_rejected(self):
        """Relative source paths are rejected."""
        with pytest.raises(ValidationError):
            WorkflowConfig(source=Path("relative/dir"), remote="url", branch="main")

    def test_blank_branch_rejected(self, tmp_path: Path):
        """Blank branch names are rejected."""
        with pytest.raises(ValidationError):
            WorkflowConfig(source=tmp_path, remote="url", branch="  ")

    def test_config_is_immutable(self, tmp_path: Path):
        """Config cannot be changed once built."""
        config = WorkflowConfig(source=tmp_path, remote="url", branch="main")
        with pytest.raises(ValidationError):
            config.dry_run = True


class TestCommandResult:
    """Tests for CommandResult."""

    def test_ok_and_command_line(self):
        """ok reflects exit status zero and command_line joins args."""
        result = CommandResult(args=["git", "add", "a.txt"], returncode=0)
        assert result.ok
        assert result.command_line == "git add a.txt"
        assert not CommandResult(args=["git"], returncode=128).ok


class TestUploadResult:
    """Tests for UploadResult and WorkflowState."""

    def test_terminal_states(self):
        """Only done, dry_run_exit and failed are terminal."""
        terminal = {s for s in WorkflowState if s.is_terminal}
        assert terminal == {WorkflowState.DONE, WorkflowState.DRY_RUN_EXIT, WorkflowState.FAILED}

    def test_succeeded(self):
        """Dry-run exit and done count as success."""
        assert UploadResult(state=WorkflowState.DONE).succeeded
        assert UploadResult(state=WorkflowState.DRY_RUN_EXIT).succeeded
        assert not UploadResult(state=WorkflowState.FAILED).succeeded
