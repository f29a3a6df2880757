"""Service running the filter, stage, commit and push workflow."""

import logging

from ..config import Settings
from ..errors import SafeUploadError
from ..git import CommandRunner, GitClient
from ..models import FileCandidate, UploadResult, WorkflowConfig, WorkflowState
from .filter_service import FilterService
from .ignore_service import IgnoreFileService
from .repository_service import RepositoryService

logger = logging.getLogger(__name__)


class UploadService:
    """
    Service driving one upload run through its states.

    validating_tool -> filtering -> (dry_run_exit | initializing -> staging
    -> committing -> pushing -> done). Any error moves the run to failed
    and is re-raised; nothing already applied is rolled back.
    """

    def __init__(
        self,
        settings: Settings,
        runner: CommandRunner,
        filter_service: FilterService | None = None,
        ignore_service: IgnoreFileService | None = None,
    ) -> None:
        self.settings = settings
        self.runner = runner
        self.filter_service = filter_service or FilterService(metadata_dir=settings.metadata_dir)
        self.ignore_service = ignore_service or IgnoreFileService(filename=settings.ignore_file)
        self.last_result: UploadResult | None = None

    def run(self, config: WorkflowConfig) -> UploadResult:
        """
        Upload the filtered contents of config.source.

        Args:
            config: Source, remote, branch and dry-run flag

        Returns:
            UploadResult in state done, or dry_run_exit for a dry run

        Raises:
            ToolNotFoundError: git is not usable; raised before the scan
            CommandFailureError: a git command failed
        """
        result = UploadResult(dry_run=config.dry_run, history=[WorkflowState.PARSING_ARGS])
        self.last_result = result
        git = GitClient(self.runner, config.source, self.settings.git_executable)

        try:
            self._transition(result, WorkflowState.VALIDATING_TOOL)
            git.version()

            self._transition(result, WorkflowState.FILTERING)
            result.candidates = self.filter_service.scan(config.source)
            logger.info("Selected %d file(s) under %s", result.file_count, config.source)

            if config.dry_run:
                self._transition(result, WorkflowState.DRY_RUN_EXIT)
                return result

            self._transition(result, WorkflowState.INITIALIZING)
            result.ignore_file_created = self.ignore_service.ensure(config.source)
            repository = RepositoryService(
                git,
                metadata_dir=self.settings.metadata_dir,
                remote_name=self.settings.remote_name,
            )
            result.initialized = repository.ensure(config.source, config.remote, config.branch)

            self._transition(result, WorkflowState.STAGING)
            self._stage(git, result.candidates)

            self._transition(result, WorkflowState.COMMITTING)
            git.commit(self.settings.commit_message)

            self._transition(result, WorkflowState.PUSHING)
            git.push(self.settings.remote_name, config.branch)

            self._transition(result, WorkflowState.DONE)
            logger.info("Uploaded %d file(s) to %s (%s)", result.file_count, config.remote, config.branch)
            return result
        except (SafeUploadError, OSError) as e:
            failed_in = result.state
            self._transition(result, WorkflowState.FAILED)
            logger.error("ERROR: %s", e)
            logger.debug("Run failed during %s", failed_in.value)
            raise

    def _stage(self, git: GitClient, candidates: list[FileCandidate]) -> None:
        for candidate in candidates:
            git.add(candidate.relative_path)
            logger.debug("Staged: %s", candidate.relative_path)

    def _transition(self, result: UploadResult, state: WorkflowState) -> None:
        logger.debug("State: %s -> %s", result.state.value, state.value)
        result.state = state
        result.history.append(state)
