"""Upload command: filter a directory and push it to a remote."""

import logging

from ..config import Settings
from ..errors import SafeUploadError
from ..git import CommandRunner, SubprocessRunner
from ..models import WorkflowConfig
from ..services import UploadService
from .output import error, header, info, listing, success

logger = logging.getLogger(__name__)


def run_upload(
    config: WorkflowConfig,
    settings: Settings,
    runner: CommandRunner | None = None,
) -> int:
    """Run the upload workflow and report the outcome.

    Args:
        config: Source, remote, branch and dry-run flag
        settings: Application settings
        runner: Command runner (default: real subprocesses)

    Returns:
        Exit code (0 for success or dry-run, 1 for any failure)
    """
    service = UploadService(settings, runner or SubprocessRunner())
    logger.info(
        "Upload requested: source=%s remote=%s branch=%s dry_run=%s",
        config.source,
        config.remote,
        config.branch,
        config.dry_run,
    )

    try:
        result = service.run(config)
    except SafeUploadError as e:
        error(str(e))
        return 1
    except OSError as e:
        error(f"File system error: {e}")
        return 1

    if result.dry_run:
        header("[Dry Run] Files to be committed:")
        listing(candidate.path for candidate in result.candidates)
        return 0

    if result.ignore_file_created:
        info(f"Created {settings.ignore_file}")
    if result.initialized:
        info(f"Initialized repository on branch {config.branch}")
    success(f"Pushed {result.file_count} file(s) to {config.remote} ({config.branch})")
    return 0
