"""Logging configuration for safe-upload."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class AppendFileHandler(logging.FileHandler):
    """File handler that opens the log file for each record and closes it after."""

    def __init__(self, filename: Path) -> None:
        super().__init__(filename, mode="a", encoding="utf-8", delay=True)

    def emit(self, record: logging.LogRecord) -> None:
        super().emit(record)
        self.close()


def setup_logging(verbose: int = 0, log_file: Path = Path("upload.log")) -> None:
    """Configure the safe_upload logger.

    Records always go to the append-only log file. Verbose runs also
    mirror them to stderr.

    Args:
        verbose: Verbosity level (0=file only, 1=INFO on stderr, 2+=DEBUG)
        log_file: Path of the log file
    """
    level = logging.DEBUG if verbose >= 2 else logging.INFO

    logger = logging.getLogger("safe_upload")
    logger.setLevel(level)

    # Replace handlers from an earlier setup in the same process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file.parent != Path():
        log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = AppendFileHandler(log_file)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)
