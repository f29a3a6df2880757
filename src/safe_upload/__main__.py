"""CLI entry point for safe-upload."""

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .cli.output import error
from .config import Settings
from .errors import UsageError
from .logging import setup_logging
from .models import WorkflowConfig


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def build_parser() -> ArgumentParser:
    """Build the command line parser."""
    parser = ArgumentParser(
        prog="safe-upload",
        description="Upload a directory to a git remote, skipping system and hidden files",
    )
    parser.add_argument(
        "--source",
        type=Path,
        required=True,
        help="Root directory to upload",
    )
    parser.add_argument(
        "--remote",
        required=True,
        help="Remote repository URL",
    )
    parser.add_argument(
        "--branch",
        required=True,
        help="Branch to create and push to",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the files that would be committed and exit without changes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Mirror log output to stderr (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path of the append-only log file (default: upload.log)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_config(args: argparse.Namespace) -> WorkflowConfig:
    """Build the workflow config from parsed arguments.

    Raises:
        UsageError: The source is not a directory or a value is invalid.
    """
    source = args.source.absolute()
    if not source.is_dir():
        raise UsageError(f"source is not a directory: {source}")

    try:
        return WorkflowConfig(
            source=source,
            remote=args.remote,
            branch=args.branch,
            dry_run=args.dry_run,
        )
    except ValidationError as e:
        details = "; ".join(f"{err['loc'][0]}: {err['msg']}" for err in e.errors())
        raise UsageError(details) from e


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        config = parse_config(args)
    except UsageError as e:
        parser.print_usage(sys.stderr)
        error(str(e))
        raise SystemExit(1) from e

    # Build settings from CLI args
    settings_kwargs: dict = {}
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file

    settings = Settings(**settings_kwargs)

    setup_logging(settings.verbose, settings.log_file)

    from .cli.upload import run_upload

    try:
        exit_code = run_upload(config, settings)
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
