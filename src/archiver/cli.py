"""
Command-line interface for the document archiver.

Exit code 0 means the whole tree was processed; any configuration,
traversal or archiving error ends the run with exit code 1.
"""

import sys
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from src.archiver.core.run_coordinator import run_archiving
from src.archiver.errors import ArchiverError
from src.services.config_service import ConfigService
from src.services.logging_service import LoggingService
from src.utils.env_loader import load_env_automatically

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Document Archiver - zip document files older than a cutoff month"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config.yaml",
        help="Path to configuration file (default: config.yaml)"
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Directory containing the category folders (default: parent of the working directory)"
    )
    parser.add_argument("--month", type=int, default=None, help="Override semd.month")
    parser.add_argument("--year", type=int, default=None, help="Override semd.year")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the archives that would be created without writing anything"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write the log to this file"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=None,
        help="Write a timestamped run log into this directory"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    log_file = None
    if args.log_file:
        log_file = Path(args.log_file)
    elif args.log_dir:
        log_file = LoggingService.run_log_file(Path(args.log_dir))
    LoggingService.setup_logging(log_level=log_level, log_file=log_file)

    load_env_automatically()

    program_dir = Path.cwd()
    root = Path(args.root) if args.root else program_dir.parent

    try:
        config_service = ConfigService(config_path=Path(args.config))
        config_service.update_settings({"month": args.month, "year": args.year})
        settings = config_service.get_settings()
        summary = run_archiving(
            settings,
            root,
            program_dir_name=program_dir.name,
            dry_run=args.dry_run
        )
    except ArchiverError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return EXIT_FAILURE

    if summary.failed_dirs:
        logger.error(f"Archiving failed for {len(summary.failed_dirs)} directory(ies):")
        for directory in summary.failed_dirs:
            logger.error(f"  {directory}")
        return EXIT_FAILURE

    if args.dry_run:
        logger.info(f"Dry run: {summary.files_matched} file(s) would be archived "
                    f"into {len(summary.archives)} archive(s)")
    else:
        logger.info(f"Done: {summary.files_archived} file(s) archived "
                    f"into {len(summary.archives)} archive(s)")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
