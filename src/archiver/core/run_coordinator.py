"""
Run Coordinator - wires cutoff, classification, aggregation and archiving
into one traversal of the document tree.

All per-run state lives in a RunContext created for each invocation; nothing
is shared between runs.
"""

import os
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Iterable, Optional, Set

from src.interfaces.visitor import ITreeVisitor, VisitResult
from src.archiver.errors import ArchiveWriteError, MissingConfig
from src.archiver.models.archive import PendingFile, RunSummary
from src.archiver.models.options import DateAttribute, ErrorPolicy
from src.services.config_service import ArchiveSettings
from src.utils.file_times import file_timestamps, local_date
from .aggregator import Aggregator
from .archive_writer import Archiver
from .classifier import (
    LayoutMembership,
    is_archive_target,
    skip_reason,
    target_directory,
)
from .cutoff import compute_cutoff
from .disposers import create_disposer
from .tree_walker import walk

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """Mutable state of a single archiving run."""
    root: Path
    cutoff: date
    membership: LayoutMembership
    archiver: Archiver
    reserved_names: Set[str] = field(default_factory=set)
    date_attribute: DateAttribute = DateAttribute.CREATED
    skip_archives: bool = True
    error_policy: ErrorPolicy = ErrorPolicy.ABORT
    aggregator: Aggregator = field(default_factory=Aggregator)
    summary: Optional[RunSummary] = None

    def __post_init__(self):
        if self.summary is None:
            self.summary = RunSummary(root=self.root, cutoff=self.cutoff)


class ArchiveRun(ITreeVisitor):
    """Tree visitor that collects old files and archives them per directory."""

    def __init__(self, context: RunContext):
        self.context = context

    def enter_dir(self, directory: Path, depth: int) -> VisitResult:
        if depth > 0 and directory.name in self.context.reserved_names:
            logger.info(f"Skipping reserved directory: {directory}")
            return VisitResult.SKIP_SUBTREE

        if depth == 1:
            category = self.context.membership.category_of(directory.name)
            if category is None:
                logger.info(f"Category folder: {directory.name} (not archived)")
            else:
                logger.info(f"Category folder: {directory.name} ({category.value})")
        elif depth == 2:
            logger.info(f"Number folder: {directory.name}")
        return VisitResult.CONTINUE

    def visit_file(self, file_path: Path, stat: os.stat_result, depth: int) -> None:
        ctx = self.context
        ctx.summary.files_visited += 1

        created, modified, accessed = file_timestamps(stat)
        reference = created if ctx.date_attribute is DateAttribute.CREATED else modified
        parent = file_path.parent

        reason = skip_reason(
            file_path.name,
            local_date(reference),
            ctx.cutoff,
            depth,
            parent.name,
            parent.parent.name,
            ctx.membership,
            skip_archives=ctx.skip_archives
        )
        if reason is not None:
            logger.debug(f"Skipping {file_path}: {reason}")
            return

        logger.info(f"File {file_path.name} will be added to the archive")
        ctx.aggregator.record(
            target_directory(file_path),
            PendingFile(path=file_path, created=created, modified=modified, accessed=accessed)
        )
        ctx.summary.files_matched += 1

    def exit_dir(self, directory: Path, depth: int) -> None:
        ctx = self.context
        count = ctx.aggregator.count(directory)
        group = ctx.aggregator.pop(directory)
        if not is_archive_target(directory, depth, ctx.membership):
            return

        logger.info(f"Directory: {directory}, files to archive: {count}")
        if not count:
            return

        try:
            result = ctx.archiver.archive(group)
        except ArchiveWriteError as e:
            if ctx.error_policy is ErrorPolicy.ABORT:
                raise
            logger.error(f"Archiving failed for {directory}, continuing: {e}")
            ctx.summary.failed_dirs.append(directory)
            return

        ctx.summary.archives.append(result)
        if not result.dry_run:
            ctx.summary.files_archived += len(result.members)


def reserved_directory_names(
    program_dir_name: Optional[str],
    holding_dir: str,
    extra: Iterable[str] = ()
) -> Set[str]:
    names = {holding_dir, *extra}
    if program_dir_name:
        names.add(program_dir_name)
    return names


def run_archiving(
    settings: ArchiveSettings,
    root: Path,
    program_dir_name: Optional[str] = None,
    dry_run: bool = False,
    today: Optional[date] = None
) -> RunSummary:
    """
    Archive every qualifying directory below root.

    Args:
        settings: Validated archive settings
        root: Directory containing the category folders
        program_dir_name: Name of the program's own folder, pruned from the walk
        dry_run: Report archive names without writing or disposing
        today: Reference date for the default year

    Returns:
        RunSummary with counts and created archives

    Raises:
        InvalidDateConfig: For an out-of-range year or month
        MissingConfig: If no month is configured
        TraversalError: On any filesystem error during the walk
        ArchiveWriteError: On archive failure with the abort policy
    """
    if settings.month is None:
        raise MissingConfig("Required key semd.month is not set")

    root = Path(root)
    year = settings.year if settings.year is not None else (today or date.today()).year
    cutoff = compute_cutoff(year, settings.month, settings.cutoff_inclusive)
    logger.info(f"Searching for files created before {cutoff}")

    disposer = create_disposer(settings.disposition, root, root / settings.holding_dir)
    context = RunContext(
        root=root,
        cutoff=cutoff,
        membership=LayoutMembership.from_names(
            settings.structured_folders,
            settings.without_structure
        ),
        archiver=Archiver(cutoff, disposer, dry_run=dry_run),
        reserved_names=reserved_directory_names(
            program_dir_name,
            settings.holding_dir,
            settings.reserved_names
        ),
        date_attribute=settings.date_attribute,
        skip_archives=settings.skip_archives,
        error_policy=settings.on_archive_error,
    )

    logger.info(f"Starting traversal of {root}...")
    walk(root, ArchiveRun(context))
    logger.info("Traversal finished.")

    summary = context.summary
    logger.info(
        f"Archived {summary.files_archived} file(s) into "
        f"{len([a for a in summary.archives if not a.dry_run])} archive(s)"
    )
    return summary
