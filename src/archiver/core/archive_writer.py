"""
Archive writer: names, writes and finalizes one zip per target directory.

Archives are labeled with the month being archived (the month before the
cutoff) and the names of the target directory and its parent:
    {YYYY}_{MM}_{directory}_{parent}.zip
An existing file with that name is never overwritten; the first free
"_1", "_2", ... variant is used instead.
"""

import os
import shutil
import zipfile
import logging
from datetime import date
from pathlib import Path
from typing import Collection, List, Optional

from src.interfaces.disposer import IDisposer
from src.archiver.models.archive import ArchiveGroup, ArchiveResult, PendingFile
from src.archiver.errors import ArchiveWriteError
from src.utils.file_times import dos_date_time, extended_timestamp_extra
from .cutoff import archive_label
from .disposers import unique_path

logger = logging.getLogger(__name__)


def build_archive_name(cutoff: date, directory: Path) -> str:
    year, month = archive_label(cutoff)
    return f"{year:04d}_{month:02d}_{directory.name}_{directory.parent.name}.zip"


class Archiver:
    """
    Creates the archive for a completed target directory and disposes of
    the archived originals.
    """

    def __init__(
        self,
        cutoff: date,
        disposer: IDisposer,
        dry_run: bool = False,
        compression: int = zipfile.ZIP_DEFLATED
    ):
        """
        Initialize the archiver.

        Args:
            cutoff: Exclusive cutoff date of the run
            disposer: Disposition policy applied after a successful write
            dry_run: Only compute and report archive names
            compression: zipfile compression method
        """
        self.cutoff = cutoff
        self.disposer = disposer
        self.dry_run = dry_run
        self.compression = compression

    def archive_path(self, directory: Path) -> Path:
        """Collision-free archive path inside directory."""
        return unique_path(directory / build_archive_name(self.cutoff, directory))

    def archive(self, group: ArchiveGroup) -> Optional[ArchiveResult]:
        """
        Write the archive for a group and dispose of its files.

        Args:
            group: Pending files of one target directory

        Returns:
            ArchiveResult, or None for an empty group

        Raises:
            ArchiveWriteError: If the zip cannot be written or an original
                cannot be disposed of
        """
        if not group.files:
            return None

        archive_path = self.archive_path(group.target)
        members = [pending.name for pending in group.files]

        if self.dry_run:
            logger.info(f"[DRY-RUN] Would create {archive_path} with {len(members)} file(s)")
            return ArchiveResult(
                target=group.target,
                archive_path=archive_path,
                members=members,
                dry_run=True
            )

        logger.info(f"Creating archive {archive_path}")
        self._write(archive_path, group)
        self._dispose(archive_path, group)

        return ArchiveResult(
            target=group.target,
            archive_path=archive_path,
            members=members,
            disposition=self.disposer.disposition
        )

    def _write(self, archive_path: Path, group: ArchiveGroup) -> None:
        try:
            zf = zipfile.ZipFile(archive_path, "x", compression=self.compression)
        except OSError as e:
            raise ArchiveWriteError(
                f"Cannot create archive {archive_path}: {e}",
                directory=group.target
            ) from e

        try:
            with zf:
                for pending in group.files:
                    logger.info(f"Writing {pending.path} to archive")
                    self._add_entry(zf, pending)
        except (OSError, zipfile.BadZipFile, ValueError) as e:
            # Keep no half-written archive behind; originals are still in place
            archive_path.unlink(missing_ok=True)
            raise ArchiveWriteError(
                f"Failed to write archive {archive_path}: {e}",
                directory=group.target
            ) from e

    def _add_entry(self, zf: zipfile.ZipFile, pending: PendingFile) -> None:
        info = zipfile.ZipInfo(pending.name, date_time=dos_date_time(pending.modified))
        info.compress_type = self.compression
        info.extra = extended_timestamp_extra(
            pending.modified,
            accessed=pending.accessed,
            created=pending.created
        )
        info.file_size = pending.path.stat().st_size
        with pending.path.open("rb") as source, zf.open(info, "w") as target:
            shutil.copyfileobj(source, target)

    def _dispose(self, archive_path: Path, group: ArchiveGroup) -> None:
        """
        Dispose of the archived originals in group order.

        Stops at the first failure. The archive is then cut down to the
        files already disposed of, so every file ends up either in the
        archive or in its original place, never in both.
        """
        disposed: List[str] = []
        for pending in group.files:
            try:
                self.disposer.dispose(pending.path)
            except OSError as e:
                try:
                    self._retain_only(archive_path, disposed)
                except (OSError, zipfile.BadZipFile) as rewrite_error:
                    logger.error(
                        f"Could not drop undisposed entries from {archive_path}: {rewrite_error}"
                    )
                raise ArchiveWriteError(
                    f"Could not dispose of {pending.path}: {e}; "
                    f"{len(group) - len(disposed)} file(s) stay in place and out of the archive",
                    directory=group.target
                ) from e
            disposed.append(pending.name)

    def _retain_only(self, archive_path: Path, names: Collection[str]) -> None:
        """Rewrite archive_path with only the entries in names; drop it if none."""
        if not names:
            logger.info(f"Removing archive {archive_path}, no original was disposed of")
            archive_path.unlink(missing_ok=True)
            return

        logger.info(f"Rewriting {archive_path} with {len(names)} disposed file(s)")
        temp_path = archive_path.with_name(archive_path.name + ".part")
        try:
            with zipfile.ZipFile(archive_path) as source, \
                    zipfile.ZipFile(temp_path, "w", compression=self.compression) as target:
                for entry in source.infolist():
                    if entry.filename not in names:
                        continue
                    info = zipfile.ZipInfo(entry.filename, date_time=entry.date_time)
                    info.compress_type = entry.compress_type
                    info.extra = entry.extra
                    info.file_size = entry.file_size
                    with source.open(entry) as src, target.open(info, "w") as dst:
                        shutil.copyfileobj(src, dst)
            os.replace(temp_path, archive_path)
        finally:
            temp_path.unlink(missing_ok=True)
