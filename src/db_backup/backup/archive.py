"""Bundle dump (and other) files into a single zip archive."""

import logging
import zipfile
from pathlib import Path

from db_backup.backup.models import Archive, ArchiveEntry
from db_backup.backup.tempfiles import TempFileRegistry
from db_backup.errors import ArchiveError

logger = logging.getLogger(__name__)


def build_archive(
    entries: list[ArchiveEntry],
    registry: TempFileRegistry,
    directory: str | Path | None = None,
) -> Archive:
    """Zip ``entries`` into a new temp file.

    Entries whose source file no longer exists are skipped.  An archive
    with no entries is logged as a zero-size warning, not treated as an
    error.

    Args:
        entries: Files to add, each under its ``archive_name``.
        registry: Owner of the created archive file.
        directory: Where to create the archive (default: system temp dir).

    Returns:
        The finalized ``Archive``.

    Raises:
        ArchiveError: If the zip cannot be written.
    """
    logger.info("Start zipping %d files...", len(entries))

    archive_path = registry.create(prefix="db-backup-zip-", suffix=".zip", directory=directory)
    names: list[str] = []

    try:
        with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for entry in entries:
                if not entry.path.exists():
                    logger.debug("Skipping vanished file %s", entry.path)
                    continue
                zf.write(entry.path, entry.archive_name)
                names.append(entry.archive_name)
    except (OSError, zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArchiveError(f"Could not create backup archive: {e}") from e

    logger.info("Zip created!")

    size = archive_path.stat().st_size
    # An empty zip still holds its 22-byte end-of-central-directory record
    if size == 0 or not names:
        logger.warning("The zipfile that will be backed up has a filesize of zero.")

    return Archive(path=archive_path, size=size, entry_names=names)
