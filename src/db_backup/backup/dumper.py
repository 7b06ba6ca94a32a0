"""Dump every configured database into the scratch directory.

Usage:
    from db_backup.backup.dumper import dump_all

    with TempFileRegistry() as registry:
        entries = await dump_all(dumper, ["billing", "crm"], registry, scratch_dir)
"""

import asyncio
import logging
import shutil
import tempfile
from pathlib import Path

from db_backup.backup.models import DumpEntry, database_slug
from db_backup.backup.tempfiles import TempFileRegistry
from db_backup.dumpers.base import DatabaseDumper
from db_backup.errors import BackupCancelled, DumpError

logger = logging.getLogger(__name__)

DEFAULT_SCRATCH_DIR = Path(tempfile.gettempdir()) / "db-backup"


def prepare_scratch_directory(scratch_dir: str | Path | None = None) -> Path:
    """Create ``scratch_dir`` and remove anything left from a previous run.

    Args:
        scratch_dir: Directory for dump files (default: ``$TMPDIR/db-backup``)

    Returns:
        The (now empty) scratch directory
    """
    directory = Path(scratch_dir) if scratch_dir else DEFAULT_SCRATCH_DIR
    directory.mkdir(parents=True, exist_ok=True)

    for child in directory.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()

    return directory


async def dump_all(
    dumper: DatabaseDumper,
    databases: list[str],
    registry: TempFileRegistry,
    scratch_dir: str | Path | None = None,
    cancel_event: asyncio.Event | None = None,
) -> list[DumpEntry]:
    """Dump ``databases`` one at a time, in order.

    Each dump file is registered with ``registry`` before the dump runs,
    so a failed or cancelled run still cleans it up.

    Args:
        dumper: Backend used to produce each dump.
        databases: Database names, in the order they should be dumped.
        registry: Owner of the produced temp files.
        scratch_dir: Directory to clear and write dumps into.
        cancel_event: When set, no further dumps are started.

    Returns:
        One ``DumpEntry`` per database, in input order.

    Raises:
        DumpError: If the list is empty, or any dump fails or is empty.
        BackupCancelled: If ``cancel_event`` is set between dumps.
    """
    if not databases:
        raise DumpError("Could not back up databases: no databases configured")

    directory = prepare_scratch_directory(scratch_dir)
    entries: list[DumpEntry] = []

    for database in databases:
        if cancel_event is not None and cancel_event.is_set():
            raise BackupCancelled(f"Backup cancelled before dumping {database}")

        dump_file = registry.create(
            prefix=f"db-backup-{database_slug(database)}-", directory=directory
        )
        logger.debug("Dumping %s to %s", database, dump_file)

        status = await dumper.dump(database, dump_file)

        if not status or not dump_file.exists() or dump_file.stat().st_size == 0:
            raise DumpError(f"Could not create backup of database '{database}'")

        entries.append(DumpEntry.for_database(database, dump_file))

    logger.info("Database dumped")

    return entries
