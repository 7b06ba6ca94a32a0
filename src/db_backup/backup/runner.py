"""Top-level backup run.

Flow: validate options -> dump databases / collect files -> zip ->
publish to every destination -> remove temp files.

Usage:
    from db_backup.backup.runner import run_backup
    from db_backup.backup.models import RunOptions
    from db_backup.config import load_backup_config

    config = load_backup_config("backup.toml")
    report = await run_backup(config, RunOptions(prefix="nightly-"))
    print(report.format_report())
"""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime

from db_backup.backup.archive import build_archive
from db_backup.backup.dumper import dump_all
from db_backup.backup.files import collect_files
from db_backup.backup.models import ArchiveEntry, BackupReport, RunOptions
from db_backup.backup.publisher import (
    backup_filename,
    build_destinations,
    publish_all,
    resolve_decorations,
)
from db_backup.backup.tempfiles import TempFileRegistry
from db_backup.config.models import BackupConfig
from db_backup.dumpers.base import DatabaseDumper
from db_backup.errors import ConfigurationError
from db_backup.factory import get_dumper, get_storages
from db_backup.storage.base import Storage

logger = logging.getLogger(__name__)


def validate_options(options: RunOptions) -> None:
    """Reject conflicting flags before any work starts.

    Raises:
        ConfigurationError: If both ``only_db`` and ``only_files`` are set.
    """
    if options.only_db and options.only_files:
        raise ConfigurationError("Cannot use only-db and only-files together")


def _wants_databases(config: BackupConfig, options: RunOptions) -> bool:
    return not options.only_files and bool(config.databases)


def _wants_files(config: BackupConfig, options: RunOptions) -> bool:
    return not options.only_db and bool(config.files)


async def collect_entries(
    config: BackupConfig,
    options: RunOptions,
    dumper: DatabaseDumper | None,
    registry: TempFileRegistry,
    cancel_event: asyncio.Event | None = None,
) -> list[ArchiveEntry]:
    """Gather everything that goes into the archive.

    Databases are dumped unless ``--only-files``; configured files are
    added unless ``--only-db``.  A later entry whose archive name is
    already taken is dropped with a warning.
    """
    entries: list[ArchiveEntry] = []

    if _wants_databases(config, options):
        entries.extend(
            await dump_all(
                dumper,
                config.databases,
                registry,
                scratch_dir=config.scratch_dir,
                cancel_event=cancel_event,
            )
        )

    if _wants_files(config, options):
        entries.extend(collect_files(config.files, config.exclude))

    return _drop_duplicate_names(entries)


def _drop_duplicate_names(entries: list[ArchiveEntry]) -> list[ArchiveEntry]:
    """Keep the first entry for each archive name; warn about the rest."""
    seen: set[str] = set()
    unique: list[ArchiveEntry] = []
    for entry in entries:
        if entry.archive_name in seen:
            logger.warning(
                "Skipping %s: archive already has an entry named %s",
                entry.path,
                entry.archive_name,
            )
            continue
        seen.add(entry.archive_name)
        unique.append(entry)
    return unique


async def run_backup(
    config: BackupConfig,
    options: RunOptions | None = None,
    *,
    dumper: DatabaseDumper | None = None,
    storages: dict[str, Storage] | None = None,
    clock: Callable[[], datetime] = datetime.now,
    cancel_event: asyncio.Event | None = None,
) -> BackupReport:
    """Run one backup.

    Temp files (dumps and the archive) are removed on every exit path,
    including errors and cancellation.

    Args:
        config: Databases, files, destinations and naming.
        options: Command-line options (default: back up everything).
        dumper: Dump backend; built from ``config.connection`` when None.
        storages: Destination drivers keyed by destination name; built
            from ``config.disks`` when None.
        clock: Source of the timestamp used in the backup filename.
        cancel_event: When set, stops before the next dump or upload.

    Returns:
        ``BackupReport`` with one ``PublishResult`` per destination, or
        status ``nothing_to_backup`` when there was nothing to archive.

    Raises:
        ConfigurationError: Conflicting options or unusable configuration.
        DumpError: A database dump failed or was empty.
        ArchiveError: The archive could not be written.
        BackupCancelled: ``cancel_event`` was set.
    """
    options = options or RunOptions()
    validate_options(options)

    if storages is None:
        storages = get_storages(config)
    if dumper is None and _wants_databases(config, options):
        dumper = get_dumper(config.connection)

    logger.info("Start backing up")

    with TempFileRegistry() as registry:
        entries = await collect_entries(config, options, dumper, registry, cancel_event)

        if not entries:
            logger.info("Nothing to back up")
            return BackupReport(status="nothing_to_backup")

        archive = build_archive(entries, registry)

        prefix, suffix = resolve_decorations(options, config)
        filename = backup_filename(prefix, suffix, clock())
        destinations = build_destinations(storages, config.path, filename)

        results = await publish_all(archive, destinations, storages, cancel_event)

    report = BackupReport(
        status="completed",
        entries=archive.entry_names,
        archive_size=archive.size,
        filename=filename,
        results=results,
    )

    if report.success:
        logger.info("Backup successfully completed")
    else:
        logger.warning(
            "Backup completed with failed destinations: %s",
            ", ".join(report.failed_destinations),
        )

    return report
