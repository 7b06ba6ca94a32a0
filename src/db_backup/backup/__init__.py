"""Backup run: dump, archive, publish, clean up.

Usage:
    from db_backup.backup import run_backup, RunOptions
    from db_backup.backup import dump_all, build_archive, publish_all
"""

from db_backup.backup.archive import build_archive
from db_backup.backup.dumper import dump_all, prepare_scratch_directory
from db_backup.backup.files import collect_files
from db_backup.backup.models import (
    Archive,
    ArchiveEntry,
    BackupReport,
    Destination,
    DumpEntry,
    PublishResult,
    RunOptions,
)
from db_backup.backup.publisher import backup_filename, publish, publish_all
from db_backup.backup.runner import run_backup, validate_options
from db_backup.backup.tempfiles import TempFileRegistry

__all__ = [
    "Archive",
    "ArchiveEntry",
    "BackupReport",
    "Destination",
    "DumpEntry",
    "PublishResult",
    "RunOptions",
    "TempFileRegistry",
    "backup_filename",
    "build_archive",
    "collect_files",
    "dump_all",
    "prepare_scratch_directory",
    "publish",
    "publish_all",
    "run_backup",
    "validate_options",
]
