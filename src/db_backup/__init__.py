"""db-backup: dump databases into one zip and copy it to storage destinations.

Dumps each configured database with its native client, bundles the dumps
(and optionally plain files) into a single archive, and streams that
archive to every configured destination (local disk, S3, ...).

Usage:
    from db_backup import run_backup, RunOptions, load_backup_config
    from db_backup import BackupReport, PublishResult
    from db_backup import DatabaseDumper, Storage
"""

__version__ = "0.1.0"

# Config
from db_backup.config.loader import load_backup_config
from db_backup.config.models import BackupConfig, ConnectionProfile, DiskConfig

# Errors
from db_backup.errors import (
    ArchiveError,
    BackupCancelled,
    BackupError,
    ConfigurationError,
    DumpError,
    PublishError,
)

# Collaborators
from db_backup.dumpers.base import DatabaseDumper
from db_backup.storage.base import Storage
from db_backup.factory import get_dumper, get_storage

# Backup run
from db_backup.backup.models import BackupReport, PublishResult, RunOptions
from db_backup.backup.runner import run_backup

__all__ = [
    # Config
    "load_backup_config",
    "BackupConfig",
    "ConnectionProfile",
    "DiskConfig",
    # Errors
    "BackupError",
    "ConfigurationError",
    "DumpError",
    "ArchiveError",
    "PublishError",
    "BackupCancelled",
    # Collaborators
    "DatabaseDumper",
    "Storage",
    "get_dumper",
    "get_storage",
    # Backup run
    "run_backup",
    "RunOptions",
    "BackupReport",
    "PublishResult",
]
