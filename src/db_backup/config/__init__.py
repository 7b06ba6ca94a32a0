"""Configuration management: TOML loading and config models.

Usage:
    >>> from db_backup.config import load_backup_config, BackupConfig, DiskConfig
"""

from db_backup.config.loader import load_backup_config
from db_backup.config.models import BackupConfig, ConnectionProfile, DiskConfig

__all__ = ["load_backup_config", "BackupConfig", "ConnectionProfile", "DiskConfig"]
