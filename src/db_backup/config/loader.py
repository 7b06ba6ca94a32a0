"""Load backup configuration from a TOML file."""

import os
import tomllib
from pathlib import Path

from db_backup.config.models import BackupConfig

CONFIG_ENV_VAR = "DB_BACKUP_CONFIG"
DEFAULT_CONFIG_FILE = "backup.toml"


def resolve_config_path(config_path: str | Path | None = None) -> Path:
    """Pick the config file: explicit path, then env var, then ./backup.toml."""
    if config_path is not None:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILE


def load_backup_config(config_path: str | Path | None = None) -> BackupConfig:
    """Load backup configuration from TOML file.

    Args:
        config_path: Path to the config file (default: ``$DB_BACKUP_CONFIG``
            or ``backup.toml`` in the working directory)

    Returns:
        BackupConfig with databases, destinations and disks

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config format is invalid
    """
    path = resolve_config_path(config_path)

    if not path.exists():
        raise FileNotFoundError(
            f"Backup config not found: {path}\n"
            f"Copy backup.toml.example to backup.toml and configure your destinations."
        )

    with open(path, "rb") as f:
        data = tomllib.load(f)

    backup = data.get("backup", {})
    destination = data.get("destination", {})

    return BackupConfig(
        databases=backup.get("databases", []),
        files=backup.get("files", []),
        exclude=backup.get("exclude", []),
        scratch_dir=backup.get("scratch_dir"),
        connection=data.get("connection", {}),
        destinations=destination.get("filesystem", []),
        path=destination.get("path", ""),
        prefix=destination.get("prefix", ""),
        suffix=destination.get("suffix", ""),
        disks=data.get("disks", {}),
    )
