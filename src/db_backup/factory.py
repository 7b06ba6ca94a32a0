"""Dumper and storage factory.

Turns configuration models into concrete collaborators:
1. ``[connection]`` -> a ``DatabaseDumper`` for the configured provider
2. ``[disks.<name>]`` -> a ``Storage`` driver for each destination
"""

from pathlib import Path
from urllib.parse import quote

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from db_backup.config.models import BackupConfig, ConnectionProfile, DiskConfig
from db_backup.dumpers import DatabaseDumper, MySQLDumper, PostgresDumper, SqliteDumper
from db_backup.errors import ConfigurationError
from db_backup.storage import LocalStorage, S3Storage, Storage


# ============================================================================
# Dumpers
# ============================================================================


def resolve_url(connection: ConnectionProfile) -> str:
    """Resolve connection URL with password substitution.

    Args:
        connection: Connection profile from config

    Returns:
        Connection URL with password substituted
    """
    url = connection.url
    if connection.db_password and "[YOUR-PASSWORD]" in url:
        url = url.replace("[YOUR-PASSWORD]", quote(connection.db_password, safe=""))
    return url


def get_dumper(connection: ConnectionProfile) -> DatabaseDumper:
    """Create the dumper for the configured provider.

    Args:
        connection: Connection profile from config

    Returns:
        A ``DatabaseDumper`` implementation

    Raises:
        ConfigurationError: If the URL is missing or cannot be parsed
    """
    url = resolve_url(connection)

    if connection.provider == "sqlite":
        # sqlite:////var/lib/app -> databases live in /var/lib/app
        root = make_url(url).database if url else None
        return SqliteDumper(Path(root or "."))

    if not url:
        raise ConfigurationError(
            f"No connection url configured for provider '{connection.provider}'"
        )

    try:
        parsed = make_url(url)
    except ArgumentError as e:
        raise ConfigurationError(f"Invalid connection url: {e}") from e

    if connection.provider == "mysql":
        return MySQLDumper(parsed)
    return PostgresDumper(parsed)


# ============================================================================
# Storages
# ============================================================================


def get_storage(name: str, disk: DiskConfig) -> Storage:
    """Create the storage driver for one configured disk.

    Args:
        name: Disk name (used in error messages)
        disk: Disk configuration

    Returns:
        A ``Storage`` implementation

    Raises:
        ConfigurationError: If the driver is not supported
    """
    if disk.driver == "local":
        return LocalStorage(disk.root, marker_file=bool(disk.marker_file))
    if disk.driver == "s3":
        return S3Storage(
            disk.bucket,
            region=disk.region,
            endpoint_url=disk.endpoint_url,
            marker_file=bool(disk.marker_file),
        )
    raise ConfigurationError(f"Unsupported driver '{disk.driver}' for disk '{name}'")


def get_storages(config: BackupConfig) -> dict[str, Storage]:
    """Create a driver for every configured destination, in order.

    ``BackupConfig`` already guarantees each destination has a disk.
    """
    storages: dict[str, Storage] = {}
    for name in config.destinations:
        storages[name] = get_storage(name, config.disks[name])
    return storages
