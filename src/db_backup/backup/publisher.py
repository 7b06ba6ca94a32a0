"""Copy the archive to every configured destination.

Each destination is attempted independently: a failure is logged and
recorded in its ``PublishResult`` and the next destination is still
tried.  Nothing already stored is rolled back.
"""

import asyncio
import logging
import posixpath
from datetime import datetime

from db_backup.backup.models import Archive, Destination, PublishResult, RunOptions
from db_backup.config.models import BackupConfig
from db_backup.errors import BackupCancelled, PublishError
from db_backup.storage.base import Storage

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
MARKER_FILE = ".gitignore"
MARKER_CONTENTS = f"*\n!{MARKER_FILE}"


# ============================================================================
# Naming
# ============================================================================


def resolve_decorations(options: RunOptions, config: BackupConfig) -> tuple[str, str]:
    """Return ``(prefix, suffix)``: CLI values when given, else config, else empty."""
    prefix = options.prefix if options.prefix else config.prefix
    suffix = options.suffix if options.suffix else config.suffix
    return prefix or "", suffix or ""


def backup_filename(prefix: str, suffix: str, now: datetime) -> str:
    """Build ``<prefix><YYYYMMDDHHMMSS><suffix>.zip``.

    Example:
        >>> backup_filename("nightly-", "-v1", datetime(2024, 1, 1, 12, 0, 0))
        'nightly-20240101120000-v1.zip'
    """
    return f"{prefix}{now.strftime(TIMESTAMP_FORMAT)}{suffix}.zip"


def destination_path(base_path: str, filename: str) -> str:
    """Prepend the configured base directory (if any) to ``filename``."""
    if not base_path:
        return filename
    return f"{base_path.rstrip('/')}/{filename}"


def build_destinations(
    storages: dict[str, Storage],
    base_path: str,
    filename: str,
) -> list[Destination]:
    """Describe one ``Destination`` per storage, preserving config order."""
    path = destination_path(base_path, filename)
    return [
        Destination(
            name=name,
            path=path,
            supports_marker_file=storage.supports_marker_file,
        )
        for name, storage in storages.items()
    ]


# ============================================================================
# Copying
# ============================================================================


def copy_to_storage(archive: Archive, storage: Storage, destination: Destination) -> None:
    """Store ``archive`` at ``destination.path`` on ``storage``.

    Creates the parent directory, writes the ignore-marker when the
    destination supports it, then streams the archive bytes.
    """
    directory = posixpath.dirname(destination.path)
    logger.debug("Writing %s to %s", destination.path, storage.describe())

    if directory not in ("", ".", "/"):
        storage.make_directory(directory)

    if destination.supports_marker_file:
        storage.put(posixpath.join(directory, MARKER_FILE), MARKER_CONTENTS)

    # The archive can be large: stream it instead of reading it into memory
    with open(archive.path, "rb") as stream:
        storage.write_stream(destination.path, stream)


async def publish(archive: Archive, destination: Destination, storage: Storage) -> PublishResult:
    """Copy ``archive`` to a single destination and report the outcome."""
    logger.info("Start uploading backup to %s-filesystem...", destination.name)

    try:
        await asyncio.to_thread(copy_to_storage, archive, storage, destination)
    except Exception as e:
        error = PublishError(destination.name, str(e))
        logger.error("%s", error)
        return PublishResult(
            destination=destination.name,
            path=destination.path,
            success=False,
            error=error.reason,
        )

    logger.info(
        'Backup stored on %s-filesystem in file "%s"', destination.name, destination.path
    )
    return PublishResult(destination=destination.name, path=destination.path, success=True)


async def publish_all(
    archive: Archive,
    destinations: list[Destination],
    storages: dict[str, Storage],
    cancel_event: asyncio.Event | None = None,
) -> list[PublishResult]:
    """Publish to every destination in order, never stopping on a failure.

    Raises:
        BackupCancelled: If ``cancel_event`` is set between destinations.
    """
    results: list[PublishResult] = []
    for destination in destinations:
        if cancel_event is not None and cancel_event.is_set():
            raise BackupCancelled(
                f"Backup cancelled before uploading to {destination.name}"
            )
        results.append(await publish(archive, destination, storages[destination.name]))
    return results
