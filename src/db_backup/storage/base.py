"""Storage protocol definition.

Defines the ``Storage`` Protocol every destination driver implements.
Drivers are synchronous; the publisher runs them in a worker thread.

Usage:
    from db_backup.storage.base import Storage

    def store(storage: Storage, archive: Path) -> None:
        storage.make_directory("backups")
        with open(archive, "rb") as stream:
            storage.write_stream("backups/nightly.zip", stream)
"""

from typing import BinaryIO, Protocol


class Storage(Protocol):
    """Destination driver interface.

    Paths are POSIX-style and relative to the driver's own root
    (a local directory, a bucket, ...).
    """

    supports_marker_file: bool
    """Whether the publisher should write an ignore-marker next to backups."""

    def make_directory(self, path: str) -> None:
        """Create ``path`` (and parents) if the backend has directories."""
        ...

    def put(self, path: str, contents: str) -> None:
        """Write a small text file."""
        ...

    def write_stream(self, path: str, stream: BinaryIO) -> None:
        """Copy ``stream`` to ``path`` without reading it fully into memory."""
        ...

    def describe(self) -> str:
        """Human-readable location, e.g. ``/var/backups`` or ``s3://bucket``."""
        ...
