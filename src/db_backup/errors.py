"""Exceptions raised by a backup run.

Validation and dump failures abort the run.  Publish failures are
recorded per destination and never raised out of the publisher.
"""


class BackupError(Exception):
    """Base class for every error raised by a backup run."""

    pass


class ConfigurationError(BackupError):
    """Raised when options or configuration are invalid (before any I/O)."""

    pass


class DumpError(BackupError):
    """Raised when a database dump fails or produces an empty file."""

    pass


class ArchiveError(BackupError):
    """Raised when the backup archive cannot be written."""

    pass


class PublishError(BackupError):
    """Failure copying the archive to a single destination."""

    def __init__(self, destination: str, reason: str):
        super().__init__(f"Could not store backup on {destination}: {reason}")
        self.destination = destination
        self.reason = reason


class BackupCancelled(BackupError):
    """Raised when the run is cancelled between two steps."""

    pass
