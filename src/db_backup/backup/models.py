"""Models passed between the steps of a backup run.

Usage:
    from db_backup.backup.models import RunOptions, DumpEntry, Archive

    options = RunOptions(only_db=True, prefix="nightly-")
    entry = DumpEntry.for_database("billing", Path("/tmp/db-backup-billing-x1"))
    entry.archive_name  # "billing_backup.sql"
"""

import re
from pathlib import Path, PurePath
from typing import Literal

from pydantic import BaseModel, Field


class RunOptions(BaseModel):
    """Command-line options for one run."""

    only_db: bool = False
    only_files: bool = False
    prefix: str | None = None          # overrides destination.prefix when non-empty
    suffix: str | None = None          # overrides destination.suffix when non-empty


def database_slug(database: str) -> str:
    """File-name-safe form of a database name.

    Path-style names (sqlite files) keep only their final component.

    Example:
        >>> database_slug("/data/alpha.db")
        'alpha.db'
    """
    name = PurePath(database).name or database
    return re.sub(r"[^\w.-]", "_", name)


class ArchiveEntry(BaseModel):
    """A file to add to the archive and the name it gets inside it."""

    path: Path
    archive_name: str


class DumpEntry(ArchiveEntry):
    """One database's dump file."""

    database: str

    @classmethod
    def for_database(cls, database: str, path: Path) -> "DumpEntry":
        return cls(
            database=database,
            path=path,
            archive_name=f"{database_slug(database)}_backup.sql",
        )


class Archive(BaseModel):
    """The finalized zip file for a run."""

    path: Path
    size: int
    entry_names: list[str] = Field(default_factory=list)


class Destination(BaseModel):
    """Where one copy of the archive goes."""

    name: str                          # disk name from destination.filesystem
    path: str                          # base path + filename, relative to the disk
    supports_marker_file: bool = False


class PublishResult(BaseModel):
    """Outcome of copying the archive to one destination."""

    destination: str
    path: str
    success: bool
    error: str | None = None


class BackupReport(BaseModel):
    """Result of ``run_backup()``."""

    status: Literal["completed", "nothing_to_backup"]
    entries: list[str] = Field(default_factory=list)
    archive_size: int = 0
    filename: str | None = None
    results: list[PublishResult] = Field(default_factory=list)

    @property
    def failed_destinations(self) -> list[str]:
        """Names of destinations the archive could not be copied to."""
        return [r.destination for r in self.results if not r.success]

    @property
    def success(self) -> bool:
        return not self.failed_destinations

    def format_report(self) -> str:
        """Format the run result as a human-readable report."""
        if self.status == "nothing_to_backup":
            return "Nothing to back up"

        lines = [
            f"Backed up {len(self.entries)} file(s) into {self.filename} "
            f"({self.archive_size} bytes)"
        ]
        for result in self.results:
            if result.success:
                lines.append(f"  + {result.destination}: {result.path}")
            else:
                lines.append(f"  - {result.destination}: {result.error}")

        if self.failed_destinations:
            lines.append(
                f"\n  Failed destinations ({len(self.failed_destinations)}): "
                f"{', '.join(self.failed_destinations)}"
            )

        return "\n".join(lines)
