"""Pydantic models for backup configuration."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


# ============================================================================
# Configuration Models
# ============================================================================


class ConnectionProfile(BaseModel):
    """Database server connection from the ``[connection]`` table."""

    url: str = ""
    provider: Literal["postgres", "mysql", "sqlite"] = "postgres"
    db_password: str | None = None  # For [YOUR-PASSWORD] placeholder substitution


class DiskConfig(BaseModel):
    """Storage destination from a ``[disks.<name>]`` table."""

    driver: Literal["local", "s3"] = "local"
    root: str = "."                     # local: base directory
    bucket: str | None = None           # s3: bucket name
    region: str | None = None
    endpoint_url: str | None = None     # s3: custom endpoint (MinIO, etc.)
    marker_file: bool | None = None     # write .gitignore next to backups

    @model_validator(mode="after")
    def _default_marker_file(self) -> "DiskConfig":
        if self.marker_file is None:
            self.marker_file = self.driver == "local"
        if self.driver == "s3" and not self.bucket:
            raise ValueError("s3 disks require a bucket")
        return self


class BackupConfig(BaseModel):
    """Complete backup configuration, passed explicitly to ``run_backup``."""

    databases: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    scratch_dir: str | None = None
    connection: ConnectionProfile = Field(default_factory=ConnectionProfile)
    destinations: list[str] = Field(default_factory=list)
    path: str = ""
    prefix: str = ""
    suffix: str = ""
    disks: dict[str, DiskConfig] = Field(default_factory=dict)

    @field_validator("destinations", mode="before")
    @classmethod
    def _listify_destinations(cls, value):
        # destination.filesystem accepts a single name or a list
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("path", "prefix", "suffix", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @model_validator(mode="after")
    def _check_destination_disks(self) -> "BackupConfig":
        missing = [name for name in self.destinations if name not in self.disks]
        if missing:
            raise ValueError(
                f"Destination(s) without a [disks] entry: {', '.join(missing)}"
            )
        return self
