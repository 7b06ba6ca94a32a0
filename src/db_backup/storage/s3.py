"""S3-compatible object storage driver (AWS S3, MinIO, ...).

Usage:
    from db_backup.storage.s3 import S3Storage

    storage = S3Storage("my-backups", region="eu-west-1")
    with open("backup.zip", "rb") as stream:
        storage.write_stream("nightly/backup.zip", stream)
"""

from typing import Any, BinaryIO

import boto3


class S3Storage:
    """``Storage`` backed by an S3 bucket.

    Object stores have no directories, so ``make_directory`` is a no-op.
    ``write_stream`` uses ``upload_fileobj`` which streams the archive in
    multipart chunks.

    Args:
        bucket: Target bucket name.
        region: AWS region (optional, falls back to the boto3 default chain).
        endpoint_url: Custom endpoint for S3-compatible services.
        client: Pre-built boto3 client (tests inject a mock here).
        marker_file: Whether backups stored here get an ignore-marker file.
    """

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        endpoint_url: str | None = None,
        client: Any | None = None,
        marker_file: bool = False,
    ) -> None:
        self.bucket = bucket
        if client is None:
            client = boto3.client("s3", region_name=region, endpoint_url=endpoint_url)
        self.client = client
        self.supports_marker_file = marker_file

    @staticmethod
    def _key(path: str) -> str:
        return path.lstrip("/")

    def make_directory(self, path: str) -> None:
        pass

    def put(self, path: str, contents: str) -> None:
        self.client.put_object(
            Bucket=self.bucket, Key=self._key(path), Body=contents.encode()
        )

    def write_stream(self, path: str, stream: BinaryIO) -> None:
        self.client.upload_fileobj(stream, self.bucket, self._key(path))

    def describe(self) -> str:
        return f"s3://{self.bucket}"
