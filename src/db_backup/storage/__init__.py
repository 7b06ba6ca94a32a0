"""Storage drivers package.

Provides the ``Storage`` Protocol plus local-disk and S3 drivers.

Usage:
    from db_backup.storage import Storage, LocalStorage, S3Storage
"""

from db_backup.storage.base import Storage
from db_backup.storage.local import LocalStorage
from db_backup.storage.s3 import S3Storage

__all__ = [
    "Storage",
    "LocalStorage",
    "S3Storage",
]
