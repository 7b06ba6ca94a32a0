"""Database dumpers package.

Provides the ``DatabaseDumper`` Protocol and concrete dumpers for
PostgreSQL (``pg_dump``), MySQL (``mysqldump``) and SQLite.

Usage:
    from db_backup.dumpers import DatabaseDumper, PostgresDumper
"""

from db_backup.dumpers.base import DatabaseDumper
from db_backup.dumpers.mysql import MySQLDumper
from db_backup.dumpers.postgres import PostgresDumper
from db_backup.dumpers.sqlite import SqliteDumper

__all__ = [
    "DatabaseDumper",
    "PostgresDumper",
    "MySQLDumper",
    "SqliteDumper",
]
