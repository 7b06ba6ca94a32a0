"""Database dumper protocol definition.

Defines the ``DatabaseDumper`` Protocol that every dump backend must
implement.  Dumping is async -- backends shell out to the database's
own client tools.

Usage:
    from db_backup.dumpers.base import DatabaseDumper

    async def do_work(dumper: DatabaseDumper) -> None:
        ok = await dumper.dump("billing", Path("/tmp/billing.sql"))
"""

from pathlib import Path
from typing import Protocol


class DatabaseDumper(Protocol):
    """Dump interface that all backends must implement.

    A dumper knows how to reach one database server; the database to
    dump is chosen per call.
    """

    async def dump(self, database: str, output_path: Path) -> bool:
        """Write a SQL dump of ``database`` to ``output_path``.

        Args:
            database: Name of the database to dump.
            output_path: Existing (empty) file to overwrite with the dump.

        Returns:
            True if the client tool reported success, False otherwise.
            Callers must still check that the file is non-empty.

        Example:
            ok = await dumper.dump("billing", Path("/tmp/billing.sql"))
        """
        ...
