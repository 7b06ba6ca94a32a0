"""SQLite dumper using ``sqlite3.Connection.iterdump``.

Database names resolve to files under a root directory:
``"alpha"`` -> ``<root>/alpha.db``; names that already carry a suffix
(``"alpha.sqlite3"``) are used as given.
"""

import asyncio
import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)


class SqliteDumper:
    """``DatabaseDumper`` for SQLite database files."""

    def __init__(self, root: str | Path = ".", extension: str = ".db") -> None:
        self.root = Path(root)
        self.extension = extension

    def resolve(self, database: str) -> Path:
        """Return the database file for ``database``."""
        path = Path(database)
        if not path.suffix:
            path = path.with_suffix(self.extension)
        return path if path.is_absolute() else self.root / path

    def _dump_sync(self, source: Path, output_path: Path) -> bool:
        if not source.exists():
            logger.error("SQLite database not found: %s", source)
            return False

        # Open read-only so a missing file is never created as a side effect
        conn = sqlite3.connect(f"{source.resolve().as_uri()}?mode=ro", uri=True)
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                for line in conn.iterdump():
                    f.write(f"{line}\n")
        except sqlite3.Error as e:
            logger.error("Could not dump %s: %s", source, e)
            return False
        finally:
            conn.close()

        return True

    async def dump(self, database: str, output_path: Path) -> bool:
        return await asyncio.to_thread(self._dump_sync, self.resolve(database), output_path)
