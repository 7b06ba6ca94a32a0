"""Registry of scratch files owned by a backup run.

Every dump and the archive are registered the moment they are created,
so leaving the ``with`` block removes them on every exit path.

Usage:
    with TempFileRegistry() as registry:
        dump_path = registry.create(prefix="db-backup-billing-", directory=scratch)
        ...
    # dump_path is gone here, even if the block raised
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class TempFileRegistry:
    """Tracks temp files and deletes them all on ``cleanup()``."""

    def __init__(self) -> None:
        self._paths: list[Path] = []

    @property
    def paths(self) -> list[Path]:
        return list(self._paths)

    def register(self, path: str | Path) -> Path:
        """Take ownership of ``path`` for cleanup."""
        path = Path(path)
        self._paths.append(path)
        return path

    def create(
        self,
        prefix: str = "db-backup-",
        suffix: str = "",
        directory: str | Path | None = None,
    ) -> Path:
        """Create an empty, uniquely named file and register it."""
        fd, name = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=directory)
        os.close(fd)
        return self.register(name)

    def cleanup(self) -> None:
        """Remove every registered file; already-missing files are skipped."""
        for path in self._paths:
            try:
                path.unlink(missing_ok=True)
            except OSError as e:
                logger.warning("Could not remove temporary file %s: %s", path, e)
        self._paths.clear()

    def __enter__(self) -> "TempFileRegistry":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()
