"""Collect plain files to include next to the database dumps."""

import logging
from pathlib import Path

from db_backup.backup.models import ArchiveEntry

logger = logging.getLogger(__name__)


def _archive_name(path: Path, base: Path) -> str:
    """Name inside the archive: relative to ``base``, else absolute minus its anchor."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.relative_to(path.anchor).as_posix()


def _is_excluded(path: Path, excluded: list[Path]) -> bool:
    return any(path == ex or ex in path.parents for ex in excluded)


def collect_files(
    include: list[str],
    exclude: list[str] | None = None,
    base: Path | None = None,
) -> list[ArchiveEntry]:
    """Expand ``include`` paths into archive entries.

    Directories are walked recursively in sorted order.  Paths under any
    ``exclude`` entry are skipped; include paths that don't exist are
    skipped with a warning.

    Args:
        include: Files or directories to back up.
        exclude: Files or directories to leave out.
        base: Directory archive names are made relative to (default: cwd).

    Returns:
        One entry per file, without duplicates, in discovery order.
    """
    base = (base or Path.cwd()).resolve()
    excluded = [Path(p).resolve() for p in (exclude or [])]

    entries: list[ArchiveEntry] = []
    seen: set[Path] = set()

    for raw in include:
        root = Path(raw).resolve()
        if not root.exists():
            logger.warning("Path to back up does not exist: %s", raw)
            continue

        candidates = sorted(p for p in root.rglob("*") if p.is_file()) if root.is_dir() else [root]

        for path in candidates:
            if path in seen or _is_excluded(path, excluded):
                continue
            seen.add(path)
            entries.append(ArchiveEntry(path=path, archive_name=_archive_name(path, base)))

    return entries
