"""Local filesystem storage driver."""

import shutil
from pathlib import Path
from typing import BinaryIO


class LocalStorage:
    """``Storage`` rooted at a local directory.

    Args:
        root: Base directory; created on first write.
        marker_file: Whether backups stored here get an ignore-marker file.
    """

    def __init__(self, root: str | Path, marker_file: bool = True) -> None:
        self.root = Path(root)
        self.supports_marker_file = marker_file

    def _full_path(self, path: str) -> Path:
        return self.root / path.lstrip("/")

    def make_directory(self, path: str) -> None:
        self._full_path(path).mkdir(parents=True, exist_ok=True)

    def put(self, path: str, contents: str) -> None:
        target = self._full_path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(contents)

    def write_stream(self, path: str, stream: BinaryIO) -> None:
        target = self._full_path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as f:
            shutil.copyfileobj(stream, f)

    def describe(self) -> str:
        return str(self.root)
