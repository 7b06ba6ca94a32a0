"""Tests for TempFileRegistry: registration and total cleanup."""

from pathlib import Path

import pytest

from db_backup.backup.tempfiles import TempFileRegistry


class TestTempFileRegistry:

    def test_create_registers_empty_file(self, tmp_path: Path) -> None:
        registry = TempFileRegistry()
        path = registry.create(prefix="db-backup-alpha-", directory=tmp_path)

        assert path.exists()
        assert path.stat().st_size == 0
        assert path.name.startswith("db-backup-alpha-")
        assert registry.paths == [path]

    def test_create_unique_names(self, tmp_path: Path) -> None:
        registry = TempFileRegistry()
        first = registry.create(directory=tmp_path)
        second = registry.create(directory=tmp_path)
        assert first != second

    def test_cleanup_removes_every_registered_path(self, tmp_path: Path) -> None:
        registry = TempFileRegistry()
        created = registry.create(directory=tmp_path)
        external = tmp_path / "external.sql"
        external.write_text("x")
        registry.register(external)

        registry.cleanup()

        assert not created.exists()
        assert not external.exists()
        assert registry.paths == []

    def test_cleanup_ignores_missing_files(self, tmp_path: Path) -> None:
        """Removing an already-absent path is a no-op."""
        registry = TempFileRegistry()
        registry.register(tmp_path / "never-created")
        gone = registry.create(directory=tmp_path)
        gone.unlink()

        registry.cleanup()  # must not raise

    def test_context_manager_cleans_up_on_error(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            with TempFileRegistry() as registry:
                path = registry.create(directory=tmp_path)
                raise RuntimeError("boom")

        assert not path.exists()
