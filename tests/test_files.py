"""Tests for collect_files(): directory walking, excludes and archive names."""

from pathlib import Path

from db_backup.backup.files import collect_files


class TestCollectFiles:

    def test_walks_directories_sorted(self, tmp_path: Path) -> None:
        uploads = tmp_path / "uploads"
        (uploads / "b").mkdir(parents=True)
        (uploads / "a.txt").write_text("a")
        (uploads / "b" / "c.txt").write_text("c")

        entries = collect_files([str(uploads)], base=tmp_path)

        assert [e.archive_name for e in entries] == ["uploads/a.txt", "uploads/b/c.txt"]

    def test_single_file(self, tmp_path: Path) -> None:
        env = tmp_path / ".env"
        env.write_text("X=1")

        entries = collect_files([str(env)], base=tmp_path)

        assert len(entries) == 1
        assert entries[0].archive_name == ".env"
        assert entries[0].path == env.resolve()

    def test_exclude(self, tmp_path: Path) -> None:
        uploads = tmp_path / "uploads"
        (uploads / "cache").mkdir(parents=True)
        (uploads / "keep.txt").write_text("k")
        (uploads / "cache" / "drop.txt").write_text("d")

        entries = collect_files([str(uploads)], [str(uploads / "cache")], base=tmp_path)

        assert [e.archive_name for e in entries] == ["uploads/keep.txt"]

    def test_missing_path_skipped(self, tmp_path: Path, caplog) -> None:
        entries = collect_files([str(tmp_path / "nope")], base=tmp_path)
        assert entries == []
        assert "does not exist" in caplog.text

    def test_no_duplicates(self, tmp_path: Path) -> None:
        f = tmp_path / "a.txt"
        f.write_text("a")
        entries = collect_files([str(tmp_path), str(f)], base=tmp_path)
        assert [e.archive_name for e in entries] == ["a.txt"]

    def test_outside_base_uses_absolute_name(self, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        f = outside / "x.txt"
        f.write_text("x")
        base = tmp_path / "project"
        base.mkdir()

        entries = collect_files([str(f)], base=base)

        assert entries[0].archive_name == f.resolve().relative_to(f.resolve().anchor).as_posix()
