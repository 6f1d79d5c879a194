"""Tests for obsidian_lint.scanner: note enumeration and full-tree walk."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from conftest import create_file, create_note
from obsidian_lint.errors import ScanError, VaultNotFoundError
from obsidian_lint.scanner import read_note, scan, walk_files


class TestScan:
    def test_finds_notes_recursively(self, vault: Path):
        create_note(vault, "Root.md")
        create_note(vault, "a/b/Deep.md")
        create_file(vault, "a/image.png")
        create_file(vault, "notes.txt", b"text")

        notes = scan(vault)

        assert notes == [vault / "Root.md", vault / "a" / "b" / "Deep.md"]

    def test_order_is_stable(self, vault: Path):
        for name in ["zeta.md", "alpha.md", "m/mid.md", "b/beta.md"]:
            create_note(vault, name)

        first = scan(vault)

        assert first == scan(vault)
        # Files of a folder come before its subfolders
        assert first == [
            vault / "alpha.md",
            vault / "zeta.md",
            vault / "b" / "beta.md",
            vault / "m" / "mid.md",
        ]

    def test_paths_are_absolute(self, vault: Path, monkeypatch: pytest.MonkeyPatch):
        create_note(vault, "Note.md")
        monkeypatch.chdir(vault.parent)

        (note,) = scan(Path(vault.name))

        assert note.is_absolute()

    def test_directory_named_like_a_note_is_skipped(self, vault: Path):
        (vault / "folder.md").mkdir()

        assert scan(vault) == []

    def test_empty_vault(self, vault: Path):
        assert scan(vault) == []

    def test_missing_root_raises(self, tmp_path: Path):
        with pytest.raises(VaultNotFoundError):
            scan(tmp_path / "missing")

    def test_file_root_raises(self, tmp_path: Path):
        file_root = tmp_path / "file.md"
        file_root.write_text("x")

        with pytest.raises(VaultNotFoundError):
            scan(file_root)

    @pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
    def test_unreadable_directory_raises(self, vault: Path):
        locked = vault / "locked"
        locked.mkdir()
        locked.chmod(0)
        try:
            with pytest.raises(ScanError):
                scan(vault)
        finally:
            locked.chmod(0o755)


class TestWalkFiles:
    def test_yields_all_file_types(self, vault: Path):
        create_note(vault, "Note.md")
        create_file(vault, "assets/pic.jpg")
        create_file(vault, ".obsidian/app.json", b"{}")

        names = sorted(path.name for path in walk_files(vault))

        assert names == ["Note.md", "app.json", "pic.jpg"]


class TestReadNote:
    def test_reads_utf8(self, vault: Path):
        note = create_note(vault, "Note.md", "Ünïcode [[Link]]")

        assert read_note(note) == "Ünïcode [[Link]]"
