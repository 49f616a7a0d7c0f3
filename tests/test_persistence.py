"""
Tests for ignore file persistence — backup-then-write publishing.
"""

import os
import stat
from pathlib import Path

import pytest

from gitignorer.core.persistence import ignore_file
from gitignorer.core.persistence.ignore_file import (
    PublishError,
    PublishResult,
    backup_existing,
    backup_path_for,
    publish,
)


class TestBackupPath:
    def test_suffix_is_appended(self, tmp_path: Path):
        assert backup_path_for(tmp_path / ".gitignore") == tmp_path / ".gitignore.bak"

    def test_existing_suffix_kept(self, tmp_path: Path):
        assert backup_path_for(tmp_path / "ignore.txt").name == "ignore.txt.bak"


class TestPublish:
    def test_write_new_file(self, tmp_path: Path):
        target = tmp_path / ".gitignore"
        result = publish("node_modules/\n", target)
        assert result.written is True
        assert result.backup_path is None
        assert result.backed_up is False
        assert target.read_text() == "node_modules/\n"
        assert not (tmp_path / ".gitignore.bak").exists()

    def test_existing_file_is_backed_up(self, tmp_path: Path):
        target = tmp_path / ".gitignore"
        target.write_text("OLD")
        result = publish("NEW\n", target)
        assert result.backed_up is True
        assert result.backup_path == tmp_path / ".gitignore.bak"
        assert (tmp_path / ".gitignore.bak").read_text() == "OLD"
        assert target.read_text() == "NEW\n"

    def test_older_backup_is_replaced(self, tmp_path: Path):
        target = tmp_path / ".gitignore"
        (tmp_path / ".gitignore.bak").write_text("ANCIENT")
        target.write_text("OLD")
        publish("NEW\n", target)
        assert (tmp_path / ".gitignore.bak").read_text() == "OLD"

    def test_content_written_verbatim(self, tmp_path: Path):
        target = tmp_path / ".gitignore"
        content = "a/\n\n\nb/\n"
        publish(content, target)
        assert target.read_bytes() == content.encode("utf-8")

    def test_file_mode(self, tmp_path: Path):
        target = tmp_path / ".gitignore"
        old_umask = os.umask(0o022)
        try:
            publish("x\n", target)
        finally:
            os.umask(old_umask)
        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_write_failure_raises(self, tmp_path: Path):
        target = tmp_path / "missing-dir" / ".gitignore"
        with pytest.raises(PublishError, match="Cannot write"):
            publish("x\n", target)
        assert not target.exists()

    def test_backup_failure_is_not_fatal(self, tmp_path: Path, monkeypatch):
        target = tmp_path / ".gitignore"
        target.write_text("OLD")

        def broken_replace(src, dst):
            raise PermissionError(13, "Permission denied", str(src))

        monkeypatch.setattr(ignore_file.os, "replace", broken_replace)
        result = publish("NEW\n", target)
        assert result.written is True
        assert result.backup_path is None
        assert target.read_text() == "NEW\n"
        assert not (tmp_path / ".gitignore.bak").exists()


class TestBackupExisting:
    def test_nothing_to_back_up(self, tmp_path: Path):
        assert backup_existing(tmp_path / ".gitignore") is None

    def test_dangling_symlink_is_moved(self, tmp_path: Path):
        target = tmp_path / ".gitignore"
        os.symlink(tmp_path / "nowhere", target)
        backup = backup_existing(target)
        assert backup == tmp_path / ".gitignore.bak"
        assert os.path.islink(backup)
        assert not os.path.lexists(target)


class TestPublishResult:
    def test_to_dict(self, tmp_path: Path):
        result = PublishResult(
            path=tmp_path / ".gitignore",
            backup_path=tmp_path / ".gitignore.bak",
            written=True,
        )
        d = result.to_dict()
        assert d["path"] == str(tmp_path / ".gitignore")
        assert d["backup_path"] == str(tmp_path / ".gitignore.bak")
        assert d["written"] is True

    def test_to_dict_without_backup(self, tmp_path: Path):
        d = PublishResult(path=tmp_path / ".gitignore").to_dict()
        assert d["backup_path"] is None
        assert d["written"] is False
