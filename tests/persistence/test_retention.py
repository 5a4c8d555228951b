"""Tests for retention cleanup."""

import os
import time

import pytest

from screencap.exceptions import ConfigurationError
from screencap.persistence import prune_old_captures

DAY = 86400


def _touch(path, age_days: float, now: float) -> None:
    path.write_bytes(b"x")
    mtime = now - age_days * DAY
    os.utime(path, (mtime, mtime))


def test_removes_only_old_images(tmp_path) -> None:
    now = time.time()
    _touch(tmp_path / "old.png", 10, now)
    _touch(tmp_path / "old.JPG", 10, now)
    _touch(tmp_path / "fresh.png", 1, now)
    _touch(tmp_path / "notes.txt", 10, now)
    (tmp_path / "nested").mkdir()
    _touch(tmp_path / "nested" / "deep.png", 10, now)

    removed = prune_old_captures(tmp_path, 7, now=now)

    assert sorted(p.name for p in removed) == ["old.JPG", "old.png"]
    assert (tmp_path / "fresh.png").exists()
    assert (tmp_path / "notes.txt").exists()
    assert (tmp_path / "nested" / "deep.png").exists()


def test_missing_directory_is_noop(tmp_path) -> None:
    assert prune_old_captures(tmp_path / "nope", 3) == []


def test_rejects_non_positive_age(tmp_path) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        prune_old_captures(tmp_path, 0)
    assert exc_info.value.config_key == "cleanup_after_days"
