"""Shared fixtures for disk_ops tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def disk_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temp directory used as the working directory, with no stray settings."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DISK_OPS_CHUNK_SIZE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture()
def sample_tree(disk_tmp: Path) -> Path:
    """Build a small tree and return its root.

    tree/
      a.txt
      empty/
      sub/
        b.txt
        deep/
          c.txt
    """
    root = disk_tmp / "tree"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a")
    (root / "sub" / "b.txt").write_text("b")
    (root / "sub" / "deep" / "c.txt").write_text("c")
    return root
