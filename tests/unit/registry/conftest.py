from __future__ import annotations

import os
import threading
from typing import TYPE_CHECKING

import pytest

from java_installations import InstallationLocation

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path


class RecordingSupplier:
    """Supplier returning fixed locations and counting how often it was asked."""

    def __init__(self, locations: Iterable[InstallationLocation], before: Callable[[], None] | None = None) -> None:
        self.locations = set(locations)
        self.before = before
        self.calls = 0
        self._lock = threading.Lock()

    def get(self) -> set[InstallationLocation]:
        with self._lock:
            self.calls += 1
        if self.before is not None:
            self.before()
        return self.locations


@pytest.fixture
def make_supplier() -> Callable[..., RecordingSupplier]:
    def _make(*paths: Path | str, source: str = "test", before: Callable[[], None] | None = None) -> RecordingSupplier:
        return RecordingSupplier((InstallationLocation(p, source) for p in paths), before=before)

    return _make


@pytest.fixture
def jdk(tmp_path: Path) -> Path:
    path = tmp_path / "jdk17"
    (path / "bin").mkdir(parents=True)
    return path


@pytest.fixture
def _require_symlink(tmp_path: Path) -> None:
    src, dest = tmp_path / "symlink-src", tmp_path / "symlink-dest"
    src.mkdir()
    try:
        os.symlink(src, dest, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("filesystem does not support symlinks")
    finally:
        if dest.is_symlink():
            dest.unlink()
        src.rmdir()
