"""Filesystem compatibility utilities for installation discovery."""

from __future__ import annotations

import functools
import logging
import os
import tempfile
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

LOGGER = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def fs_is_case_sensitive() -> bool:
    with tempfile.NamedTemporaryFile(prefix="TmP") as tmp_file:
        result = not os.path.exists(tmp_file.name.lower())
    LOGGER.debug("filesystem is %scase-sensitive", "" if result else "not ")
    return result


def fs_path_id(path: str) -> str:
    return path.casefold() if not fs_is_case_sensitive() else path


def canonical_path(path: Path) -> Path:
    """Resolve symlinks and normalize the path.

    Resolution is strict: a directory that disappeared after it was validated raises :class:`OSError`, the same as any
    other I/O failure while resolving.

    """
    return path.resolve(strict=True)


__all__ = [
    "canonical_path",
    "fs_is_case_sensitive",
    "fs_path_id",
]
