"""Process wide registry of detected java installation directories."""

from __future__ import annotations

import logging
import os
import stat
import threading
from typing import TYPE_CHECKING

from ._compat import canonical_path, fs_path_id
from ._operation import OperationDescriptor, run_operation

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ._location import InstallationLocation, InstallationSupplier
    from ._operation import OperationExecutor

LOGGER = logging.getLogger(__name__)

TOOLCHAIN_DETECTION = OperationDescriptor(
    display_name="Toolchain detection",
    progress_display_name="Detecting local java toolchains",
)


class InstallationConfigurationError(RuntimeError):
    """A validated installation path could not be turned into its canonical form."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"could not canonicalize path to java installation: {path}")
        self.path = path


class InstallationRegistry:
    """Collects installation directories from the suppliers once and serves the same snapshot afterwards.

    Only a successful collection is remembered: if a supplier raises or a path cannot be canonicalized the error
    propagates and the next call runs the whole collection again.

    """

    def __init__(
        self,
        suppliers: Iterable[InstallationSupplier],
        executor: OperationExecutor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._suppliers = tuple(suppliers)
        self._executor = executor
        self._logger = LOGGER if logger is None else logger
        self._lock = threading.Lock()
        self._installations: frozenset[Path] | None = None

    @property
    def computed(self) -> bool:
        return self._installations is not None

    def list_installations(self) -> frozenset[Path]:
        """:returns: the canonical installation directories, collected on the first call"""
        installations = self._installations
        if installations is None:
            with self._lock:
                if self._installations is None:
                    self._installations = run_operation(self._collect_installations, TOOLCHAIN_DETECTION, self._executor)
                installations = self._installations
        return installations

    def _collect_installations(self) -> frozenset[Path]:
        candidates: list[InstallationLocation] = []
        for supplier in self._suppliers:
            candidates.extend(supplier.get())
        found: dict[str, Path] = {}
        for candidate in candidates:
            if not self._installation_exists(candidate):
                continue
            path = self._canonicalize(candidate.location)
            found.setdefault(fs_path_id(str(path)), path)
        self._logger.debug("found %d java installation(s) from %d candidate(s)", len(found), len(candidates))
        return frozenset(found.values())

    def _installation_exists(self, candidate: InstallationLocation) -> bool:
        try:
            mode = os.stat(candidate.location).st_mode
        except OSError:
            self._logger.debug("could not stat %s", candidate.location, exc_info=True)
            self._logger.warning("directory %s used for installations does not exist", candidate.display_name)
            return False
        if not stat.S_ISDIR(mode):
            self._logger.warning("path for installation %s points to a file, not a directory", candidate.display_name)
            return False
        return True

    def _canonicalize(self, path: Path) -> Path:
        try:
            resolved = canonical_path(path)
        except OSError as exc:
            raise InstallationConfigurationError(path) from exc
        if resolved != path:
            self._logger.debug("canonicalized %s to %s", path, resolved)
        return resolved

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(suppliers={len(self._suppliers)}, computed={self.computed})"


__all__ = [
    "TOOLCHAIN_DETECTION",
    "InstallationConfigurationError",
    "InstallationRegistry",
]
