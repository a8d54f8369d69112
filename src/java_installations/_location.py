"""Candidate installation locations and the protocol for suppliers that produce them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True)
class InstallationLocation:
    """A raw, not yet validated installation path and the source that proposed it."""

    location: Path
    source: str

    def __post_init__(self) -> None:
        if not isinstance(self.location, Path):
            object.__setattr__(self, "location", Path(self.location))

    @property
    def display_name(self) -> str:
        return f"'{self.location}' ({self.source})"


@runtime_checkable
class InstallationSupplier(Protocol):
    """Proposes candidate installation locations, e.g. from an environment variable or well known directories."""

    def get(self) -> Iterable[InstallationLocation]: ...


__all__ = [
    "InstallationLocation",
    "InstallationSupplier",
]
