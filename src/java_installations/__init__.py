"""Detect java installation directories from pluggable suppliers -- validated, canonical and computed once."""

from __future__ import annotations

from ._location import InstallationLocation, InstallationSupplier
from ._operation import OperationDescriptor, OperationExecutor, run_operation
from ._registry import TOOLCHAIN_DETECTION, InstallationConfigurationError, InstallationRegistry

__all__ = [
    "TOOLCHAIN_DETECTION",
    "InstallationConfigurationError",
    "InstallationLocation",
    "InstallationRegistry",
    "InstallationSupplier",
    "OperationDescriptor",
    "OperationExecutor",
    "run_operation",
]
