"""Seam for running a computation as a named, observable unit of work."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, NamedTuple, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

LOGGER = logging.getLogger(__name__)


class OperationDescriptor(NamedTuple):
    display_name: str
    progress_display_name: str


@runtime_checkable
class OperationExecutor(Protocol):
    """Runs a computation on behalf of an operations tracker and returns its result unchanged."""

    def call(self, operation: Callable[[], T], descriptor: OperationDescriptor) -> T: ...


def run_operation(
    operation: Callable[[], T],
    descriptor: OperationDescriptor,
    executor: OperationExecutor | None = None,
) -> T:
    """Run ``operation`` through ``executor``, or directly when no executor is configured."""
    if executor is not None:
        return executor.call(operation, descriptor)
    LOGGER.debug("%s", descriptor.progress_display_name)
    start = time.perf_counter()
    result = operation()
    LOGGER.debug("%s took %.3fs", descriptor.display_name, time.perf_counter() - start)
    return result


__all__ = [
    "OperationDescriptor",
    "OperationExecutor",
    "run_operation",
]
