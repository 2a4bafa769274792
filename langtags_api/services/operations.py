from __future__ import annotations

"""
langtags_api/services/operations.py

Una sola operación de tags a la vez por proceso (scan o mantenimiento).
Una segunda petición mientras otra corre se rechaza (409) en lugar de encolarse.
"""

import threading
from collections.abc import Callable
from typing import TypeVar

from langtags_api.services import metrics

T = TypeVar("T")

_RUN_LOCK = threading.Lock()


class OperationBusy(RuntimeError):
    pass


def is_busy() -> bool:
    return _RUN_LOCK.locked()


def run_exclusive(name: str, fn: Callable[[], T]) -> T:
    if not _RUN_LOCK.acquire(blocking=False):
        metrics.inc("language_tags_operations_rejected_total", 1)
        raise OperationBusy(f"Another language tags operation is running; rejected {name}")
    try:
        metrics.inc("language_tags_operations_total", 1)
        return fn()
    finally:
        _RUN_LOCK.release()
