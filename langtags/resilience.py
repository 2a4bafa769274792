from __future__ import annotations

"""
langtags/resilience.py

Reintentos + circuit breaker para las escrituras de tags contra la biblioteca
remota (Plex). Una persistencia de tags es "todo o nada" para el item: si tras
los reintentos sigue fallando, el caller recibe el estado y decide (PlexLibrary
lanza, el motor lo registra como error del root).

Circuit breaker por key (normalmente "plex:labels"):
    CLOSED    -> llamadas normales; cuenta fallos consecutivos
    OPEN      -> rechaza sin llamar hasta que pase `open_seconds`
    HALF_OPEN -> deja pasar una sonda; éxito => CLOSED, fallo => OPEN

Thread-safe: el scan paralelo comparte un único breaker entre workers.
"""

import random
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TypeVar

T = TypeVar("T")

CLOSED = "CLOSED"
OPEN = "OPEN"
HALF_OPEN = "HALF_OPEN"


@dataclass
class BreakerState:
    state: str = CLOSED
    failures: int = 0
    opened_at: float = 0.0
    probes: int = 0
    last_error: str = ""


class CircuitBreaker:
    def __init__(self, *, failure_threshold: int = 5, open_seconds: float = 20.0, max_probes: int = 1) -> None:
        self._lock = threading.Lock()
        self._by_key: dict[str, BreakerState] = {}
        self.failure_threshold = max(1, int(failure_threshold))
        self.open_seconds = max(0.1, float(open_seconds))
        self.max_probes = max(1, int(max_probes))

    def _state(self, key: str) -> BreakerState:
        st = self._by_key.get(key)
        if st is None:
            st = BreakerState()
            self._by_key[key] = st
        return st

    def allow(self, key: str) -> tuple[bool, str]:
        with self._lock:
            st = self._state(key)
            if st.state == CLOSED:
                return True, "closed"
            if st.state == OPEN:
                if time.monotonic() - st.opened_at < self.open_seconds:
                    return False, "open"
                st.state = HALF_OPEN
                st.probes = 0
            if st.probes >= self.max_probes:
                return False, "half_open:busy"
            st.probes += 1
            return True, "half_open:probe"

    def record_success(self, key: str) -> None:
        with self._lock:
            self._by_key[key] = BreakerState()

    def record_failure(self, key: str, *, error: str) -> None:
        with self._lock:
            st = self._state(key)
            st.failures += 1
            st.last_error = error[:500]
            if st.state == HALF_OPEN or st.failures >= self.failure_threshold:
                st.state = OPEN
                st.opened_at = time.monotonic()
                st.probes = 0

    def snapshot(self, key: str) -> BreakerState | None:
        with self._lock:
            st = self._by_key.get(key)
            return None if st is None else replace(st)


def backoff_delay(attempt: int, *, base: float = 0.35, cap: float = 6.0, jitter: float = 0.35) -> float:
    """base * 2^attempt, acotado a `cap`, con jitter multiplicativo +-jitter."""
    delay = min(cap, base * (2 ** max(0, int(attempt))))
    if jitter > 0:
        delay *= 1.0 + random.uniform(-jitter, jitter)
    return max(0.0, delay)


def backoff_sleep(attempt: int) -> None:
    time.sleep(backoff_delay(attempt))


def call_with_resilience(
    *,
    breaker: CircuitBreaker,
    key: str,
    fn: Callable[[], T],
    should_retry: Callable[[Exception], bool],
    max_retries: int = 2,
    sleep: Callable[[int], None] | None = None,
) -> tuple[T | None, str]:
    """
    Ejecuta fn() con breaker + reintentos.

    Returns: (resultado | None, status) con status "ok", "circuit_open:<motivo>"
    o "error:<repr>".
    """
    allowed, reason = breaker.allow(key)
    if not allowed:
        return None, f"circuit_open:{reason}"

    retries = max(0, int(max_retries))
    last: Exception | None = None
    for attempt in range(retries + 1):
        try:
            out = fn()
        except Exception as exc:  # noqa: BLE001
            last = exc
            breaker.record_failure(key, error=repr(exc))
            if attempt >= retries or not should_retry(exc):
                break
            (sleep or backoff_sleep)(attempt)
            continue
        breaker.record_success(key)
        return out, "ok"

    return None, f"error:{last!r}"
