from __future__ import annotations

"""
langtags/run_metrics.py

Métricas agregadas del scan (thread-safe).

Objetivo:
- Contar eventos relevantes (llamadas a ffmpeg, errores, tags escritos, avisos de agregación).
- Poder imprimir un resumen final CONSISTENTE al terminar cada pass.
- Ser seguro en ThreadPool.

Uso:
    from langtags.run_metrics import METRICS

    METRICS.incr("extract.calls")
    METRICS.observe_ms("extract.latency_ms", elapsed_ms)
    METRICS.add_error("extract", "ffmpeg", item="Movie (1999)", detail="exit 1")

    summary = METRICS.snapshot()
"""

import threading
import time
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ErrorEvent:
    ts: float
    subsystem: str   # "extract" | "aggregation" | "library" | "scan" | "maintenance"
    action: str
    item: str | None
    detail: str


class RunMetrics:
    """
    - counters: dict[str, int]
    - timings_ms: dict[str, {"count", "sum", "min", "max"}] (+ "avg" en snapshot)
    - errors: lista acotada (se descartan los más antiguos)
    """

    def __init__(self, *, max_error_events: int = 2000) -> None:
        self._lock = threading.Lock()
        self._counters: dict[str, int] = {}
        self._timings: dict[str, dict[str, float]] = {}
        self._errors: list[ErrorEvent] = []
        self._max_error_events = max(0, int(max_error_events))

    def incr(self, key: str, n: int = 1) -> None:
        if not key:
            return
        with self._lock:
            self._counters[key] = int(self._counters.get(key, 0)) + int(n)

    def get(self, key: str) -> int:
        with self._lock:
            return int(self._counters.get(key, 0))

    def observe_ms(self, key: str, ms: float) -> None:
        if not key:
            return
        v = float(ms)
        with self._lock:
            t = self._timings.get(key)
            if t is None:
                self._timings[key] = {"count": 1.0, "sum": v, "min": v, "max": v}
                return
            t["count"] += 1.0
            t["sum"] += v
            t["min"] = min(t["min"], v)
            t["max"] = max(t["max"], v)

    def add_error(self, subsystem: str, action: str, *, item: str | None, detail: str) -> None:
        ev = ErrorEvent(
            ts=time.time(),
            subsystem=str(subsystem),
            action=str(action),
            item=item,
            detail=str(detail)[:800],
        )
        with self._lock:
            if self._max_error_events <= 0:
                return
            if len(self._errors) >= self._max_error_events:
                self._errors.pop(0)
            self._errors.append(ev)

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()
            self._timings.clear()
            self._errors.clear()

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            counters = dict(self._counters)
            timings = {k: dict(v) for k, v in self._timings.items()}
            errors = list(self._errors)

        by_subsystem: dict[str, int] = {}
        for e in errors:
            by_subsystem[e.subsystem] = by_subsystem.get(e.subsystem, 0) + 1

        for t in timings.values():
            t["avg"] = t.get("sum", 0.0) / max(1.0, t.get("count", 0.0))

        return {
            "counters": counters,
            "timings_ms": timings,
            "errors": errors,
            "derived": {"errors.total": len(errors), "errors.by_subsystem": by_subsystem},
        }


# Singleton del proceso
METRICS = RunMetrics()
