from __future__ import annotations

from threading import RLock

from langtags.run_metrics import METRICS

_LOCK = RLock()
_METRICS: dict[str, int] = {
    "http_requests_total": 0,
    "http_errors_5xx_total": 0,
    "language_tags_operations_total": 0,
    "language_tags_operations_rejected_total": 0,
}


def inc(name: str, value: int = 1) -> None:
    with _LOCK:
        _METRICS[name] = _METRICS.get(name, 0) + value


def _prom_name(key: str) -> str:
    return "langtags_" + "".join(ch if ch.isalnum() else "_" for ch in key) + "_total"


def render_prometheus() -> str:
    """Contadores HTTP + contadores del scan (langtags.run_metrics)."""
    with _LOCK:
        lines: list[str] = []
        for k, v in sorted(_METRICS.items()):
            lines.append(f"# TYPE {k} counter")
            lines.append(f"{k} {v}")

    counters = METRICS.snapshot().get("counters", {})
    for k, v in sorted(counters.items()):
        name = _prom_name(k)
        lines.append(f"# TYPE {name} counter")
        lines.append(f"{name} {v}")
    return "\n".join(lines) + "\n"
