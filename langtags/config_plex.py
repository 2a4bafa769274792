from __future__ import annotations

from langtags.config_base import (
    _cap_float_min,
    _cap_int,
    _get_env_bool,
    _get_env_float,
    _get_env_int,
    _get_env_str,
)

# ============================================================
# PLEX
# ============================================================

BASEURL: str | None = _get_env_str("BASEURL", None)
PLEX_PORT: int = _cap_int(
    "PLEX_PORT", _get_env_int("PLEX_PORT", 32400), min_v=1, max_v=65535
)
PLEX_TOKEN: str | None = _get_env_str("PLEX_TOKEN", None)

_raw_exclude_plex: str = _get_env_str("EXCLUDE_PLEX_LIBRARIES", "") or ""
EXCLUDE_PLEX_LIBRARIES: list[str] = [
    x.strip() for x in _raw_exclude_plex.split(",") if x.strip()
]

# Escritura de labels (addLabel/removeLabel): retries + circuit breaker
PLEX_WRITE_MAX_RETRIES: int = _cap_int(
    "PLEX_WRITE_MAX_RETRIES", _get_env_int("PLEX_WRITE_MAX_RETRIES", 2), min_v=0, max_v=10
)
PLEX_BREAKER_FAILURE_THRESHOLD: int = _cap_int(
    "PLEX_BREAKER_FAILURE_THRESHOLD",
    _get_env_int("PLEX_BREAKER_FAILURE_THRESHOLD", 5),
    min_v=1,
    max_v=100,
)
PLEX_BREAKER_OPEN_SECONDS: float = _cap_float_min(
    "PLEX_BREAKER_OPEN_SECONDS", _get_env_float("PLEX_BREAKER_OPEN_SECONDS", 20.0), min_v=0.1
)

PLEX_METRICS_ENABLED: bool = _get_env_bool("PLEX_METRICS_ENABLED", True)
