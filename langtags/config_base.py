"""
langtags/config_base.py

- Carga .env UNA vez
- Define PATHS base (BASE_DIR/DATA_DIR) temprano
- Helpers defensivos (_get_env_*, _cap_*, parsers)
- Flags globales (DEBUG_MODE/SILENT_MODE/LOG_LEVEL/HTTP_DEBUG)
- LOGGER_FILE_* + congelado de LOGGER_FILE_PATH

Este módulo NO debe importar config_*.py para evitar ciclos.
"""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# No sobre-escribimos env vars ya definidas por el entorno.
load_dotenv(override=False)

from langtags import logger as _logger  # noqa: E402


# ============================================================
# Paths base
# ============================================================

BASE_DIR: Final[Path] = Path(__file__).resolve().parent
PROJECT_DIR: Final[Path] = BASE_DIR.parent

_DATA_DIR_RAW: Final[str] = (os.getenv("DATA_DIR") or "data").strip() or "data"
_DATA_DIR_CANDIDATE = Path(_DATA_DIR_RAW)
DATA_DIR: Final[Path] = (
    _DATA_DIR_CANDIDATE if _DATA_DIR_CANDIDATE.is_absolute() else (PROJECT_DIR / _DATA_DIR_CANDIDATE)
)


# ============================================================
# Helpers: parseo defensivo de env vars
# ============================================================

_TRUE_SET: Final[set[str]] = {"1", "true", "t", "yes", "y", "on"}
_FALSE_SET: Final[set[str]] = {"0", "false", "f", "no", "n", "off"}


def _clean_env_raw(v: object | None) -> str | None:
    if v is None:
        return None
    s = str(v).strip()
    if not s:
        return None
    if len(s) >= 2 and (s[0] == s[-1]) and s[0] in ("'", '"'):
        s = s[1:-1].strip()
    return s or None


def _get_env_str(name: str, default: str | None = None) -> str | None:
    v = _clean_env_raw(os.getenv(name))
    return default if v is None else v


def _get_env_int(name: str, default: int) -> int:
    v = _clean_env_raw(os.getenv(name))
    if v is None:
        return default
    try:
        return int(v)
    except Exception:
        _logger.warning(f"Invalid int for {name!r}: {v!r}, using default {default}", always=True)
        return default


def _get_env_float(name: str, default: float) -> float:
    v = _clean_env_raw(os.getenv(name))
    if v is None:
        return default
    try:
        return float(v)
    except Exception:
        _logger.warning(f"Invalid float for {name!r}: {v!r}, using default {default}", always=True)
        return default


def _get_env_bool(name: str, default: bool) -> bool:
    v = _clean_env_raw(os.getenv(name))
    if v is None:
        return default
    s = v.strip().lower()
    if s in _TRUE_SET:
        return True
    if s in _FALSE_SET:
        return False
    _logger.warning(f"Invalid bool for {name!r}: {v!r}, using default {default}", always=True)
    return default


def _get_env_enum_str(
    name: str,
    *,
    default: str,
    allowed: set[str],
    normalize: bool = True,
) -> str:
    raw = _get_env_str(name, None)
    if raw is None:
        return default
    s = raw.strip()
    if normalize:
        s = s.lower()
    if s in allowed:
        return s
    _logger.warning(
        f"Invalid value for {name!r}: {raw!r}. Allowed={sorted(allowed)}. Using default {default!r}.",
        always=True,
    )
    return default


def _cap_int(name: str, value: int, *, min_v: int, max_v: int) -> int:
    if value < min_v:
        _logger.warning(f"{name} < {min_v}; forcing to {min_v}", always=True)
        return min_v
    if value > max_v:
        _logger.warning(f"{name} too high; capping to {max_v}", always=True)
        return max_v
    return value


def _cap_float_min(name: str, value: float, *, min_v: float) -> float:
    if value < min_v:
        _logger.warning(f"{name} < {min_v}; forcing to {min_v}", always=True)
        return min_v
    return value


def _log_config_debug(label: str, value: object, *, debug_mode: bool, silent_mode: bool) -> None:
    if not debug_mode or silent_mode:
        return
    _logger.info(f"{label}: {value}")


def _parse_env_csv_tokens(raw: str, *, lower: bool = True) -> list[str]:
    """CSV -> tokens sin vacíos ni duplicados (orden estable)."""
    cleaned = (raw or "").strip().strip('"').strip("'").strip()
    if not cleaned:
        return []

    parts = [p.strip() for p in cleaned.split(",") if p.strip()]
    if lower:
        parts = [p.lower() for p in parts]

    seen: set[str] = set()
    out: list[str] = []
    for p in parts:
        key = p.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(p)
    return out


# ============================================================
# MODO DE EJECUCIÓN
# ============================================================

DEBUG_MODE: bool = _get_env_bool("DEBUG_MODE", False)
SILENT_MODE: bool = _get_env_bool("SILENT_MODE", False)

HTTP_DEBUG: bool = _get_env_bool("HTTP_DEBUG", False)
LOG_LEVEL: str | None = _get_env_str("LOG_LEVEL", None)


# ============================================================
# LOGGER (persistencia opcional a fichero por ejecución)
# ============================================================

LOGGER_FILE_ENABLED: bool = _get_env_bool("LOGGER_FILE_ENABLED", False)

_LOGGER_FILE_DIR_RAW: Final[str] = _get_env_str("LOGGER_FILE_DIR", "logs") or "logs"
_LOGGER_FILE_DIR_CANDIDATE = Path(_LOGGER_FILE_DIR_RAW)
LOGGER_FILE_DIR: Final[Path] = (
    _LOGGER_FILE_DIR_CANDIDATE if _LOGGER_FILE_DIR_CANDIDATE.is_absolute() else (PROJECT_DIR / _LOGGER_FILE_DIR_CANDIDATE)
)

LOGGER_FILE_PREFIX: Final[str] = _get_env_str("LOGGER_FILE_PREFIX", "langtags") or "langtags"
LOGGER_FILE_TIMESTAMP_FORMAT: Final[str] = _get_env_str("LOGGER_FILE_TIMESTAMP_FORMAT", "%Y-%m-%d_%H-%M-%S") or "%Y-%m-%d_%H-%M-%S"
LOGGER_FILE_INCLUDE_PID: bool = _get_env_bool("LOGGER_FILE_INCLUDE_PID", True)

_LOGGER_FILE_PATH_SENTINEL: Final[object] = object()
_LOGGER_FILE_PATH_CACHED: Path | None | object = _LOGGER_FILE_PATH_SENTINEL


def _sanitize_filename_component(s: str) -> str:
    out_chars: list[str] = []
    for ch in (s or ""):
        if ch.isalnum() or ch in ("-", "_", ".", "@"):
            out_chars.append(ch)
        else:
            out_chars.append("_")
    cleaned = "".join(out_chars).strip("._-")
    return cleaned or "run"


def _build_logger_file_path() -> Path | None:
    """
    Calcula el path del log UNA vez y lo congela en os.environ["LOGGER_FILE_PATH"]
    para que subprocesos hereden el mismo fichero.
    """
    global _LOGGER_FILE_PATH_CACHED

    if _LOGGER_FILE_PATH_CACHED is not _LOGGER_FILE_PATH_SENTINEL:
        return None if _LOGGER_FILE_PATH_CACHED is None else _LOGGER_FILE_PATH_CACHED  # type: ignore[return-value]

    if not LOGGER_FILE_ENABLED:
        _LOGGER_FILE_PATH_CACHED = None
        return None

    env_path = _clean_env_raw(os.getenv("LOGGER_FILE_PATH"))
    if env_path:
        p = Path(env_path)
        resolved = (p if p.is_absolute() else (PROJECT_DIR / p)).resolve()
        os.environ["LOGGER_FILE_PATH"] = str(resolved)
        _LOGGER_FILE_PATH_CACHED = resolved
        return resolved

    ts = _sanitize_filename_component(datetime.now().strftime(LOGGER_FILE_TIMESTAMP_FORMAT))
    prefix = _sanitize_filename_component(LOGGER_FILE_PREFIX)
    pid_part = f"_{os.getpid()}" if LOGGER_FILE_INCLUDE_PID else ""

    resolved = (LOGGER_FILE_DIR / f"{prefix}_{ts}{pid_part}.log").resolve()
    os.environ["LOGGER_FILE_PATH"] = str(resolved)
    _LOGGER_FILE_PATH_CACHED = resolved
    return resolved


LOGGER_FILE_PATH: Path | None = _build_logger_file_path()
