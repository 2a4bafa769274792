from __future__ import annotations

"""
langtags/config_tags.py

Superficie de configuración del scan de tags de idioma.

A diferencia del resto de config_*.py (constantes a nivel de módulo), las opciones
del scan se leen con `read_tag_settings()` al inicio de CADA pass: así un cambio en
el entorno se aplica en el siguiente scan, y nunca a mitad de uno.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from langtags.config_base import (
    DATA_DIR,
    DEBUG_MODE,
    SILENT_MODE,
    _cap_int,
    _get_env_bool,
    _get_env_enum_str,
    _get_env_int,
    _get_env_str,
    _log_config_debug,
    _parse_env_csv_tokens,
)

DEFAULT_AUDIO_PREFIX: Final[str] = "language_"
DEFAULT_SUBTITLE_PREFIX: Final[str] = "subtitle_language_"
DEFAULT_NON_MEDIA_TAG: Final[str] = "item"
DEFAULT_FFMPEG: Final[str] = "ffmpeg"

SCAN_WORKERS_MAX: Final[int] = 64


@dataclass(frozen=True)
class TagSettings:
    """Snapshot crudo del entorno (sin validar prefijos ni normalizar whitelist)."""

    always_force_full_refresh: bool
    whitelist: tuple[str, ...]
    add_subtitle_tags: bool
    synchronous_refresh: bool
    disable_undefined_language_tags: bool
    audio_prefix: str
    subtitle_prefix: str
    ffmpeg_path: str
    scan_workers: int
    enable_non_media_tagging: bool
    non_media_tag: str
    non_media_item_types: tuple[str, ...]


def _default_workers() -> int:
    return max(1, min(os.cpu_count() or 1, SCAN_WORKERS_MAX))


def read_tag_settings() -> TagSettings:
    settings = TagSettings(
        always_force_full_refresh=_get_env_bool("ALWAYS_FORCE_FULL_REFRESH", False),
        whitelist=tuple(_parse_env_csv_tokens(_get_env_str("WHITELIST_LANGUAGE_TAGS", "") or "")),
        add_subtitle_tags=_get_env_bool("ADD_SUBTITLE_TAGS", False),
        synchronous_refresh=_get_env_bool("SYNCHRONOUS_REFRESH", False),
        disable_undefined_language_tags=_get_env_bool("DISABLE_UNDEFINED_LANGUAGE_TAGS", False),
        # Sin strip de espacios internos: el prefijo se valida después.
        audio_prefix=os.getenv("AUDIO_LANGUAGE_TAG_PREFIX", DEFAULT_AUDIO_PREFIX),
        subtitle_prefix=os.getenv("SUBTITLE_LANGUAGE_TAG_PREFIX", DEFAULT_SUBTITLE_PREFIX),
        ffmpeg_path=_get_env_str("FFMPEG_PATH", DEFAULT_FFMPEG) or DEFAULT_FFMPEG,
        scan_workers=_cap_int(
            "SCAN_WORKERS",
            _get_env_int("SCAN_WORKERS", _default_workers()),
            min_v=1,
            max_v=SCAN_WORKERS_MAX,
        ),
        enable_non_media_tagging=_get_env_bool("ENABLE_NON_MEDIA_TAGGING", False),
        non_media_tag=_get_env_str("NON_MEDIA_TAG", DEFAULT_NON_MEDIA_TAG) or DEFAULT_NON_MEDIA_TAG,
        non_media_item_types=tuple(
            _parse_env_csv_tokens(_get_env_str("NON_MEDIA_ITEM_TYPES", "") or "", lower=False)
        ),
    )
    _log_config_debug("TagSettings", settings, debug_mode=DEBUG_MODE, silent_mode=SILENT_MODE)
    return settings


# ============================================================
# ORIGEN DE LA BIBLIOTECA
# ============================================================

LIBRARY_SOURCE: str = _get_env_enum_str(
    "LIBRARY_SOURCE", default="plex", allowed={"plex", "json"}
)

_LIBRARY_JSON_RAW: Final[str] = _get_env_str("LIBRARY_JSON_PATH", "library.json") or "library.json"
_LIBRARY_JSON_CANDIDATE = Path(_LIBRARY_JSON_RAW)
LIBRARY_JSON_PATH: Final[Path] = (
    _LIBRARY_JSON_CANDIDATE if _LIBRARY_JSON_CANDIDATE.is_absolute() else (DATA_DIR / _LIBRARY_JSON_CANDIDATE)
)
