from __future__ import annotations

"""
langtags/policy.py

ScanPolicy (snapshot inmutable por pass) + Policy Filter (whitelist).

- `build_scan_policy(settings, full_refresh=...)` se llama UNA vez al inicio de cada scan
  y el resultado viaja explícitamente por toda la cadena de llamadas.
- Prefijos: >= 3 caracteres y distintos entre sí (case-insensitive); si no, se vuelve
  a los defaults con warning (nunca se aplica una config inválida a medias).
- Whitelist: normalizada a iso3 canónico + `und` implícito. Vacía = sin filtro.
"""

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from langtags import logger as _logger
from langtags.config_tags import (
    DEFAULT_AUDIO_PREFIX,
    DEFAULT_SUBTITLE_PREFIX,
    TagSettings,
)
from langtags.languages import REGISTRY, UNDETERMINED_CODE

_MIN_PREFIX_LEN = 3


class TagKind(enum.Enum):
    AUDIO = "audio"
    SUBTITLE = "subtitle"


@dataclass(frozen=True)
class ScanPolicy:
    full_refresh: bool
    synchronous: bool
    include_subtitle_tags: bool
    disable_undetermined_tag: bool
    whitelist: frozenset[str]
    audio_prefix: str = DEFAULT_AUDIO_PREFIX
    subtitle_prefix: str = DEFAULT_SUBTITLE_PREFIX
    workers: int = 1
    ffmpeg_path: str = "ffmpeg"

    def prefix_for(self, kind: TagKind) -> str:
        return self.audio_prefix if kind is TagKind.AUDIO else self.subtitle_prefix

    def enabled_kinds(self) -> tuple[TagKind, ...]:
        if self.include_subtitle_tags:
            return (TagKind.AUDIO, TagKind.SUBTITLE)
        return (TagKind.AUDIO,)


def _validated_prefix(raw: str | None, *, default: str, label: str) -> str:
    value = raw or ""
    if not value.strip() or len(value) < _MIN_PREFIX_LEN:
        if value:
            _logger.warning(
                f"[CONFIG] {label} prefix {value!r} shorter than {_MIN_PREFIX_LEN} characters; "
                f"using default {default!r}",
                always=True,
            )
        return default
    return value


def validate_prefixes(audio_raw: str | None, subtitle_raw: str | None) -> tuple[str, str]:
    audio = _validated_prefix(audio_raw, default=DEFAULT_AUDIO_PREFIX, label="Audio")
    subtitle = _validated_prefix(subtitle_raw, default=DEFAULT_SUBTITLE_PREFIX, label="Subtitle")

    if audio.lower() == subtitle.lower():
        _logger.warning(
            f"[CONFIG] Audio and subtitle prefixes are identical ({audio!r}); "
            "using default prefixes for both",
            always=True,
        )
        return DEFAULT_AUDIO_PREFIX, DEFAULT_SUBTITLE_PREFIX

    return audio, subtitle


def normalize_whitelist(tokens: Iterable[str]) -> frozenset[str]:
    """Tokens (2 o 3 letras) -> iso3 canónicos; se añade `und` si queda algo."""
    out: set[str] = set()
    for token in tokens:
        t = (token or "").strip().lower()
        if not t:
            continue
        entry = REGISTRY.resolve(t)
        if entry is None:
            _logger.warning(f"[CONFIG] Unknown language code in whitelist ignored: {t!r}", always=True)
            continue
        out.add(entry.iso3)

    if out:
        out.add(UNDETERMINED_CODE)
    return frozenset(out)


def build_scan_policy(settings: TagSettings, *, full_refresh: bool) -> ScanPolicy:
    audio_prefix, subtitle_prefix = validate_prefixes(settings.audio_prefix, settings.subtitle_prefix)

    return ScanPolicy(
        full_refresh=bool(full_refresh or settings.always_force_full_refresh),
        synchronous=settings.synchronous_refresh,
        include_subtitle_tags=settings.add_subtitle_tags,
        disable_undetermined_tag=settings.disable_undefined_language_tags,
        whitelist=normalize_whitelist(settings.whitelist),
        audio_prefix=audio_prefix,
        subtitle_prefix=subtitle_prefix,
        workers=max(1, int(settings.scan_workers)),
        ffmpeg_path=settings.ffmpeg_path,
    )


def filter_languages(
    languages: Iterable[str],
    whitelist: frozenset[str],
    *,
    item_name: str = "",
) -> list[str]:
    """
    Intersección con `whitelist ∪ {und}`.

    Whitelist vacía -> entrada sin cambios (deduplicada). Registra lo descartado.
    """
    seen: set[str] = set()
    unique: list[str] = []
    for code in languages:
        key = code.lower()
        if key in seen:
            continue
        seen.add(key)
        unique.append(code)

    if not whitelist:
        return unique

    allowed = whitelist | {UNDETERMINED_CODE}
    kept = [c for c in unique if c.lower() in allowed]
    dropped = [c for c in unique if c.lower() not in allowed]

    if dropped:
        _logger.info(f"Filtered out languages for {item_name or '<item>'}: {', '.join(dropped)}")

    return kept
