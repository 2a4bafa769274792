from __future__ import annotations

"""
langtags/plex_library.py

Biblioteca Plex (plexapi) como Library Collaborator del scan.

Mapeo
-----
- Tags de idioma  <-> labels de Plex (`item.labels[*].tag`, addLabel/removeLabel).
- Movie    <- sección "movie"      (section.all())
- Series   <- sección "show"       (section.all())
- Season   <- show.seasons()
- Episode  <- season.episodes()
- BoxSet   <- section.collections() NO smart (el guid hace de id externo)
- path     <- media[0].parts[0].file

Lecturas defensivas
-------------------
plexapi recarga objetos lazy al leer ciertos atributos; un corte de red en ese
reload no debe tumbar el scan: `_safe_getattr` devuelve default y lo registra.

Escrituras
----------
`update_tags()` calcula el diff contra los labels actuales y lo aplica con
reintentos + circuit breaker (langtags/resilience.py). Si tras los reintentos
sigue fallando, LANZA: la persistencia es síncrona y el motor no debe dar por
escrito algo que no lo está.
"""

from collections.abc import Sequence
from typing import Any, Final

import requests  # type: ignore[import-untyped]
from plexapi.server import PlexServer  # type: ignore[import-not-found]

from langtags import logger as _logger
from langtags.config_base import DEBUG_MODE, SILENT_MODE
from langtags.config_plex import (
    BASEURL,
    EXCLUDE_PLEX_LIBRARIES,
    PLEX_BREAKER_FAILURE_THRESHOLD,
    PLEX_BREAKER_OPEN_SECONDS,
    PLEX_METRICS_ENABLED,
    PLEX_PORT,
    PLEX_TOKEN,
    PLEX_WRITE_MAX_RETRIES,
)
from langtags.extractor import find_sidecar_subtitles
from langtags.library import ItemKind, MediaItem
from langtags.resilience import CircuitBreaker, call_with_resilience
from langtags.run_metrics import METRICS

# kind (Library) -> libtype (plexapi). Todo lo que no esté aquí es "Unknown item type".
_LIBTYPES: Final[dict[str, str]] = {
    "movie": "movie",
    "series": "show",
    "show": "show",
    "season": "season",
    "episode": "episode",
    "boxset": "collection",
    "collection": "collection",
    "musicartist": "artist",
    "artist": "artist",
    "musicalbum": "album",
    "album": "album",
    "audio": "track",
    "track": "track",
    "photo": "photo",
    "photoalbum": "photoalbum",
    "clip": "clip",
    "trailer": "clip",
}

_KIND_BY_LIBTYPE: Final[dict[str, str]] = {
    "movie": ItemKind.MOVIE.value,
    "show": ItemKind.SERIES.value,
    "season": ItemKind.SEASON.value,
    "episode": ItemKind.EPISODE.value,
    "collection": ItemKind.COLLECTION.value,
}

_BREAKER_KEY: Final[str] = "plex:labels"


def _log_always(msg: object) -> None:
    _logger.warning(str(msg), always=True)


def _log_debug(msg: object) -> None:
    if not DEBUG_MODE:
        return
    if SILENT_MODE:
        _logger.progress(f"[PLEX][DEBUG] {msg}")
    else:
        _logger.info(f"[PLEX][DEBUG] {msg}")


def _metric(key: str) -> None:
    if PLEX_METRICS_ENABLED:
        METRICS.incr(key)


# ============================================================
# Helpers defensivos
# ============================================================


def _is_networkish_exception(exc: BaseException) -> bool:
    if isinstance(exc, (requests.exceptions.RequestException, OSError)):
        return True
    name = exc.__class__.__name__.lower()
    return any(k in name for k in ("remotedisconnected", "protocolerror", "connectionreset", "timeout"))


def _safe_getattr(obj: object, attr: str, default: Any = None) -> Any:
    """getattr() que nunca lanza (lazy reload de plexapi incluido)."""
    try:
        return getattr(obj, attr, default)
    except Exception as exc:  # noqa: BLE001
        if _is_networkish_exception(exc):
            _metric("plex.network_attr_errors")
            _log_always(f"[PLEX] Network error reading attribute {attr!r} (lazy reload skipped): {exc!r}")
        else:
            _metric("plex.helper_failures")
            _log_debug(f"_safe_getattr({attr!r}) failed: {exc!r}")
        return default


def _first_file(obj: object) -> str | None:
    media = _safe_getattr(obj, "media", None)
    if not isinstance(media, Sequence) or not media:
        return None
    parts = _safe_getattr(media[0], "parts", None)
    if not isinstance(parts, Sequence) or not parts:
        return None
    file_path = _safe_getattr(parts[0], "file", None)
    if isinstance(file_path, str) and file_path.strip():
        return file_path.strip()
    return None


def _labels(obj: object) -> list[str]:
    out: list[str] = []
    for label in _safe_getattr(obj, "labels", None) or []:
        tag = _safe_getattr(label, "tag", None)
        if isinstance(tag, str) and tag.strip():
            out.append(tag.strip())
    return out


# ============================================================
# Conexión
# ============================================================


def _build_plex_base_url() -> str:
    """BASEURL="http://192.168.1.10" + PLEX_PORT=32400 -> "http://192.168.1.10:32400"."""
    if not BASEURL or not str(BASEURL).strip():
        raise RuntimeError("BASEURL no está definido en el entorno (.env)")
    return f"{str(BASEURL).rstrip('/')}:{int(PLEX_PORT)}"


def connect_plex() -> PlexServer:
    """
    Conecta a Plex y devuelve PlexServer.

    - Faltan BASEURL/PLEX_TOKEN -> RuntimeError
    - Fallo de conexión -> se re-lanza (caller decide)
    """
    if not BASEURL or not str(BASEURL).strip() or not PLEX_TOKEN or not str(PLEX_TOKEN).strip():
        raise RuntimeError("Faltan BASEURL o PLEX_TOKEN en el .env")

    base_url = _build_plex_base_url()
    _log_debug(f"Connecting to Plex at {base_url}")

    try:
        plex = PlexServer(base_url, str(PLEX_TOKEN))
    except Exception as exc:
        _metric("plex.connect_failures")
        _log_always(f"[PLEX] ERROR conectando a Plex ({base_url}): {exc!r}")
        raise

    _logger.info(f"[PLEX] Conectado a Plex: {base_url}")
    return plex


def get_sections(plex: PlexServer, *, excluded: Sequence[str] = ()) -> list[object]:
    """Secciones de Plex excluyendo `excluded` por título. Nunca lanza."""
    try:
        sections = plex.library.sections()
    except Exception as exc:  # noqa: BLE001
        _metric("plex.helper_failures")
        _log_always(f"[PLEX] ERROR obteniendo secciones: {exc!r}")
        return []

    skip = set(excluded)
    selected: list[object] = []
    for section in sections:
        title = _safe_getattr(section, "title", "") or ""
        if title and title in skip:
            _logger.info(f"[PLEX] Saltando biblioteca excluida: {title}")
            continue
        selected.append(section)

    _log_debug(f"Libraries selected: {len(selected)} (excluded={len(skip)})")
    return selected


# ============================================================
# PlexLibrary
# ============================================================


class PlexLibrary:
    def __init__(
        self,
        plex: PlexServer,
        *,
        excluded: Sequence[str] | None = None,
        breaker: CircuitBreaker | None = None,
        max_retries: int = PLEX_WRITE_MAX_RETRIES,
    ) -> None:
        self._plex = plex
        self._sections = get_sections(plex, excluded=EXCLUDE_PLEX_LIBRARIES if excluded is None else excluded)
        self._breaker = breaker or CircuitBreaker(
            failure_threshold=PLEX_BREAKER_FAILURE_THRESHOLD,
            open_seconds=PLEX_BREAKER_OPEN_SECONDS,
        )
        self._max_retries = max_retries

    @classmethod
    def connect(cls) -> "PlexLibrary":
        return cls(connect_plex())

    # ------------------------------------------------------------------

    def _to_item(self, obj: object, kind: str, *, parent_id: str | None = None) -> MediaItem:
        rating_key = _safe_getattr(obj, "ratingKey", None)
        is_video = kind in (ItemKind.MOVIE.value, ItemKind.EPISODE.value)
        return MediaItem(
            id=str(rating_key),
            name=str(_safe_getattr(obj, "title", "") or rating_key),
            kind=kind,
            path=_first_file(obj) if is_video else None,
            tags=_labels(obj),
            parent_id=parent_id,
            external_id=_safe_getattr(obj, "guid", None) if kind == ItemKind.COLLECTION.value else None,
            source=obj,
        )

    def _sections_of(self, section_type: str) -> list[object]:
        return [s for s in self._sections if _safe_getattr(s, "type", None) == section_type]

    def _all(self, section_type: str, kind: str) -> list[MediaItem]:
        out: list[MediaItem] = []
        for section in self._sections_of(section_type):
            out.extend(self._to_item(o, kind) for o in section.all())
        return out

    def movies(self) -> list[MediaItem]:
        return self._all("movie", ItemKind.MOVIE.value)

    def series(self) -> list[MediaItem]:
        return self._all("show", ItemKind.SERIES.value)

    def seasons(self, series: MediaItem) -> list[MediaItem]:
        return [self._to_item(s, ItemKind.SEASON.value, parent_id=series.id) for s in series.source.seasons()]

    def episodes(self, season: MediaItem) -> list[MediaItem]:
        return [self._to_item(e, ItemKind.EPISODE.value, parent_id=season.id) for e in season.source.episodes()]

    def collections(self) -> list[MediaItem]:
        out: list[MediaItem] = []
        for section in self._sections_of("movie"):
            for c in section.collections():
                if _safe_getattr(c, "smart", False):
                    continue
                item = self._to_item(c, ItemKind.COLLECTION.value)
                if item.external_id:
                    out.append(item)
        return out

    def collection_movies(self, collection: MediaItem) -> list[MediaItem]:
        return [
            self._to_item(m, ItemKind.MOVIE.value)
            for m in collection.source.items()
            if _safe_getattr(m, "type", None) == "movie"
        ]

    def parent(self, item: MediaItem) -> MediaItem | None:
        if item.kind == ItemKind.EPISODE.value:
            return self._to_item(item.source.season(), ItemKind.SEASON.value)
        if item.kind == ItemKind.SEASON.value:
            return self._to_item(item.source.show(), ItemKind.SERIES.value)
        return None

    def items_of_type(self, kind: str) -> list[MediaItem]:
        libtype = _LIBTYPES.get(str(getattr(kind, "value", kind)).strip().lower())
        if libtype is None:
            raise ValueError(f"Unknown item type: {kind}")
        if libtype == "collection":
            return self.collections()

        mapped = _KIND_BY_LIBTYPE.get(libtype, str(getattr(kind, "value", kind)))
        out: list[MediaItem] = []
        for section in self._sections:
            try:
                found = section.search(libtype=libtype)
            except Exception as exc:  # noqa: BLE001
                # libtype no aplicable a esta sección (p.ej. "episode" en una de películas)
                _log_debug(f"search({libtype}) failed in {_safe_getattr(section, 'title', '?')}: {exc!r}")
                continue
            out.extend(self._to_item(o, mapped) for o in found)
        return out

    def subtitle_files(self, item: MediaItem) -> list[str]:
        if not item.path:
            return []
        return find_sidecar_subtitles(item.path)

    def update_tags(self, item: MediaItem, tags: Sequence[str]) -> None:
        current = {t.lower(): t for t in item.tags}
        wanted = {t.lower(): t for t in tags}
        to_add = [t for k, t in wanted.items() if k not in current]
        to_remove = [t for k, t in current.items() if k not in wanted]
        if not to_add and not to_remove:
            item.tags = list(tags)
            return

        obj = item.source

        def _apply() -> None:
            if to_remove:
                obj.removeLabel(to_remove)
            if to_add:
                obj.addLabel(to_add)

        _out, status = call_with_resilience(
            breaker=self._breaker,
            key=_BREAKER_KEY,
            fn=_apply,
            should_retry=_is_networkish_exception,
            max_retries=self._max_retries,
        )
        if status != "ok":
            _metric("plex.write_failures")
            raise RuntimeError(f"[PLEX] Label update failed for {item.kind} {item.name!r}: {status}")

        _metric("plex.writes")
        item.tags = list(tags)
