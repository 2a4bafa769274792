from __future__ import annotations

"""
langtags/orchestrator.py

Orquestador del scan (Scan Orchestrator) + passes de mantenimiento.

scan(full_refresh, scope, library=...)
--------------------------------------
1) Snapshot de configuración -> ScanPolicy (una vez por pass).
2) Resuelve ffmpeg ANTES de tocar nada: si no se puede, ConfigurationError
   registrada y el pass termina sin mutaciones.
3) Ejecuta cada scope sobre sus roots (una película / una serie / una colección):
   - modo paralelo: ThreadPoolExecutor acotado (SCAN_WORKERS) con inflight limitado
   - modo síncrono: un root detrás de otro, sin pool
4) Resumen por scope (procesados/total) y métricas. No devuelve resultados.

Ningún error cruza la frontera del pass: ExtractionError se contiene por hoja,
AggregationWarning por root y cualquier excepción inesperada por root.

Scopes: movies | series (alias tvshows) | collections | externalsubtitles | everything.
Un scope desconocido se trata como everything (con warning).
"""

import dataclasses
import threading
import time
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from typing import Final

from langtags import logger as _logger
from langtags.aggregation import AggregationEngine, Extractor
from langtags.config_base import DEBUG_MODE, SILENT_MODE
from langtags.config_tags import TagSettings, read_tag_settings
from langtags.errors import AggregationWarning, ConfigurationError, ScanCancelled
from langtags.extractor import extract_languages, resolve_ffmpeg
from langtags.hierarchy import collection_root, movie_root, series_root
from langtags.library import LANGUAGE_ITEM_KINDS, Library, MediaItem
from langtags.policy import ScanPolicy, build_scan_policy
from langtags.run_metrics import METRICS
from langtags.tag_store import TagStore


SCOPES: Final[tuple[str, ...]] = ("movies", "series", "collections", "externalsubtitles", "everything")
_SCOPE_ALIASES: Final[dict[str, str]] = {"tvshows": "series"}

_MAX_INFLIGHT_FACTOR: Final[int] = 4


def normalize_scope(scope: str | None) -> str:
    s = (scope or "everything").strip().lower()
    s = _SCOPE_ALIASES.get(s, s)
    if s not in SCOPES:
        _logger.warning(f"[SCAN] Unknown scope {scope!r}; processing everything", always=True)
        return "everything"
    return s


# ============================================================================
# Ejecución por roots (paralelo / síncrono)
# ============================================================================


@dataclasses.dataclass
class _ScopeCounts:
    total: int = 0
    processed: int = 0
    warnings: int = 0
    errors: int = 0
    cancelled: bool = False


def _run_one(label: str, root: MediaItem, work: Callable[[MediaItem], object]) -> str:
    """Ejecuta un root; nunca lanza salvo ScanCancelled."""
    try:
        work(root)
        return "ok"
    except ScanCancelled:
        raise
    except AggregationWarning as exc:
        METRICS.incr("aggregation.warnings")
        _logger.warning(str(exc))
        return "warning"
    except Exception as exc:  # noqa: BLE001
        METRICS.add_error("scan", label, item=root.name, detail=repr(exc))
        _logger.error(f"[SCAN] Error processing {label} root {root.name!r}: {exc!r}", always=True)
        return "error"


def _tally(counts: _ScopeCounts, status: str) -> None:
    if status == "error":
        counts.errors += 1
        return
    counts.processed += 1
    if status == "warning":
        counts.warnings += 1


def _run_roots(
    label: str,
    list_roots: Callable[[], Sequence[MediaItem]],
    work: Callable[[MediaItem], object],
    *,
    policy: ScanPolicy,
    cancel_event: threading.Event,
) -> _ScopeCounts:
    # Un fallo al enumerar (p.ej. Plex caído) se queda en este scope.
    try:
        roots = list(list_roots())
    except Exception as exc:  # noqa: BLE001
        METRICS.add_error("scan", label, item=None, detail=repr(exc))
        METRICS.incr(f"scan.{label}.errors")
        _logger.error(f"[SCAN] Could not list {label}: {exc!r}", always=True)
        return _ScopeCounts(errors=1)

    counts = _ScopeCounts(total=len(roots))
    METRICS.incr(f"scan.{label}.roots", len(roots))

    if not roots:
        _logger.info(f"Processed 0 of 0 {label}")
        return counts

    if policy.synchronous:
        for root in roots:
            if cancel_event.is_set():
                counts.cancelled = True
                break
            try:
                _tally(counts, _run_one(label, root, work))
            except ScanCancelled:
                counts.cancelled = True
                break
    else:
        max_workers = max(1, min(policy.workers, len(roots)))
        max_inflight = max(max_workers, max_workers * _MAX_INFLIGHT_FACTOR)
        inflight: set[Future[str]] = set()

        _logger.debug_ctx("SCAN", f"{label}: ThreadPool workers={max_workers} inflight_cap={max_inflight}")

        def _drain(*, drain_all: bool) -> None:
            while inflight:
                done, _pending = wait(inflight, return_when=FIRST_COMPLETED)
                for fut in done:
                    inflight.discard(fut)
                    try:
                        _tally(counts, fut.result())
                    except ScanCancelled:
                        counts.cancelled = True
                if not drain_all:
                    return

        with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=f"langtags-{label}") as executor:
            try:
                for root in roots:
                    if cancel_event.is_set():
                        counts.cancelled = True
                        break
                    inflight.add(executor.submit(_run_one, label, root, work))
                    if len(inflight) >= max_inflight:
                        _drain(drain_all=False)
                _drain(drain_all=True)
            except KeyboardInterrupt:
                cancel_event.set()
                counts.cancelled = True
                _drain(drain_all=True)
                raise

    METRICS.incr(f"scan.{label}.processed", counts.processed)
    METRICS.incr(f"scan.{label}.errors", counts.errors)
    _logger.info(f"Processed {counts.processed} of {counts.total} {label}")
    if counts.cancelled:
        METRICS.incr("scan.cancelled")
        _logger.warning(f"[SCAN] {label}: cancelled after {counts.processed} of {counts.total}", always=True)
    return counts


def _banner(title: str) -> None:
    if SILENT_MODE:
        _logger.progress(f"[SCAN] {title}")
        return
    line = "*" * (len(title) + 6)
    _logger.info(line)
    _logger.info(f"*  {title}  *")
    _logger.info(line)


# ============================================================================
# Scopes
# ============================================================================


def _scan_movies(engine: AggregationEngine, library: Library, cancel_event: threading.Event) -> _ScopeCounts:
    _banner("Processing movies...")
    return _run_roots(
        "movies",
        library.movies,
        lambda m: engine.process_root(movie_root(m)),
        policy=engine.policy,
        cancel_event=cancel_event,
    )


def _scan_series(engine: AggregationEngine, library: Library, cancel_event: threading.Event) -> _ScopeCounts:
    _banner("Processing series...")
    return _run_roots(
        "series",
        library.series,
        lambda s: engine.process_root(series_root(library, s)),
        policy=engine.policy,
        cancel_event=cancel_event,
    )


def _scan_collections(engine: AggregationEngine, library: Library, cancel_event: threading.Event) -> _ScopeCounts:
    _banner("Processing collections...")
    return _run_roots(
        "collections",
        library.collections,
        lambda c: engine.process_root(collection_root(library, c)),
        policy=engine.policy,
        cancel_event=cancel_event,
    )


def _scan_external_subtitles(
    engine: AggregationEngine, library: Library, cancel_event: threading.Event
) -> list[_ScopeCounts]:
    if not engine.policy.include_subtitle_tags:
        _logger.info("Skipping external subtitle processing as subtitle tag extraction is disabled")
        return []

    _banner("Processing external subtitles...")
    policy = engine.policy
    out = [
        _run_roots(
            "movies",
            library.movies,
            lambda m: engine.process_external_subtitles_root(movie_root(m)),
            policy=policy,
            cancel_event=cancel_event,
        )
    ]
    if cancel_event.is_set():
        return out
    out.append(
        _run_roots(
            "collections",
            library.collections,
            lambda c: engine.process_external_subtitles_root(collection_root(library, c)),
            policy=policy,
            cancel_event=cancel_event,
        )
    )
    if cancel_event.is_set():
        return out
    out.append(
        _run_roots(
            "series",
            library.series,
            lambda s: engine.process_external_subtitles_root(series_root(library, s)),
            policy=policy,
            cancel_event=cancel_event,
        )
    )
    return out


def scan(
    full_refresh: bool = False,
    scope: str = "everything",
    *,
    library: Library,
    cancel_event: threading.Event | None = None,
    settings: TagSettings | None = None,
    extractor: Extractor = extract_languages,
) -> None:
    """Entry-point del núcleo. Nunca lanza por fallos de items/ramas."""
    t0 = time.monotonic()
    cancel = cancel_event if cancel_event is not None else threading.Event()
    settings = settings if settings is not None else read_tag_settings()
    scope_n = normalize_scope(scope)

    METRICS.incr("scan.runs")

    try:
        ffmpeg = resolve_ffmpeg(settings.ffmpeg_path)
    except ConfigurationError as exc:
        METRICS.incr("scan.config_errors")
        _logger.error(f"[SCAN] Configuration error, scan aborted: {exc}", always=True)
        return

    policy = dataclasses.replace(build_scan_policy(settings, full_refresh=full_refresh), ffmpeg_path=ffmpeg)

    if policy.full_refresh:
        _logger.info("Full scan enabled")
    if policy.synchronous:
        _logger.info("Synchronous refresh enabled")
    if policy.include_subtitle_tags:
        _logger.info("Extract subtitle languages enabled")
    if DEBUG_MODE:
        _logger.debug_ctx("SCAN", f"policy={policy!r}")

    engine = AggregationEngine(library, policy, extractor=extractor, cancel_event=cancel)
    results: list[_ScopeCounts] = []

    if scope_n in ("movies", "everything"):
        results.append(_scan_movies(engine, library, cancel))
    if scope_n in ("series", "everything") and not cancel.is_set():
        results.append(_scan_series(engine, library, cancel))
    if scope_n in ("collections", "everything") and not cancel.is_set():
        results.append(_scan_collections(engine, library, cancel))
    if scope_n in ("externalsubtitles", "everything") and not cancel.is_set():
        results.extend(_scan_external_subtitles(engine, library, cancel))
    if scope_n == "everything" and not cancel.is_set():
        try:
            tag_non_media_items(library, settings=settings)
        except Exception as exc:  # noqa: BLE001
            METRICS.add_error("scan", "non_media", item=None, detail=repr(exc))
            _logger.error(f"[SCAN] Error in non-media pass: {exc!r}", always=True)

    elapsed = time.monotonic() - t0
    METRICS.observe_ms("scan.seconds", elapsed * 1000.0)

    processed = sum(r.processed for r in results)
    total = sum(r.total for r in results)
    errors = sum(r.errors for r in results)
    _logger.progress(
        f"[SCAN] Fin: scope={scope_n} full={policy.full_refresh} processed={processed}/{total} "
        f"errors={errors} cancelled={cancel.is_set()} time={elapsed:.1f}s"
    )


# ============================================================================
# Mantenimiento
# ============================================================================


def remove_all_language_tags(library: Library, *, settings: TagSettings | None = None) -> int:
    """Quita tags de audio y subtítulo de películas, episodios, temporadas, series y colecciones."""
    settings = settings if settings is not None else read_tag_settings()
    store = TagStore(library, build_scan_policy(settings, full_refresh=False))

    _logger.info("Starting removal of all language tags from library")
    changed_total = 0
    for kind in LANGUAGE_ITEM_KINDS:
        items = library.items_of_type(kind.value)
        _logger.info(f"Removing language tags from {len(items)} {kind.value} items")
        for item in items:
            kept = [t for t in item.tags if store.kind_of(t) is None]
            dropped = len(item.tags) - len(kept)
            if dropped and _write_tags(library, item, kept, action="remove_language_tags"):
                METRICS.incr("tags.removed", dropped)
                changed_total += 1

    _logger.info(f"Completed removal of all language tags from library ({changed_total} items changed)")
    return changed_total


def _write_tags(library: Library, item: MediaItem, tags: list[str], *, action: str) -> bool:
    """Persistencia de un item en los pases de mantenimiento; un fallo no corta el pase."""
    try:
        library.update_tags(item, tags)
    except Exception as exc:  # noqa: BLE001
        METRICS.add_error("maintenance", action, item=item.name, detail=repr(exc))
        _logger.error(f"[MAINT] Could not update tags of {item.name!r}: {exc!r}", always=True)
        return False
    return True


def _non_media_types(settings: TagSettings) -> list[str]:
    return [t for t in settings.non_media_item_types if t.strip()]


def tag_non_media_items(library: Library, *, settings: TagSettings | None = None) -> int:
    settings = settings if settings is not None else read_tag_settings()

    if not settings.enable_non_media_tagging:
        _logger.info("Non-media tagging is disabled")
        return 0

    item_types = _non_media_types(settings)
    if not item_types:
        _logger.info("No non-media item types selected for tagging")
        return 0

    tag = settings.non_media_tag
    _banner("Processing non-media items...")
    _logger.info(f"Applying tag {tag!r} to {len(item_types)} item types")

    tagged_total = 0
    for item_type in item_types:
        try:
            items = library.items_of_type(item_type)
        except ValueError:
            _logger.warning(f"Unknown item type: {item_type}")
            continue
        except Exception as exc:  # noqa: BLE001
            _logger.error(f"Error processing non-media items of type {item_type}: {exc!r}", always=True)
            continue

        tagged = 0
        for item in items:
            if any(t.lower() == tag.lower() for t in item.tags):
                continue
            if _write_tags(library, item, [*item.tags, tag], action="non_media_tag"):
                tagged += 1
        tagged_total += tagged
        _logger.info(f"Tagged {tagged} of {len(items)} {item_type} items")

    _logger.info("Completed non-media item tagging")
    return tagged_total


def remove_non_media_tags(library: Library, *, settings: TagSettings | None = None) -> int:
    settings = settings if settings is not None else read_tag_settings()
    tag = settings.non_media_tag
    item_types = _non_media_types(settings)

    _logger.info(f"Starting removal of non-media tag {tag!r} from library")
    if not item_types:
        _logger.warning("No non-media item types configured for tag removal")
        return 0

    removed_total = 0
    for item_type in item_types:
        try:
            items = library.items_of_type(item_type)
        except ValueError:
            _logger.warning(f"Unknown item type: {item_type}")
            continue
        except Exception as exc:  # noqa: BLE001
            _logger.error(f"Error removing non-media tag from type {item_type}: {exc!r}", always=True)
            continue

        removed = 0
        for item in items:
            kept = [t for t in item.tags if t.lower() != tag.lower()]
            if len(kept) < len(item.tags) and _write_tags(library, item, kept, action="non_media_untag"):
                removed += 1
        removed_total += removed
        _logger.info(f"Removed tag from {removed} {item_type} items")

    _logger.info("Completed removal of non-media tags")
    return removed_total
