from __future__ import annotations

"""
langtags/aggregation.py

Motor de agregación: extracción + filtro + escritura por hoja, y unión hacia arriba.

Estados por item y pass
-----------------------
  Pending -> Skipped     incremental y el item ya tiene tags de ese kind (sin ffmpeg)
  Pending -> Recomputed  -> Tagged    (idiomas encontrados, tags escritos)
                         -> Fallback  (sin idiomas, se escribe <prefix>Undetermined)
                         -> Untagged  (sin idiomas, fallback deshabilitado)
  Pending -> Failed      (ExtractionError: tags intactos, contribución vacía)

Convención de valores: los tags guardan NOMBRES canónicos ("language_English").
Las contribuciones también son nombres; `Undetermined` nunca se propaga hacia arriba.

Audio y subtítulos se tratan igual y de forma independiente (subtítulos solo si
`include_subtitle_tags`). ffmpeg se ejecuta como mucho UNA vez por hoja y pass:
si ambos kinds necesitan recomputar, comparten la misma extracción, y las hojas
compartidas entre roots (una película en dos colecciones) se memorizan.
"""

import os
import threading
from collections.abc import Callable, Iterable, Sequence

from langtags import logger as _logger
from langtags.errors import ExtractionError, ScanCancelled
from langtags.extractor import StreamLanguages, extract_languages, sidecar_languages
from langtags.hierarchy import HierarchyNode, fold
from langtags.languages import REGISTRY, UNDETERMINED_CODE, UNDETERMINED_NAME, LanguageRegistry
from langtags.library import Library, MediaItem
from langtags.policy import ScanPolicy, TagKind, filter_languages
from langtags.run_metrics import METRICS
from langtags.tag_store import TagStore

Contribution = dict[TagKind, tuple[str, ...]]
Extractor = Callable[..., StreamLanguages]


def _unique_ci(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        if not v or v.lower() in seen:
            continue
        seen.add(v.lower())
        out.append(v)
    return out


class AggregationEngine:
    def __init__(
        self,
        library: Library,
        policy: ScanPolicy,
        *,
        extractor: Extractor = extract_languages,
        registry: LanguageRegistry = REGISTRY,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.library = library
        self.policy = policy
        self.store = TagStore(library, policy)
        self._extractor = extractor
        self._registry = registry
        self._cancel = cancel_event

        self._memo: dict[str, Contribution] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def check_cancelled(self) -> None:
        if self._cancel is not None and self._cancel.is_set():
            raise ScanCancelled("scan cancelled")

    def _lock_for(self, item_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(item_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[item_id] = lock
            return lock

    def _is_undetermined(self, value: str) -> bool:
        low = value.lower()
        return low == UNDETERMINED_CODE or low == UNDETERMINED_NAME.lower()

    def _names_for(self, codes: Iterable[str]) -> list[str]:
        return _unique_ci(
            self._registry.name_for(c) for c in codes if not self._is_undetermined(c)
        )

    def _codes_for(self, names: Iterable[str]) -> list[str]:
        return [self._registry.code_for_name(n) for n in names]

    def _write(self, item: MediaItem, kind: TagKind, codes: Sequence[str]) -> tuple[str, ...]:
        """Filtra, normaliza a nombres y escribe (reemplaza) los tags de `kind`."""
        kept = filter_languages(codes, self.policy.whitelist, item_name=item.name)
        names = self._names_for(kept)

        if names:
            self.store.replace_tags(item, kind, names)
            _logger.debug(f"Added {kind.value} tags for {item.kind} {item.name}: {', '.join(names)}")
            return tuple(names)

        if self.policy.disable_undetermined_tag:
            self.store.remove_tags(item, kind)
            _logger.debug(f"No {kind.value} languages for {item.kind} {item.name} (untagged)")
        else:
            self.store.replace_tags(item, kind, [UNDETERMINED_NAME])
            _logger.debug(f"No {kind.value} languages for {item.kind} {item.name}; tagged {UNDETERMINED_NAME}")
        return ()

    # ------------------------------------------------------------------
    # hojas (vídeos)
    # ------------------------------------------------------------------

    def process_leaf(self, item: MediaItem) -> Contribution:
        self.check_cancelled()
        with self._lock_for(item.id):
            cached = self._memo.get(item.id)
            if cached is not None:
                return cached
            result = self._compute_leaf(item)
            self._memo[item.id] = result
            return result

    def _extract(self, item: MediaItem, *, include_subtitles: bool) -> StreamLanguages:
        if not item.path:
            raise ExtractionError(f"No file path for {item.kind} {item.name}", path=None)
        sidecars = self.library.subtitle_files(item) if include_subtitles else []
        return self._extractor(
            item.path,
            ffmpeg_path=self.policy.ffmpeg_path,
            sidecar_files=sidecars,
            include_subtitles=include_subtitles,
        )

    def _compute_leaf(self, item: MediaItem) -> Contribution:
        contribution: Contribution = {}
        pending: list[TagKind] = []

        for kind in self.policy.enabled_kinds():
            if not self.policy.full_refresh and self.store.has_tags(item, kind):
                existing = [v for v in self.store.get_tags(item, kind) if not self._is_undetermined(v)]
                contribution[kind] = tuple(existing)
                _logger.debug_ctx("SCAN", f"{kind.value} tags exist for {item.name}; skipped")
            else:
                pending.append(kind)

        if not pending:
            METRICS.incr("leaf.skipped")
            return contribution

        try:
            langs = self._extract(item, include_subtitles=TagKind.SUBTITLE in pending)
        except ExtractionError as exc:
            METRICS.incr("leaf.failed")
            METRICS.add_error("extract", "ffmpeg", item=item.name, detail=str(exc))
            _logger.warning(f"[EXTRACT] {item.kind} {item.name}: {exc}", always=True)
            for kind in pending:
                contribution[kind] = ()
            return contribution

        METRICS.incr("leaf.recomputed")
        for kind in pending:
            codes = langs.audio if kind is TagKind.AUDIO else langs.subtitle
            contribution[kind] = self._write(item, kind, codes)
        return contribution

    # ------------------------------------------------------------------
    # contenedores (season / series / collection)
    # ------------------------------------------------------------------

    def process_container(self, item: MediaItem, children: list[Contribution]) -> Contribution:
        contribution: Contribution = {}
        for kind in self.policy.enabled_kinds():
            union = _unique_ci(name for child in children for name in child.get(kind, ()))
            contribution[kind] = self._write(item, kind, self._codes_for(union))
        return contribution

    def process_root(self, root: HierarchyNode) -> Contribution:
        return fold(root, self.process_leaf, self.process_container)

    # ------------------------------------------------------------------
    # pass aditivo de subtítulos externos
    # ------------------------------------------------------------------

    def external_subtitles_leaf(self, item: MediaItem) -> tuple[str, ...]:
        self.check_cancelled()
        files = self.library.subtitle_files(item)
        stem = os.path.splitext(os.path.basename(item.path))[0] if item.path else None
        codes = sidecar_languages(files, video_stem=stem)
        kept = filter_languages(codes, self.policy.whitelist, item_name=item.name)
        names = self._names_for(kept)

        if not names:
            _logger.warning(f"No external subtitle information found for VIDEO {item.name}")
            return ()

        added = self.store.add_tags(item, TagKind.SUBTITLE, names)
        if added:
            _logger.info(f"Added external subtitle tags for VIDEO {item.name}: {', '.join(added)}")
        return tuple(names)

    def external_subtitles_container(self, item: MediaItem, children: list[tuple[str, ...]]) -> tuple[str, ...]:
        union = _unique_ci(name for child in children for name in child)
        if not union:
            return ()
        added = self.store.add_tags(item, TagKind.SUBTITLE, union)
        if added:
            _logger.info(f"Added external subtitle tags for {item.kind} {item.name}: {', '.join(added)}")
        return tuple(union)

    def process_external_subtitles_root(self, root: HierarchyNode) -> tuple[str, ...]:
        return fold(root, self.external_subtitles_leaf, self.external_subtitles_container)
