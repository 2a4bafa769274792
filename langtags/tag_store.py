from __future__ import annotations

"""
langtags/tag_store.py

Tag Store Adapter: lectura/escritura de tags de idioma de un item.

Formato en la biblioteca: "<prefix><value>", p.ej. "language_English",
"subtitle_language_Spanish". Internamente el tipo se maneja como `TagKind`
y solo se serializa a string con prefijo aquí.

Reglas
------
- Matching de prefijo case-insensitive. Si ambos prefijos encajan con un tag
  (uno es prefijo del otro), gana el más largo.
- Valores únicos por kind (comparación case-insensitive).
- Cada mutación se persiste de forma síncrona vía `library.update_tags()`;
  si no cambia nada, no se llama a la biblioteca.
"""

from collections.abc import Iterable

from langtags.library import Library, MediaItem
from langtags.policy import ScanPolicy, TagKind
from langtags.run_metrics import METRICS


def _unique_ci(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for v in values:
        s = (v or "").strip()
        if not s or s.lower() in seen:
            continue
        seen.add(s.lower())
        out.append(s)
    return out


class TagStore:
    def __init__(self, library: Library, policy: ScanPolicy) -> None:
        self._library = library
        self._prefixes = {
            TagKind.AUDIO: policy.audio_prefix,
            TagKind.SUBTITLE: policy.subtitle_prefix,
        }

    def prefix(self, kind: TagKind) -> str:
        return self._prefixes[kind]

    def kind_of(self, tag: str) -> TagKind | None:
        low = tag.lower()
        best: TagKind | None = None
        best_len = -1
        for kind, prefix in self._prefixes.items():
            if low.startswith(prefix.lower()) and len(prefix) > best_len:
                best, best_len = kind, len(prefix)
        return best

    def _is_kind(self, tag: str, kind: TagKind) -> bool:
        return self.kind_of(tag) is kind

    # ------------------------------------------------------------------

    def has_tags(self, item: MediaItem, kind: TagKind) -> bool:
        return any(self._is_kind(t, kind) for t in item.tags)

    def get_tags(self, item: MediaItem, kind: TagKind) -> list[str]:
        n = len(self.prefix(kind))
        return _unique_ci(t[n:] for t in item.tags if self._is_kind(t, kind))

    def remove_tags(self, item: MediaItem, kind: TagKind) -> list[str]:
        removed = self.get_tags(item, kind)
        if not any(self._is_kind(t, kind) for t in item.tags):
            return []
        kept = [t for t in item.tags if not self._is_kind(t, kind)]
        self._library.update_tags(item, kept)
        METRICS.incr("tags.removed", len(removed))
        return removed

    def add_tags(self, item: MediaItem, kind: TagKind, values: Iterable[str]) -> list[str]:
        """Añade valores; devuelve SOLO los realmente añadidos."""
        existing = {v.lower() for v in self.get_tags(item, kind)}
        added = [v for v in _unique_ci(values) if v.lower() not in existing]
        if not added:
            return []
        prefix = self.prefix(kind)
        self._library.update_tags(item, [*item.tags, *(f"{prefix}{v}" for v in added)])
        METRICS.incr("tags.written", len(added))
        return added

    def replace_tags(self, item: MediaItem, kind: TagKind, values: Iterable[str]) -> list[str]:
        """
        Borra los tags de `kind` y escribe `values` en UNA sola persistencia.

        Devuelve el conjunto escrito. Si el resultado coincide con lo que ya había
        (mismo orden, case-insensitive) no se persiste nada.
        """
        new_values = _unique_ci(values)
        current = self.get_tags(item, kind)
        if [v.lower() for v in current] == [v.lower() for v in new_values] and len(current) == sum(
            1 for t in item.tags if self._is_kind(t, kind)
        ):
            return new_values

        prefix = self.prefix(kind)
        kept = [t for t in item.tags if not self._is_kind(t, kind)]
        self._library.update_tags(item, [*kept, *(f"{prefix}{v}" for v in new_values)])
        METRICS.incr("tags.removed", len(current))
        METRICS.incr("tags.written", len(new_values))
        return new_values
