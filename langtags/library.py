from __future__ import annotations

"""
langtags/library.py

Contrato con la biblioteca de medios (Library Collaborator) + implementación en memoria.

El núcleo NUNCA crea ni destruye items: solo lee tags/hijos y pide persistir
mutaciones de tags vía `update_tags()`.

MemoryLibrary
-------------
Biblioteca en memoria, opcionalmente respaldada por un JSON:

    {
      "items": [
        {"id": "m1", "name": "Movie (1999)", "kind": "Movie", "path": "/media/m1.mkv", "tags": []},
        {"id": "s1", "name": "Show", "kind": "Series"},
        {"id": "s1-1", "name": "Season 1", "kind": "Season", "parent_id": "s1"},
        {"id": "e1", "name": "S01E01", "kind": "Episode", "parent_id": "s1-1", "path": "/media/e1.mkv"},
        {"id": "c1", "name": "Saga", "kind": "BoxSet", "external_id": "tmdb:1", "members": ["m1"]}
      ]
    }

Con `path`, cada `update_tags()` reescribe el JSON (escritura atómica) antes de volver.
"""

import enum
import json
import os
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from langtags import logger as _logger
from langtags.extractor import find_sidecar_subtitles


class ItemKind(str, enum.Enum):
    MOVIE = "Movie"
    SERIES = "Series"
    SEASON = "Season"
    EPISODE = "Episode"
    COLLECTION = "BoxSet"


LANGUAGE_ITEM_KINDS: tuple[ItemKind, ...] = (
    ItemKind.MOVIE,
    ItemKind.EPISODE,
    ItemKind.SEASON,
    ItemKind.SERIES,
    ItemKind.COLLECTION,
)

_KNOWN_KINDS: frozenset[str] = frozenset(k.value.lower() for k in ItemKind)


@dataclass(eq=False)
class MediaItem:
    id: str
    name: str
    kind: str
    path: str | None = None
    tags: list[str] = field(default_factory=list)
    parent_id: str | None = None
    external_id: str | None = None
    # None -> se descubren en disco junto al vídeo
    subtitle_files: list[str] | None = None
    source: Any = field(default=None, repr=False)

    @property
    def is_video(self) -> bool:
        return self.kind in (ItemKind.MOVIE.value, ItemKind.EPISODE.value)


class Library(Protocol):
    def movies(self) -> list[MediaItem]: ...

    def series(self) -> list[MediaItem]: ...

    def seasons(self, series: MediaItem) -> list[MediaItem]: ...

    def episodes(self, season: MediaItem) -> list[MediaItem]: ...

    def collections(self) -> list[MediaItem]: ...

    def collection_movies(self, collection: MediaItem) -> list[MediaItem]: ...

    def parent(self, item: MediaItem) -> MediaItem | None: ...

    def items_of_type(self, kind: str) -> list[MediaItem]: ...

    def subtitle_files(self, item: MediaItem) -> list[str]: ...

    def update_tags(self, item: MediaItem, tags: Sequence[str]) -> None: ...


def _kind_value(kind: str | ItemKind) -> str:
    return kind.value if isinstance(kind, ItemKind) else str(kind)


class MemoryLibrary:
    def __init__(self, items: Iterable[MediaItem] = (), *, path: str | Path | None = None) -> None:
        self._lock = threading.RLock()
        self._items: dict[str, MediaItem] = {}
        self._members: dict[str, list[str]] = {}
        self._path = Path(path) if path is not None else None
        self.update_calls = 0
        for item in items:
            self.add(item)

    # ------------------------------------------------------------------
    # construcción
    # ------------------------------------------------------------------

    def add(self, item: MediaItem, *, members: Sequence[str] = ()) -> MediaItem:
        with self._lock:
            if item.id in self._items:
                raise ValueError(f"Duplicate item id: {item.id!r}")
            self._items[item.id] = item
            if members:
                self._members[item.id] = list(members)
        return item

    def add_to_collection(self, collection: MediaItem, movie: MediaItem) -> None:
        with self._lock:
            self._members.setdefault(collection.id, []).append(movie.id)

    def get(self, item_id: str) -> MediaItem | None:
        return self._items.get(item_id)

    # ------------------------------------------------------------------
    # consultas
    # ------------------------------------------------------------------

    def items_of_type(self, kind: str | ItemKind) -> list[MediaItem]:
        """Tipos conocidos o presentes en los datos; cualquier otro -> ValueError."""
        wanted = _kind_value(kind).lower()
        with self._lock:
            found = [i for i in self._items.values() if i.kind.lower() == wanted]
        if not found and wanted not in _KNOWN_KINDS:
            raise ValueError(f"Unknown item type: {_kind_value(kind)}")
        return found

    def movies(self) -> list[MediaItem]:
        return self.items_of_type(ItemKind.MOVIE)

    def series(self) -> list[MediaItem]:
        return self.items_of_type(ItemKind.SERIES)

    def _children(self, parent: MediaItem, kind: ItemKind) -> list[MediaItem]:
        with self._lock:
            return [
                i for i in self._items.values()
                if i.parent_id == parent.id and i.kind == kind.value
            ]

    def seasons(self, series: MediaItem) -> list[MediaItem]:
        return self._children(series, ItemKind.SEASON)

    def episodes(self, season: MediaItem) -> list[MediaItem]:
        return self._children(season, ItemKind.EPISODE)

    def collections(self) -> list[MediaItem]:
        return [c for c in self.items_of_type(ItemKind.COLLECTION) if c.external_id]

    def collection_movies(self, collection: MediaItem) -> list[MediaItem]:
        with self._lock:
            ids = list(self._members.get(collection.id, []))
            return [
                self._items[i] for i in ids
                if i in self._items and self._items[i].kind == ItemKind.MOVIE.value
            ]

    def parent(self, item: MediaItem) -> MediaItem | None:
        if not item.parent_id:
            return None
        return self._items.get(item.parent_id)

    def subtitle_files(self, item: MediaItem) -> list[str]:
        if item.subtitle_files is not None:
            return list(item.subtitle_files)
        if not item.path:
            return []
        return find_sidecar_subtitles(item.path)

    # ------------------------------------------------------------------
    # persistencia
    # ------------------------------------------------------------------

    def update_tags(self, item: MediaItem, tags: Sequence[str]) -> None:
        with self._lock:
            item.tags = list(tags)
            self.update_calls += 1
            if self._path is not None:
                self.save(self._path)

    def to_dict(self) -> dict[str, Any]:
        with self._lock:
            rows: list[dict[str, Any]] = []
            for item in self._items.values():
                row: dict[str, Any] = {"id": item.id, "name": item.name, "kind": item.kind}
                if item.path:
                    row["path"] = item.path
                row["tags"] = list(item.tags)
                if item.parent_id:
                    row["parent_id"] = item.parent_id
                if item.external_id:
                    row["external_id"] = item.external_id
                if item.subtitle_files is not None:
                    row["subtitle_files"] = list(item.subtitle_files)
                if item.id in self._members:
                    row["members"] = list(self._members[item.id])
                rows.append(row)
            return {"items": rows}

    def save(self, path: str | Path) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        tmp = target.with_suffix(target.suffix + ".tmp")
        with self._lock:
            payload = self.to_dict()
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp, target)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, path: str | Path | None = None) -> "MemoryLibrary":
        lib = cls(path=path)
        for row in data.get("items", []) or []:
            if not isinstance(row, dict) or not row.get("id") or not row.get("kind"):
                _logger.warning(f"[LIBRARY] Invalid item row ignored: {row!r}", always=True)
                continue
            item = MediaItem(
                id=str(row["id"]),
                name=str(row.get("name") or row["id"]),
                kind=str(row["kind"]),
                path=row.get("path"),
                tags=[str(t) for t in (row.get("tags") or [])],
                parent_id=row.get("parent_id"),
                external_id=row.get("external_id"),
                subtitle_files=row.get("subtitle_files"),
            )
            lib.add(item, members=[str(m) for m in (row.get("members") or [])])
        return lib

    @classmethod
    def load(cls, path: str | Path, *, autosave: bool = True) -> "MemoryLibrary":
        p = Path(path)
        with open(p, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Library JSON must be an object: {p}")
        return cls.from_dict(data, path=p if autosave else None)
