from __future__ import annotations

"""
langtags/hierarchy.py

Árbol explícito de la jerarquía de contenido + fold genérico bottom-up.

    movie                          (hoja)
    collection -> movies           (contenedor -> hojas)
    series -> seasons -> episodes  (contenedor -> contenedores -> hojas)

El motor de agregación no recorre la biblioteca: recibe un `HierarchyNode` ya
construido y lo pliega con `fold(node, leaf_fn, container_fn)`. Un único
combinador sirve para películas, colecciones y series.

Ramas vacías
------------
- Temporada sin episodios: se omite (warning) y el resto de temporadas sigue.
- Serie sin temporadas utilizables / colección sin películas: AggregationWarning
  (el caller la registra y salta ese root).
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from langtags import logger as _logger
from langtags.errors import AggregationWarning
from langtags.library import Library, MediaItem
from langtags.run_metrics import METRICS

T = TypeVar("T")


@dataclass
class HierarchyNode:
    item: MediaItem
    children: list["HierarchyNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self):
        yield self
        for child in self.children:
            yield from child.walk()

    def leaves(self) -> list[MediaItem]:
        return [n.item for n in self.walk() if n.is_leaf]


def fold(
    node: HierarchyNode,
    leaf_fn: Callable[[MediaItem], T],
    container_fn: Callable[[MediaItem, list[T]], T],
) -> T:
    """Hijos antes que padres; el resultado del contenedor es su contribución al padre."""
    if node.is_leaf:
        return leaf_fn(node.item)
    results = [fold(child, leaf_fn, container_fn) for child in node.children]
    return container_fn(node.item, results)


# ============================================================
# Builders
# ============================================================


def movie_root(movie: MediaItem) -> HierarchyNode:
    return HierarchyNode(item=movie)


def collection_root(library: Library, collection: MediaItem) -> HierarchyNode:
    movies = library.collection_movies(collection)
    if not movies:
        raise AggregationWarning(f"No movies found in box set {collection.name}", item_name=collection.name)
    return HierarchyNode(item=collection, children=[HierarchyNode(item=m) for m in movies])


def series_root(library: Library, series: MediaItem) -> HierarchyNode:
    seasons = library.seasons(series)
    if not seasons:
        raise AggregationWarning(f"No seasons found for SERIES {series.name}", item_name=series.name)

    season_nodes: list[HierarchyNode] = []
    for season in seasons:
        episodes = library.episodes(season)
        if not episodes:
            METRICS.incr("aggregation.warnings")
            _logger.warning(f"No episodes found in SEASON {season.name} of {series.name}")
            continue
        season_nodes.append(
            HierarchyNode(item=season, children=[HierarchyNode(item=e) for e in episodes])
        )

    if not season_nodes:
        raise AggregationWarning(f"No episodes found for SERIES {series.name}", item_name=series.name)

    return HierarchyNode(item=series, children=season_nodes)
