import pytest

from langtags.errors import AggregationWarning
from langtags.hierarchy import collection_root, fold, movie_root, series_root
from langtags.library import MediaItem, MemoryLibrary
from langtags.run_metrics import METRICS
from tests.conftest import build_collection_library, build_series_library


def test_series_root_shape_and_fold():
    lib = build_series_library()
    root = series_root(lib, lib.get("s1"))

    assert [n.item.id for n in root.children] == ["s1-1", "s1-2"]
    assert [i.id for i in root.leaves()] == ["e1", "e2", "e3"]

    counted = fold(root, lambda leaf: 1, lambda item, children: sum(children))
    assert counted == 3


def test_series_skips_empty_season_with_warning():
    lib = build_series_library()
    lib.add(MediaItem(id="s1-3", name="Season 3", kind="Season", parent_id="s1"))

    root = series_root(lib, lib.get("s1"))
    assert [n.item.id for n in root.children] == ["s1-1", "s1-2"]
    assert METRICS.get("aggregation.warnings") == 1


def test_series_without_seasons_or_episodes():
    lib = MemoryLibrary([MediaItem(id="s9", name="Empty", kind="Series")])
    with pytest.raises(AggregationWarning):
        series_root(lib, lib.get("s9"))

    lib.add(MediaItem(id="s9-1", name="Season 1", kind="Season", parent_id="s9"))
    with pytest.raises(AggregationWarning):
        series_root(lib, lib.get("s9"))


def test_collection_root_and_empty_collection():
    lib = build_collection_library()
    root = collection_root(lib, lib.get("c1"))
    assert [i.id for i in root.leaves()] == ["m1", "m2"]

    lib.add(MediaItem(id="c2", name="Empty Saga", kind="BoxSet", external_id="tmdb:2"))
    with pytest.raises(AggregationWarning):
        collection_root(lib, lib.get("c2"))


def test_movie_root_is_leaf():
    lib = build_collection_library()
    assert movie_root(lib.get("m3")).is_leaf
