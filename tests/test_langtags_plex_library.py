from __future__ import annotations

from dataclasses import dataclass, field

import pytest

import langtags.plex_library as plex_library
from langtags.library import MediaItem
from langtags.resilience import CircuitBreaker


@dataclass(slots=True)
class FakeLabel:
    tag: str


@dataclass(slots=True)
class FakePart:
    file: str


@dataclass(slots=True)
class FakeMedia:
    parts: list[FakePart]


@dataclass
class FakeVideo:
    ratingKey: int
    title: str
    type: str = "movie"
    file: str | None = None
    labels: list[FakeLabel] = field(default_factory=list)
    children: list["FakeVideo"] = field(default_factory=list)
    fail_writes: int = 0
    writes: list[tuple[str, list[str]]] = field(default_factory=list)

    @property
    def media(self):
        return [FakeMedia(parts=[FakePart(file=self.file)])] if self.file else []

    def seasons(self):
        return self.children

    def episodes(self):
        return self.children

    def _write(self, action, labels):
        if self.fail_writes > 0:
            self.fail_writes -= 1
            raise ConnectionError("connection reset")
        self.writes.append((action, list(labels)))

    def addLabel(self, labels):
        self._write("add", labels)

    def removeLabel(self, labels):
        self._write("remove", labels)


@dataclass
class FakeCollection:
    ratingKey: int
    title: str
    guid: str
    members: list[FakeVideo]
    smart: bool = False
    labels: list[FakeLabel] = field(default_factory=list)

    def items(self):
        return self.members


@dataclass
class FakeSection:
    title: str
    type: str
    videos: list[FakeVideo] = field(default_factory=list)
    cols: list[FakeCollection] = field(default_factory=list)

    def all(self):
        return self.videos

    def collections(self):
        return self.cols

    def search(self, libtype=None):
        if libtype == self.type:
            return self.videos
        raise ValueError(f"libtype {libtype} not supported in {self.title}")


class FakeLibraryRoot:
    def __init__(self, sections):
        self._sections = sections

    def sections(self):
        return self._sections


class FakePlex:
    def __init__(self, sections):
        self.library = FakeLibraryRoot(sections)


def _plex():
    m1 = FakeVideo(ratingKey=1, title="Movie One", file="/media/m1.mkv", labels=[FakeLabel("language_English")])
    m2 = FakeVideo(ratingKey=2, title="Movie Two", file="/media/m2.mkv")
    ep = FakeVideo(ratingKey=30, title="Pilot", type="episode", file="/media/e1.mkv")
    season = FakeVideo(ratingKey=20, title="Season 1", type="season", children=[ep])
    show = FakeVideo(ratingKey=10, title="Show", type="show", children=[season])
    saga = FakeCollection(ratingKey=100, title="Saga", guid="collection://abc", members=[m1, m2])
    smart = FakeCollection(ratingKey=101, title="Smart", guid="collection://def", members=[m1], smart=True)

    movies = FakeSection(title="Movies", type="movie", videos=[m1, m2], cols=[saga, smart])
    shows = FakeSection(title="TV", type="show", videos=[show])
    kids = FakeSection(title="Kids", type="movie", videos=[FakeVideo(ratingKey=3, title="Hidden")])
    return FakePlex([movies, shows, kids]), m1


def _library(plex, **kwargs):
    kwargs.setdefault("breaker", CircuitBreaker(failure_threshold=10, open_seconds=1.0))
    return plex_library.PlexLibrary(plex, excluded=["Kids"], **kwargs)


def test_sections_map_to_media_items():
    plex, _m1 = _plex()
    lib = _library(plex)

    movies = lib.movies()
    assert [(m.id, m.name, m.path, m.tags) for m in movies] == [
        ("1", "Movie One", "/media/m1.mkv", ["language_English"]),
        ("2", "Movie Two", "/media/m2.mkv", []),
    ]

    show = lib.series()[0]
    season = lib.seasons(show)[0]
    episode = lib.episodes(season)[0]
    assert (season.kind, season.parent_id) == ("Season", "10")
    assert (episode.kind, episode.path) == ("Episode", "/media/e1.mkv")


def test_collections_skip_smart_ones():
    plex, _m1 = _plex()
    lib = _library(plex)

    collections = lib.collections()
    assert [(c.id, c.external_id) for c in collections] == [("100", "collection://abc")]
    assert [m.id for m in lib.collection_movies(collections[0])] == ["1", "2"]
    assert [c.id for c in lib.items_of_type("BoxSet")] == ["100"]


def test_items_of_type_unknown_raises():
    plex, _m1 = _plex()
    lib = _library(plex)

    assert [i.id for i in lib.items_of_type("Movie")] == ["1", "2"]
    with pytest.raises(ValueError):
        lib.items_of_type("Hologram")


def test_update_tags_applies_label_diff():
    plex, m1 = _plex()
    lib = _library(plex)
    item = lib.movies()[0]

    lib.update_tags(item, ["language_German", "favorite"])

    assert m1.writes == [("remove", ["language_English"]), ("add", ["language_German", "favorite"])]
    assert item.tags == ["language_German", "favorite"]


def test_update_tags_retries_network_errors(monkeypatch):
    plex, m1 = _plex()
    lib = _library(plex, max_retries=2)
    item = lib.movies()[0]
    m1.fail_writes = 1

    monkeypatch.setattr("langtags.resilience.backoff_sleep", lambda attempt: None)
    lib.update_tags(item, [])

    assert m1.writes == [("remove", ["language_English"])]
    assert item.tags == []


def test_update_tags_raises_after_retries(monkeypatch):
    monkeypatch.setattr("langtags.resilience.backoff_sleep", lambda attempt: None)
    plex, m1 = _plex()
    lib = _library(plex, max_retries=1)
    item = lib.movies()[0]
    m1.fail_writes = 5

    with pytest.raises(RuntimeError):
        lib.update_tags(item, [])
    assert item.tags == ["language_English"]


def test_connect_plex_requires_credentials(monkeypatch):
    monkeypatch.setattr(plex_library, "BASEURL", None)
    with pytest.raises(RuntimeError):
        plex_library.connect_plex()


def test_subtitle_files_without_path():
    plex, _m1 = _plex()
    lib = _library(plex)
    assert lib.subtitle_files(MediaItem(id="x", name="x", kind="Movie")) == []
