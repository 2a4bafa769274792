from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from langtags.config_tags import TagSettings
from langtags.errors import ExtractionError
from langtags.extractor import StreamLanguages
from langtags.library import MediaItem, MemoryLibrary
from langtags.run_metrics import METRICS


@dataclass(slots=True)
class ExtractorCall:
    path: str
    ffmpeg_path: str
    sidecar_files: list[str]
    include_subtitles: bool


@dataclass(slots=True)
class FakeExtractor:
    """
    Sustituto de `extract_languages` programable por path.

    - by_path[path] = StreamLanguages(...) -> se devuelve una copia
    - failing = {path, ...} -> ExtractionError
    - path desconocido -> sin idiomas
    """

    by_path: dict[str, StreamLanguages] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)
    calls: list[ExtractorCall] = field(default_factory=list)

    def __call__(self, video_path, *, ffmpeg_path, sidecar_files=(), include_subtitles=True):
        self.calls.append(
            ExtractorCall(
                path=video_path,
                ffmpeg_path=ffmpeg_path,
                sidecar_files=list(sidecar_files),
                include_subtitles=include_subtitles,
            )
        )
        if video_path in self.failing:
            raise ExtractionError(f"ffmpeg failed for {video_path}", path=video_path, returncode=1)
        langs = self.by_path.get(video_path, StreamLanguages())
        return StreamLanguages(
            audio=list(langs.audio),
            subtitle=list(langs.subtitle) if include_subtitles else [],
        )

    def paths(self) -> list[str]:
        return [c.path for c in self.calls]


@dataclass(slots=True)
class FakeCompletedProcess:
    returncode: int
    stderr: str
    stdout: str = ""


def make_settings(**overrides) -> TagSettings:
    values = dict(
        always_force_full_refresh=False,
        whitelist=(),
        add_subtitle_tags=False,
        synchronous_refresh=True,
        disable_undefined_language_tags=False,
        audio_prefix="language_",
        subtitle_prefix="subtitle_language_",
        ffmpeg_path="ffmpeg",
        scan_workers=2,
        enable_non_media_tagging=False,
        non_media_tag="item",
        non_media_item_types=(),
    )
    values.update(overrides)
    return TagSettings(**values)


def video(item_id: str, name: str, kind: str = "Movie", *, parent_id=None, tags=None, subs=None) -> MediaItem:
    return MediaItem(
        id=item_id,
        name=name,
        kind=kind,
        path=f"/media/{item_id}.mkv",
        tags=list(tags or []),
        parent_id=parent_id,
        subtitle_files=list(subs) if subs is not None else [],
    )


def build_series_library() -> MemoryLibrary:
    """
    Show
      Season 1: e1 (eng), e2 (ger)
      Season 2: e3 (eng, fre)
    """
    lib = MemoryLibrary()
    lib.add(MediaItem(id="s1", name="Show", kind="Series"))
    lib.add(MediaItem(id="s1-1", name="Season 1", kind="Season", parent_id="s1"))
    lib.add(MediaItem(id="s1-2", name="Season 2", kind="Season", parent_id="s1"))
    lib.add(video("e1", "S01E01", "Episode", parent_id="s1-1"))
    lib.add(video("e2", "S01E02", "Episode", parent_id="s1-1"))
    lib.add(video("e3", "S02E01", "Episode", parent_id="s1-2"))
    return lib


def series_extractor() -> FakeExtractor:
    return FakeExtractor(
        by_path={
            "/media/e1.mkv": StreamLanguages(audio=["eng"]),
            "/media/e2.mkv": StreamLanguages(audio=["ger"]),
            "/media/e3.mkv": StreamLanguages(audio=["eng", "fre"]),
        }
    )


def build_collection_library() -> MemoryLibrary:
    """m1 (spa) y m2 (eng) en la colección c1; m3 suelta."""
    lib = MemoryLibrary()
    m1 = lib.add(video("m1", "Movie One"))
    m2 = lib.add(video("m2", "Movie Two"))
    lib.add(video("m3", "Movie Three"))
    lib.add(MediaItem(id="c1", name="Saga", kind="BoxSet", external_id="tmdb:10"), members=[m1.id, m2.id])
    return lib


def collection_extractor() -> FakeExtractor:
    return FakeExtractor(
        by_path={
            "/media/m1.mkv": StreamLanguages(audio=["spa"], subtitle=["eng"]),
            "/media/m2.mkv": StreamLanguages(audio=["eng"], subtitle=["spa", "fre"]),
            "/media/m3.mkv": StreamLanguages(audio=["jpn"]),
        }
    )


@pytest.fixture(autouse=True)
def _reset_run_metrics():
    METRICS.reset()
    yield
    METRICS.reset()


@pytest.fixture()
def ffmpeg_available(monkeypatch):
    import langtags.orchestrator as orchestrator

    monkeypatch.setattr(orchestrator, "resolve_ffmpeg", lambda configured: "/usr/bin/ffmpeg")
    return "/usr/bin/ffmpeg"
