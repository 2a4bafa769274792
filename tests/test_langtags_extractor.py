from __future__ import annotations

import os
import stat

import pytest

import langtags.extractor as ex
from langtags.errors import ConfigurationError, ExtractionError
from langtags.run_metrics import METRICS
from tests.conftest import FakeCompletedProcess

FFMPEG_STDERR = """\
Input #0, matroska,webm, from '/media/movie.mkv':
  Duration: 01:42:11.04, start: 0.000000, bitrate: 5120 kb/s
  Stream #0:0: Video: h264 (High), yuv420p(progressive), 1920x1080, 23.98 fps
  Stream #0:1(eng): Audio: ac3, 48000 Hz, 5.1(side), fltp, 640 kb/s (default)
  Stream #0:2(deu): Audio: ac3, 48000 Hz, stereo, fltp, 192 kb/s
  Stream #0:3(und): Audio: aac (LC), 48000 Hz, stereo
  Stream #0:4(eng): Audio: aac (LC), 48000 Hz, stereo
  Stream #0:5(spa): Subtitle: subrip
  Stream #0:6(fre): Subtitle: hdmv_pgs_subtitle (pgs), 1920x1080
At least one output file must be specified
"""


def test_parse_stream_languages_dedupes_and_normalizes():
    langs = ex.parse_stream_languages(FFMPEG_STDERR)
    assert langs.audio == ["eng", "ger"]
    assert langs.subtitle == ["spa", "fre"]


def test_parse_ignores_streams_without_language():
    langs = ex.parse_stream_languages("Stream #0:0: Video: h264\nStream #0:1: Audio: aac\n")
    assert langs.audio == []
    assert langs.subtitle == []


def test_parse_empty_text():
    assert ex.parse_stream_languages("").audio == []


def test_sidecar_languages_strips_video_stem():
    files = ["/m/Iron.Man.en.srt", "/m/Iron.Man.ger.forced.ass", "/m/Iron.Man.srt"]
    assert ex.sidecar_languages(files, video_stem="Iron.Man") == ["eng", "ger"]


def test_sidecar_languages_skips_unknown_codes():
    assert ex.sidecar_languages(["Movie.xq.srt", "Movie.es.srt"], video_stem="Movie") == ["spa"]


def test_find_sidecar_subtitles(tmp_path):
    video = tmp_path / "Movie (1999).mkv"
    video.write_bytes(b"")
    for name in ("Movie (1999).en.srt", "Movie (1999).es.ass", "Movie (1999).nfo", "Other.en.srt"):
        (tmp_path / name).write_text("x", encoding="utf-8")

    found = [os.path.basename(p) for p in ex.find_sidecar_subtitles(str(video))]
    assert found == ["Movie (1999).en.srt", "Movie (1999).es.ass"]


def test_find_sidecar_subtitles_missing_dir(tmp_path):
    assert ex.find_sidecar_subtitles(str(tmp_path / "nope" / "x.mkv")) == []


def test_resolve_ffmpeg_by_name(monkeypatch):
    monkeypatch.setattr(ex.shutil, "which", lambda name: f"/opt/bin/{name}")
    assert ex.resolve_ffmpeg("ffmpeg") == "/opt/bin/ffmpeg"
    assert ex.resolve_ffmpeg("") == "/opt/bin/ffmpeg"


def test_resolve_ffmpeg_missing(monkeypatch, tmp_path):
    monkeypatch.setattr(ex.shutil, "which", lambda name: None)
    with pytest.raises(ConfigurationError):
        ex.resolve_ffmpeg("ffmpeg")
    with pytest.raises(ConfigurationError):
        ex.resolve_ffmpeg(str(tmp_path / "ffmpeg"))


def test_resolve_ffmpeg_explicit_path(tmp_path):
    tool = tmp_path / "ffmpeg"
    tool.write_text("#!/bin/sh\n", encoding="utf-8")
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR)
    assert ex.resolve_ffmpeg(str(tool)) == str(tool)


def test_run_inspection_missing_file():
    with pytest.raises(ExtractionError):
        ex.run_inspection("ffmpeg", "/definitely/not/here.mkv")


def test_run_inspection_accepts_nonzero_exit_with_streams(monkeypatch, tmp_path):
    video = tmp_path / "movie.mkv"
    video.write_bytes(b"")
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        return FakeCompletedProcess(returncode=1, stderr=FFMPEG_STDERR)

    monkeypatch.setattr(ex.subprocess, "run", fake_run)

    out = ex.run_inspection("/usr/bin/ffmpeg", str(video))
    assert "Stream #0:1(eng)" in out
    assert seen["cmd"] == ["/usr/bin/ffmpeg", "-i", str(video), "-hide_banner"]
    assert METRICS.get("extract.calls") == 1
    assert METRICS.get("extract.errors") == 0


def test_run_inspection_failure_without_streams(monkeypatch, tmp_path):
    video = tmp_path / "broken.mkv"
    video.write_bytes(b"")
    monkeypatch.setattr(
        ex.subprocess,
        "run",
        lambda cmd, **kw: FakeCompletedProcess(returncode=1, stderr="broken.mkv: Invalid data found\n"),
    )

    with pytest.raises(ExtractionError) as info:
        ex.run_inspection("ffmpeg", str(video))
    assert info.value.returncode == 1
    assert METRICS.get("extract.errors") == 1


def test_run_inspection_oserror(monkeypatch, tmp_path):
    video = tmp_path / "movie.mkv"
    video.write_bytes(b"")

    def boom(cmd, **kw):
        raise FileNotFoundError("ffmpeg")

    monkeypatch.setattr(ex.subprocess, "run", boom)
    with pytest.raises(ExtractionError):
        ex.run_inspection("ffmpeg", str(video))


def test_extract_languages_merges_sidecars(monkeypatch, tmp_path):
    video = tmp_path / "movie.mkv"
    video.write_bytes(b"")
    monkeypatch.setattr(ex.subprocess, "run", lambda cmd, **kw: FakeCompletedProcess(1, FFMPEG_STDERR))

    langs = ex.extract_languages(
        str(video),
        ffmpeg_path="ffmpeg",
        sidecar_files=[str(tmp_path / "movie.it.srt"), str(tmp_path / "movie.es.srt")],
    )
    assert langs.audio == ["eng", "ger"]
    assert langs.subtitle == ["spa", "fre", "ita"]

    no_subs = ex.extract_languages(str(video), ffmpeg_path="ffmpeg", include_subtitles=False)
    assert no_subs.subtitle == []
