from __future__ import annotations

"""
langtags/extractor.py

Extracción de códigos de idioma (Code Extractor).

Fuentes
-------
1) Stderr de `ffmpeg -i <path> -hide_banner`:
     Stream #0:1(eng): Audio: aac (LC), 48000 Hz, stereo
     Stream #0:3(spa): Subtitle: subrip
   Un único proceso y una única pasada de regex por item.

2) Nombres de subtítulos externos (sidecars):
     Movie (1999).en.srt  ->  "en" -> "eng"
     Movie (1999).ger.forced.ass -> "ger"

Contrato
--------
- Path inexistente / ffmpeg no ejecutable / ffmpeg sin descripción de streams -> ExtractionError.
- Listas deduplicadas (orden estable) y restringidas a tokens de EXACTAMENTE 3 letras.
- `und` nunca sale del extractor: el fallback lo decide el motor de agregación.

Nota sobre el exit code:
ffmpeg invocado solo con `-i` termina con código != 0 ("At least one output file
must be specified") aunque haya descrito el fichero. Por eso un exit code != 0 solo
se trata como fallo cuando stderr no contiene ninguna línea "Stream #".
"""

import os
import re
import shutil
import subprocess
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Final

from langtags import logger as _logger
from langtags.errors import ConfigurationError, ExtractionError
from langtags.languages import REGISTRY, UNDETERMINED_CODE
from langtags.run_metrics import METRICS

_STREAM_LANGUAGE_RE: Final[re.Pattern[str]] = re.compile(
    r"\(([A-Za-z]{3})\):\s*(Audio|Subtitle)\b"
)
_SIDECAR_LANGUAGE_RE: Final[re.Pattern[str]] = re.compile(r"\.([A-Za-z]{2,3})(?=\.)")
_STREAM_MARKER: Final[str] = "Stream #"

SUBTITLE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    {".srt", ".ass", ".ssa", ".sub", ".vtt", ".idx", ".sup", ".smi"}
)

_IGNORED_CODES: Final[frozenset[str]] = frozenset({UNDETERMINED_CODE, "root"})


@dataclass(slots=True)
class StreamLanguages:
    audio: list[str] = field(default_factory=list)
    subtitle: list[str] = field(default_factory=list)


# ============================================================
# ffmpeg
# ============================================================


def resolve_ffmpeg(configured: str | None) -> str:
    """
    Devuelve un ejecutable ffmpeg usable o lanza ConfigurationError.

    - Path explícito (con separador): debe existir.
    - Nombre suelto: se busca en PATH.
    """
    raw = (configured or "").strip() or "ffmpeg"

    if os.sep in raw or (os.altsep and os.altsep in raw):
        if os.path.isfile(raw) and os.access(raw, os.X_OK):
            return raw
        raise ConfigurationError(f"ffmpeg not found or not executable at {raw!r}")

    found = shutil.which(raw)
    if not found:
        raise ConfigurationError(f"ffmpeg executable {raw!r} not found in PATH")
    return found


def run_inspection(ffmpeg_path: str, video_path: str) -> str:
    """Ejecuta ffmpeg una vez y devuelve su stderr completo como texto."""
    if not video_path or not os.path.exists(video_path):
        raise ExtractionError(f"File does not exist: {video_path!r}", path=video_path)

    cmd = [ffmpeg_path, "-i", video_path, "-hide_banner"]
    _logger.debug_ctx("FFMPEG", f"cmd={cmd!r}")

    METRICS.incr("extract.calls")
    t0 = time.monotonic()
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        METRICS.incr("extract.errors")
        raise ExtractionError(f"Could not run ffmpeg for {video_path!r}: {exc!r}", path=video_path) from exc
    finally:
        METRICS.observe_ms("extract.latency_ms", (time.monotonic() - t0) * 1000.0)

    stderr = proc.stderr or ""
    if proc.returncode != 0 and _STREAM_MARKER not in stderr:
        METRICS.incr("extract.errors")
        tail = _logger.truncate_line(stderr.strip().splitlines()[-1] if stderr.strip() else "")
        raise ExtractionError(
            f"ffmpeg exited with code {proc.returncode} for {video_path!r}: {tail}",
            path=video_path,
            returncode=proc.returncode,
        )

    return stderr


# ============================================================
# Parsing
# ============================================================


def _keep_three_letter(codes: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for raw in codes:
        code = REGISTRY.to_three_letter(raw)
        if len(code) != 3 or not code.isalpha():
            continue
        if code in _IGNORED_CODES or code in seen:
            continue
        seen.add(code)
        out.append(code)
    return out


def parse_stream_languages(text: str) -> StreamLanguages:
    """Una sola pasada de regex sobre el stderr de ffmpeg."""
    audio: list[str] = []
    subtitle: list[str] = []
    for match in _STREAM_LANGUAGE_RE.finditer(text or ""):
        code = match.group(1).lower()
        if match.group(2) == "Audio":
            audio.append(code)
        else:
            subtitle.append(code)
    return StreamLanguages(audio=_keep_three_letter(audio), subtitle=_keep_three_letter(subtitle))


def sidecar_languages(filenames: Sequence[str], *, video_stem: str | None = None) -> list[str]:
    """
    Idiomas de subtítulos externos a partir de sus nombres.

    Si el nombre empieza por el stem del vídeo, solo se inspecciona el sufijo
    (evita que palabras del título como ".Man." cuenten como idioma).
    """
    found: list[str] = []
    stem = (video_stem or "").lower()

    for filename in filenames:
        name = os.path.basename(filename)
        if stem and name.lower().startswith(stem):
            name = name[len(stem):]
        for match in _SIDECAR_LANGUAGE_RE.finditer(name):
            code = match.group(1).lower()
            if REGISTRY.is_valid(code):
                found.append(REGISTRY.to_three_letter(code))

    return _keep_three_letter(found)


def find_sidecar_subtitles(video_path: str) -> list[str]:
    """Subtítulos en el mismo directorio que comparten el stem del vídeo."""
    directory = os.path.dirname(video_path) or "."
    base = os.path.basename(video_path)
    stem, _ext = os.path.splitext(base)
    prefix = f"{stem}.".lower()

    try:
        names = sorted(os.listdir(directory))
    except OSError as exc:
        _logger.debug_ctx("SUBS", f"listdir failed for {directory!r}: {exc!r}")
        return []

    out: list[str] = []
    for name in names:
        if name == base:
            continue
        if not name.lower().startswith(prefix):
            continue
        if os.path.splitext(name)[1].lower() not in SUBTITLE_EXTENSIONS:
            continue
        out.append(os.path.join(directory, name))
    return out


def extract_languages(
    video_path: str,
    *,
    ffmpeg_path: str,
    sidecar_files: Sequence[str] = (),
    include_subtitles: bool = True,
) -> StreamLanguages:
    """
    Audio + subtítulos (embebidos y externos) de un vídeo.

    Lanza ExtractionError; el caller decide (normalmente: log y contribución vacía).
    """
    text = run_inspection(ffmpeg_path, video_path)
    langs = parse_stream_languages(text)

    if not include_subtitles:
        langs.subtitle = []
        return langs

    if sidecar_files:
        stem = os.path.splitext(os.path.basename(video_path))[0]
        external = sidecar_languages(sidecar_files, video_stem=stem)
        langs.subtitle = _keep_three_letter([*langs.subtitle, *external])

    return langs
