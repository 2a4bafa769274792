from __future__ import annotations

from pathlib import Path

from langtags import logger as _logger
from langtags.config_tags import LIBRARY_JSON_PATH, LIBRARY_SOURCE
from langtags.errors import ConfigurationError
from langtags.library import Library, MemoryLibrary


def open_library(source: str | None = None, *, json_path: str | Path | None = None) -> Library:
    """
    Abre la biblioteca según LIBRARY_SOURCE (o `source`):

    - "plex": conecta con plexapi (BASEURL/PLEX_TOKEN).
    - "json": MemoryLibrary respaldada por LIBRARY_JSON_PATH (autosave).
    """
    src = (source or LIBRARY_SOURCE).strip().lower()

    if src == "json":
        path = Path(json_path) if json_path is not None else LIBRARY_JSON_PATH
        if not path.exists():
            raise ConfigurationError(f"Library JSON not found: {path}")
        _logger.debug_ctx("LIBRARY", f"json={path}")
        return MemoryLibrary.load(path)

    if src == "plex":
        from langtags.plex_library import PlexLibrary

        try:
            return PlexLibrary.connect()
        except RuntimeError as exc:
            raise ConfigurationError(str(exc)) from exc

    raise ConfigurationError(f"Unknown library source: {source!r}")
