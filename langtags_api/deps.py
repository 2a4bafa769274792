from __future__ import annotations

import threading

from langtags.library import Library
from langtags.library_source import open_library
from langtags_api.settings import Settings

_SETTINGS = Settings.from_env()

_LIBRARY: Library | None = None
_LIBRARY_LOCK = threading.Lock()


def get_settings() -> Settings:
    return _SETTINGS


def get_library() -> Library:
    """Biblioteca compartida por el proceso; se abre en la primera operación."""
    global _LIBRARY
    with _LIBRARY_LOCK:
        if _LIBRARY is None:
            _LIBRARY = open_library()
        return _LIBRARY
