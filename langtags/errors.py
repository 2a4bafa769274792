from __future__ import annotations

"""
langtags/errors.py

Taxonomía de errores del scan.

- ConfigurationError: ffmpeg no resoluble / config inválida. Aborta el pass ANTES de mutar nada.
- ExtractionError: fallo de ffmpeg o path inexistente. Acotado a un único item.
- AggregationWarning: rama vacía (serie sin temporadas, temporada sin episodios,
  colección sin películas). Se salta la rama y el resto continúa.

Ninguna de estas excepciones cruza la frontera de `orchestrator.scan()`.
"""


class LanguageTagsError(Exception):
    """Base de todos los errores del proyecto."""


class ConfigurationError(LanguageTagsError):
    pass


class ExtractionError(LanguageTagsError):
    def __init__(self, message: str, *, path: str | None = None, returncode: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.returncode = returncode


class AggregationWarning(LanguageTagsError):
    def __init__(self, message: str, *, item_name: str | None = None) -> None:
        super().__init__(message)
        self.item_name = item_name


class ScanCancelled(LanguageTagsError):
    """Señal de cancelación observada entre items; el root en curso no escribe contenedores."""
