from __future__ import annotations

"""
langtags/languages.py

Registro de códigos ISO 639 (Language Code Registry).

- Tabla inmutable construida una vez por proceso desde `language_data.LANGUAGE_ROWS`.
- Indexada por TODAS las variantes no vacías (iso3, iso3 bibliográfico, iso2), en minúsculas.
- Lookups case-insensitive, O(1) y sin estado: seguro para lecturas concurrentes.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from langtags import logger as _logger
from langtags.language_data import LANGUAGE_ROWS

UNDETERMINED_CODE: Final[str] = "und"


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    iso3: str
    iso3_bibliographic: str | None
    iso2: str | None
    name: str

    def codes(self) -> tuple[str, ...]:
        return tuple(c for c in (self.iso3, self.iso3_bibliographic, self.iso2) if c)


class LanguageRegistry:
    def __init__(self, rows: Iterable[tuple[str, str | None, str | None, str]]) -> None:
        by_code: dict[str, LanguageEntry] = {}
        by_name: dict[str, LanguageEntry] = {}

        for iso3, iso3_b, iso2, name in rows:
            entry = LanguageEntry(iso3=iso3, iso3_bibliographic=iso3_b, iso2=iso2, name=name)
            for code in entry.codes():
                key = code.lower()
                if key in by_code:
                    raise ValueError(f"Duplicate language code in table: {code!r}")
                by_code[key] = entry
            by_name.setdefault(name.lower(), entry)

        self._by_code = by_code
        self._by_name = by_name

    def __len__(self) -> int:
        return len(self._by_code)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.is_valid(code)

    def resolve(self, code: str | None) -> LanguageEntry | None:
        if not code:
            return None
        return self._by_code.get(code.strip().lower())

    def is_valid(self, code: str | None) -> bool:
        return self.resolve(code) is not None

    def to_three_letter(self, code: str) -> str:
        """
        Normaliza a iso3 canónico.

        Códigos desconocidos se devuelven tal cual (el filtro de forma
        aguas abajo decide si sobreviven).
        """
        entry = self.resolve(code)
        if entry is None:
            return code.strip().lower()
        return entry.iso3

    def name_for(self, code: str) -> str:
        entry = self.resolve(code)
        if entry is None:
            _logger.warning(
                f"[LANG] Could not find language name for ISO code {code!r}, using code as fallback"
            )
            return code
        return entry.name

    def resolve_name(self, name: str | None) -> LanguageEntry | None:
        if not name:
            return None
        return self._by_name.get(name.strip().lower())

    def code_for_name(self, value: str) -> str:
        """
        Nombre canónico -> iso3.

        Si `value` ya es un código conocido se normaliza; si no se reconoce,
        se devuelve sin cambios.
        """
        entry = self.resolve_name(value)
        if entry is not None:
            return entry.iso3
        entry = self.resolve(value)
        if entry is not None:
            return entry.iso3
        _logger.debug_ctx("LANG", f"No ISO code for language name {value!r}")
        return value


REGISTRY: Final[LanguageRegistry] = LanguageRegistry(LANGUAGE_ROWS)

UNDETERMINED_NAME: Final[str] = REGISTRY.name_for(UNDETERMINED_CODE)


def resolve(code: str | None) -> LanguageEntry | None:
    return REGISTRY.resolve(code)


def is_valid(code: str | None) -> bool:
    return REGISTRY.is_valid(code)
