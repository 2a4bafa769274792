from __future__ import annotations

"""
langtags/main.py

CLI (console_scripts: `langtags`).

Ejemplos:
    langtags                                  # scan incremental de todo
    langtags --scope series --full            # refresco completo de series
    langtags --scope externalsubtitles
    langtags --remove-language-tags
    langtags --non-media / --remove-non-media
    langtags --source json --library-json data/library.json

Reglas de consola (alineado con langtags/logger.py)
--------------------------------------------------
- Estado global (inicio / modo / fin): logger.progress(...)
- Debug contextual: logger.debug_ctx("CLI", "...")
- Ctrl+C: activa la cancelación cooperativa del scan y sale sin stacktrace.
"""

import argparse
import threading

from langtags import logger as logger
from langtags.config_base import DEBUG_MODE, SILENT_MODE
from langtags.errors import ConfigurationError
from langtags.library_source import open_library
from langtags.orchestrator import (
    SCOPES,
    remove_all_language_tags,
    remove_non_media_tags,
    scan,
    tag_non_media_items,
)
from langtags.run_metrics import METRICS


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="langtags",
        add_help=True,
        description="Language tags - etiqueta películas, series y colecciones con sus idiomas de audio/subtítulos",
    )

    parser.add_argument(
        "--scope",
        default="everything",
        help=f"Alcance del scan: {', '.join(SCOPES)} (alias: tvshows)",
    )
    parser.add_argument("--full", action="store_true", help="Refresco completo (ignora tags existentes)")

    maintenance = parser.add_mutually_exclusive_group()
    maintenance.add_argument(
        "--remove-language-tags",
        action="store_true",
        help="Elimina todos los tags de idioma de la biblioteca (sin scan)",
    )
    maintenance.add_argument("--non-media", action="store_true", help="Solo etiqueta items no multimedia")
    maintenance.add_argument(
        "--remove-non-media",
        action="store_true",
        help="Elimina el tag de items no multimedia",
    )

    parser.add_argument("--source", choices=("plex", "json"), default=None, help="Origen de la biblioteca")
    parser.add_argument("--library-json", default=None, help="Ruta del JSON de biblioteca (source=json)")

    return parser.parse_args(argv)


def start(argv: list[str] | None = None) -> None:
    """Entry-point principal (console_scripts)."""
    logger.progress("[LangTags] Inicio")

    args = _parse_args(argv)

    if SILENT_MODE:
        logger.progress("[LangTags] SILENT_MODE=True" + (" DEBUG_MODE=True" if DEBUG_MODE else ""))
    elif DEBUG_MODE:
        logger.debug_ctx("CLI", f"args={vars(args)!r}")

    cancel_event = threading.Event()

    try:
        try:
            library = open_library(args.source, json_path=args.library_json)
        except ConfigurationError as exc:
            logger.error(f"[LangTags] {exc}", always=True)
            return

        if args.remove_language_tags:
            logger.progress("[LangTags] Modo: eliminar tags de idioma")
            remove_all_language_tags(library)
            return

        if args.non_media:
            logger.progress("[LangTags] Modo: etiquetar items no multimedia")
            tag_non_media_items(library)
            return

        if args.remove_non_media:
            logger.progress("[LangTags] Modo: eliminar tag de items no multimedia")
            remove_non_media_tags(library)
            return

        logger.progress(f"[LangTags] Modo: scan scope={args.scope} full={args.full}")
        scan(args.full, args.scope, library=library, cancel_event=cancel_event)

        if DEBUG_MODE:
            logger.debug_ctx("CLI", f"metrics={METRICS.snapshot()!r}")

    except KeyboardInterrupt:
        cancel_event.set()
        logger.info("\n[LangTags] Interrumpido por el usuario (Ctrl+C).", always=True)
    finally:
        logger.progress("[LangTags] Fin")


if __name__ == "__main__":
    start()
