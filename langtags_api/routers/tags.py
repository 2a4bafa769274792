from __future__ import annotations

"""
langtags_api/routers/tags.py

Superficie de control del scan:

    POST   /language-tags/refresh?type=everything&full=true   -> 204
    POST   /language-tags/remove                              -> 204
    POST   /language-tags/non-media                           -> 204
    DELETE /language-tags/non-media                           -> 204

Las operaciones son síncronas (el endpoint vuelve cuando el pass termina) y
exclusivas: si ya hay una en curso -> 409. `type` fuera del conjunto admitido -> 422.
"""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from langtags.library import Library
from langtags.orchestrator import remove_all_language_tags, remove_non_media_tags, scan, tag_non_media_items
from langtags_api.deps import get_library
from langtags_api.services.operations import OperationBusy, run_exclusive

router = APIRouter(prefix="/language-tags", tags=["language-tags"])

ScopeParam = Literal["movies", "series", "tvshows", "collections", "externalsubtitles", "everything"]


def _run(name: str, fn) -> Response:
    try:
        run_exclusive(name, fn)
    except OperationBusy as exc:
        raise HTTPException(status_code=409, detail=str(exc))
    return Response(status_code=204)


@router.post("/refresh", status_code=204)
def refresh(
    scope: ScopeParam = Query("everything", alias="type"),
    full: bool = Query(True),
    library: Library = Depends(get_library),
) -> Response:
    return _run("refresh", lambda: scan(full, scope, library=library))


@router.post("/remove", status_code=204)
def remove(library: Library = Depends(get_library)) -> Response:
    return _run("remove", lambda: remove_all_language_tags(library))


@router.post("/non-media", status_code=204)
def non_media(library: Library = Depends(get_library)) -> Response:
    return _run("non-media", lambda: tag_non_media_items(library))


@router.delete("/non-media", status_code=204)
def remove_non_media(library: Library = Depends(get_library)) -> Response:
    return _run("remove-non-media", lambda: remove_non_media_tags(library))
