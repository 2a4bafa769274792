from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, HTTPException, Response

from langtags.config_tags import read_tag_settings
from langtags.errors import ConfigurationError
from langtags.extractor import resolve_ffmpeg
from langtags_api.services import metrics
from langtags_api.services.operations import is_busy

router = APIRouter()


@router.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True, "ts": datetime.now(timezone.utc).isoformat()}


@router.get("/ready")
def ready() -> dict[str, Any]:
    """
    Readiness: el inspector (ffmpeg) debe ser resoluble; sin él un scan
    abortaría antes de tocar nada.
    """
    try:
        ffmpeg = resolve_ffmpeg(read_tag_settings().ffmpeg_path)
    except ConfigurationError as exc:
        raise HTTPException(status_code=503, detail={"ready": False, "issues": {"ffmpeg": str(exc)}})

    return {
        "ready": True,
        "ffmpeg": ffmpeg,
        "busy": is_busy(),
        "ts": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/metrics")
def metrics_endpoint() -> Response:
    body = metrics.render_prometheus()
    return Response(content=body, media_type="text/plain; version=0.0.4")
