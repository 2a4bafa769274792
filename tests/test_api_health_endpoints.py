import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient

import langtags_api.routers.health as health_router
from langtags.errors import ConfigurationError
from langtags.run_metrics import METRICS
from langtags_api.app import create_app


def test_health():
    client = TestClient(create_app())
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert response.headers["X-Request-ID"]


def test_ready_when_ffmpeg_resolves(monkeypatch):
    monkeypatch.setattr(health_router, "resolve_ffmpeg", lambda configured: "/usr/bin/ffmpeg")
    client = TestClient(create_app())

    response = client.get("/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["ready"] is True
    assert body["ffmpeg"] == "/usr/bin/ffmpeg"
    assert body["busy"] is False


def test_ready_without_ffmpeg(monkeypatch):
    def missing(configured):
        raise ConfigurationError("ffmpeg executable 'ffmpeg' not found in PATH")

    monkeypatch.setattr(health_router, "resolve_ffmpeg", missing)
    client = TestClient(create_app())

    response = client.get("/ready")
    assert response.status_code == 503
    assert "ffmpeg" in response.json()["detail"]["issues"]


def test_metrics_exposes_http_and_scan_counters():
    METRICS.incr("tags.written", 4)
    client = TestClient(create_app())
    client.get("/health")

    response = client.get("/metrics")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "http_requests_total" in response.text
    assert "langtags_tags_written_total 4" in response.text
