import asyncio
import json

from fastapi import Request, Response

from langtags_api.middleware.errors import build_exception_handler
from langtags_api.middleware.request_id import build_request_id_middleware
from langtags_api.settings import Settings


def _make_request(headers, path="/language-tags/refresh", method="POST"):
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "method": method,
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": headers,
        "client": ("127.0.0.1", 1234),
        "server": ("testserver", 80),
        "scheme": "http",
        "http_version": "1.1",
    }

    async def receive():
        return {"type": "http.request", "body": b""}

    return Request(scope, receive)


def _settings():
    return Settings(log_level="INFO", cors_origins_raw="*", cors_allow_credentials=False, gzip_min_size=0)


def test_request_id_middleware_propagates_header(monkeypatch):
    from langtags_api.middleware import request_id as mod

    captured = {"info": None, "metrics": []}

    class DummyLogger:
        def info(self, msg, extra=None):
            captured["info"] = (msg, extra)

    monkeypatch.setattr(mod, "configure_logging", lambda settings: DummyLogger())
    monkeypatch.setattr(mod.metrics, "inc", lambda name, value=1: captured["metrics"].append((name, value)))

    middleware = build_request_id_middleware(_settings())
    request = _make_request([(b"x-request-id", b"req-123")])

    async def call_next(req):
        assert req.state.request_id == "req-123"
        return Response(status_code=204)

    response = asyncio.run(middleware(request, call_next))

    assert response.status_code == 204
    assert response.headers["X-Request-ID"] == "req-123"
    assert ("http_requests_total", 1) in captured["metrics"]
    assert captured["info"][1]["status"] == 204
    assert captured["info"][1]["method"] == "POST"


def test_request_id_generated_when_missing(monkeypatch):
    from langtags_api.middleware import request_id as mod

    class DummyLogger:
        def info(self, msg, extra=None):
            pass

    monkeypatch.setattr(mod, "configure_logging", lambda settings: DummyLogger())
    monkeypatch.setattr(mod.metrics, "inc", lambda name, value=1: None)

    middleware = build_request_id_middleware(_settings())

    async def call_next(req):
        return Response(status_code=200)

    response = asyncio.run(middleware(_make_request([]), call_next))
    assert len(response.headers["X-Request-ID"]) == 32


def test_exception_handler_includes_request_id(monkeypatch):
    from langtags_api.middleware import errors as mod

    captured = {"exc": None, "metrics": []}

    class DummyLogger:
        def exception(self, msg, exc_info=None, extra=None):
            captured["exc"] = (msg, exc_info, extra)

    monkeypatch.setattr(mod, "configure_logging", lambda settings: DummyLogger())
    monkeypatch.setattr(mod.metrics, "inc", lambda name, value=1: captured["metrics"].append((name, value)))

    handler = build_exception_handler(_settings())
    request = _make_request([])
    request.state.request_id = "req-xyz"

    response = asyncio.run(handler(request, RuntimeError("boom")))

    payload = json.loads(response.body.decode("utf-8"))
    assert response.status_code == 500
    assert payload["detail"] == "Internal Server Error"
    assert payload["request_id"] == "req-xyz"
    assert payload["error_id"]
    assert ("http_errors_5xx_total", 1) in captured["metrics"]
    assert captured["exc"][2]["path"] == "/language-tags/refresh"
