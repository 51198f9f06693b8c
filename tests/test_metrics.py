"""Tests pour les métriques Prometheus et les middlewares de traçabilité."""

from fastapi.testclient import TestClient

from wallpaper.app.main import app
from wallpaper.core.http_constants import HTTP_OK

c = TestClient(app)


def test_metrics_exposed():
    """Teste que l'endpoint /metrics expose les métriques HTTP et métier."""
    c.get("/health")
    r = c.get("/metrics")
    assert r.status_code == HTTP_OK
    assert b"http_requests_total" in r.content
    assert b'route="/health"' in r.content
    assert b"wallpaper_renders_total" in r.content
    assert b"wallpaper_invalid_tokens_total" in r.content
    assert b"ramadan_timings_failures_total" in r.content


def test_request_id_and_timing_headers():
    r = c.get("/health", headers={"X-Request-ID": "req-123"})
    assert r.headers["X-Request-ID"] == "req-123"
    assert int(r.headers["X-Process-Time-ms"]) >= 0

    generated = c.get("/health").headers["X-Request-ID"]
    assert len(generated) == 36


def test_error_envelope_carries_request_id():
    r = c.get("/setup/garbage", headers={"X-Request-ID": "trace-me"})
    assert r.json()["trace_id"] == "trace-me"
