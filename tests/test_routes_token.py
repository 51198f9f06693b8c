"""Tests pour l'endpoint d'émission de jetons `POST /api/token`.

Ce module couvre les modes vie et Ramadan, la résolution de l'origine des URLs et les erreurs
400/404 à enveloppe standard.
"""

import pytest
from fastapi.testclient import TestClient

from wallpaper.api import routes_token
from wallpaper.app.main import app
from wallpaper.core.http_constants import HTTP_BAD_REQUEST, HTTP_NOT_FOUND, HTTP_OK
from wallpaper.domain.services import WallpaperService
from wallpaper.domain.token_codec import decode_token

c = TestClient(app)


@pytest.fixture(autouse=True)
def fake_service(monkeypatch, fake_timings, fake_rasterizer, fake_geocoder):
    service = WallpaperService(fake_timings, fake_rasterizer, fake_geocoder)
    monkeypatch.setattr(routes_token, "service", service)
    return service


def test_life_token_with_camel_case_body():
    r = c.post(
        "/api/token",
        json={"mode": "life", "dateOfBirth": "1990-05-17", "timeZone": "Europe/Paris"},
    )
    assert r.status_code == HTTP_OK
    body = r.json()
    assert body["mode"] == "life"
    assert "variants" not in body and "theme" not in body
    cfg = decode_token(body["token"])
    assert cfg.date_of_birth == "1990-05-17"
    assert cfg.time_zone == "Europe/Paris"
    assert body["wallpaper_url"] == f"https://testserver{body['wallpaper_path']}"


def test_ramadan_is_default_mode_and_returns_variants():
    """Teste le mode Ramadan par défaut, le géocodage et les deux variantes de thème."""
    r = c.post("/api/token", json={"city": "Karachi", "theme": "girly", "calculationMethod": 1})
    assert r.status_code == HTTP_OK
    body = r.json()
    assert body["mode"] == "ramadan"
    assert body["theme"] == "girly"
    assert body["config"]["calculation_method"] == 1
    assert body["token"] == body["variants"]["girly"]["token"]
    assert body["variants"]["classic"]["theme"] == "classic"
    assert body["variants"]["classic"]["setup_url"].endswith(
        f"/setup/{body['variants']['classic']['token']}"
    )


def test_origin_from_forwarded_headers():
    r = c.post(
        "/api/token",
        json={"mode": "life"},
        headers={"x-forwarded-proto": "http", "x-forwarded-host": "wall.example"},
    )
    assert r.json()["setup_url"].startswith("http://wall.example/setup/")


def test_missing_location_is_400():
    r = c.post("/api/token", json={"mode": "ramadan"})
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["message"] == "Provide exact latitude/longitude, or enter a city name."


def test_unknown_city_is_404():
    r = c.post("/api/token", json={"city": "Atlantis"})
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json()["code"] == "CITY_NOT_FOUND"
    assert r.json()["message"].startswith("City not found.")


def test_unsupported_mode_is_400():
    r = c.post("/api/token", json={"mode": "weekly"})
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["code"] == "UNSUPPORTED_MODE"


def test_invalid_json_body_is_400():
    r = c.post("/api/token", content=b"{not json", headers={"content-type": "application/json"})
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["message"] == "Invalid JSON body."
