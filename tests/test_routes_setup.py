"""Tests pour la page d'installation `GET /setup/{token}`."""

from fastapi.testclient import TestClient

from wallpaper.app.main import app
from wallpaper.core.http_constants import HTTP_NOT_FOUND, HTTP_OK
from wallpaper.domain.token_codec import encode_token

c = TestClient(app)


def test_setup_for_ramadan_token(karachi_config):
    """Teste le résumé (lieu, coordonnées à 6 décimales, méthode) et les étapes."""
    token = encode_token(karachi_config)
    r = c.get(f"/setup/{token}")
    assert r.status_code == HTTP_OK
    body = r.json()
    assert body["title"] == "Ramadan Wallpaper Setup"
    assert body["wallpaper_url"] == f"https://testserver/api/wallpaper/{token}?w=1290&h=2796"
    assert body["summary"] == [
        "Mode: Ramadan Calendar",
        "Location label: Karachi",
        "Coordinates (exact): 24.860700, 67.001100",
        "Calculation method: 1",
    ]
    assert len(body["shortcut_steps"]) == 5
    assert len(body["automation_steps"]) == 3
    assert "dynamic daily trigger times" in body["note"]


def test_setup_for_life_token(life_config):
    r = c.get(f"/setup/{encode_token(life_config)}")
    assert r.status_code == HTTP_OK
    assert r.json()["summary"] == [
        "Mode: Life Calendar (legacy token)",
        "Date of birth: 1990-05-17",
    ]


def test_setup_invalid_token_is_404():
    r = c.get("/setup/garbage")
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json()["code"] == "NOT_FOUND"
