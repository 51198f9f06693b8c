"""Tests pour le service de rendu et d'émission de jetons."""

import asyncio
import time
from datetime import datetime, timezone

import pytest

from wallpaper.domain.services import (
    CityNotFoundError,
    InvalidTokenError,
    MissingLocationError,
    TimingsUnavailableError,
    UnsupportedModeError,
    WallpaperService,
    clamp_dimension,
)
from wallpaper.domain.token_codec import decode_token, encode_token
from wallpaper.infra.fake_timings import FakeTimingsClient

NOW = datetime(2026, 3, 1, 22, 30, tzinfo=timezone.utc)
ORIGIN = "https://wall.example"


@pytest.fixture
def service(fake_timings, fake_rasterizer, fake_geocoder):
    return WallpaperService(fake_timings, fake_rasterizer, fake_geocoder)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 1290), ("abc", 1290), ("", 1290), ("100", 720), ("99999", 2200), ("1000.5", 1001)],
)
def test_clamp_dimension(raw, expected):
    assert clamp_dimension(raw, 1290, 720, 2200) == expected


def test_produce_life_image(service, fake_rasterizer, life_config):
    token = encode_token(life_config)
    result = asyncio.run(service.produce_image(token, "800", None, NOW))
    svg, width = fake_rasterizer.calls[0]
    assert width == 800
    assert 'height="2796"' in svg
    assert result.filename == f"life-calendar-{token[:10]}.png"
    assert result.png.startswith(b"\x89PNG")
    assert result.config == life_config


def test_produce_ramadan_image_uses_local_day(service, fake_timings, karachi_config):
    """Teste que les horaires sont demandés avec les paramètres du jeton."""
    token = encode_token(karachi_config)
    result = asyncio.run(service.produce_image(token, None, None, NOW))
    lat, lon, tz, method, instant = fake_timings.calls[0]
    assert (lat, lon, tz, method) == (24.8607, 67.0011, "Asia/Karachi", 1)
    assert instant == NOW
    assert result.filename.startswith("ramadan-calendar-")


def test_produce_image_invalid_token(service, fake_rasterizer):
    with pytest.raises(InvalidTokenError):
        asyncio.run(service.produce_image("garbage", None, None, NOW))
    assert fake_rasterizer.calls == []


def test_produce_image_timings_unavailable(fake_rasterizer, karachi_config):
    service = WallpaperService(FakeTimingsClient(available=False), fake_rasterizer)
    with pytest.raises(TimingsUnavailableError):
        asyncio.run(service.produce_image(encode_token(karachi_config), None, None, NOW))
    assert fake_rasterizer.calls == []


def test_issue_life_token(service):
    out = asyncio.run(service.issue_token({"mode": "life", "date_of_birth": "1990-05-17"}, ORIGIN))
    assert out["mode"] == "life"
    assert out["config"]["date_of_birth"] == "1990-05-17"
    assert out["wallpaper_path"] == f"/api/wallpaper/{out['token']}?w=1290&h=2796"
    assert out["wallpaper_url"] == ORIGIN + out["wallpaper_path"]
    assert out["setup_url"] == f"{ORIGIN}/setup/{out['token']}"
    assert "variants" not in out


def test_issue_ramadan_with_exact_coordinates(service, fake_geocoder):
    """Teste qu'avec des coordonnées exactes, aucun géocodage n'est nécessaire."""
    body = {"latitude": 21.4225, "longitude": 39.8262, "time_zone": "Asia/Riyadh", "theme": "girly"}
    out = asyncio.run(service.issue_token(body, ORIGIN))
    assert out["mode"] == "ramadan"
    assert out["theme"] == "girly"
    assert out["config"]["city"] == "Current Location"
    assert out["token"] == out["variants"]["girly"]["token"]
    assert decode_token(out["variants"]["classic"]["token"]).theme == "classic"
    assert decode_token(out["variants"]["girly"]["token"]).theme == "girly"


def test_issue_ramadan_geocodes_city(service):
    out = asyncio.run(service.issue_token({"city": "Karachi Pakistan"}, ORIGIN))
    assert out["theme"] == "classic"
    assert out["config"]["time_zone"] == "Asia/Karachi"
    assert out["config"]["country"] == "Pakistan"
    assert set(out["variants"]) == {"classic", "girly"}


def test_issue_ramadan_invalid_zone_with_coordinates_falls_back_to_city(service):
    body = {"latitude": 1, "longitude": 2, "time_zone": "Bad/Zone", "city": "karachi"}
    out = asyncio.run(service.issue_token(body, ORIGIN))
    assert out["config"]["latitude"] == 24.8607


def test_issue_ramadan_errors(service):
    with pytest.raises(MissingLocationError):
        asyncio.run(service.issue_token({"mode": "ramadan"}, ORIGIN))
    with pytest.raises(CityNotFoundError):
        asyncio.run(service.issue_token({"city": "Atlantis"}, ORIGIN))
    with pytest.raises(UnsupportedModeError):
        asyncio.run(service.issue_token({"mode": "weekly"}, ORIGIN))


class SlowRasterizer:
    """Rastériseur factice bloquant, comme un rendu CairoSVG coûteux."""

    def __init__(self, delay: float):
        self.delay = delay

    def render_png(self, svg: str, width: int) -> bytes:
        time.sleep(self.delay)
        return b"\x89PNG\r\n\x1a\nslow"


def test_concurrent_renders_do_not_block_event_loop(fake_timings, life_config):
    """Teste que deux rendus simultanés se chevauchent et laissent la boucle répondre."""
    service = WallpaperService(fake_timings, SlowRasterizer(0.3))
    token = encode_token(life_config)
    gaps: list[float] = []

    async def ticker(stop: asyncio.Event) -> None:
        last = time.perf_counter()
        while not stop.is_set():
            await asyncio.sleep(0.05)
            current = time.perf_counter()
            gaps.append(current - last)
            last = current

    async def scenario() -> float:
        stop = asyncio.Event()
        tick_task = asyncio.create_task(ticker(stop))
        start = time.perf_counter()
        results = await asyncio.gather(
            service.produce_image(token, None, None, NOW),
            service.produce_image(token, None, None, NOW),
        )
        elapsed = time.perf_counter() - start
        stop.set()
        await tick_task
        assert all(r.png.endswith(b"slow") for r in results)
        return elapsed

    elapsed = asyncio.run(scenario())
    assert elapsed < 0.55
    assert gaps and max(gaps) < 0.2
