"""Configuration de test pour pytest avec gestion des chemins.

Ce module configure pytest pour résoudre les imports `wallpaper` en ajoutant la racine du projet
au sys.path, force les fournisseurs d'horaires factices et expose des fixtures partagées.
"""

import os
import sys

import pytest

# Must be set BEFORE importing app/modules (the container reads settings at import)
os.environ.setdefault("USE_FAKE_TIMINGS", "true")
os.environ.setdefault("APP_ENV", "test")
# aucune police livrée dans le dépôt: les tests utilisent un rastériseur factice
os.environ.setdefault("REQUIRE_FONTS", "false")

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wallpaper.domain.entities import LifeConfig, RamadanConfig  # noqa: E402
from wallpaper.infra.fake_timings import FakeGeocoder, FakeTimingsClient  # noqa: E402

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class FakeRasterizer:
    """Rastériseur factice: mémorise les SVG reçus et renvoie un en-tête PNG."""

    def __init__(self):
        self.calls: list[tuple[str, int]] = []

    def render_png(self, svg: str, width: int) -> bytes:
        self.calls.append((svg, width))
        return PNG_SIGNATURE + b"fake"


@pytest.fixture
def fake_rasterizer():
    return FakeRasterizer()


@pytest.fixture
def fake_timings():
    return FakeTimingsClient()


@pytest.fixture
def fake_geocoder():
    return FakeGeocoder()


@pytest.fixture
def life_config():
    return LifeConfig(date_of_birth="1990-05-17", time_zone="Europe/Paris", title="MY LIFE")


@pytest.fixture
def karachi_config():
    return RamadanConfig(
        city="Karachi",
        country="Pakistan",
        latitude=24.8607,
        longitude=67.0011,
        time_zone="Asia/Karachi",
        calculation_method=1,
        title="RAMADAN CALENDAR",
        theme="classic",
    )
