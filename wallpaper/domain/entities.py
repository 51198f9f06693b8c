"""
Entités du domaine métier.

Ce module définit les modèles de données principaux: les deux variantes de configuration de fond
d'écran (union étiquetée par `mode`), les horaires de prière fournis par le service amont et le
résultat d'un géocodage de ville.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

WallpaperMode = Literal["life", "ramadan"]
RamadanTheme = Literal["classic", "girly"]


class LifeConfig(BaseModel):
    """Configuration normalisée d'un calendrier de vie (grille de semaines)."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["life"] = "life"
    date_of_birth: str  # YYYY-MM-DD
    time_zone: str  # IANA TZ
    title: str


class RamadanConfig(BaseModel):
    """Configuration normalisée d'un calendrier de Ramadan (horaires de prière)."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["ramadan"] = "ramadan"
    city: str
    country: str
    latitude: float
    longitude: float
    time_zone: str  # IANA TZ
    calculation_method: int
    title: str
    theme: RamadanTheme = "classic"


WallpaperConfig = LifeConfig | RamadanConfig


class RamadanTimings(BaseModel):
    """Horaires du jour pour une position donnée (heures au format 24h `HH:MM`)."""

    gregorian_date: str
    hijri_date: str
    hijri_month: str
    hijri_day: int
    fajr: str
    dhuhr: str
    asr: str
    maghrib: str
    isha: str
    sehri: str
    iftar: str


class GeocodedCity(BaseModel):
    """Résultat d'une recherche de ville par nom libre."""

    city: str
    country: str
    latitude: float
    longitude: float
    time_zone: str
