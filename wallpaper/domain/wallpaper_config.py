"""
Normalisation des configurations de fond d'écran.

Transforme un dictionnaire faiblement typé (corps JSON, charge utile de jeton) en l'une des deux
configurations bien formées du domaine.

Règles:
- Les chaînes sont nettoyées (espaces compactés), tronquées, et remplacées par une valeur par
  défaut si elles sont vides.
- Les nombres acceptent les valeurs numériques et les chaînes numériques; hors bornes, ils sont
  ramenés dans l'intervalle valide.
- Une configuration Ramadan sans fuseau horaire valide ou sans coordonnées finies est rejetée
  (`None`): ces champs alimentent directement la recherche d'horaires.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel

from wallpaper.domain.entities import (
    LifeConfig,
    RamadanConfig,
    RamadanTheme,
    WallpaperConfig,
)

DEFAULT_LIFE_DATE_OF_BIRTH = "1996-01-01"
DEFAULT_LIFE_TIME_ZONE = "America/New_York"
DEFAULT_LIFE_TITLE = "LIFE CALENDAR"

DEFAULT_RAMADAN_CITY = "Current Location"
DEFAULT_RAMADAN_TITLE = "RAMADAN CALENDAR"
DEFAULT_RAMADAN_METHOD = 2
DEFAULT_RAMADAN_THEME: RamadanTheme = "classic"

TITLE_MAX_LEN = 28
PLACE_MAX_LEN = 40
MIN_CALCULATION_METHOD = 0
MAX_CALCULATION_METHOD = 23

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def _as_mapping(partial: Mapping[str, Any] | BaseModel | None) -> Mapping[str, Any]:
    if partial is None:
        return {}
    if isinstance(partial, BaseModel):
        return partial.model_dump()
    return partial


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    """Première valeur présente parmi `keys` (snake_case puis alias camelCase)."""
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None


def is_iso_date(value: Any) -> bool:
    """Vrai si `value` est une date calendaire réelle au format YYYY-MM-DD."""
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return False
    year, month, day = (int(part) for part in value.split("-"))
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_valid_time_zone(value: Any) -> bool:
    """Vérifie un identifiant IANA en formatant l'instant courant dans ce fuseau."""
    if not isinstance(value, str) or not value:
        return False
    try:
        datetime.now(ZoneInfo(value)).strftime("%Y-%m-%d %H:%M")
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True


def clean_text(value: Any, fallback: str, max_len: int) -> str:
    """Compacte les espaces, tronque à `max_len`, et retombe sur `fallback` si vide."""
    if not isinstance(value, str):
        return fallback
    collapsed = " ".join(value.split())
    if not collapsed:
        return fallback
    return collapsed[:max_len]


def to_number(value: Any) -> float:
    """Convertit un nombre ou une chaîne numérique; `nan` pour tout le reste."""
    if isinstance(value, bool):
        return math.nan
    if not isinstance(value, int | float | str):
        return math.nan
    try:
        return float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return math.nan


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def normalize_ramadan_theme(value: Any) -> RamadanTheme:
    return "girly" if value == "girly" else DEFAULT_RAMADAN_THEME


def normalize_calculation_method(value: Any) -> int:
    """Méthode de calcul: défaut si absente/invalide, arrondie puis bornée sinon."""
    raw = to_number(value)
    if not math.isfinite(raw):
        return DEFAULT_RAMADAN_METHOD
    rounded = math.floor(raw + 0.5)
    return int(clamp(rounded, MIN_CALCULATION_METHOD, MAX_CALCULATION_METHOD))


def normalize_life(partial: Mapping[str, Any] | BaseModel | None) -> LifeConfig:
    """Construit une `LifeConfig` valide; n'échoue jamais (valeurs par défaut sinon)."""
    data = _as_mapping(partial)
    date_of_birth = _pick(data, "date_of_birth", "dateOfBirth")
    time_zone = _pick(data, "time_zone", "timeZone")
    return LifeConfig(
        date_of_birth=date_of_birth if is_iso_date(date_of_birth) else DEFAULT_LIFE_DATE_OF_BIRTH,
        time_zone=time_zone if is_valid_time_zone(time_zone) else DEFAULT_LIFE_TIME_ZONE,
        title=clean_text(data.get("title"), DEFAULT_LIFE_TITLE, TITLE_MAX_LEN),
    )


def normalize_ramadan(partial: Mapping[str, Any] | BaseModel | None) -> RamadanConfig | None:
    """Construit une `RamadanConfig` valide, ou `None` si fuseau/coordonnées inutilisables."""
    data = _as_mapping(partial)
    time_zone = _pick(data, "time_zone", "timeZone")
    latitude = to_number(data.get("latitude"))
    longitude = to_number(data.get("longitude"))

    if (
        not is_valid_time_zone(time_zone)
        or not math.isfinite(latitude)
        or not math.isfinite(longitude)
    ):
        return None

    return RamadanConfig(
        city=clean_text(data.get("city"), DEFAULT_RAMADAN_CITY, PLACE_MAX_LEN),
        country=clean_text(data.get("country"), "", PLACE_MAX_LEN),
        latitude=clamp(latitude, -90.0, 90.0),
        longitude=clamp(longitude, -180.0, 180.0),
        time_zone=time_zone,
        calculation_method=normalize_calculation_method(
            _pick(data, "calculation_method", "calculationMethod")
        ),
        title=clean_text(data.get("title"), DEFAULT_RAMADAN_TITLE, TITLE_MAX_LEN),
        theme=normalize_ramadan_theme(data.get("theme")),
    )


def normalize_config(partial: Mapping[str, Any] | BaseModel | None) -> WallpaperConfig | None:
    """Aiguille selon `mode`; `None` pour un mode inconnu ou une config Ramadan invalide."""
    data = _as_mapping(partial)
    mode = data.get("mode")
    if mode == "life":
        return normalize_life(data)
    if mode == "ramadan":
        return normalize_ramadan(data)
    return None
