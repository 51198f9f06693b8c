"""Définition et chargement des paramètres de configuration applicative.

Objectif du module
------------------
- Centraliser les paramètres (env/.env) via Pydantic Settings
- Résoudre le fichier `.env` à utiliser selon la stratégie: ENV_FILE > .env.{APP_ENV} > .env
"""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Détermination du fichier .env à utiliser avec priorité:
# 1) ENV_FILE (chemin explicite)
# 2) .env.{APP_ENV} si présent
# 3) .env (défaut)
_cwd = Path.cwd()
_env_file_from_env = os.getenv("ENV_FILE")
if _env_file_from_env:
    _ENV_FILE_PATH = _env_file_from_env
else:
    _app_env = os.getenv("APP_ENV", "dev")
    _candidate_specific = _cwd / f".env.{_app_env}"
    _candidate_default = _cwd / ".env"
    if _candidate_specific.exists():
        _ENV_FILE_PATH = _candidate_specific
    else:
        _ENV_FILE_PATH = _candidate_default

_DEFAULT_FONT_DIR = str(Path(__file__).resolve().parent.parent / "infra" / "fonts")


class Settings(BaseSettings):
    """Modèle de configuration chargé depuis l'environnement et .env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_PATH,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
    )
    APP_NAME: str = "lockscreen-wallpaper"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    # Origine publique utilisée pour construire les URLs absolues (sinon en-têtes proxy)
    PUBLIC_BASE_URL: str | None = None

    # Services amont
    ALADHAN_BASE_URL: str = "https://api.aladhan.com/v1"
    GEOCODING_BASE_URL: str = "https://geocoding-api.open-meteo.com/v1"
    HTTP_TIMEOUT_S: float = 10.0
    USER_AGENT: str = "life-calendar-wallpaper/1.0"
    USE_FAKE_TIMINGS: bool = False

    # Rastérisation
    FONT_DIR: str = _DEFAULT_FONT_DIR
    FONTCONFIG_DIR: str = "/tmp/fontconfig"
    DEFAULT_FONT_FAMILY: str = "Noto Sans"
    # Refuse le démarrage si FONT_DIR ne contient aucune police
    REQUIRE_FONTS: bool = True

    # Bornes des dimensions d'image (pixels)
    WALLPAPER_DEFAULT_WIDTH: int = 1290
    WALLPAPER_DEFAULT_HEIGHT: int = 2796
    WALLPAPER_MIN_WIDTH: int = 720
    WALLPAPER_MAX_WIDTH: int = 2200
    WALLPAPER_MIN_HEIGHT: int = 1280
    WALLPAPER_MAX_HEIGHT: int = 4200


def get_settings() -> Settings:
    """Construit et retourne la configuration de l'application."""
    return Settings()
