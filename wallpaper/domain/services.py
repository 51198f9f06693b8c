"""
Services métier: production d'images et émission de jetons.

Responsabilités:
- `WallpaperService.produce_image`: jeton -> configuration -> SVG -> PNG, en interrogeant le
  fournisseur d'horaires pour le mode Ramadan.
- `WallpaperService.issue_token`: corps de requête -> configuration normalisée -> jeton(s) et URLs.

Les erreurs métier sont des exceptions dédiées, converties en enveloppes HTTP par la couche API.
"""

from __future__ import annotations

import math
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import structlog
from starlette.concurrency import run_in_threadpool

from wallpaper.app.metrics import (
    RAMADAN_TIMINGS_FAILURES,
    TOKENS_ISSUED,
    WALLPAPER_INVALID_TOKENS,
    WALLPAPER_RENDER_LATENCY,
    WALLPAPER_RENDERS,
)
from wallpaper.domain.entities import LifeConfig, RamadanConfig, WallpaperConfig
from wallpaper.domain.svg_compositor import render_life, render_ramadan
from wallpaper.domain.token_codec import decode_token, encode_token
from wallpaper.domain.wallpaper_config import (
    DEFAULT_RAMADAN_CITY,
    normalize_life,
    normalize_ramadan,
    normalize_ramadan_theme,
    to_number,
)

log = structlog.get_logger(__name__)

LIFE_FILENAME_PREFIX = "life-calendar"
RAMADAN_FILENAME_PREFIX = "ramadan-calendar"
TOKEN_LOG_PREFIX = 10


class InvalidTokenError(Exception):
    """Jeton illisible ou ne décrivant pas une configuration exploitable."""


class TimingsUnavailableError(Exception):
    """Le fournisseur d'horaires n'a renvoyé aucune donnée pour ce lieu/ce jour."""


class TokenRequestError(ValueError):
    """Corps de requête insuffisant pour construire une configuration."""


class MissingLocationError(TokenRequestError):
    pass


class CityNotFoundError(TokenRequestError):
    pass


class UnsupportedModeError(TokenRequestError):
    pass


@dataclass(frozen=True)
class RenderedWallpaper:
    """Image produite et métadonnées utiles aux en-têtes de réponse."""

    png: bytes
    filename: str
    config: WallpaperConfig


def clamp_dimension(value: Any, fallback: int, low: int, high: int) -> int:
    """Dimension arrondie puis bornée; `fallback` si absente ou non numérique."""
    raw = to_number(value)
    if not math.isfinite(raw):
        return fallback
    return int(min(max(math.floor(raw + 0.5), low), high))


def wallpaper_path(token: str, width: int = 1290, height: int = 2796) -> str:
    return f"/api/wallpaper/{token}?w={width}&h={height}"


def _links(token: str, origin: str) -> dict[str, str]:
    path = wallpaper_path(token)
    return {
        "token": token,
        "wallpaper_url": f"{origin}{path}",
        "wallpaper_path": path,
        "setup_url": f"{origin}/setup/{token}",
    }


class WallpaperService:
    """Orchestration du rendu et de l'émission de jetons.

    Paramètres:
    - timings_client: fournit `lookup_ramadan_timings(...)` (AlAdhan ou factice).
    - rasterizer: fournit `render_png(svg, width)`.
    - geocoder: fournit `lookup_city_coordinates(query)`; requis pour l'émission par nom de ville.
    - default_size / width_bounds / height_bounds: dimensions par défaut et bornes (pixels).
    """

    def __init__(
        self,
        timings_client,
        rasterizer,
        geocoder=None,
        *,
        default_size: tuple[int, int] = (1290, 2796),
        width_bounds: tuple[int, int] = (720, 2200),
        height_bounds: tuple[int, int] = (1280, 4200),
    ):
        self.timings = timings_client
        self.rasterizer = rasterizer
        self.geocoder = geocoder
        self.default_size = default_size
        self.width_bounds = width_bounds
        self.height_bounds = height_bounds

    def resolve_size(self, width: Any, height: Any) -> tuple[int, int]:
        """Applique défauts et bornes aux dimensions brutes (paramètres de requête)."""
        return (
            clamp_dimension(width, self.default_size[0], *self.width_bounds),
            clamp_dimension(height, self.default_size[1], *self.height_bounds),
        )

    async def compose_svg(
        self, config: WallpaperConfig, *, width: int, height: int, now: datetime
    ) -> str:
        """SVG de la configuration; interroge les horaires pour le mode Ramadan."""
        if isinstance(config, LifeConfig):
            return render_life(config, width=width, height=height, now=now)

        timings = await self.timings.lookup_ramadan_timings(
            config.latitude,
            config.longitude,
            config.time_zone,
            config.calculation_method,
            now,
        )
        if timings is None:
            RAMADAN_TIMINGS_FAILURES.inc()
            raise TimingsUnavailableError(config.city)
        return render_ramadan(config, timings, width=width, height=height, now=now)

    async def produce_image(
        self, token: str, width: Any, height: Any, now: datetime
    ) -> RenderedWallpaper:
        """Décode `token` et rend l'image PNG aux dimensions bornées.

        Lève:
        - InvalidTokenError si le jeton est inexploitable.
        - TimingsUnavailableError si les horaires du jour ne peuvent être obtenus.
        """
        config = decode_token(token)
        if config is None:
            WALLPAPER_INVALID_TOKENS.inc()
            log.info("invalid_token", token=token[:TOKEN_LOG_PREFIX])
            raise InvalidTokenError(token[:TOKEN_LOG_PREFIX])

        width_px, height_px = self.resolve_size(width, height)
        theme = config.theme if isinstance(config, RamadanConfig) else "none"
        start = time.perf_counter()
        svg = await self.compose_svg(config, width=width_px, height=height_px, now=now)
        # rendu CairoSVG bloquant: exécuté hors de la boucle d'événements
        png = await run_in_threadpool(self.rasterizer.render_png, svg, width_px)
        elapsed = time.perf_counter() - start

        WALLPAPER_RENDERS.labels(config.mode, theme).inc()
        WALLPAPER_RENDER_LATENCY.labels(config.mode).observe(elapsed)
        log.info(
            "wallpaper_rendered",
            mode=config.mode,
            theme=theme,
            width=width_px,
            height=height_px,
            ms=int(elapsed * 1000),
        )

        prefix = LIFE_FILENAME_PREFIX if config.mode == "life" else RAMADAN_FILENAME_PREFIX
        return RenderedWallpaper(
            png=png, filename=f"{prefix}-{token[:TOKEN_LOG_PREFIX]}.png", config=config
        )

    async def _resolve_ramadan(self, body: Mapping[str, Any]) -> RamadanConfig:
        latitude = to_number(body.get("latitude"))
        longitude = to_number(body.get("longitude"))
        config = None
        if math.isfinite(latitude) and math.isfinite(longitude):
            config = normalize_ramadan(
                {
                    **body,
                    "city": (body.get("city") or "").strip() or DEFAULT_RAMADAN_CITY,
                    "country": (body.get("country") or "").strip(),
                }
            )
        if config is not None:
            return config

        query = (body.get("city") or "").strip()
        if not query:
            raise MissingLocationError("Provide exact latitude/longitude, or enter a city name.")
        if self.geocoder is None:
            raise CityNotFoundError(query)
        city = await self.geocoder.lookup_city_coordinates(query)
        if city is None:
            raise CityNotFoundError(
                "City not found. Try with city and country, for example: Karachi Pakistan."
            )

        config = normalize_ramadan(
            {
                **body,
                "city": city.city,
                "country": city.country,
                "latitude": city.latitude,
                "longitude": city.longitude,
                "time_zone": city.time_zone,
            }
        )
        if config is None:
            raise TokenRequestError("Could not build ramadan config.")
        return config

    async def issue_token(self, body: Mapping[str, Any], origin: str) -> dict[str, Any]:
        """Construit la configuration demandée et renvoie jeton(s) et URLs associées.

        `body` utilise les clés snake_case (`date_of_birth`, `time_zone`, ...). `mode` vaut
        `ramadan` par défaut. Pour le mode Ramadan, un jeton est produit pour chaque thème
        (`variants`); le jeton principal est celui du thème demandé.
        """
        mode = body.get("mode") or "ramadan"

        if mode == "life":
            config = normalize_life(body)
            token = encode_token(config)
            TOKENS_ISSUED.labels("life").inc()
            log.info("token_issued", mode="life", token=token[:TOKEN_LOG_PREFIX])
            return {"mode": "life", "config": config.model_dump(), **_links(token, origin)}

        if mode != "ramadan":
            raise UnsupportedModeError("Unsupported mode.")

        config = await self._resolve_ramadan(body)
        selected = normalize_ramadan_theme(body.get("theme"))
        variants = {}
        for theme in ("classic", "girly"):
            themed = config.model_copy(update={"theme": theme})
            variants[theme] = {"theme": theme, **_links(encode_token(themed), origin)}

        primary = variants[selected]
        TOKENS_ISSUED.labels("ramadan").inc()
        log.info(
            "token_issued",
            mode="ramadan",
            theme=selected,
            city=config.city,
            token=primary["token"][:TOKEN_LOG_PREFIX],
        )
        return {
            "mode": "ramadan",
            "theme": selected,
            "config": config.model_copy(update={"theme": selected}).model_dump(),
            **{key: value for key, value in primary.items() if key != "theme"},
            "variants": variants,
        }
