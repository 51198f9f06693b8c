"""
Route de rendu: `GET /api/wallpaper/{token}`.

Le jeton porte toute la configuration; la réponse est une image PNG jamais mise en cache, de sorte
que la même URL produise chaque jour une image à jour.
"""

import math
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import Response

from wallpaper.core.container import container
from wallpaper.core.http_constants import NO_STORE_CACHE_CONTROL, PNG_MEDIA_TYPE
from wallpaper.domain.wallpaper_config import to_number

router = APIRouter(prefix="/api", tags=["wallpaper"])
service = container.build_service()

MIN_RENDER_YEAR = 2
MAX_RENDER_YEAR = 9998


def strip_png_suffix(token: str) -> str:
    return token[:-4] if token.lower().endswith(".png") else token


def _within_render_range(instant: datetime) -> bool:
    """Vrai si l'instant reste localisable dans tout fuseau (années 2 à 9998 en UTC)."""
    try:
        year = instant.astimezone(timezone.utc).year
    except (OverflowError, ValueError):
        return False
    return MIN_RENDER_YEAR <= year <= MAX_RENDER_YEAR


def read_timestamp(value: str | None) -> datetime:
    """Instant de rendu: millisecondes epoch ou horodatage ISO-8601; sinon maintenant (UTC).

    Un horodatage ISO sans fuseau est interprété en UTC. Un instant trop proche des bornes de
    `datetime` pour être converti dans un fuseau quelconque est remplacé par maintenant.
    """
    now = datetime.now(timezone.utc)
    if not value:
        return now
    millis = to_number(value)
    if math.isfinite(millis):
        try:
            parsed = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return now
    else:
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return now
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed if _within_render_range(parsed) else now


@router.get("/wallpaper/{token}")
async def get_wallpaper(
    token: str, w: str | None = None, h: str | None = None, at: str | None = None
):
    """
    Rend le fond d'écran décrit par `token` (suffixe `.png` facultatif).

    Paramètres de requête:
    - w, h: dimensions en pixels, bornées (défaut 1290x2796).
    - at: instant de rendu (epoch ms ou ISO-8601), maintenant par défaut.

    Erreurs: 400 si le jeton est invalide, 502 si les horaires sont indisponibles.
    """
    clean_token = strip_png_suffix(token)
    rendered = await service.produce_image(clean_token, w, h, read_timestamp(at))
    return Response(
        content=rendered.png,
        media_type=PNG_MEDIA_TYPE,
        headers={
            "Cache-Control": NO_STORE_CACHE_CONTROL,
            "Content-Disposition": f'inline; filename="{rendered.filename}"',
        },
    )
