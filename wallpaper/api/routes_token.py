"""
Route d'émission de jetons: `POST /api/token`.

Normalise le corps de requête, résout les coordonnées (exactes ou par géocodage de la ville) et
renvoie le jeton ainsi que les URLs de l'image et de la page d'installation.
"""

from fastapi import APIRouter, Request

from wallpaper.api.schemas import TokenRequest, TokenResponse
from wallpaper.core.container import container

router = APIRouter(prefix="/api", tags=["token"])
service = container.build_service()


@router.post("/token", response_model=TokenResponse, response_model_exclude_none=True)
async def create_token(payload: TokenRequest, request: Request):
    """
    Émet un jeton de fond d'écran.

    Paramètres:
    - payload: `TokenRequest` (snake_case ou camelCase); `mode` vaut `ramadan` par défaut.

    Retour: `TokenResponse`; en mode Ramadan, `variants` contient un jeton par thème.
    """
    origin = container.public_origin(request.headers)
    return await service.issue_token(payload.model_dump(), origin)
