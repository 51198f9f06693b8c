"""Page d'installation iOS pour un jeton: `GET /setup/{token}` (JSON)."""

from fastapi import APIRouter, Request

from wallpaper.api.schemas import SetupResponse
from wallpaper.apigw.errors import APIError, ErrorCodes
from wallpaper.core.container import container
from wallpaper.core.http_constants import HTTP_NOT_FOUND
from wallpaper.domain.services import wallpaper_path
from wallpaper.domain.setup_guide import build_setup_guide
from wallpaper.domain.token_codec import decode_token

router = APIRouter(tags=["setup"])


@router.get("/setup/{token}", response_model=SetupResponse)
def get_setup(token: str, request: Request):
    """Instructions Raccourci/Automatisation et résumé de la configuration; 404 si jeton invalide."""
    config = decode_token(token)
    if config is None:
        raise APIError(HTTP_NOT_FOUND, ErrorCodes.NOT_FOUND, "Setup page not found")
    origin = container.public_origin(request.headers)
    return build_setup_guide(config, f"{origin}{wallpaper_path(token)}")
