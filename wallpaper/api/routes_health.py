"""
Endpoint de santé pour vérifier la disponibilité de l'API.

Expose `/health` pour signaler l'état général de l'application et le fournisseur d'horaires actif.
"""

from fastapi import APIRouter

from wallpaper.core.container import container

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    """Vérifie la disponibilité de l'API et le fournisseur d'horaires configuré."""
    return {
        "status": "ok",
        "timings": getattr(container, "timings_backend", "unknown"),
        "env": container.settings.APP_ENV,
        "fonts": len(getattr(container, "font_files", [])),
    }
