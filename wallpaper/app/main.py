"""
Application principale FastAPI.

Ce module assemble tous les composants de l'application : middlewares,
routes, métriques et gestion des erreurs du service de fonds d'écran.

Responsabilités du module:
- Initialiser le logging structuré
- Construire l'application FastAPI avec son titre/debug
- Ajouter les middlewares (request id, timing, Prometheus)
- Monter les routers (santé, jetons, rendu, installation, métriques)
- Installer les gestionnaires d'erreurs à enveloppe standard
"""

from __future__ import annotations

from fastapi import FastAPI

from wallpaper.api.routes_health import router as health_router
from wallpaper.api.routes_setup import router as setup_router
from wallpaper.api.routes_token import router as token_router
from wallpaper.api.routes_wallpaper import router as wallpaper_router
from wallpaper.apigw.errors import install_error_handlers
from wallpaper.app.metrics import PrometheusMiddleware, metrics_router
from wallpaper.core.container import container
from wallpaper.core.logging import setup_logging
from wallpaper.middlewares.request_id import RequestIDMiddleware
from wallpaper.middlewares.timing import TimingMiddleware


def create_app() -> FastAPI:
    """
    Construit et retourne l'application FastAPI prête à l'usage.

    Étapes:
    - Configure le logging structuré (structlog)
    - Lit les paramètres d'exécution
    - Ajoute les middlewares utiles au debug/traçabilité
    - Publie les routes et les gestionnaires d'erreurs
    """
    settings = container.settings
    setup_logging(debug=settings.APP_DEBUG)
    app = FastAPI(title=settings.APP_NAME, debug=settings.APP_DEBUG)
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    install_error_handlers(app)
    app.include_router(health_router)
    app.include_router(token_router)
    app.include_router(wallpaper_router)
    app.include_router(setup_router)
    app.include_router(metrics_router)
    return app


app = create_app()
