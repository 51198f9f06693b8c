"""
Métriques Prometheus pour l'application.

Ce module définit les métriques Prometheus utilisées pour le monitoring du service de fonds
d'écran: trafic HTTP, rendus par mode/thème, jetons invalides et indisponibilités amont.
"""

import time

from fastapi import APIRouter, Request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

metrics_router = APIRouter()

REQUEST_COUNT = Counter(
    "http_requests_total", "Total HTTP requests", ["method", "route", "status"]
)
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds", "Latency of HTTP requests", ["route"]
)

# Rendering metrics
WALLPAPER_RENDERS = Counter(
    "wallpaper_renders_total",
    "Total wallpapers rendered",
    ["mode", "theme"],
)
WALLPAPER_RENDER_LATENCY = Histogram(
    "wallpaper_render_seconds",
    "Latency of SVG composition and rasterization",
    ["mode"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 4.0],
)
WALLPAPER_INVALID_TOKENS = Counter(
    "wallpaper_invalid_tokens_total",
    "Tokens that could not be decoded into a usable config",
)
RAMADAN_TIMINGS_FAILURES = Counter(
    "ramadan_timings_failures_total",
    "Prayer-time lookups that returned no data",
)
TOKENS_ISSUED = Counter(
    "wallpaper_tokens_issued_total",
    "Tokens issued by the generation endpoint",
    ["mode"],
)


def _route_label(request: Request) -> str:
    """Gabarit de route (ex. `/api/wallpaper/{token}`) pour borner la cardinalité des labels."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


@metrics_router.get("/metrics")
def metrics():
    """
    Expose les métriques Prometheus au format texte.

    Returns:
        Response: Réponse HTTP contenant les métriques au format Prometheus.
    """
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """
    Middleware Prometheus pour mesurer les métriques HTTP.

    Collecte les métriques de comptage des requêtes et de latence par route pour l'exposition
    Prometheus.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Traite une requête HTTP et collecte les métriques.

        Args:
            request: Requête HTTP entrante.
            call_next: Fonction pour appeler le middleware suivant.

        Returns:
            Response: Réponse HTTP avec métriques collectées.
        """
        start = time.perf_counter()
        response: Response = await call_next(request)
        route = _route_label(request)
        REQUEST_COUNT.labels(request.method, route, str(response.status_code)).inc()
        REQUEST_LATENCY.labels(route).observe(time.perf_counter() - start)
        return response
