"""Middleware Starlette pour attribuer et propager un identifiant de requête.

L'identifiant (reçu du client ou généré) est exposé dans `request.state.request_id`, lié au contexte
structlog pour la durée de la requête et renvoyé dans l'en-tête `X-Request-ID`.
"""

from collections.abc import Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attribue un identifiant unique à chaque requête HTTP."""

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID") -> None:
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request, call_next: Callable):
        """Lit ou génère l'identifiant, puis l'ajoute à la réponse."""
        request_id = request.headers.get(self.header_name) or str(uuid4())
        request.state.request_id = request_id
        with structlog.contextvars.bound_contextvars(request_id=request_id):
            response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response
