"""Gestion standardisée des erreurs API avec enveloppes d'erreur.

Ce module fournit une gestion centralisée des erreurs avec des enveloppes standardisées, des codes
d'erreur cohérents et un support pour le tracing des requêtes. Les exceptions métier du service
de fonds d'écran y sont traduites en réponses HTTP.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wallpaper.core.http_constants import (
    HTTP_BAD_GATEWAY,
    HTTP_BAD_REQUEST,
    HTTP_INTERNAL_SERVER_ERROR,
    HTTP_NOT_FOUND,
)
from wallpaper.domain.services import (
    CityNotFoundError,
    InvalidTokenError,
    TimingsUnavailableError,
    TokenRequestError,
    UnsupportedModeError,
)

log = structlog.get_logger(__name__)


@dataclass
class ErrorEnvelope:
    """Standard error envelope for API responses."""

    code: str
    message: str
    trace_id: str | None = None
    details: dict[str, Any] | None = None


class ErrorCodes:
    """Standard error codes for the API."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    INVALID_TOKEN = "INVALID_TOKEN"
    TIMINGS_UNAVAILABLE = "TIMINGS_UNAVAILABLE"
    CITY_NOT_FOUND = "CITY_NOT_FOUND"
    UNSUPPORTED_MODE = "UNSUPPORTED_MODE"


class APIError(HTTPException):
    """Custom API error with standard envelope."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        trace_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=message)
        self.code = code
        self.message = message
        self.trace_id = trace_id
        self.details = details


def create_error_response(
    status_code: int,
    code: str,
    message: str,
    trace_id: str | None = None,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    envelope = ErrorEnvelope(code=code, message=message, trace_id=trace_id, details=details)
    return JSONResponse(
        status_code=status_code,
        content={
            "code": envelope.code,
            "message": envelope.message,
            "trace_id": envelope.trace_id,
            **({"details": envelope.details} if envelope.details else {}),
        },
    )


def extract_trace_id(request: Request) -> str | None:
    """Identifiant de trace: en-tête `X-Trace-ID`, sinon `X-Request-ID`, sinon état de requête."""
    trace_id = request.headers.get("X-Trace-ID") or request.headers.get("X-Request-ID")
    if trace_id:
        return trace_id
    return getattr(request.state, "request_id", None)


def to_api_error(exc: Exception) -> APIError:
    """Traduit une exception métier en `APIError` (statut, code, message public)."""
    if isinstance(exc, InvalidTokenError):
        return APIError(HTTP_BAD_REQUEST, ErrorCodes.INVALID_TOKEN, "Invalid token")
    if isinstance(exc, TimingsUnavailableError):
        return APIError(
            HTTP_BAD_GATEWAY,
            ErrorCodes.TIMINGS_UNAVAILABLE,
            "Could not fetch ramadan timings for this city.",
        )
    if isinstance(exc, CityNotFoundError):
        return APIError(HTTP_NOT_FOUND, ErrorCodes.CITY_NOT_FOUND, str(exc))
    if isinstance(exc, UnsupportedModeError):
        return APIError(HTTP_BAD_REQUEST, ErrorCodes.UNSUPPORTED_MODE, str(exc))
    if isinstance(exc, TokenRequestError):
        return APIError(HTTP_BAD_REQUEST, ErrorCodes.BAD_REQUEST, str(exc))
    return APIError(
        HTTP_INTERNAL_SERVER_ERROR, ErrorCodes.INTERNAL_ERROR, "An unexpected error occurred"
    )


def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions with standard envelope."""
    trace_id = extract_trace_id(request) or exc.trace_id
    log.warning(
        "api_error",
        code=exc.code,
        status_code=exc.status_code,
        error_message=exc.message,
        path=request.url.path,
        trace_id=trace_id,
    )
    return create_error_response(
        status_code=exc.status_code,
        code=exc.code,
        message=exc.message,
        trace_id=trace_id,
        details=exc.details,
    )


def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle business exceptions raised by the wallpaper service."""
    return handle_api_error(request, to_api_error(exc))


def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle FastAPI HTTPException with standard envelope."""
    error_codes = {
        400: ErrorCodes.BAD_REQUEST,
        404: ErrorCodes.NOT_FOUND,
        422: ErrorCodes.VALIDATION_ERROR,
        500: ErrorCodes.INTERNAL_ERROR,
    }
    code = error_codes.get(exc.status_code, "HTTP_ERROR")
    return create_error_response(
        status_code=exc.status_code,
        code=code,
        message=str(exc.detail),
        trace_id=extract_trace_id(request),
    )


def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps JSON illisible ou mal typé: 400 plutôt que le 422 par défaut."""
    return create_error_response(
        status_code=HTTP_BAD_REQUEST,
        code=ErrorCodes.BAD_REQUEST,
        message="Invalid JSON body.",
        trace_id=extract_trace_id(request),
        details={"errors": [err.get("msg", "") for err in exc.errors()]},
    )


def install_error_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires d'exceptions sur l'application."""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(InvalidTokenError, handle_domain_error)
    app.add_exception_handler(TimingsUnavailableError, handle_domain_error)
    app.add_exception_handler(TokenRequestError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
