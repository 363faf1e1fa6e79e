"""
Centralized error handlers for FastAPI.

Maps farming domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.farming.errors import (
    CropNotFoundError,
    FarmingDomainError,
    FarmNotFoundError,
    FertilizerNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(FarmNotFoundError)
    async def handle_farm_not_found(
        _request: Request, exc: FarmNotFoundError
    ) -> JSONResponse:
        """Handle missing farm errors."""
        logger.warning("Farm not found: %s", exc.farm_id)
        return _error_response(HTTP_404, "Farm not found")

    @app.exception_handler(CropNotFoundError)
    async def handle_crop_not_found(
        _request: Request, exc: CropNotFoundError
    ) -> JSONResponse:
        """Handle missing crop errors."""
        logger.warning("Crop not found: %s", exc.crop_id)
        return _error_response(HTTP_404, "Crop not found")

    @app.exception_handler(FertilizerNotFoundError)
    async def handle_fertilizer_not_found(
        _request: Request, exc: FertilizerNotFoundError
    ) -> JSONResponse:
        """Handle missing fertilizer errors."""
        logger.warning("Fertilizer not found: %s", exc.fertilizer_id)
        return _error_response(HTTP_404, "Fertilizer not found")

    @app.exception_handler(FarmingDomainError)
    async def handle_farming_domain(
        _request: Request, exc: FarmingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled farming domain errors."""
        logger.error("Unhandled farming domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
