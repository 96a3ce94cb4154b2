"""Custom exceptions and error handlers for the REST API.

Every error response has the body ``{error, error_type, details}``.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from furniture_estimator.application.config import ConfigError
from furniture_estimator.domain.exceptions import (
    EstimationError,
    InconsistentRateError,
    InfeasibleConfigurationError,
    InvalidSpecError,
    NumericOverflowError,
    UnknownMaterialError,
)

# Checked in order; the first matching class wins
STATUS_CODES: tuple[tuple[type[EstimationError], int], ...] = (
    (InvalidSpecError, 422),
    (InfeasibleConfigurationError, 422),
    (UnknownMaterialError, 400),
    (InconsistentRateError, 409),
    (NumericOverflowError, 422),
)


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def status_code_for(exc: EstimationError) -> int:
    for error_class, status_code in STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return 422


def error_details(exc: EstimationError) -> dict[str, Any] | None:
    """Structured detail for each estimation error kind."""
    if isinstance(exc, InvalidSpecError):
        return {"field": exc.field}
    if isinstance(exc, InfeasibleConfigurationError):
        return {
            "dimension": exc.dimension,
            "required": exc.required,
            "available": exc.available,
        }
    if isinstance(exc, UnknownMaterialError):
        key = exc.key
        return {"key": list(key) if isinstance(key, tuple) else getattr(key, "value", key)}
    if isinstance(exc, InconsistentRateError):
        return {"description": exc.description, "unit": exc.unit, "rates": list(exc.rates)}
    if isinstance(exc, NumericOverflowError):
        return {"quantity": exc.quantity}
    return None


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(EstimationError)
    async def estimation_error_handler(request: Request, exc: EstimationError) -> JSONResponse:
        return JSONResponse(
            status_code=status_code_for(exc),
            content={
                "error": str(exc),
                "error_type": exc.error_type,
                "details": error_details(exc),
            },
        )

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
