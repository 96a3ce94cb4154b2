"""Pydantic schemas for the REST API."""

from furniture_estimator.web.schemas.requests import (
    EstimateRequest,
    ExportRequest,
    LayoutRequest,
    SpecValidateRequest,
)
from furniture_estimator.web.schemas.responses import (
    AccessoryLineSchema,
    BomResultSchema,
    ConsolidatedItemSchema,
    DrawingPrimitiveSchema,
    ErrorResponseSchema,
    EstimateResponse,
    ExportFormatsSchema,
    LayoutResponse,
    PanelSpecSchema,
    SheetEstimateSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "EstimateRequest",
    "ExportRequest",
    "LayoutRequest",
    "SpecValidateRequest",
    # Responses
    "AccessoryLineSchema",
    "BomResultSchema",
    "ConsolidatedItemSchema",
    "DrawingPrimitiveSchema",
    "ErrorResponseSchema",
    "EstimateResponse",
    "ExportFormatsSchema",
    "LayoutResponse",
    "PanelSpecSchema",
    "SheetEstimateSchema",
    "ValidationResultSchema",
]
