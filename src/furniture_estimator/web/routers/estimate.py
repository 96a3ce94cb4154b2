"""Estimation endpoints."""

from fastapi import APIRouter

from furniture_estimator.infrastructure.exporters import bom_to_dict, drawing_to_list
from furniture_estimator.web.dependencies import EstimateCommandDep
from furniture_estimator.web.routers._common import parse_rates, parse_spec
from furniture_estimator.web.schemas import (
    ErrorResponseSchema,
    EstimateRequest,
    EstimateResponse,
    SheetEstimateSchema,
)

router = APIRouter(prefix="/estimate", tags=["estimate"])


@router.post(
    "",
    response_model=EstimateResponse,
    responses={
        400: {"model": ErrorResponseSchema},
        409: {"model": ErrorResponseSchema},
        422: {"model": ErrorResponseSchema},
    },
)
def estimate(request: EstimateRequest, command: EstimateCommandDep) -> EstimateResponse:
    """Estimate the bill of materials and cost of a piece.

    Estimation errors are mapped to status codes by the registered
    exception handlers.
    """
    spec, calculation_number = parse_spec(request.spec)
    output = command.execute(
        spec,
        parse_rates(request.rates),
        calculation_number=calculation_number,
        include_hardware=request.include_hardware,
        include_layout=request.include_layout,
    )
    return EstimateResponse(
        bom=bom_to_dict(output.bom),
        sheet_estimates=[
            SheetEstimateSchema(
                thickness=e.thickness,
                total_area_sqft=e.total_area_sqft,
                sheet_count_8x4=e.sheet_count_8x4,
                waste_percentage=e.waste_percentage,
                description=e.description,
            )
            for e in output.sheet_estimates.values()
        ],
        total_sheets=output.total_sheets,
        layout=drawing_to_list(output.drawing) if output.drawing is not None else None,
    )
