"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from furniture_estimator.infrastructure.exporters import ExporterRegistry
from furniture_estimator.web.dependencies import EstimateCommandDep
from furniture_estimator.web.exceptions import UnsupportedFormatError
from furniture_estimator.web.routers._common import parse_rates, parse_spec
from furniture_estimator.web.schemas import ExportFormatsSchema, ExportRequest

router = APIRouter(prefix="/export", tags=["export"])

DRAWING_FORMATS = frozenset({"svg", "dxf"})


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
def export(
    format_name: str,
    request: ExportRequest,
    command: EstimateCommandDep,
) -> Response:
    """Estimate a piece and return it in ``format_name``.

    BOM formats (text, csv, json) return the estimate; drawing formats
    (svg, dxf) return the front-view layout.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    spec, calculation_number = parse_spec(request.spec)
    output = command.execute(
        spec,
        parse_rates(request.rates),
        calculation_number=calculation_number,
        include_hardware=request.include_hardware,
        include_layout=format_name in DRAWING_FORMATS or format_name == "json",
    )
    exporter = ExporterRegistry.get(format_name)()
    filename = f"{spec.furniture_type.value}.{exporter.file_extension}"
    return Response(
        content=exporter.export_string(output),
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
