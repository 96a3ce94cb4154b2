"""Front-view layout endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from furniture_estimator.infrastructure.exporters import SvgRenderer, drawing_to_dict
from furniture_estimator.web.dependencies import LayoutEngineDep
from furniture_estimator.web.routers._common import parse_spec
from furniture_estimator.web.schemas import LayoutRequest, LayoutResponse

router = APIRouter(prefix="/layout", tags=["layout"])


@router.post("", response_model=LayoutResponse)
def layout(request: LayoutRequest, engine: LayoutEngineDep) -> LayoutResponse:
    """Lay out a piece as ordered drawing primitives."""
    spec, _ = parse_spec(request.spec)
    return LayoutResponse.model_validate(drawing_to_dict(engine.layout(spec)))


@router.post("/svg")
def layout_svg(request: LayoutRequest, engine: LayoutEngineDep) -> Response:
    """Render the front-view layout as SVG."""
    spec, _ = parse_spec(request.spec)
    svg = SvgRenderer().render(engine.layout(spec))
    return Response(content=svg, media_type="image/svg+xml")
