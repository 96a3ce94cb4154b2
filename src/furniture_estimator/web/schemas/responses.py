"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RESPONSE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SheetEstimateSchema(BaseModel):
    """Full boards needed for one thickness."""

    model_config = _RESPONSE_CONFIG

    thickness: float = Field(..., description="Board thickness in spec units")
    total_area_sqft: float = Field(..., description="Board area in square feet")
    sheet_count_8x4: int = Field(..., alias="sheetCount8x4", description="8x4 ft sheets to buy")
    waste_percentage: float = Field(..., description="Waste allowance applied")
    description: str = Field(..., description="Human-readable summary")


class PanelSpecSchema(BaseModel):
    """One BOM line: a panel, possibly grouped with identical pieces."""

    model_config = _RESPONSE_CONFIG

    item_type: str = Field(..., description="BOM item type, e.g. Panel or Shelf")
    item_category: str = Field(..., description="Grouping category such as carcass or fronts")
    part_name: str = Field(..., description="Part name, e.g. Side Panel")
    role: str = Field(..., description="Structural role of the part")
    material_category: str = Field(..., description="Rate category the board is priced from")
    material_type: str = Field(..., description="Board label, e.g. 18mm Plywood")
    length: float = Field(..., description="Length in spec units")
    width: float = Field(..., description="Width in spec units")
    thickness: float = Field(..., description="Thickness in spec units")
    quantity: int = Field(..., description="Number of identical pieces")
    unit: str = Field(..., description="Unit of measure of the dimensions")
    exposed_edges: list[str] = Field(default_factory=list, description="Edges that take banding")
    edge_banding_type: str | None = Field(default=None, description="2mm or 0.8mm, if banded")
    edge_banding_length: float = Field(..., description="Banding in metres across all pieces")
    unit_rate: float = Field(..., description="Board rate")
    pricing_basis: str = Field(..., description="area or count")
    edge_banding_cost: float
    total_cost: float
    area_sqft: float = Field(..., description="Board area in square feet across all pieces")
    description: str


class ConsolidatedItemSchema(BaseModel):
    """Procurement line: one board or banding roll to buy."""

    model_config = _RESPONSE_CONFIG

    description: str
    quantity: float
    unit: str
    rate: float
    amount: float


class AccessoryLineSchema(BaseModel):
    """Hardware or consumable line."""

    model_config = _RESPONSE_CONFIG

    name: str
    category: str
    quantity: float
    unit: str
    unit_rate: float
    total_cost: float
    description: str


class BomResultSchema(BaseModel):
    """Bill of materials with totals."""

    model_config = _RESPONSE_CONFIG

    calculation_number: str
    total_board_area: float = Field(..., description="Board area in square feet")
    board_area_by_thickness: dict[str, float] = Field(
        default_factory=dict, description="Square feet keyed by thickness in mm"
    )
    total_edge_banding_2mm: float = Field(
        ..., alias="totalEdgeBanding2mm", description="2mm banding in metres"
    )
    total_edge_banding_0_8mm: float = Field(
        ..., alias="totalEdgeBanding0_8mm", description="0.8mm banding in metres"
    )
    total_material_cost: float
    total_hardware_cost: float
    total_cost: float
    items: list[PanelSpecSchema] = Field(default_factory=list)
    consolidated_items: list[ConsolidatedItemSchema] = Field(default_factory=list)
    hardware: list[AccessoryLineSchema] = Field(default_factory=list)
    consumables: list[AccessoryLineSchema] = Field(default_factory=list)


class DrawingPrimitiveSchema(BaseModel):
    """One rect, line or label of the front-view schematic."""

    model_config = _RESPONSE_CONFIG

    kind: str = Field(..., description="rect, line or label")
    x: float
    y: float
    w: float
    h: float
    real_length: float | None = Field(
        default=None, description="Length of the matching BOM part, for part rects"
    )
    part: str
    index: int
    text: str | None = Field(default=None, description="Label text")
    style: str = Field(..., description="solid, dashed or thin")


class EstimateResponse(BaseModel):
    """Response for an estimate."""

    model_config = _RESPONSE_CONFIG

    bom: BomResultSchema = Field(..., description="Bill of materials")
    sheet_estimates: list[SheetEstimateSchema] = Field(default_factory=list)
    total_sheets: int = Field(default=0, description="8x4 sheets across all thicknesses")
    layout: list[DrawingPrimitiveSchema] | None = Field(
        default=None, description="Layout primitives, when requested"
    )


class LayoutResponse(BaseModel):
    """Response for the front-view layout."""

    model_config = _RESPONSE_CONFIG

    furniture_type: str
    unit_of_measure: str
    width: float
    height: float
    depth: float
    scale: float = Field(..., description="Canvas units per spec unit")
    canvas_size: float
    primitives: list[DrawingPrimitiveSchema] = Field(default_factory=list)


class ExportFormatsSchema(BaseModel):
    """Response listing export formats."""

    formats: list[str] = Field(..., description="Available export format names")


class ValidationResultSchema(BaseModel):
    """Response for spec validation."""

    model_config = _RESPONSE_CONFIG

    is_valid: bool = Field(..., description="Whether the spec can be estimated")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Body of every error response."""

    error: str
    error_type: str
    details: Any = None
