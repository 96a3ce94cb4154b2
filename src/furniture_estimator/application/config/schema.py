"""Pydantic models for furniture spec and rate table files.

Both files use camelCase keys. Snake_case names are accepted as well so
the models can be built directly from Python.
"""

from __future__ import annotations

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from furniture_estimator.domain.value_objects import (
    BandingClass,
    Finish,
    FurnitureType,
    MaterialCategory,
    PricingBasis,
    UnitOfMeasure,
)

_MODEL_CONFIG = ConfigDict(
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
    allow_inf_nan=False,
)


# =============================================================================
# Furniture specification
# =============================================================================


class DimensionsConfig(BaseModel):
    """Outer dimensions in the file's unit of measure."""

    model_config = _MODEL_CONFIG

    height: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    depth: float = Field(..., gt=0)


class CustomPartConfig(BaseModel):
    model_config = _MODEL_CONFIG

    name: str = Field(..., min_length=1)
    quantity: int = Field(default=1, ge=1)


class ConfigurationConfig(BaseModel):
    """Feature counts for the piece.

    Attributes:
        shelves: Number of shelves.
        drawers: Number of drawers, stacked from the bottom.
        doors: Number of door leaves.
        shutters: Number of shutter leaves.
        custom_parts: Extra named parts.
    """

    model_config = _MODEL_CONFIG

    shelves: int = Field(default=0, ge=0)
    drawers: int = Field(default=0, ge=0)
    doors: int = Field(default=0, ge=0)
    shutters: int = Field(default=0, ge=0)
    custom_parts: list[CustomPartConfig] = Field(default_factory=list)


class FurnitureSpecConfig(BaseModel):
    """Root model of a furniture spec file."""

    model_config = _MODEL_CONFIG

    furniture_type: FurnitureType
    dimensions: DimensionsConfig
    configuration: ConfigurationConfig = Field(default_factory=ConfigurationConfig)
    unit_of_measure: UnitOfMeasure = UnitOfMeasure.MM
    finish: Finish = Finish.NONE
    calculation_number: str | None = None


# =============================================================================
# Rate table
# =============================================================================


class BoardConfig(BaseModel):
    """Board assigned to a material category."""

    model_config = _MODEL_CONFIG

    material: str = Field(..., min_length=1)
    thickness: float = Field(..., gt=0, description="Board thickness in millimetres")


class BoardRateConfig(BaseModel):
    """Rate for one board material at one thickness."""

    model_config = _MODEL_CONFIG

    material: str = Field(..., min_length=1)
    thickness: float = Field(..., gt=0, description="Board thickness in millimetres")
    rate: float = Field(..., ge=0)
    basis: PricingBasis = PricingBasis.AREA


class LaminateConfig(BaseModel):
    model_config = _MODEL_CONFIG

    outer_rate: float = Field(default=85.0, ge=0)
    inner_rate: float = Field(default=65.0, ge=0)
    adhesive_bottle_price: float = Field(default=85.0, ge=0)
    adhesive_coverage_sqft: float = Field(default=32.0, gt=0)
    adhesive_waste: float = Field(default=0.10, ge=0)


class RateTableConfig(BaseModel):
    """Root model of a rate table file.

    Attributes:
        materials: Board for each material category.
        boards: Board rates; each (material, thickness) pair at most once.
        edge_banding: Rate per metre keyed by banding class ("2mm", "0.8mm").
        hardware: Rate per piece keyed by hardware item.
        laminate: Laminate rates, needed only for laminate finishes.
    """

    model_config = _MODEL_CONFIG

    materials: dict[MaterialCategory, BoardConfig] = Field(default_factory=dict)
    boards: list[BoardRateConfig] = Field(default_factory=list)
    edge_banding: dict[BandingClass, float] = Field(default_factory=dict)
    hardware: dict[str, float] = Field(default_factory=dict)
    laminate: LaminateConfig | None = None

    @field_validator("edge_banding", "hardware")
    @classmethod
    def validate_non_negative_rates(cls, v: dict) -> dict:
        """Validate that every rate is zero or more."""
        for key, rate in v.items():
            if rate < 0:
                raise ValueError(f"Rate for '{getattr(key, 'value', key)}' cannot be negative")
        return v

    @model_validator(mode="after")
    def validate_unique_boards(self) -> "RateTableConfig":
        """Reject a board listed twice."""
        seen: set[tuple[str, float]] = set()
        for board in self.boards:
            key = (board.material, board.thickness)
            if key in seen:
                raise ValueError(
                    f"Board '{board.material}' at {board.thickness:g}mm is listed more than once"
                )
            seen.add(key)
        return self
