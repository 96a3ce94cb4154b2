"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from furniture_estimator.domain import (
    BomResult,
    Drawing,
    FurnitureSpec,
    SheetEstimate,
)


@dataclass
class EstimateOutput:
    """Output of one estimation pass.

    Attributes:
        spec: The specification that was estimated.
        bom: Aggregated bill of materials.
        drawing: Front-view schematic, when layout was requested.
        sheet_estimates: Full boards to buy, keyed by thickness.
    """

    spec: FurnitureSpec
    bom: BomResult
    drawing: Drawing | None = None
    sheet_estimates: dict[float, SheetEstimate] = field(default_factory=dict)

    @property
    def total_sheets(self) -> int:
        """Full 8x4 boards across all thicknesses."""
        return sum(e.sheet_count_8x4 for e in self.sheet_estimates.values())
