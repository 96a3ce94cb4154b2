"""Sheet count estimation service."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..value_objects import BomResult

__all__ = ["SheetEstimate", "SheetEstimator"]


@dataclass
class SheetEstimate:
    """Estimate of full boards needed for one thickness."""

    thickness: float
    total_area_sqft: float
    sheet_count_8x4: int
    waste_percentage: float

    @property
    def description(self) -> str:
        """Human-readable description of board needs."""
        return (
            f"{self.total_area_sqft:.1f} sq ft at {self.thickness:g} thick "
            f"({self.sheet_count_8x4} sheets of 8x4, "
            f"assuming {self.waste_percentage:.0%} waste)"
        )


class SheetEstimator:
    """Estimates full 8x4 ft boards to buy for a bill of materials."""

    SHEET_8X4_SQFT = 8 * 4  # 32 sq ft

    def __init__(self, waste_factor: float = 0.15) -> None:
        """Initialize with waste factor (default 15%)."""
        if waste_factor < 0:
            raise ValueError("Waste factor cannot be negative")
        self.waste_factor = waste_factor

    def _sheets(self, area_sqft: float) -> int:
        return math.ceil(area_sqft * (1 + self.waste_factor) / self.SHEET_8X4_SQFT)

    def estimate(self, bom: BomResult) -> dict[float, SheetEstimate]:
        """Estimate sheets per thickness bucket, in the BOM's bucket order."""
        return {
            thickness: SheetEstimate(
                thickness=thickness,
                total_area_sqft=area,
                sheet_count_8x4=self._sheets(area),
                waste_percentage=self.waste_factor,
            )
            for thickness, area in bom.board_area_by_thickness.items()
        }

    def estimate_total(self, bom: BomResult) -> int:
        """Sheets needed across all thicknesses."""
        return sum(e.sheet_count_8x4 for e in self.estimate(bom).values())
