"""Laminate and adhesive estimation for laminate-finished pieces."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from ..rates import RateSnapshot
from ..units import area_sqft
from ..value_objects import AccessoryLine, PanelRole, PanelSpec, UnitOfMeasure

logger = logging.getLogger(__name__)


class LaminateFace(str, Enum):
    OUTER = "outer"
    INNER = "inner"
    NONE = "none"


def faces_for(role: PanelRole, exposed_end: bool) -> tuple[LaminateFace, LaminateFace]:
    """Laminate on the two faces of a panel with ``role``.

    Sides are (interior, room side); the room side is laminated only
    when the side is an exposed end.
    """
    if role in (PanelRole.DOOR, PanelRole.SHUTTER, PanelRole.DRAWER_FRONT):
        return (LaminateFace.OUTER, LaminateFace.OUTER)
    if role == PanelRole.SIDE:
        return (LaminateFace.INNER, LaminateFace.OUTER if exposed_end else LaminateFace.NONE)
    if role in (PanelRole.TOP, PanelRole.BOTTOM, PanelRole.SHELF, PanelRole.CUSTOM):
        return (LaminateFace.INNER, LaminateFace.NONE)
    return (LaminateFace.NONE, LaminateFace.NONE)


@dataclass(frozen=True)
class LaminateSummary:
    """Laminated areas in square feet and the adhesive they need."""

    outer_area_sqft: float
    inner_area_sqft: float
    adhesive_bottles: int


class LaminateCalculator:
    """Estimates outer and inner laminate plus adhesive bottles.

    Args:
        unit: Unit of measure of the panel dimensions.
        exposed_ends: Whether the side panels face the room. A piece
            standing between walls has no exposed ends.
    """

    def __init__(self, unit: UnitOfMeasure = UnitOfMeasure.MM, exposed_ends: bool = True) -> None:
        self.unit = unit
        self.exposed_ends = exposed_ends

    def summarize(self, panels: tuple[PanelSpec, ...], coverage_sqft: float, waste: float) -> LaminateSummary:
        outer = 0.0
        inner = 0.0
        for panel in panels:
            face_area = area_sqft(panel.length, panel.width, self.unit) * panel.quantity
            faces = faces_for(panel.role, self.exposed_ends)
            outer += face_area * faces.count(LaminateFace.OUTER)
            inner += face_area * faces.count(LaminateFace.INNER)
        bottles = math.ceil((outer + inner) * (1 + waste) / coverage_sqft)
        return LaminateSummary(outer_area_sqft=outer, inner_area_sqft=inner, adhesive_bottles=bottles)

    def calculate(self, panels: tuple[PanelSpec, ...], rates: RateSnapshot) -> tuple[AccessoryLine, ...]:
        """Consumable lines for laminating ``panels``.

        Raises:
            UnknownMaterialError: If the snapshot has no laminate rates.
        """
        laminate = rates.require_laminate()
        summary = self.summarize(panels, laminate.adhesive_coverage_sqft, laminate.adhesive_waste)
        lines = []
        if summary.outer_area_sqft > 0:
            lines.append(
                AccessoryLine(
                    name="Outer Laminate",
                    category="Laminate",
                    quantity=summary.outer_area_sqft,
                    unit="Sqft",
                    unit_rate=laminate.outer_rate,
                    total_cost=summary.outer_area_sqft * laminate.outer_rate,
                    description="Outer surface laminate",
                )
            )
        if summary.inner_area_sqft > 0:
            lines.append(
                AccessoryLine(
                    name="Inner Laminate",
                    category="Laminate",
                    quantity=summary.inner_area_sqft,
                    unit="Sqft",
                    unit_rate=laminate.inner_rate,
                    total_cost=summary.inner_area_sqft * laminate.inner_rate,
                    description="Inner surface laminate",
                )
            )
        if summary.adhesive_bottles > 0:
            lines.append(
                AccessoryLine(
                    name="Laminate Adhesive",
                    category="Adhesive",
                    quantity=summary.adhesive_bottles,
                    unit="Bottles",
                    unit_rate=laminate.adhesive_bottle_price,
                    total_cost=summary.adhesive_bottles * laminate.adhesive_bottle_price,
                    description=f"1 bottle per {laminate.adhesive_coverage_sqft:g} sqft",
                )
            )
        logger.debug(
            f"Laminate: {summary.outer_area_sqft:.2f} sqft outer, "
            f"{summary.inner_area_sqft:.2f} sqft inner, {summary.adhesive_bottles} bottles"
        )
        return tuple(lines)
