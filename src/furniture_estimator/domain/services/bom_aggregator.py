"""BOM aggregation: prices panels and rolls everything up into a BomResult."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Iterable

from ..exceptions import InconsistentRateError
from ..rates import RateSnapshot
from ..units import area_sqft, ensure_finite
from ..value_objects import (
    AccessoryLine,
    BandingClass,
    BomResult,
    ConsolidatedItem,
    PanelSpec,
    PricingBasis,
    UnitOfMeasure,
)

logger = logging.getLogger(__name__)


@dataclass
class _ConsolidationGroup:
    description: str
    unit: str
    rate: float
    quantity: float = 0.0
    amount: float = 0.0


class _Consolidator:
    """Groups contributions by (description, unit), keeping first-seen order."""

    def __init__(self) -> None:
        self._groups: dict[tuple[str, str], _ConsolidationGroup] = {}

    def add(self, description: str, unit: str, quantity: float, rate: float, amount: float) -> None:
        key = (description, unit)
        group = self._groups.get(key)
        if group is None:
            group = self._groups[key] = _ConsolidationGroup(description, unit, rate)
        elif rate != group.rate:
            raise InconsistentRateError(description, unit, (group.rate, rate))
        group.quantity += quantity
        group.amount += amount

    def items(self) -> tuple[ConsolidatedItem, ...]:
        return tuple(
            ConsolidatedItem(
                description=g.description,
                quantity=g.quantity,
                unit=g.unit,
                rate=g.rate,
                amount=g.amount,
            )
            for g in self._groups.values()
        )


def _board_cost(rate: float, basis: PricingBasis, total_area: float, quantity: int) -> float:
    if basis == PricingBasis.AREA:
        return rate * total_area
    return rate * quantity


def banding_description(banding: BandingClass) -> str:
    return f"{banding.value} Edge Banding"


class BomAggregator:
    """Rolls panels, hardware and consumables into a BomResult.

    Aggregation is deterministic: the same inputs give the same output
    order and the same totals, with no generated ids or timestamps.
    """

    def __init__(self, unit: UnitOfMeasure = UnitOfMeasure.MM) -> None:
        self.unit = unit

    def price_panel(self, panel: PanelSpec, rates: RateSnapshot) -> PanelSpec:
        """Return ``panel`` with rate, area and cost fields filled in.

        Raises:
            UnknownMaterialError: If the board or its banding class has no rate.
            NumericOverflowError: If a derived value is not finite.
        """
        assignment = rates.board_for(panel.material_category)
        entry = rates.board_rate(assignment.material, assignment.thickness_mm)
        total_area = ensure_finite(
            f"{panel.part_name}.area_sqft",
            area_sqft(panel.length, panel.width, self.unit) * panel.quantity,
        )
        board_cost = _board_cost(entry.unit_rate, entry.pricing_basis, total_area, panel.quantity)

        banding_cost = 0.0
        if panel.edge_banding_type is not None and panel.edge_banding_length > 0:
            banding_cost = panel.edge_banding_length * rates.banding_rate(panel.edge_banding_type)

        total = ensure_finite(f"{panel.part_name}.total_cost", board_cost + banding_cost)
        return replace(
            panel,
            unit_rate=entry.unit_rate,
            pricing_basis=entry.pricing_basis,
            area_sqft=total_area,
            edge_banding_cost=banding_cost,
            total_cost=total,
        )

    def aggregate(
        self,
        panels: Iterable[PanelSpec],
        rates: RateSnapshot,
        hardware: Iterable[AccessoryLine] = (),
        consumables: Iterable[AccessoryLine] = (),
        calculation_number: str | None = None,
    ) -> BomResult:
        """Price and total a set of banded panels.

        Args:
            panels: Panels with edge banding already populated.
            rates: Rate snapshot used for every lookup in this pass.
            hardware: Priced hardware lines.
            consumables: Priced consumable lines (laminate, adhesive).
            calculation_number: Caller-assigned identifier.

        Returns:
            The aggregated BomResult.

        Raises:
            UnknownMaterialError: If a rate lookup fails.
            InconsistentRateError: If one consolidated line sees two rates.
            NumericOverflowError: If any total is not finite.
        """
        hardware = tuple(hardware)
        consumables = tuple(consumables)
        consolidator = _Consolidator()
        by_thickness: dict[float, float] = {}
        banding_totals: dict[BandingClass, float] = {cls: 0.0 for cls in BandingClass}
        items: list[PanelSpec] = []

        for panel in panels:
            priced = self.price_panel(panel, rates)
            items.append(priced)

            thickness_key = round(priced.thickness, 6)
            by_thickness[thickness_key] = by_thickness.get(thickness_key, 0.0) + priced.area_sqft

            board_cost = _board_cost(
                priced.unit_rate, priced.pricing_basis, priced.area_sqft, priced.quantity
            )
            if priced.pricing_basis == PricingBasis.AREA:
                consolidator.add(priced.material_type, "Sqft", priced.area_sqft, priced.unit_rate, board_cost)
            else:
                consolidator.add(priced.material_type, "Nos", priced.quantity, priced.unit_rate, board_cost)

            if priced.edge_banding_type is not None and priced.edge_banding_length > 0:
                banding_totals[priced.edge_banding_type] += priced.edge_banding_length
                consolidator.add(
                    banding_description(priced.edge_banding_type),
                    "Mtr",
                    priced.edge_banding_length,
                    rates.banding_rate(priced.edge_banding_type),
                    priced.edge_banding_cost,
                )

        for line in (*hardware, *consumables):
            consolidator.add(line.name, line.unit, line.quantity, line.unit_rate, line.total_cost)

        total_board_area = ensure_finite("total_board_area", math.fsum(p.area_sqft for p in items))
        material_cost = ensure_finite(
            "total_material_cost",
            math.fsum(p.total_cost for p in items) + math.fsum(c.total_cost for c in consumables),
        )
        hardware_cost = ensure_finite(
            "total_hardware_cost", math.fsum(h.total_cost for h in hardware)
        )
        total_cost = ensure_finite("total_cost", material_cost + hardware_cost)

        result = BomResult(
            calculation_number=calculation_number,
            total_board_area=total_board_area,
            board_area_by_thickness=by_thickness,
            edge_banding_by_class=banding_totals,
            total_material_cost=material_cost,
            total_hardware_cost=hardware_cost,
            total_cost=total_cost,
            items=tuple(items),
            hardware=hardware,
            consumables=consumables,
            consolidated_items=consolidator.items(),
        )
        logger.info(
            f"Aggregated {len(items)} panel lines: {total_board_area:.2f} sqft, "
            f"total cost {total_cost:.2f}"
        )
        return result
