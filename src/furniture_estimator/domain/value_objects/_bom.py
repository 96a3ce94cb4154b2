"""Bill of materials result value objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ._panels import BandingClass, PanelSpec


@dataclass(frozen=True)
class AccessoryLine:
    """A priced line that is not a board panel (hardware, laminate, adhesive)."""

    name: str
    category: str
    quantity: float
    unit: str
    unit_rate: float
    total_cost: float
    description: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Accessory quantity cannot be negative")
        if self.unit_rate < 0:
            raise ValueError("Accessory unit rate cannot be negative")


@dataclass(frozen=True)
class ConsolidatedItem:
    """Procurement line grouping every contribution of one material and unit."""

    description: str
    quantity: float
    unit: str
    rate: float
    amount: float


@dataclass(frozen=True)
class BomResult:
    """Aggregate output of one estimation pass.

    Attributes:
        calculation_number: Caller-assigned identifier, never generated here.
        total_board_area: Board area over all panels, in square feet.
        board_area_by_thickness: Square feet keyed by panel thickness
            (spec units), in first-seen order.
        edge_banding_by_class: Banding metres for every banding class.
        total_material_cost: Panels plus consumables.
        total_hardware_cost: Hardware lines.
        total_cost: Material plus hardware.
        items: Panels in decomposition order.
        hardware: Hardware lines.
        consumables: Laminate and adhesive lines.
        consolidated_items: Procurement view grouped by description and unit.
    """

    calculation_number: str | None
    total_board_area: float
    board_area_by_thickness: Mapping[float, float]
    edge_banding_by_class: Mapping[BandingClass, float]
    total_material_cost: float
    total_hardware_cost: float
    total_cost: float
    items: tuple[PanelSpec, ...] = field(default_factory=tuple)
    hardware: tuple[AccessoryLine, ...] = field(default_factory=tuple)
    consumables: tuple[AccessoryLine, ...] = field(default_factory=tuple)
    consolidated_items: tuple[ConsolidatedItem, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "board_area_by_thickness", MappingProxyType(dict(self.board_area_by_thickness))
        )
        object.__setattr__(
            self, "edge_banding_by_class", MappingProxyType(dict(self.edge_banding_by_class))
        )

    def _key(self) -> tuple:
        # Mapping order is part of the value
        return (
            self.calculation_number,
            self.total_board_area,
            tuple(self.board_area_by_thickness.items()),
            tuple(self.edge_banding_by_class.items()),
            self.total_material_cost,
            self.total_hardware_cost,
            self.total_cost,
            self.items,
            self.hardware,
            self.consumables,
            self.consolidated_items,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BomResult):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    @property
    def total_edge_banding_2mm(self) -> float:
        """Metres of 2mm edge banding."""
        return self.edge_banding_by_class.get(BandingClass.THICK, 0.0)

    @property
    def total_edge_banding_0_8mm(self) -> float:
        """Metres of 0.8mm edge banding."""
        return self.edge_banding_by_class.get(BandingClass.THIN, 0.0)

    @property
    def panel_count(self) -> int:
        """Number of physical panels across all items."""
        return sum(item.quantity for item in self.items)
