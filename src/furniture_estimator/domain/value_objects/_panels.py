"""Panel specifications and their classification enums."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PanelRole(str, Enum):
    """Structural role of a panel within the piece."""

    SIDE = "side"
    TOP = "top"
    BOTTOM = "bottom"
    BACK = "back"
    SHELF = "shelf"
    DRAWER_FRONT = "drawer_front"
    DRAWER_SIDE = "drawer_side"
    DRAWER_BACK = "drawer_back"
    DRAWER_BOTTOM = "drawer_bottom"
    DOOR = "door"
    SHUTTER = "shutter"
    CUSTOM = "custom"


class ItemType(str, Enum):
    """BOM item type shown to the user."""

    PANEL = "Panel"
    SHELF = "Shelf"
    DRAWER_COMPONENT = "Drawer Component"
    DOOR = "Door"
    SHUTTER = "Shutter"
    CUSTOM_PART = "Custom Part"


class ItemCategory(str, Enum):
    """Grouping of BOM items by where they sit in the piece."""

    MAIN_STRUCTURE = "Main Structure"
    INTERNAL = "Internal"
    FRONT = "Front"


class MaterialCategory(str, Enum):
    """Material slot a panel draws its board from.

    The rate snapshot assigns a concrete board (material + thickness)
    to each category.
    """

    CARCASS = "carcass"
    BACK = "back"
    FRONT = "front"
    DRAWER_BOX = "drawer_box"
    DRAWER_BOTTOM = "drawer_bottom"


class Edge(str, Enum):
    """Panel edges. FRONT/BACK run along the length, LEFT/RIGHT along the width."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


ALL_EDGES: frozenset[Edge] = frozenset(Edge)


class BandingClass(str, Enum):
    """Edge banding classes, named by tape thickness."""

    THICK = "2mm"
    THIN = "0.8mm"


class PricingBasis(str, Enum):
    """How a material's unit rate is applied."""

    AREA = "area"
    COUNT = "count"


@dataclass(frozen=True)
class PanelSpec:
    """One structural part of the piece, possibly with quantity > 1.

    Lengths are in the spec's unit of measure. ``area_sqft`` is the total
    area over all ``quantity`` pieces. ``edge_banding_length`` is in
    metres. Pricing fields stay zero until the aggregator fills them in.
    """

    item_type: ItemType
    item_category: ItemCategory
    part_name: str
    role: PanelRole
    material_category: MaterialCategory
    material_type: str
    length: float
    width: float
    thickness: float
    quantity: int = 1
    unit: str = "Nos"
    exposed_edges: frozenset[Edge] = field(default_factory=frozenset)
    edge_banding_type: BandingClass | None = None
    edge_banding_length: float = 0.0
    unit_rate: float = 0.0
    pricing_basis: PricingBasis = PricingBasis.AREA
    edge_banding_cost: float = 0.0
    total_cost: float = 0.0
    area_sqft: float = 0.0
    description: str = ""

    def __post_init__(self) -> None:
        if self.length <= 0 or self.width <= 0 or self.thickness <= 0:
            raise ValueError(
                f"Panel '{self.part_name}' dimensions must be positive "
                f"(got {self.length} x {self.width} x {self.thickness})"
            )
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")
        if self.edge_banding_length < 0:
            raise ValueError("Edge banding length cannot be negative")

    @property
    def exposed_edge_length(self) -> float:
        """Sum of exposed edge lengths for a single piece."""
        total = 0.0
        for edge in self.exposed_edges:
            total += self.length if edge in (Edge.FRONT, Edge.BACK) else self.width
        return total

    @property
    def grouping_key(self) -> tuple:
        """Identity used to merge identical pieces into one line."""
        return (
            self.role,
            self.part_name,
            self.material_category,
            self.material_type,
            round(self.length, 6),
            round(self.width, 6),
            round(self.thickness, 6),
            self.exposed_edges,
        )
