"""Unit & rate registry.

A RateSnapshot is an immutable rate table passed explicitly into every
estimation pass. A pass reads all of its rates from one snapshot, so
rates changing elsewhere cannot leak into a computation midway.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .exceptions import UnknownMaterialError
from .value_objects import BandingClass, MaterialCategory, PricingBasis

__all__ = [
    "BoardAssignment",
    "LaminateRates",
    "RateEntry",
    "RateSnapshot",
    "material_label",
]

MATERIAL_DISPLAY_NAMES: dict[str, str] = {
    "plywood": "Plywood",
    "mdf": "MDF",
    "hdf": "HDF",
    "particle_board": "Particle Board",
    "pre_lam_particle_board": "Pre-Laminated Particle Board",
    "solid_wood": "Solid Wood",
}


def _thickness_key(thickness_mm: float) -> float:
    return round(float(thickness_mm), 3)


def material_label(material: str, thickness_mm: float) -> str:
    """Human-readable board label, e.g. ``18mm Plywood``."""
    name = MATERIAL_DISPLAY_NAMES.get(material, material.replace("_", " ").title())
    return f"{thickness_mm:g}mm {name}"


@dataclass(frozen=True)
class BoardAssignment:
    """Concrete board used for a material category."""

    material: str
    thickness_mm: float

    def __post_init__(self) -> None:
        if not self.material:
            raise ValueError("Board material must not be empty")
        if self.thickness_mm <= 0:
            raise ValueError("Board thickness must be positive")

    @property
    def label(self) -> str:
        return material_label(self.material, self.thickness_mm)


@dataclass(frozen=True)
class RateEntry:
    """Unit rate and how it applies (per square foot or per piece)."""

    unit_rate: float
    pricing_basis: PricingBasis = PricingBasis.AREA

    def __post_init__(self) -> None:
        if self.unit_rate < 0:
            raise ValueError("Unit rate cannot be negative")

    @property
    def unit(self) -> str:
        """Procurement unit matching the pricing basis."""
        return "Sqft" if self.pricing_basis == PricingBasis.AREA else "Nos"


@dataclass(frozen=True)
class LaminateRates:
    """Rates for laminate finish and its adhesive."""

    outer_rate: float = 85.0
    inner_rate: float = 65.0
    adhesive_bottle_price: float = 85.0
    adhesive_coverage_sqft: float = 32.0
    adhesive_waste: float = 0.10

    def __post_init__(self) -> None:
        if self.adhesive_coverage_sqft <= 0:
            raise ValueError("Adhesive coverage must be positive")
        if self.adhesive_waste < 0:
            raise ValueError("Adhesive waste cannot be negative")


@dataclass(frozen=True)
class RateSnapshot:
    """Immutable view of material assignments and unit rates.

    Attributes:
        materials: Board assigned to each material category.
        boards: Rate per (material, thickness in mm).
        edge_banding: Rate per metre for each banding class.
        hardware: Rate per piece for each hardware item key.
        laminate: Laminate rates, or None when laminate is not priced.
    """

    materials: Mapping[MaterialCategory, BoardAssignment] = field(default_factory=dict)
    boards: Mapping[tuple[str, float], RateEntry] = field(default_factory=dict)
    edge_banding: Mapping[BandingClass, float] = field(default_factory=dict)
    hardware: Mapping[str, float] = field(default_factory=dict)
    laminate: LaminateRates | None = None

    def __post_init__(self) -> None:
        boards = {
            (material, _thickness_key(thickness)): entry
            for (material, thickness), entry in dict(self.boards).items()
        }
        object.__setattr__(self, "materials", MappingProxyType(dict(self.materials)))
        object.__setattr__(self, "boards", MappingProxyType(boards))
        object.__setattr__(self, "edge_banding", MappingProxyType(dict(self.edge_banding)))
        object.__setattr__(self, "hardware", MappingProxyType(dict(self.hardware)))

    def board_for(self, category: MaterialCategory) -> BoardAssignment:
        """Board assigned to ``category``.

        Raises:
            UnknownMaterialError: If the category has no assignment.
        """
        try:
            return self.materials[category]
        except KeyError:
            raise UnknownMaterialError(
                f"No board configured for material category '{category.value}'",
                key=category.value,
            ) from None

    def board_rate(self, material: str, thickness_mm: float) -> RateEntry:
        """Rate for a board material at a thickness tier.

        Raises:
            UnknownMaterialError: If the board has no rate.
        """
        key = (material, _thickness_key(thickness_mm))
        try:
            return self.boards[key]
        except KeyError:
            raise UnknownMaterialError(
                f"No rate configured for board '{material_label(material, thickness_mm)}'",
                key=key,
            ) from None

    def banding_rate(self, banding_class: BandingClass) -> float:
        """Rate per metre for a banding class.

        Raises:
            UnknownMaterialError: If the class has no rate.
        """
        try:
            return self.edge_banding[banding_class]
        except KeyError:
            raise UnknownMaterialError(
                f"No rate configured for {banding_class.value} edge banding",
                key=banding_class.value,
            ) from None

    def hardware_rate(self, item: str) -> float:
        """Rate per piece for a hardware item.

        Raises:
            UnknownMaterialError: If the item has no rate.
        """
        try:
            return self.hardware[item]
        except KeyError:
            raise UnknownMaterialError(
                f"No rate configured for hardware item '{item}'", key=item
            ) from None

    def require_laminate(self) -> LaminateRates:
        """Laminate rates, raising when laminate is not priced."""
        if self.laminate is None:
            raise UnknownMaterialError("No laminate rates configured", key="laminate")
        return self.laminate

    @classmethod
    def default(cls) -> RateSnapshot:
        """Default rates used when the caller supplies no rate table."""
        return cls(
            materials={
                MaterialCategory.CARCASS: BoardAssignment("plywood", 18),
                MaterialCategory.BACK: BoardAssignment("plywood", 6),
                MaterialCategory.FRONT: BoardAssignment("plywood", 18),
                MaterialCategory.DRAWER_BOX: BoardAssignment("plywood", 12),
                MaterialCategory.DRAWER_BOTTOM: BoardAssignment("plywood", 6),
            },
            boards={
                ("plywood", 18): RateEntry(120.0),
                ("plywood", 12): RateEntry(95.0),
                ("plywood", 6): RateEntry(60.0),
                ("mdf", 18): RateEntry(100.0),
                ("mdf", 12): RateEntry(80.0),
                ("mdf", 6): RateEntry(50.0),
                ("hdf", 6): RateEntry(90.0),
                ("pre_lam_particle_board", 18): RateEntry(80.0),
                ("solid_wood", 18): RateEntry(150.0),
            },
            edge_banding={
                BandingClass.THICK: 13.0,
                BandingClass.THIN: 6.5,
            },
            hardware={
                "hinge": 30.0,
                "lock": 80.0,
                "minifix": 10.0,
                "dowel": 2.0,
                "straightener": 150.0,
                "handle": 25.0,
                "drawer_slide": 120.0,
                "wall_bracket": 50.0,
            },
            laminate=LaminateRates(),
        )
