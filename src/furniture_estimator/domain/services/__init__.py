"""Domain services for furniture estimation."""

from .archetypes import (
    ArchetypeRegistry,
    DecompositionContext,
    DecompositionRule,
    HardwareExtra,
    archetype_registry,
)
from .bom_aggregator import BomAggregator
from .edge_banding import EdgeBandingCalculator, banding_class_for
from .hardware_calculator import HardwareCalculator
from .interior_plan import (
    NOMINAL_BOARDS,
    BoardThicknesses,
    InteriorPlan,
    LeafSpan,
    plan_interior,
    plan_with_boards,
)
from .laminate_calculator import LaminateCalculator, LaminateSummary
from .layout_engine import LayoutEngine
from .panel_decomposer import PanelDecomposer, group_pieces
from .sheet_estimator import SheetEstimate, SheetEstimator

__all__ = [
    "ArchetypeRegistry",
    "BoardThicknesses",
    "BomAggregator",
    "DecompositionContext",
    "DecompositionRule",
    "EdgeBandingCalculator",
    "HardwareCalculator",
    "HardwareExtra",
    "InteriorPlan",
    "LaminateCalculator",
    "LaminateSummary",
    "LayoutEngine",
    "LeafSpan",
    "NOMINAL_BOARDS",
    "PanelDecomposer",
    "SheetEstimate",
    "SheetEstimator",
    "archetype_registry",
    "banding_class_for",
    "group_pieces",
    "plan_interior",
    "plan_with_boards",
]
