"""Value objects for the estimation domain.

All classes are immutable and re-exported from the private sub-modules.
"""

from __future__ import annotations

# Engine input
from ._spec import (
    Configuration,
    CustomPart,
    Dimensions,
    Finish,
    FurnitureSpec,
    FurnitureType,
    UnitOfMeasure,
)

# Panels and classification
from ._panels import (
    ALL_EDGES,
    BandingClass,
    Edge,
    ItemCategory,
    ItemType,
    MaterialCategory,
    PanelRole,
    PanelSpec,
    PricingBasis,
)

# Aggregate output
from ._bom import (
    AccessoryLine,
    BomResult,
    ConsolidatedItem,
)

# Front-view drawing
from ._drawing import (
    Drawing,
    DrawingPrimitive,
    PrimitiveKind,
    PrimitiveStyle,
)

__all__ = [
    "ALL_EDGES",
    "AccessoryLine",
    "BandingClass",
    "BomResult",
    "Configuration",
    "ConsolidatedItem",
    "CustomPart",
    "Dimensions",
    "Drawing",
    "DrawingPrimitive",
    "Edge",
    "Finish",
    "FurnitureSpec",
    "FurnitureType",
    "ItemCategory",
    "ItemType",
    "MaterialCategory",
    "PanelRole",
    "PanelSpec",
    "PricingBasis",
    "PrimitiveKind",
    "PrimitiveStyle",
    "UnitOfMeasure",
]
