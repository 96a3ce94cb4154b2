"""Domain layer - core estimation logic."""

from .exceptions import (
    EstimationError,
    InconsistentRateError,
    InfeasibleConfigurationError,
    InvalidSpecError,
    NumericOverflowError,
    UnknownMaterialError,
)
from .rates import BoardAssignment, LaminateRates, RateEntry, RateSnapshot
from .services import (
    BomAggregator,
    EdgeBandingCalculator,
    HardwareCalculator,
    LaminateCalculator,
    LayoutEngine,
    PanelDecomposer,
    SheetEstimate,
    SheetEstimator,
)
from .value_objects import (
    BomResult,
    Configuration,
    CustomPart,
    Dimensions,
    Drawing,
    Finish,
    FurnitureSpec,
    FurnitureType,
    PanelSpec,
    UnitOfMeasure,
)

__all__ = [
    "BoardAssignment",
    "BomAggregator",
    "BomResult",
    "Configuration",
    "CustomPart",
    "Dimensions",
    "Drawing",
    "EdgeBandingCalculator",
    "EstimationError",
    "Finish",
    "FurnitureSpec",
    "FurnitureType",
    "HardwareCalculator",
    "InconsistentRateError",
    "InfeasibleConfigurationError",
    "InvalidSpecError",
    "LaminateCalculator",
    "LaminateRates",
    "LayoutEngine",
    "NumericOverflowError",
    "PanelDecomposer",
    "PanelSpec",
    "RateEntry",
    "RateSnapshot",
    "SheetEstimate",
    "SheetEstimator",
    "UnitOfMeasure",
    "UnknownMaterialError",
]
