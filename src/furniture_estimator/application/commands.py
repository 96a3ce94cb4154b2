"""Application commands (use cases) for furniture estimation."""

from __future__ import annotations

import logging

from furniture_estimator.domain import (
    BomAggregator,
    EdgeBandingCalculator,
    Finish,
    FurnitureSpec,
    HardwareCalculator,
    LaminateCalculator,
    LayoutEngine,
    PanelDecomposer,
    RateSnapshot,
    SheetEstimator,
)

from .dtos import EstimateOutput

logger = logging.getLogger(__name__)


class EstimateCommand:
    """Command to estimate a furniture piece end to end.

    Runs decomposition, edge banding, hardware and laminate estimation,
    aggregation and optionally layout against a single rate snapshot.
    Any failure propagates as an EstimationError; there is no partial
    result.
    """

    def __init__(
        self,
        decomposer: PanelDecomposer | None = None,
        hardware_calculator: HardwareCalculator | None = None,
        layout_engine: LayoutEngine | None = None,
        sheet_estimator: SheetEstimator | None = None,
    ) -> None:
        self.decomposer = decomposer or PanelDecomposer()
        self.hardware_calculator = hardware_calculator or HardwareCalculator()
        self.layout_engine = layout_engine or LayoutEngine()
        self.sheet_estimator = sheet_estimator or SheetEstimator()

    def execute(
        self,
        spec: FurnitureSpec,
        rates: RateSnapshot | None = None,
        calculation_number: str | None = None,
        include_hardware: bool = True,
        include_layout: bool = False,
    ) -> EstimateOutput:
        """Execute the estimate.

        Args:
            spec: Furniture specification.
            rates: Rate snapshot. Defaults to RateSnapshot.default().
            calculation_number: Caller-assigned identifier carried into the BOM.
            include_hardware: Whether to estimate and price hardware.
            include_layout: Whether to also build the front-view drawing.

        Returns:
            EstimateOutput with the BOM, sheet estimates and optional drawing.
        """
        rates = rates or RateSnapshot.default()
        unit = spec.unit_of_measure

        panels = self.decomposer.decompose(spec, rates)
        panels = EdgeBandingCalculator(unit).band(panels)

        hardware = self.hardware_calculator.calculate(spec, rates) if include_hardware else ()
        consumables = ()
        if spec.finish == Finish.LAMINATE:
            consumables = LaminateCalculator(unit).calculate(panels, rates)

        bom = BomAggregator(unit).aggregate(
            panels,
            rates,
            hardware=hardware,
            consumables=consumables,
            calculation_number=calculation_number,
        )
        drawing = None
        if include_layout:
            drawing = self.layout_engine.layout(
                spec, self.decomposer.board_thicknesses(spec, rates)
            )

        logger.info(
            f"Estimated {spec.furniture_type.value} "
            f"{spec.dimensions.height:g}x{spec.dimensions.width:g}x{spec.dimensions.depth:g} "
            f"{unit.value}: total {bom.total_cost:.2f}"
        )
        return EstimateOutput(
            spec=spec,
            bom=bom,
            drawing=drawing,
            sheet_estimates=self.sheet_estimator.estimate(bom),
        )
