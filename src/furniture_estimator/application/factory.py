"""Service factory for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from furniture_estimator.application.commands import EstimateCommand
    from furniture_estimator.domain.services import (
        HardwareCalculator,
        LayoutEngine,
        PanelDecomposer,
        SheetEstimator,
    )


@dataclass
class ServiceFactory:
    """Factory for creating service instances.

    Only stateless services are cached, so one factory can serve
    concurrent requests.
    """

    _decomposer: "PanelDecomposer | None" = field(default=None, init=False, repr=False)
    _hardware_calculator: "HardwareCalculator | None" = field(
        default=None, init=False, repr=False
    )
    _layout_engine: "LayoutEngine | None" = field(default=None, init=False, repr=False)
    _sheet_estimator: "SheetEstimator | None" = field(default=None, init=False, repr=False)

    def get_decomposer(self) -> "PanelDecomposer":
        """Get or create panel decomposer instance."""
        if self._decomposer is None:
            from furniture_estimator.domain.services import PanelDecomposer

            self._decomposer = PanelDecomposer()
        return self._decomposer

    def get_hardware_calculator(self) -> "HardwareCalculator":
        """Get or create hardware calculator instance."""
        if self._hardware_calculator is None:
            from furniture_estimator.domain.services import HardwareCalculator

            self._hardware_calculator = HardwareCalculator()
        return self._hardware_calculator

    def get_layout_engine(self) -> "LayoutEngine":
        """Get or create layout engine instance."""
        if self._layout_engine is None:
            from furniture_estimator.domain.services import LayoutEngine

            self._layout_engine = LayoutEngine()
        return self._layout_engine

    def get_sheet_estimator(self) -> "SheetEstimator":
        """Get or create sheet estimator instance."""
        if self._sheet_estimator is None:
            from furniture_estimator.domain.services import SheetEstimator

            self._sheet_estimator = SheetEstimator()
        return self._sheet_estimator

    def create_estimate_command(self) -> "EstimateCommand":
        """Create EstimateCommand with all dependencies."""
        from furniture_estimator.application.commands import EstimateCommand

        return EstimateCommand(
            decomposer=self.get_decomposer(),
            hardware_calculator=self.get_hardware_calculator(),
            layout_engine=self.get_layout_engine(),
            sheet_estimator=self.get_sheet_estimator(),
        )


# Default factory instance
_default_factory: ServiceFactory | None = None


def get_factory() -> ServiceFactory:
    """Get the default service factory."""
    global _default_factory
    if _default_factory is None:
        _default_factory = ServiceFactory()
    return _default_factory


def set_factory(factory: ServiceFactory | None) -> None:
    """Set a custom factory (for testing)."""
    global _default_factory
    _default_factory = factory


def reset_factory() -> None:
    """Reset the factory to default (for testing cleanup)."""
    global _default_factory
    _default_factory = None
