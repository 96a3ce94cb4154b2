"""Edge banding class selection and length calculation."""

from __future__ import annotations

import logging
from dataclasses import replace

from ..units import METRES_PER_UNIT, to_mm
from ..value_objects import BandingClass, PanelSpec, UnitOfMeasure

logger = logging.getLogger(__name__)

THICK_BANDING_MIN_MM = 18.0
THIN_BANDING_MIN_MM = 9.0


def banding_class_for(thickness_mm: float) -> BandingClass | None:
    """Banding class for a board thickness, or None below the thin threshold."""
    # Inch and feet thicknesses round-trip through mm with float noise
    thickness_mm = round(thickness_mm, 6)
    if thickness_mm >= THICK_BANDING_MIN_MM:
        return BandingClass.THICK
    if thickness_mm >= THIN_BANDING_MIN_MM:
        return BandingClass.THIN
    return None


class EdgeBandingCalculator:
    """Fills in banding class and length on each panel.

    Lengths are reported in metres whatever the panel unit. A panel with
    no banding class or no exposed edges keeps length 0.0.
    """

    def __init__(self, unit: UnitOfMeasure = UnitOfMeasure.MM) -> None:
        self.unit = unit

    def band_panel(self, panel: PanelSpec) -> PanelSpec:
        banding = banding_class_for(to_mm(panel.thickness, self.unit))
        if banding is None:
            return replace(panel, edge_banding_type=None, edge_banding_length=0.0)
        metres = panel.exposed_edge_length * panel.quantity * METRES_PER_UNIT[self.unit]
        return replace(panel, edge_banding_type=banding, edge_banding_length=metres)

    def band(self, panels: tuple[PanelSpec, ...] | list[PanelSpec]) -> tuple[PanelSpec, ...]:
        """Return fresh panels with edge banding populated."""
        banded = tuple(self.band_panel(p) for p in panels)
        logger.debug(
            f"Banded {len(banded)} panels: "
            f"{sum(p.edge_banding_length for p in banded):.3f} m total"
        )
        return banded
