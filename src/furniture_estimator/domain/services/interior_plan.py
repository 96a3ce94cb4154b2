"""Interior planning shared by decomposition and layout.

Both the panel decomposer and the layout engine derive their geometry
from an InteriorPlan, so a shelf or drawer front in the drawing sits at
exactly the size the BOM prices it at. All lengths are in the spec's
unit of measure and heights are measured up from the outer bottom edge.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..exceptions import InfeasibleConfigurationError
from ..units import from_mm
from ..value_objects import FurnitureSpec, UnitOfMeasure

logger = logging.getLogger(__name__)

# Construction constants, in millimetres
DRAWER_FRONT_BAND_MM = 200.0
DRAWER_BOX_HEIGHT_MM = 150.0
SLIDE_CLEARANCE_MM = 12.5
DRAWER_REAR_CLEARANCE_MM = 20.0
MIN_DRAWER_DEPTH_MM = 200.0
MIN_SHELF_SPACING_MM = 150.0
MIN_LEAF_WIDTH_MM = 150.0
MIN_LEAF_HEIGHT_MM = 200.0

# Nominal boards used when no rate snapshot is involved (layout)
NOMINAL_CARCASS_THICKNESS_MM = 18.0
NOMINAL_BACK_THICKNESS_MM = 6.0
NOMINAL_DRAWER_BOX_THICKNESS_MM = 12.0


@dataclass(frozen=True)
class BoardThicknesses:
    """Thicknesses, in millimetres, of the boards that shape the interior.

    Decomposition reads them from the rate snapshot. A standalone layout
    has no snapshot and draws with the nominal boards.
    """

    carcass_mm: float = NOMINAL_CARCASS_THICKNESS_MM
    back_mm: float = NOMINAL_BACK_THICKNESS_MM
    drawer_box_mm: float = NOMINAL_DRAWER_BOX_THICKNESS_MM


NOMINAL_BOARDS = BoardThicknesses()


@dataclass(frozen=True)
class LeafSpan:
    """Horizontal extent of one door or shutter leaf."""

    left: float
    width: float


@dataclass(frozen=True)
class InteriorPlan:
    """Resolved positions of every interior feature.

    Attributes:
        height: Outer height.
        width: Outer width.
        depth: Outer depth.
        thickness: Carcass board thickness.
        back_thickness: Back panel thickness.
        drawer_box_thickness: Drawer box board thickness.
        drawer_band: Height of one drawer front.
        drawer_zone: Height occupied by all drawer fronts.
        drawer_bands: (bottom, top) of each drawer front, lowest first.
        shelf_levels: Centre height of each shelf, lowest first.
        shelf_spacing: Centre-to-centre pitch between neighbouring shelves
            (0 with no shelves). The clear gap is this minus one carcass
            thickness.
        leaf_height: Height of each door or shutter leaf.
        leaves: Horizontal span of each leaf, doors first then shutters.
        door_count: How many of ``leaves`` are doors.
    """

    height: float
    width: float
    depth: float
    thickness: float
    back_thickness: float
    drawer_box_thickness: float
    drawer_band: float
    drawer_zone: float
    drawer_bands: tuple[tuple[float, float], ...]
    shelf_levels: tuple[float, ...]
    shelf_spacing: float
    leaf_height: float
    leaves: tuple[LeafSpan, ...]
    door_count: int
    unit: UnitOfMeasure = UnitOfMeasure.MM

    @property
    def interior_width(self) -> float:
        """Width between the two side panels."""
        return self.width - 2 * self.thickness

    @property
    def interior_height(self) -> float:
        """Height between top and bottom panels."""
        return self.height - 2 * self.thickness

    @property
    def shelf_depth(self) -> float:
        """Depth of a shelf sitting in front of the back panel."""
        return self.depth - self.back_thickness

    @property
    def leaf_width(self) -> float:
        return self.leaves[0].width if self.leaves else 0.0

    @property
    def drawer_box_width(self) -> float:
        """Outside width of a drawer box between its slides."""
        return self.interior_width - 2 * from_mm(SLIDE_CLEARANCE_MM, self.unit)

    @property
    def drawer_box_depth(self) -> float:
        """Depth of a drawer box, clear of the back panel."""
        return self.depth - self.back_thickness - from_mm(DRAWER_REAR_CLEARANCE_MM, self.unit)

    @property
    def drawer_box_height(self) -> float:
        return from_mm(DRAWER_BOX_HEIGHT_MM, self.unit)


def _require(condition: bool, message: str, dimension: str, required: float, available: float) -> None:
    if not condition:
        raise InfeasibleConfigurationError(
            message, dimension=dimension, required=required, available=available
        )


def plan_interior(
    spec: FurnitureSpec,
    thickness: float,
    back_thickness: float,
    drawer_box_thickness: float,
) -> InteriorPlan:
    """Place drawers, shelves and leaves inside the carcass.

    Args:
        spec: Furniture specification.
        thickness: Carcass board thickness, in spec units.
        back_thickness: Back board thickness, in spec units.
        drawer_box_thickness: Drawer box board thickness, in spec units.

    Returns:
        The resolved InteriorPlan.

    Raises:
        InfeasibleConfigurationError: If any requested feature cannot fit.
    """
    unit: UnitOfMeasure = spec.unit_of_measure
    dims = spec.dimensions
    config = spec.configuration
    height, width, depth = dims.height, dims.width, dims.depth

    _require(
        width > 2 * thickness,
        f"Width {width:g} leaves no room between two {thickness:g} side panels",
        "width",
        2 * thickness,
        width,
    )
    _require(
        height > 2 * thickness,
        f"Height {height:g} leaves no room between top and bottom panels",
        "height",
        2 * thickness,
        height,
    )
    _require(
        depth > back_thickness,
        f"Depth {depth:g} is not deeper than the {back_thickness:g} back panel",
        "depth",
        back_thickness,
        depth,
    )

    band = from_mm(DRAWER_FRONT_BAND_MM, unit)
    drawer_zone = config.drawers * band
    if config.drawers:
        _require(
            drawer_zone <= height - thickness,
            f"{config.drawers} drawers need {drawer_zone:g} of height, "
            f"only {height - thickness:g} available",
            "height",
            drawer_zone,
            height - thickness,
        )
        box_depth = depth - back_thickness - from_mm(DRAWER_REAR_CLEARANCE_MM, unit)
        min_depth = from_mm(MIN_DRAWER_DEPTH_MM, unit)
        _require(
            box_depth >= min_depth,
            f"Drawer box depth {box_depth:g} is below the minimum {min_depth:g}",
            "depth",
            min_depth,
            box_depth,
        )
        box_width = width - 2 * thickness - 2 * from_mm(SLIDE_CLEARANCE_MM, unit)
        _require(
            box_width > 2 * drawer_box_thickness,
            f"Drawer box width {box_width:g} cannot fit two {drawer_box_thickness:g} sides",
            "width",
            2 * drawer_box_thickness,
            box_width,
        )
    drawer_bands = tuple((i * band, (i + 1) * band) for i in range(config.drawers))

    shelf_levels: tuple[float, ...] = ()
    spacing = 0.0
    if config.shelves:
        region_bottom = drawer_zone if config.drawers else thickness
        region_top = height - thickness
        spacing = (region_top - region_bottom) / (config.shelves + 1)
        min_spacing = from_mm(MIN_SHELF_SPACING_MM, unit)
        _require(
            spacing >= min_spacing,
            f"{config.shelves} shelves would be {spacing:g} apart, "
            f"minimum spacing is {min_spacing:g}",
            "height",
            min_spacing * (config.shelves + 1),
            region_top - region_bottom,
        )
        shelf_levels = tuple(region_bottom + spacing * i for i in range(1, config.shelves + 1))

    leaf_count = config.front_leaves
    leaf_height = height - drawer_zone
    leaves: tuple[LeafSpan, ...] = ()
    if leaf_count:
        leaf_width = width / leaf_count
        min_width = from_mm(MIN_LEAF_WIDTH_MM, unit)
        _require(
            leaf_width >= min_width,
            f"{leaf_count} leaves would each be {leaf_width:g} wide, minimum is {min_width:g}",
            "width",
            min_width * leaf_count,
            width,
        )
        min_height = from_mm(MIN_LEAF_HEIGHT_MM, unit)
        _require(
            leaf_height >= min_height,
            f"Leaves above the drawers would be {leaf_height:g} tall, minimum is {min_height:g}",
            "height",
            min_height + drawer_zone,
            height,
        )
        leaves = tuple(LeafSpan(left=i * leaf_width, width=leaf_width) for i in range(leaf_count))

    logger.debug(
        f"Planned interior for {spec.furniture_type.value}: {len(drawer_bands)} drawers, "
        f"{len(shelf_levels)} shelves, {len(leaves)} leaves"
    )
    return InteriorPlan(
        height=height,
        width=width,
        depth=depth,
        thickness=thickness,
        back_thickness=back_thickness,
        drawer_box_thickness=drawer_box_thickness,
        drawer_band=band,
        drawer_zone=drawer_zone,
        drawer_bands=drawer_bands,
        shelf_levels=shelf_levels,
        shelf_spacing=spacing,
        leaf_height=leaf_height,
        leaves=leaves,
        door_count=config.doors,
        unit=unit,
    )


def plan_with_boards(spec: FurnitureSpec, boards: BoardThicknesses = NOMINAL_BOARDS) -> InteriorPlan:
    """Plan the interior with board thicknesses given in millimetres."""
    unit = spec.unit_of_measure
    return plan_interior(
        spec,
        thickness=from_mm(boards.carcass_mm, unit),
        back_thickness=from_mm(boards.back_mm, unit),
        drawer_box_thickness=from_mm(boards.drawer_box_mm, unit),
    )
