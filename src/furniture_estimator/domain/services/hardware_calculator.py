"""Hardware estimation from the furniture configuration."""

from __future__ import annotations

import logging
import math

from ..rates import RateSnapshot
from ..units import to_mm
from ..value_objects import AccessoryLine, FurnitureSpec
from .archetypes import ArchetypeRegistry, archetype_registry

logger = logging.getLogger(__name__)

HARDWARE_CATEGORY = "Hardware"

TALL_LEAF_HINGE_THRESHOLD_MM = 1200.0
STRAIGHTENER_THRESHOLD_MM = 2100.0
HINGES_PER_SHORT_LEAF = 3
HINGES_PER_TALL_LEAF = 4
SLIDES_PER_DRAWER = 2
MINIFIX_PER_JOINT = 3
DOWELS_PER_JOINT = 5


def estimated_joints(shelves: int) -> int:
    """Carcass joints: four corners plus two per shelf."""
    return 4 + 2 * shelves


class HardwareCalculator:
    """Counts hardware from the configuration and prices it from a snapshot.

    Lines with a zero count are left out. Rates are looked up only for
    items that appear, so a snapshot does not need a wall bracket rate
    unless the archetype adds brackets.
    """

    def __init__(self, registry: ArchetypeRegistry | None = None) -> None:
        self.registry = registry or archetype_registry

    def counts(self, spec: FurnitureSpec) -> list[tuple[str, str, int]]:
        """Return (rate key, display name, quantity) for every hardware item."""
        config = spec.configuration
        height_mm = to_mm(spec.dimensions.height, spec.unit_of_measure)
        leaves = config.front_leaves
        joints = estimated_joints(config.shelves)
        hinges_per_leaf = (
            HINGES_PER_SHORT_LEAF
            if height_mm <= TALL_LEAF_HINGE_THRESHOLD_MM
            else HINGES_PER_TALL_LEAF
        )

        items = [
            ("lock", "Lock", leaves),
            ("handle", "Handle", leaves + config.drawers),
            ("hinge", "Hinge", leaves * hinges_per_leaf),
            ("drawer_slide", "Drawer Slide", config.drawers * SLIDES_PER_DRAWER),
            ("minifix", "Minifix", joints * MINIFIX_PER_JOINT),
            ("dowel", "Dowel", joints * DOWELS_PER_JOINT),
            (
                "straightener",
                "Straightener",
                leaves if height_mm > STRAIGHTENER_THRESHOLD_MM else 0,
            ),
        ]
        rule = self.registry.get(spec.furniture_type)
        items.extend((extra.key, extra.name, extra.quantity) for extra in rule.hardware_extras)
        return [item for item in items if item[2] > 0]

    def calculate(self, spec: FurnitureSpec, rates: RateSnapshot) -> tuple[AccessoryLine, ...]:
        """Priced hardware lines for ``spec``.

        Raises:
            UnknownMaterialError: If an item in use has no rate.
        """
        lines = []
        for key, name, quantity in self.counts(spec):
            rate = rates.hardware_rate(key)
            lines.append(
                AccessoryLine(
                    name=name,
                    category=HARDWARE_CATEGORY,
                    quantity=quantity,
                    unit="Nos",
                    unit_rate=rate,
                    total_cost=quantity * rate,
                    description=f"{quantity} x {name}",
                )
            )
        total = math.fsum(line.total_cost for line in lines)
        logger.debug(f"Hardware for {spec.furniture_type.value}: {len(lines)} lines, {total:.2f}")
        return tuple(lines)
