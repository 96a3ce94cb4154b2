"""Panel decomposition: FurnitureSpec to an ordered list of PanelSpecs."""

from __future__ import annotations

import logging
from dataclasses import replace

from ..rates import RateSnapshot
from ..units import from_mm
from ..value_objects import FurnitureSpec, MaterialCategory, PanelSpec
from .archetypes import (
    ArchetypeRegistry,
    Board,
    DecompositionContext,
    DecompositionRule,
    archetype_registry,
)
from .interior_plan import (
    NOMINAL_DRAWER_BOX_THICKNESS_MM,
    BoardThicknesses,
    plan_with_boards,
)

logger = logging.getLogger(__name__)


def group_pieces(pieces: list[PanelSpec]) -> tuple[PanelSpec, ...]:
    """Merge identical pieces into one PanelSpec each, in first-seen order."""
    grouped: dict[tuple, PanelSpec] = {}
    for piece in pieces:
        key = piece.grouping_key
        existing = grouped.get(key)
        if existing is None:
            grouped[key] = piece
        else:
            grouped[key] = replace(existing, quantity=existing.quantity + piece.quantity)
    return tuple(grouped.values())


class PanelDecomposer:
    """Breaks a furniture piece down into its structural panels.

    The archetype rule is resolved once per call. Board thicknesses come
    from the rate snapshot, so a different snapshot can change panel
    dimensions (interior widths shrink with thicker sides).
    """

    def __init__(self, registry: ArchetypeRegistry | None = None) -> None:
        self.registry = registry or archetype_registry

    def decompose(self, spec: FurnitureSpec, rates: RateSnapshot) -> tuple[PanelSpec, ...]:
        """Decompose ``spec`` into grouped panels.

        Args:
            spec: Furniture specification.
            rates: Rate snapshot supplying the board for each material category.

        Returns:
            Panels in decomposition order: carcass, shelves, drawers,
            doors, shutters, custom parts.

        Raises:
            InvalidSpecError: If the archetype does not support the configuration.
            UnknownMaterialError: If a needed material category is unconfigured.
            InfeasibleConfigurationError: If the configuration cannot fit.
        """
        rule = self.registry.get(spec.furniture_type)
        rule.validate(spec)

        unit = spec.unit_of_measure
        boards: dict[MaterialCategory, Board] = {}
        for category in rule.required_categories(spec):
            assignment = rates.board_for(category)
            boards[category] = Board(
                label=assignment.label,
                thickness=from_mm(assignment.thickness_mm, unit),
            )

        plan = plan_with_boards(spec, self._thicknesses(rule, spec, rates))

        ctx = DecompositionContext(spec=spec, plan=plan, boards=boards)
        panels = group_pieces(list(rule.pieces(ctx)))
        logger.info(
            f"Decomposed {spec.furniture_type.value} into {len(panels)} panel lines "
            f"({sum(p.quantity for p in panels)} pieces)"
        )
        return panels

    def board_thicknesses(self, spec: FurnitureSpec, rates: RateSnapshot) -> BoardThicknesses:
        """Carcass, back and drawer box thicknesses ``spec`` is built from.

        Passing these to LayoutEngine.layout draws the piece at the sizes
        decomposition prices it at.

        Raises:
            InvalidSpecError: If the furniture type has no rule.
            UnknownMaterialError: If a needed material category is unconfigured.
        """
        return self._thicknesses(self.registry.get(spec.furniture_type), spec, rates)

    @staticmethod
    def _thicknesses(
        rule: DecompositionRule, spec: FurnitureSpec, rates: RateSnapshot
    ) -> BoardThicknesses:
        # Pieces without drawers keep the nominal drawer box board
        if MaterialCategory.DRAWER_BOX in rule.required_categories(spec):
            drawer_box_mm = rates.board_for(MaterialCategory.DRAWER_BOX).thickness_mm
        else:
            drawer_box_mm = NOMINAL_DRAWER_BOX_THICKNESS_MM
        return BoardThicknesses(
            carcass_mm=rates.board_for(MaterialCategory.CARCASS).thickness_mm,
            back_mm=rates.board_for(MaterialCategory.BACK).thickness_mm,
            drawer_box_mm=drawer_box_mm,
        )
