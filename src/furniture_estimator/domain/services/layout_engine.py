"""Front-view layout: FurnitureSpec to scaled drawing primitives.

Coordinates are normalized canvas units with the origin at the top-left
and y pointing down. One uniform scale maps real lengths onto the
canvas, so proportions are never distorted.
"""

from __future__ import annotations

import logging

from ..value_objects import (
    Drawing,
    DrawingPrimitive,
    FurnitureSpec,
    PrimitiveKind,
    PrimitiveStyle,
)
from .archetypes import ArchetypeRegistry, archetype_registry
from .interior_plan import NOMINAL_BOARDS, BoardThicknesses, InteriorPlan, plan_with_boards

logger = logging.getLogger(__name__)

DEFAULT_CANVAS_SIZE = 1000.0
DEFAULT_MARGIN = 50.0


class _Canvas:
    """Maps real coordinates (from the outer bottom-left) to the canvas."""

    def __init__(self, plan: InteriorPlan, canvas_size: float, margin: float) -> None:
        self.height = plan.height
        self.scale = (canvas_size - 2 * margin) / max(plan.width, plan.height)
        self.x0 = (canvas_size - plan.width * self.scale) / 2
        self.y0 = (canvas_size - plan.height * self.scale) / 2

    def rect(
        self,
        left: float,
        bottom: float,
        width: float,
        height: float,
        part: str,
        index: int = 1,
        real_length: float | None = None,
        style: PrimitiveStyle = PrimitiveStyle.SOLID,
    ) -> DrawingPrimitive:
        return DrawingPrimitive(
            kind=PrimitiveKind.RECT,
            x=self.x0 + left * self.scale,
            y=self.y0 + (self.height - bottom - height) * self.scale,
            w=width * self.scale,
            h=height * self.scale,
            real_length=real_length,
            part=part,
            index=index,
            style=style,
        )

    def label(self, x: float, y: float, text: str, part: str, index: int = 1) -> DrawingPrimitive:
        """Label at canvas coordinates."""
        return DrawingPrimitive(
            kind=PrimitiveKind.LABEL, x=x, y=y, w=0.0, h=0.0, part=part, index=index, text=text
        )


class LayoutEngine:
    """Builds a front-view schematic consistent with the BOM geometry.

    Args:
        canvas_size: Side of the square canvas.
        margin: Space kept clear on every side of the outline.
    """

    def __init__(
        self,
        canvas_size: float = DEFAULT_CANVAS_SIZE,
        margin: float = DEFAULT_MARGIN,
        registry: ArchetypeRegistry | None = None,
    ) -> None:
        if canvas_size <= 0:
            raise ValueError("Canvas size must be positive")
        if margin < 0 or 2 * margin >= canvas_size:
            raise ValueError("Margin must leave room for the drawing")
        self.canvas_size = canvas_size
        self.margin = margin
        self.registry = registry or archetype_registry

    def layout(self, spec: FurnitureSpec, boards: BoardThicknesses = NOMINAL_BOARDS) -> Drawing:
        """Lay out ``spec`` as an ordered set of primitives.

        Args:
            spec: Furniture specification.
            boards: Board thicknesses to draw with. The nominal boards keep
                a standalone layout independent of any rate table; pass
                PanelDecomposer.board_thicknesses to match a BOM.

        Raises:
            InvalidSpecError: If the archetype does not support the configuration.
            InfeasibleConfigurationError: If the configuration cannot fit.
        """
        self.registry.get(spec.furniture_type).validate(spec)
        plan = plan_with_boards(spec, boards)
        canvas = _Canvas(plan, self.canvas_size, self.margin)

        primitives: list[DrawingPrimitive] = []
        primitives.extend(self._carcass(canvas, plan))
        primitives.extend(self._shelves(canvas, plan))
        primitives.extend(self._drawers(canvas, plan))
        primitives.extend(self._leaves(canvas, plan))
        primitives.extend(self._dimensions(canvas, plan, spec.unit_of_measure.value))

        logger.debug(
            f"Laid out {spec.furniture_type.value} at scale {canvas.scale:.4f}: "
            f"{len(primitives)} primitives"
        )
        return Drawing(
            primitives=tuple(primitives),
            scale=canvas.scale,
            canvas_size=self.canvas_size,
            unit_of_measure=spec.unit_of_measure,
            furniture_type=spec.furniture_type,
            width=plan.width,
            height=plan.height,
            depth=plan.depth,
        )

    def _carcass(self, canvas: _Canvas, plan: InteriorPlan) -> list[DrawingPrimitive]:
        t = plan.thickness
        inner = plan.interior_width
        return [
            canvas.rect(0, 0, plan.width, plan.height, "Outline", real_length=plan.width),
            canvas.rect(0, 0, t, plan.height, "Side Panel", 1, plan.height),
            canvas.rect(plan.width - t, 0, t, plan.height, "Side Panel", 2, plan.height),
            canvas.rect(t, plan.height - t, inner, t, "Top Panel", 1, inner),
            canvas.rect(t, 0, inner, t, "Bottom Panel", 1, inner),
        ]

    def _shelves(self, canvas: _Canvas, plan: InteriorPlan) -> list[DrawingPrimitive]:
        t = plan.thickness
        return [
            canvas.rect(t, level - t / 2, plan.interior_width, t, "Shelf", i, plan.interior_width)
            for i, level in enumerate(plan.shelf_levels, start=1)
        ]

    def _drawers(self, canvas: _Canvas, plan: InteriorPlan) -> list[DrawingPrimitive]:
        primitives = []
        for i, (bottom, top) in enumerate(plan.drawer_bands, start=1):
            front = canvas.rect(0, bottom, plan.width, top - bottom, "Drawer Front", i, plan.width)
            primitives.append(front)
            primitives.append(
                canvas.label(front.x + front.w / 2, front.y + front.h / 2, f"Drawer {i}", "Drawer Front", i)
            )
        return primitives

    def _leaves(self, canvas: _Canvas, plan: InteriorPlan) -> list[DrawingPrimitive]:
        primitives = []
        for i, leaf in enumerate(plan.leaves):
            is_door = i < plan.door_count
            primitives.append(
                canvas.rect(
                    leaf.left,
                    plan.drawer_zone,
                    leaf.width,
                    plan.leaf_height,
                    "Door" if is_door else "Shutter",
                    i + 1 if is_door else i + 1 - plan.door_count,
                    plan.leaf_height,
                    PrimitiveStyle.DASHED,
                )
            )
        return primitives

    def _dimensions(self, canvas: _Canvas, plan: InteriorPlan, unit: str) -> list[DrawingPrimitive]:
        offset = self.margin / 2
        w = plan.width * canvas.scale
        h = plan.height * canvas.scale
        below = canvas.y0 + h + offset
        left = canvas.x0 - offset
        return [
            DrawingPrimitive(
                kind=PrimitiveKind.LINE,
                x=canvas.x0,
                y=below,
                w=w,
                h=0.0,
                real_length=plan.width,
                part="Dimension",
                index=1,
                style=PrimitiveStyle.THIN,
            ),
            canvas.label(canvas.x0 + w / 2, below, f"{plan.width:g} {unit}", "Dimension", 1),
            DrawingPrimitive(
                kind=PrimitiveKind.LINE,
                x=left,
                y=canvas.y0,
                w=0.0,
                h=h,
                real_length=plan.height,
                part="Dimension",
                index=2,
                style=PrimitiveStyle.THIN,
            ),
            canvas.label(left, canvas.y0 + h / 2, f"{plan.height:g} {unit}", "Dimension", 2),
            canvas.label(
                canvas.x0 + w, canvas.y0 - offset, f"Depth: {plan.depth:g} {unit}", "Depth", 1
            ),
        ]
