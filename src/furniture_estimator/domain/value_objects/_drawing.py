"""2D front-view drawing primitives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._spec import FurnitureType, UnitOfMeasure


class PrimitiveKind(str, Enum):
    """Shape kinds a rendering surface must support."""

    RECT = "rect"
    LINE = "line"
    LABEL = "label"


class PrimitiveStyle(str, Enum):
    """Stroke hint for the renderer."""

    SOLID = "solid"
    DASHED = "dashed"
    THIN = "thin"


@dataclass(frozen=True)
class DrawingPrimitive:
    """One renderable shape in normalized canvas coordinates.

    The canvas origin is the top-left corner with y pointing down. A LINE
    runs from (x, y) to (x + w, y + h). A LABEL is anchored at (x, y) and
    has zero size.

    Attributes:
        kind: Shape kind.
        x: Left (or start) coordinate.
        y: Top (or start) coordinate.
        w: Width, or horizontal extent for lines.
        h: Height, or vertical extent for lines.
        real_length: Real-world length this shape represents, in spec units.
        part: Name of the part this shape depicts ("Shelf", "Door", "Dimension"...).
        index: 1-based position of the shape within its part.
        text: Label text, for LABEL primitives.
        style: Stroke hint.
    """

    kind: PrimitiveKind
    x: float
    y: float
    w: float
    h: float
    real_length: float | None = None
    part: str = ""
    index: int = 1
    text: str | None = None
    style: PrimitiveStyle = PrimitiveStyle.SOLID


@dataclass(frozen=True)
class Drawing:
    """Ordered set of primitives plus the scale used to produce them."""

    primitives: tuple[DrawingPrimitive, ...]
    scale: float
    canvas_size: float
    unit_of_measure: UnitOfMeasure
    furniture_type: FurnitureType
    width: float
    height: float
    depth: float

    def by_part(self, part: str, kind: PrimitiveKind | None = None) -> tuple[DrawingPrimitive, ...]:
        """Return primitives for ``part``, optionally filtered by kind."""
        return tuple(
            p for p in self.primitives if p.part == part and (kind is None or p.kind == kind)
        )

    @property
    def outline(self) -> DrawingPrimitive:
        """The outer rectangle of the piece."""
        for primitive in self.primitives:
            if primitive.part == "Outline":
                return primitive
        raise LookupError("Drawing has no outline primitive")
