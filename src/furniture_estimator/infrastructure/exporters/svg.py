"""SVG rendering of the front-view schematic."""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from furniture_estimator.domain.value_objects import (
    Drawing,
    DrawingPrimitive,
    PrimitiveKind,
    PrimitiveStyle,
)
from furniture_estimator.infrastructure.exporters.base import ExporterRegistry, require_drawing

if TYPE_CHECKING:
    from furniture_estimator.application.dtos import EstimateOutput


logger = logging.getLogger(__name__)

PART_COLORS: dict[str, str] = {
    "Outline": "none",
    "Side Panel": "#D2B48C",
    "Top Panel": "#D2B48C",
    "Bottom Panel": "#D2B48C",
    "Shelf": "#DEB887",
    "Drawer Front": "#F5DEB3",
    "Door": "none",
    "Shutter": "none",
}

STROKE_WIDTHS: dict[PrimitiveStyle, float] = {
    PrimitiveStyle.SOLID: 2.0,
    PrimitiveStyle.DASHED: 1.5,
    PrimitiveStyle.THIN: 1.0,
}


class SvgRenderer:
    """Renders a Drawing as a standalone SVG document.

    Args:
        show_labels: Whether to render LABEL primitives.
        font_size: Label font size in canvas units.
    """

    def __init__(self, show_labels: bool = True, font_size: float = 14.0) -> None:
        self.show_labels = show_labels
        self.font_size = font_size

    def render(self, drawing: Drawing) -> str:
        size = drawing.canvas_size
        title = (
            f"{drawing.furniture_type.value} {drawing.height:g} x {drawing.width:g} x "
            f"{drawing.depth:g} {drawing.unit_of_measure.value}"
        )
        svg_parts = [
            f'<svg width="{size:g}" height="{size:g}" viewBox="0 0 {size:g} {size:g}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f"  <title>{escape(title)}</title>",
            f'  <rect x="0" y="0" width="{size:g}" height="{size:g}" fill="#FFFFFF"/>',
        ]
        for primitive in drawing.primitives:
            element = self._render_primitive(primitive)
            if element:
                svg_parts.append(element)
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    def _stroke(self, style: PrimitiveStyle) -> str:
        attrs = f'stroke="#333333" stroke-width="{STROKE_WIDTHS[style]:g}"'
        if style == PrimitiveStyle.DASHED:
            attrs += ' stroke-dasharray="8,4"'
        return attrs

    def _render_primitive(self, p: DrawingPrimitive) -> str:
        if p.kind == PrimitiveKind.RECT:
            fill = PART_COLORS.get(p.part, "#EEEEEE")
            return (
                f'  <rect x="{p.x:.2f}" y="{p.y:.2f}" width="{p.w:.2f}" height="{p.h:.2f}" '
                f'fill="{fill}" {self._stroke(p.style)} data-part="{escape(p.part)}" '
                f'data-index="{p.index}"/>'
            )
        if p.kind == PrimitiveKind.LINE:
            return (
                f'  <line x1="{p.x:.2f}" y1="{p.y:.2f}" x2="{p.x + p.w:.2f}" '
                f'y2="{p.y + p.h:.2f}" {self._stroke(p.style)}/>'
            )
        if not self.show_labels or not p.text:
            return ""
        return (
            f'  <text x="{p.x:.2f}" y="{p.y:.2f}" font-family="Arial" '
            f'font-size="{self.font_size:g}" text-anchor="middle" '
            f'dominant-baseline="middle">{escape(p.text)}</text>'
        )


@ExporterRegistry.register("svg")
class SvgExporter:
    """Front-view schematic as SVG."""

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(self, show_labels: bool = True) -> None:
        self.renderer = SvgRenderer(show_labels=show_labels)

    def export(self, output: EstimateOutput, path: Path) -> None:
        """Export the schematic to an SVG file.

        Raises:
            ValueError: If the estimate carries no drawing.
        """
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported SVG to {path}")

    def export_string(self, output: EstimateOutput) -> str:
        return self.render(require_drawing(output, self.format_name))

    def render(self, drawing: Drawing) -> str:
        return self.renderer.render(drawing)
