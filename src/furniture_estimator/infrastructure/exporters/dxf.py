"""DXF export of the front-view schematic.

Generates a 2D DXF (R2010) drawing in the spec's real units, so the file
can be dimensioned or traced directly in CAD.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf

from furniture_estimator.domain.value_objects import (
    Drawing,
    DrawingPrimitive,
    PrimitiveKind,
    PrimitiveStyle,
    UnitOfMeasure,
)
from furniture_estimator.infrastructure.exporters.base import ExporterRegistry, require_drawing

if TYPE_CHECKING:
    from ezdxf.document import Drawing as DxfDocument
    from ezdxf.layouts import Modelspace

    from furniture_estimator.application.dtos import EstimateOutput


logger = logging.getLogger(__name__)


LAYERS = {
    "OUTLINE": {"color": 7, "linetype": "CONTINUOUS"},  # White
    "PANELS": {"color": 2, "linetype": "CONTINUOUS"},  # Yellow
    "FRONTS": {"color": 1, "linetype": "DASHED"},  # Red
    "DIMENSIONS": {"color": 3, "linetype": "CONTINUOUS"},  # Green
    "LABELS": {"color": 5, "linetype": "CONTINUOUS"},  # Blue
}

# $INSUNITS codes
INSUNITS = {
    UnitOfMeasure.MM: 4,
    UnitOfMeasure.INCH: 1,
    UnitOfMeasure.FT: 2,
}


def _layer_for(primitive: DrawingPrimitive) -> str:
    if primitive.kind == PrimitiveKind.LABEL:
        return "LABELS"
    if primitive.part == "Outline":
        return "OUTLINE"
    if primitive.part == "Dimension":
        return "DIMENSIONS"
    if primitive.style == PrimitiveStyle.DASHED or primitive.part == "Drawer Front":
        return "FRONTS"
    return "PANELS"


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports the front-view schematic to DXF.

    Canvas coordinates are mapped back to real units with the drawing's
    scale, and the y axis is flipped so that y points up.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, text_height_ratio: float = 0.02) -> None:
        """Initialize the DXF exporter.

        Args:
            text_height_ratio: Label height as a fraction of the larger of
                the piece's width and height.
        """
        if text_height_ratio <= 0:
            raise ValueError("Text height ratio must be positive")
        self.text_height_ratio = text_height_ratio

    def export(self, output: EstimateOutput, path: Path) -> None:
        """Export the schematic to a DXF file.

        Raises:
            ValueError: If the estimate carries no drawing.
        """
        doc = self.build_document(require_drawing(output, self.format_name))
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, output: EstimateOutput) -> str:
        return self.render(require_drawing(output, self.format_name))

    def render(self, drawing: Drawing) -> str:
        """DXF document text for ``drawing``."""
        doc = self.build_document(drawing)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, drawing: Drawing) -> DxfDocument:
        doc = ezdxf.new("R2010")
        doc.header["$INSUNITS"] = INSUNITS[drawing.unit_of_measure]
        self._setup_layers(doc)
        msp = doc.modelspace()
        for primitive in drawing.primitives:
            self._draw(msp, primitive, drawing)
        return doc

    def _setup_layers(self, doc: DxfDocument) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[0.5, 0.25, -0.25],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _point(self, x: float, y: float, drawing: Drawing) -> tuple[float, float]:
        return (x / drawing.scale, (drawing.canvas_size - y) / drawing.scale)

    def _draw(self, msp: Modelspace, p: DrawingPrimitive, drawing: Drawing) -> None:
        layer = _layer_for(p)
        if p.kind == PrimitiveKind.RECT:
            corners = [
                self._point(p.x, p.y, drawing),
                self._point(p.x + p.w, p.y, drawing),
                self._point(p.x + p.w, p.y + p.h, drawing),
                self._point(p.x, p.y + p.h, drawing),
            ]
            msp.add_lwpolyline(corners, close=True, dxfattribs={"layer": layer})
        elif p.kind == PrimitiveKind.LINE:
            msp.add_line(
                self._point(p.x, p.y, drawing),
                self._point(p.x + p.w, p.y + p.h, drawing),
                dxfattribs={"layer": layer},
            )
        elif p.text:
            text_height = max(drawing.width, drawing.height) * self.text_height_ratio
            msp.add_mtext(
                p.text,
                dxfattribs={
                    "layer": layer,
                    "char_height": text_height,
                    "insert": self._point(p.x, p.y, drawing),
                    "attachment_point": 5,  # MIDDLE_CENTER
                },
            )


__all__ = ["DxfExporter", "LAYERS"]
