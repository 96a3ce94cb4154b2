"""Tests for the camelCase dictionary forms of results."""

from __future__ import annotations

from furniture_estimator.domain import LayoutEngine
from furniture_estimator.domain.value_objects import DrawingPrimitive, PrimitiveKind
from furniture_estimator.infrastructure.exporters import (
    drawing_to_dict,
    primitive_to_dict,
    sheet_estimates_to_list,
)


class TestPrimitiveToDict:
    def test_optional_keys_omitted(self) -> None:
        data = primitive_to_dict(DrawingPrimitive(kind=PrimitiveKind.RECT, x=1, y=2, w=3, h=4, part="Shelf"))
        assert data == {
            "kind": "rect",
            "x": 1,
            "y": 2,
            "w": 3,
            "h": 4,
            "part": "Shelf",
            "index": 1,
            "style": "solid",
        }

    def test_label_keeps_text(self) -> None:
        data = primitive_to_dict(
            DrawingPrimitive(kind=PrimitiveKind.LABEL, x=0, y=0, w=0, h=0, text="Drawer 1", real_length=200)
        )
        assert data["text"] == "Drawer 1"
        assert data["realLength"] == 200


class TestDrawingToDict:
    def test_drawing_metadata(self, wardrobe_spec) -> None:
        data = drawing_to_dict(LayoutEngine().layout(wardrobe_spec))
        assert data["furnitureType"] == "wardrobe"
        assert data["unitOfMeasure"] == "mm"
        assert data["canvasSize"] == 1000
        assert data["scale"] == 0.375
        assert len(data["primitives"]) == 22


class TestSheetEstimates:
    def test_list_shape(self, estimate_command, wardrobe_spec) -> None:
        output = estimate_command.execute(wardrobe_spec)
        estimates = sheet_estimates_to_list(output.sheet_estimates)
        assert [e["thickness"] for e in estimates] == [18.0, 6.0, 12.0]
        assert sum(e["sheetCount8x4"] for e in estimates) == output.total_sheets
        assert "sheets of 8x4" in estimates[0]["description"]
