"""camelCase dictionary forms of estimation results.

These are the wire shapes shared by the JSON exporter, the CLI and the
REST API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from furniture_estimator.domain.value_objects import (
    AccessoryLine,
    BomResult,
    ConsolidatedItem,
    Drawing,
    DrawingPrimitive,
    PanelSpec,
)

if TYPE_CHECKING:
    from furniture_estimator.domain.services import SheetEstimate


def panel_to_dict(panel: PanelSpec) -> dict[str, Any]:
    return {
        "itemType": panel.item_type.value,
        "itemCategory": panel.item_category.value,
        "partName": panel.part_name,
        "role": panel.role.value,
        "materialCategory": panel.material_category.value,
        "materialType": panel.material_type,
        "length": panel.length,
        "width": panel.width,
        "thickness": panel.thickness,
        "quantity": panel.quantity,
        "unit": panel.unit,
        "exposedEdges": sorted(edge.value for edge in panel.exposed_edges),
        "edgeBandingType": panel.edge_banding_type.value if panel.edge_banding_type else None,
        "edgeBandingLength": panel.edge_banding_length,
        "unitRate": panel.unit_rate,
        "pricingBasis": panel.pricing_basis.value,
        "edgeBandingCost": panel.edge_banding_cost,
        "totalCost": panel.total_cost,
        "areaSqft": panel.area_sqft,
        "description": panel.description,
    }


def accessory_to_dict(line: AccessoryLine) -> dict[str, Any]:
    return {
        "name": line.name,
        "category": line.category,
        "quantity": line.quantity,
        "unit": line.unit,
        "unitRate": line.unit_rate,
        "totalCost": line.total_cost,
        "description": line.description,
    }


def consolidated_to_dict(item: ConsolidatedItem) -> dict[str, Any]:
    return {
        "description": item.description,
        "quantity": item.quantity,
        "unit": item.unit,
        "rate": item.rate,
        "amount": item.amount,
    }


def bom_to_dict(bom: BomResult) -> dict[str, Any]:
    """Serialize a BomResult. Thickness keys become strings such as "18"."""
    return {
        "calculationNumber": bom.calculation_number,
        "totalBoardArea": bom.total_board_area,
        "boardAreaByThickness": {
            f"{thickness:g}": area for thickness, area in bom.board_area_by_thickness.items()
        },
        "totalEdgeBanding2mm": bom.total_edge_banding_2mm,
        "totalEdgeBanding0_8mm": bom.total_edge_banding_0_8mm,
        "totalMaterialCost": bom.total_material_cost,
        "totalHardwareCost": bom.total_hardware_cost,
        "totalCost": bom.total_cost,
        "items": [panel_to_dict(p) for p in bom.items],
        "consolidatedItems": [consolidated_to_dict(c) for c in bom.consolidated_items],
        "hardware": [accessory_to_dict(h) for h in bom.hardware],
        "consumables": [accessory_to_dict(c) for c in bom.consumables],
    }


def primitive_to_dict(primitive: DrawingPrimitive) -> dict[str, Any]:
    """Serialize one primitive, omitting ``realLength`` and ``text`` when unset."""
    data: dict[str, Any] = {
        "kind": primitive.kind.value,
        "x": primitive.x,
        "y": primitive.y,
        "w": primitive.w,
        "h": primitive.h,
    }
    if primitive.real_length is not None:
        data["realLength"] = primitive.real_length
    data["part"] = primitive.part
    data["index"] = primitive.index
    if primitive.text is not None:
        data["text"] = primitive.text
    data["style"] = primitive.style.value
    return data


def drawing_to_list(drawing: Drawing) -> list[dict[str, Any]]:
    return [primitive_to_dict(p) for p in drawing.primitives]


def drawing_to_dict(drawing: Drawing) -> dict[str, Any]:
    return {
        "furnitureType": drawing.furniture_type.value,
        "unitOfMeasure": drawing.unit_of_measure.value,
        "width": drawing.width,
        "height": drawing.height,
        "depth": drawing.depth,
        "scale": drawing.scale,
        "canvasSize": drawing.canvas_size,
        "primitives": drawing_to_list(drawing),
    }


def sheet_estimates_to_list(estimates: dict[float, SheetEstimate]) -> list[dict[str, Any]]:
    return [
        {
            "thickness": e.thickness,
            "totalAreaSqft": e.total_area_sqft,
            "sheetCount8x4": e.sheet_count_8x4,
            "wastePercentage": e.waste_percentage,
            "description": e.description,
        }
        for e in estimates.values()
    ]
