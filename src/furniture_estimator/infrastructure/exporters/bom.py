"""Bill of Materials exporters: text, CSV and JSON.

The CSV layout matches the spreadsheet export of the quoting tool the
engine replaces: one row per line item, a blank row, then a SUMMARY
block of totals.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from furniture_estimator.domain.value_objects import (
    AccessoryLine,
    BomResult,
    PanelSpec,
    PricingBasis,
    UnitOfMeasure,
)
from furniture_estimator.infrastructure.exporters.base import ExporterRegistry
from furniture_estimator.infrastructure.exporters.serialization import (
    bom_to_dict,
    drawing_to_list,
    sheet_estimates_to_list,
)

if TYPE_CHECKING:
    from furniture_estimator.application.dtos import EstimateOutput


logger = logging.getLogger(__name__)

CSV_HEADER = [
    "Part Name",
    "Type",
    "Quantity",
    "Unit",
    "Size",
    "Material",
    "Edge Banding",
    "Unit Rate",
    "Total Cost",
]


def _rate_unit(panel: PanelSpec) -> str:
    return "Sqft" if panel.pricing_basis == PricingBasis.AREA else "Nos"


def _size(panel: PanelSpec, unit: UnitOfMeasure) -> str:
    return f"{panel.length:g} x {panel.width:g} x {panel.thickness:g} {unit.value}"


def _banding(panel: PanelSpec) -> str:
    if panel.edge_banding_type is None or panel.edge_banding_length <= 0:
        return ""
    return f"{panel.edge_banding_type.value} {panel.edge_banding_length:.2f} m"


class BomFormatter:
    """Renders a BomResult as text or CSV."""

    def __init__(self, unit: UnitOfMeasure = UnitOfMeasure.MM) -> None:
        self.unit = unit

    def format_text(self, bom: BomResult, title: str | None = None) -> str:
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        lines.append("=" * 60)
        if bom.calculation_number:
            lines.append(f"BOM Number: {bom.calculation_number}")
        if title:
            lines.append(title)
        lines.append("")

        lines.append("PANELS")
        lines.append("-" * 40)
        if bom.items:
            for item in bom.items:
                lines.append(
                    f"  {item.part_name} x{item.quantity} - {_size(item, self.unit)} "
                    f"{item.material_type}"
                )
                detail = f"    Area: {item.area_sqft:.2f} sq ft"
                banding = _banding(item)
                if banding:
                    detail += f", Banding: {banding}"
                lines.append(detail)
                lines.append(
                    f"    Cost: {item.unit_rate:.2f}/{_rate_unit(item)} = {item.total_cost:.2f}"
                )
        else:
            lines.append("  (No panels)")
        lines.append("")

        for heading, accessory_lines in (("HARDWARE", bom.hardware), ("CONSUMABLES", bom.consumables)):
            if not accessory_lines:
                continue
            lines.append(heading)
            lines.append("-" * 40)
            for line in accessory_lines:
                lines.append(
                    f"  {line.name}: {line.quantity:g} {line.unit} @ {line.unit_rate:.2f} "
                    f"= {line.total_cost:.2f}"
                )
            lines.append("")

        lines.append("MATERIALS")
        lines.append("-" * 40)
        for item in bom.consolidated_items:
            lines.append(
                f"  {item.description}: {item.quantity:.2f} {item.unit} @ {item.rate:.2f} "
                f"= {item.amount:.2f}"
            )
        lines.append("")

        lines.append("=" * 60)
        lines.append("SUMMARY")
        lines.append("-" * 40)
        lines.append(f"  Total Board Area:     {bom.total_board_area:>10.2f} sq ft")
        for thickness, area in bom.board_area_by_thickness.items():
            lines.append(f"    {thickness:g} {self.unit.value}:  {area:>10.2f} sq ft")
        lines.append(f"  Edge Banding 2mm:     {bom.total_edge_banding_2mm:>10.2f} m")
        lines.append(f"  Edge Banding 0.8mm:   {bom.total_edge_banding_0_8mm:>10.2f} m")
        lines.append(f"  Material Cost:        {bom.total_material_cost:>10.2f}")
        lines.append(f"  Hardware Cost:        {bom.total_hardware_cost:>10.2f}")
        lines.append("-" * 40)
        lines.append(f"  TOTAL:                {bom.total_cost:>10.2f}")
        lines.append("")

        return "\n".join(lines)

    def format_csv(self, bom: BomResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        writer.writerow(CSV_HEADER)
        for item in bom.items:
            writer.writerow(
                [
                    item.part_name,
                    item.item_type.value,
                    item.quantity,
                    _rate_unit(item),
                    _size(item, self.unit),
                    item.material_type,
                    _banding(item),
                    f"{item.unit_rate:.2f}",
                    f"{item.total_cost:.2f}",
                ]
            )
        for line in (*bom.hardware, *bom.consumables):
            writer.writerow(self._accessory_row(line))

        writer.writerow([])
        writer.writerow(["SUMMARY"])
        writer.writerow(["Total Board Area (sq.ft)", f"{bom.total_board_area:.2f}"])
        writer.writerow(["Total Edge Banding 2mm (m)", f"{bom.total_edge_banding_2mm:.2f}"])
        writer.writerow(["Total Edge Banding 0.8mm (m)", f"{bom.total_edge_banding_0_8mm:.2f}"])
        writer.writerow(["Total Material Cost", f"{bom.total_material_cost:.2f}"])
        writer.writerow(["Total Hardware Cost", f"{bom.total_hardware_cost:.2f}"])
        writer.writerow(["TOTAL COST", f"{bom.total_cost:.2f}"])

        return output.getvalue()

    @staticmethod
    def _accessory_row(line: AccessoryLine) -> list[Any]:
        return [
            line.name,
            line.category,
            f"{line.quantity:g}",
            line.unit,
            "",
            "",
            "",
            f"{line.unit_rate:.2f}",
            f"{line.total_cost:.2f}",
        ]


def _title(output: EstimateOutput) -> str:
    spec = output.spec
    dims = spec.dimensions
    return (
        f"Furniture: {spec.furniture_type.value}\n"
        f"Dimensions: {dims.height:g} x {dims.width:g} x {dims.depth:g} "
        f"{spec.unit_of_measure.value} (H x W x D)"
    )


class _TextFileExporter:
    """Shared ``export`` for exporters that render to a string."""

    format_name: ClassVar[str]

    def export_string(self, output: EstimateOutput) -> str:
        raise NotImplementedError

    def export(self, output: EstimateOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported {self.format_name} to {path}")


@ExporterRegistry.register("text")
class BomTextExporter(_TextFileExporter):
    """Human-readable BOM report."""

    format_name: ClassVar[str] = "text"
    file_extension: ClassVar[str] = "txt"
    media_type: ClassVar[str] = "text/plain"

    def export_string(self, output: EstimateOutput) -> str:
        formatter = BomFormatter(output.spec.unit_of_measure)
        return formatter.format_text(output.bom, title=_title(output))


@ExporterRegistry.register("csv")
class BomCsvExporter(_TextFileExporter):
    """Spreadsheet BOM: item rows followed by a SUMMARY block."""

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"
    media_type: ClassVar[str] = "text/csv"

    def export_string(self, output: EstimateOutput) -> str:
        return BomFormatter(output.spec.unit_of_measure).format_csv(output.bom)


@ExporterRegistry.register("json")
class EstimateJsonExporter(_TextFileExporter):
    """Full estimate as JSON: the spec, the BOM, sheet estimates and layout."""

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def to_dict(self, output: EstimateOutput) -> dict[str, Any]:
        from furniture_estimator.application.config.adapter import spec_to_config

        data: dict[str, Any] = {
            "spec": spec_to_config(output.spec).model_dump(by_alias=True, mode="json"),
            "bom": bom_to_dict(output.bom),
            "sheetEstimates": sheet_estimates_to_list(output.sheet_estimates),
            "totalSheets": output.total_sheets,
        }
        if output.drawing is not None:
            data["layout"] = drawing_to_list(output.drawing)
        return data

    def export_string(self, output: EstimateOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)
