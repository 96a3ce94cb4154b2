"""Exporter framework for estimation results.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- text: Human-readable BOM report
- csv: Spreadsheet BOM with a SUMMARY block
- json: Spec, BOM, sheet estimates and layout primitives
- svg: Front-view schematic
- dxf: Front-view schematic for CAD

Usage:
    from furniture_estimator.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    csv_text = ExporterRegistry.get("csv")().export_string(estimate_output)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["csv", "svg"], estimate_output, project_name="wardrobe")
"""

from furniture_estimator.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from furniture_estimator.infrastructure.exporters.bom import (
    BomCsvExporter,
    BomFormatter,
    BomTextExporter,
    EstimateJsonExporter,
)
from furniture_estimator.infrastructure.exporters.dxf import DxfExporter
from furniture_estimator.infrastructure.exporters.serialization import (
    bom_to_dict,
    drawing_to_dict,
    drawing_to_list,
    primitive_to_dict,
    sheet_estimates_to_list,
)
from furniture_estimator.infrastructure.exporters.svg import SvgExporter, SvgRenderer

__all__ = [
    "BomCsvExporter",
    "BomFormatter",
    "BomTextExporter",
    "DxfExporter",
    "EstimateJsonExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "SvgExporter",
    "SvgRenderer",
    "bom_to_dict",
    "drawing_to_dict",
    "drawing_to_list",
    "primitive_to_dict",
    "sheet_estimates_to_list",
]
