"""Infrastructure layer - exporters and output formats."""

from furniture_estimator.infrastructure.exporters import (
    ExporterRegistry,
    ExportManager,
)

__all__ = ["ExportManager", "ExporterRegistry"]
