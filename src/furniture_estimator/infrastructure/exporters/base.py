"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from furniture_estimator.application.dtos import EstimateOutput
    from furniture_estimator.domain.value_objects import Drawing


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert an EstimateOutput to a specific format. Each exporter
    defines its format name and file extension and implements at least
    ``export``.

    Attributes:
        format_name: Registry key for the format (e.g., "csv", "svg").
        file_extension: File extension without leading dot.
        media_type: MIME type used when the format is served over HTTP.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    media_type: ClassVar[str]

    @abstractmethod
    def export(self, output: EstimateOutput, path: Path) -> None:
        """Export the estimate to a file."""
        ...

    def export_string(self, output: EstimateOutput) -> str:
        """Export the estimate as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register
    decorator.

    Example:
        @ExporterRegistry.register("csv")
        class BomCsvExporter:
            format_name = "csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Exports one estimate to one or more formats in an output directory.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: EstimateOutput,
        project_name: str = "estimate",
    ) -> dict[str, Path]:
        """Export the estimate to every format in ``formats``.

        Files are named ``{project_name}_{format}.{ext}``.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            ValueError: If a drawing format is requested without a drawing.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filepath = self.output_dir / f"{project_name}_{format_name}.{exporter.file_extension}"

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: EstimateOutput,
        project_name: str = "estimate",
    ) -> Path:
        """Export the estimate to a single format."""
        return self.export_all([format_name], output, project_name)[format_name]


def require_drawing(output: EstimateOutput, format_name: str) -> Drawing:
    """Return the estimate's drawing.

    Raises:
        ValueError: If the estimate was run without layout.
    """
    if output.drawing is None:
        raise ValueError(
            f"{format_name.upper()} export requires a layout. "
            "Run the estimate with layout enabled."
        )
    return output.drawing
