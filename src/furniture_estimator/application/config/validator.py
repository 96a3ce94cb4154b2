"""Validation structures and construction advisories for spec files.

Errors block estimation. Warnings flag configurations that will build
but that a joiner would question, such as long unsupported shelf spans.
"""

from dataclasses import dataclass, field
from typing import Any

from furniture_estimator.application.config.schema import FurnitureSpecConfig
from furniture_estimator.domain.exceptions import EstimationError
from furniture_estimator.domain.services import archetype_registry, plan_with_boards
from furniture_estimator.domain.units import from_mm, to_mm

# Shelf spans beyond this sag under load without a centre support
MAX_SHELF_SPAN_MM: float = 900.0
# Height to depth ratio beyond which a freestanding piece should be wall-fixed
MAX_ASPECT_RATIO: float = 6.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "configuration.drawers")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 valid, 1 errors, 2 valid with warnings."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self


def _error_path(error: EstimationError) -> str:
    field_name = getattr(error, "field", None)
    if field_name:
        return field_name
    dimension = getattr(error, "dimension", None)
    if dimension:
        return f"dimensions.{dimension}"
    return "configuration"


def validate_spec(config: FurnitureSpecConfig) -> ValidationResult:
    """Run domain checks and construction advisories on a spec.

    Args:
        config: A FurnitureSpecConfig already validated by Pydantic.

    Returns:
        ValidationResult containing any errors or warnings.
    """
    from furniture_estimator.application.config.adapter import config_to_spec

    result = ValidationResult()
    try:
        spec = config_to_spec(config)
        archetype_registry.get(spec.furniture_type).validate(spec)
        plan = plan_with_boards(spec)
    except EstimationError as e:
        result.add_error(_error_path(e), str(e))
        return result

    unit = spec.unit_of_measure
    span_mm = to_mm(plan.interior_width, unit)
    if plan.shelf_levels and span_mm > MAX_SHELF_SPAN_MM:
        result.add_warning(
            path="configuration.shelves",
            message=(
                f"Shelf span {plan.interior_width:g} {unit.value} exceeds "
                f"{from_mm(MAX_SHELF_SPAN_MM, unit):g} {unit.value} and may sag"
            ),
            suggestion="Add a vertical partition or use thicker shelves",
        )

    dims = spec.dimensions
    if dims.height / dims.depth > MAX_ASPECT_RATIO:
        result.add_warning(
            path="dimensions.depth",
            message=(
                f"Height to depth ratio {dims.height / dims.depth:.1f} exceeds "
                f"{MAX_ASPECT_RATIO:g}; the piece may tip over"
            ),
            suggestion="Fix the piece to the wall",
        )
    return result
