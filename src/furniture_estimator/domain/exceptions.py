"""Exceptions raised by the estimation engine.

Every failure is raised synchronously before any BomResult or Drawing is
returned. Each exception carries an ``error_type`` slug used by the CLI
and REST layers to report the failure category.
"""

from __future__ import annotations

__all__ = [
    "EstimationError",
    "InconsistentRateError",
    "InfeasibleConfigurationError",
    "InvalidSpecError",
    "NumericOverflowError",
    "UnknownMaterialError",
]


class EstimationError(Exception):
    """Base class for all estimation failures."""

    error_type: str = "estimation"


class InvalidSpecError(EstimationError, ValueError):
    """Raised when a furniture specification is malformed.

    Covers non-positive dimensions, negative configuration counts,
    unknown furniture types or units, and features the archetype does
    not support.

    Attributes:
        field: Name of the offending input field, if known.
    """

    error_type = "invalid_spec"

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class InfeasibleConfigurationError(EstimationError):
    """Raised when the requested parts cannot physically fit.

    Attributes:
        dimension: The dimension that is too small ("height", "width", "depth").
        required: Space the configuration needs, in spec units.
        available: Space actually available, in spec units.
    """

    error_type = "infeasible_configuration"

    def __init__(
        self,
        message: str,
        dimension: str,
        required: float | None = None,
        available: float | None = None,
    ) -> None:
        self.dimension = dimension
        self.required = required
        self.available = available
        super().__init__(message)


class UnknownMaterialError(EstimationError, KeyError):
    """Raised when the rate snapshot lacks a required entry.

    Attributes:
        key: The missing lookup key (category, board or hardware item).
    """

    error_type = "unknown_material"

    def __init__(self, message: str, key: object = None) -> None:
        self.key = key
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InconsistentRateError(EstimationError):
    """Raised when a consolidated line sees two different unit rates.

    Attributes:
        description: Consolidated line description.
        unit: Consolidated line unit.
        rates: The conflicting rates, in the order they were seen.
    """

    error_type = "inconsistent_rate"

    def __init__(self, description: str, unit: str, rates: tuple[float, ...]) -> None:
        self.description = description
        self.unit = unit
        self.rates = rates
        super().__init__(
            f"Inconsistent rates for '{description}' ({unit}): "
            + ", ".join(f"{r:g}" for r in rates)
        )


class NumericOverflowError(EstimationError, ArithmeticError):
    """Raised when a derived value is NaN or infinite.

    Attributes:
        quantity: Name of the derived quantity that went non-finite.
    """

    error_type = "numeric_overflow"

    def __init__(self, quantity: str, value: float) -> None:
        self.quantity = quantity
        self.value = value
        super().__init__(f"Derived value '{quantity}' is not finite: {value!r}")
