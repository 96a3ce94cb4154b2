"""Furniture specification value objects (engine input)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import InvalidSpecError


class UnitOfMeasure(str, Enum):
    """Linear unit the furniture dimensions are expressed in."""

    MM = "mm"
    INCH = "inch"
    FT = "ft"


class FurnitureType(str, Enum):
    """Closed set of furniture archetypes the decomposer knows."""

    WARDROBE = "wardrobe"
    CABINET = "cabinet"
    STORAGE_UNIT = "storage_unit"
    BOOKSHELF = "bookshelf"
    TV_UNIT = "tv_unit"
    SHOE_RACK = "shoe_rack"


class Finish(str, Enum):
    """Surface finish applied over the board."""

    NONE = "none"
    LAMINATE = "laminate"


def _coerce_enum(enum_cls: type[Enum], value: object, field_name: str) -> Enum:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)  # type: ignore[attr-defined]
        raise InvalidSpecError(
            f"Unsupported {field_name} '{value}'. Expected one of: {allowed}",
            field=field_name,
        ) from None


@dataclass(frozen=True)
class Dimensions:
    """Outer dimensions of the piece, in the spec's unit of measure."""

    height: float
    width: float
    depth: float

    def __post_init__(self) -> None:
        for name in ("height", "width", "depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidSpecError(
                    f"Dimension '{name}' must be a number", field=f"dimensions.{name}"
                )
            if not math.isfinite(value) or value <= 0:
                raise InvalidSpecError(
                    f"Dimension '{name}' must be positive and finite (got {value})",
                    field=f"dimensions.{name}",
                )


@dataclass(frozen=True)
class CustomPart:
    """A named extra part requested by the caller."""

    name: str
    quantity: int = 1

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidSpecError("Custom part name must not be empty", field="customParts")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidSpecError(
                "Custom part quantity must be an integer", field="customParts"
            )
        if self.quantity < 1:
            raise InvalidSpecError(
                f"Custom part '{self.name}' quantity must be at least 1",
                field="customParts",
            )


@dataclass(frozen=True)
class Configuration:
    """Feature counts for the piece."""

    shelves: int = 0
    drawers: int = 0
    doors: int = 0
    shutters: int = 0
    custom_parts: tuple[CustomPart, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("shelves", "drawers", "doors", "shutters"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSpecError(
                    f"Configuration '{name}' must be an integer",
                    field=f"configuration.{name}",
                )
            if value < 0:
                raise InvalidSpecError(
                    f"Configuration '{name}' cannot be negative (got {value})",
                    field=f"configuration.{name}",
                )
        if not isinstance(self.custom_parts, tuple):
            object.__setattr__(self, "custom_parts", tuple(self.custom_parts))

    @property
    def front_leaves(self) -> int:
        """Total number of hinged front leaves (doors plus shutters)."""
        return self.doors + self.shutters


@dataclass(frozen=True)
class FurnitureSpec:
    """Complete input for one estimation pass.

    String values for the enum fields are accepted and coerced, so a spec
    can be built straight from JSON-like data. Anything that cannot be
    coerced raises InvalidSpecError.
    """

    furniture_type: FurnitureType
    dimensions: Dimensions
    configuration: Configuration = field(default_factory=Configuration)
    unit_of_measure: UnitOfMeasure = UnitOfMeasure.MM
    finish: Finish = Finish.NONE

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "furniture_type",
            _coerce_enum(FurnitureType, self.furniture_type, "furnitureType"),
        )
        object.__setattr__(
            self,
            "unit_of_measure",
            _coerce_enum(UnitOfMeasure, self.unit_of_measure, "unitOfMeasure"),
        )
        object.__setattr__(self, "finish", _coerce_enum(Finish, self.finish, "finish"))
        if not isinstance(self.dimensions, Dimensions):
            raise InvalidSpecError("dimensions must be a Dimensions value", field="dimensions")
        if not isinstance(self.configuration, Configuration):
            raise InvalidSpecError(
                "configuration must be a Configuration value", field="configuration"
            )
