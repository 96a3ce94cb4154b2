"""Configuration merging utilities for CLI override support.

Precedence: CLI args > spec file values > defaults. Only non-None CLI
arguments override spec file values.
"""

from typing import Any

from furniture_estimator.application.config.schema import FurnitureSpecConfig


def merge_spec_with_cli(
    config: FurnitureSpecConfig,
    *,
    furniture_type: str | None = None,
    height: float | None = None,
    width: float | None = None,
    depth: float | None = None,
    shelves: int | None = None,
    drawers: int | None = None,
    doors: int | None = None,
    shutters: int | None = None,
    unit_of_measure: str | None = None,
    finish: str | None = None,
    calculation_number: str | None = None,
) -> FurnitureSpecConfig:
    """Merge CLI arguments with a spec file.

    Returns:
        A new, re-validated FurnitureSpecConfig.

    Raises:
        pydantic.ValidationError: If an override is invalid.

    Example:
        >>> config = load_spec(Path("wardrobe.json"))
        >>> merge_spec_with_cli(config, shelves=5).configuration.shelves
        5
    """
    data = config.model_dump()
    _override(
        data,
        furniture_type=furniture_type,
        unit_of_measure=unit_of_measure,
        finish=finish,
        calculation_number=calculation_number,
    )
    _override(data["dimensions"], height=height, width=width, depth=depth)
    _override(
        data["configuration"],
        shelves=shelves,
        drawers=drawers,
        doors=doors,
        shutters=shutters,
    )
    return FurnitureSpecConfig.model_validate(data)


def _override(target: dict[str, Any], **values: Any) -> None:
    for key, value in values.items():
        if value is not None:
            target[key] = value
