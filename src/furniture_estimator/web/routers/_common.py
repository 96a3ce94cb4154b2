"""Helpers shared by the API routers."""

from typing import Any

from furniture_estimator.application.config import (
    config_to_rates,
    config_to_spec,
    load_rates_from_dict,
    load_spec_from_dict,
)
from furniture_estimator.domain import FurnitureSpec, RateSnapshot


def parse_spec(data: dict[str, Any]) -> tuple[FurnitureSpec, str | None]:
    """Validate a spec dictionary and return it with its calculation number.

    Raises:
        ConfigError: If the dictionary fails schema validation.
        InvalidSpecError: If the domain rejects the values.
    """
    config = load_spec_from_dict(data)
    return config_to_spec(config), config.calculation_number


def parse_rates(data: dict[str, Any] | None) -> RateSnapshot:
    if data is None:
        return RateSnapshot.default()
    return config_to_rates(load_rates_from_dict(data))
