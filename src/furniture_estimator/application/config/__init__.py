"""Configuration schema and loading for furniture specs and rate tables.

Public API:
    - FurnitureSpecConfig: Root model of a spec file
    - RateTableConfig: Root model of a rate table file
    - load_spec / load_rates: Load from a JSON file
    - load_spec_from_dict / load_rates_from_dict: Load from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_spec_with_cli: Apply CLI overrides to a spec file
    - config_to_spec / config_to_rates: Convert to domain objects
    - validate_spec: Domain checks and construction advisories

Example:
    >>> from pathlib import Path
    >>> from furniture_estimator.application.config import load_spec, ConfigError
    >>>
    >>> try:
    ...     config = load_spec(Path("wardrobe.json"))
    ...     print(config.dimensions.height)
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from furniture_estimator.application.config.adapter import (
    config_to_rates,
    config_to_spec,
    rates_to_config,
    spec_to_config,
)
from furniture_estimator.application.config.loader import (
    ConfigError,
    load_rates,
    load_rates_from_dict,
    load_spec,
    load_spec_from_dict,
)
from furniture_estimator.application.config.merger import merge_spec_with_cli
from furniture_estimator.application.config.schema import (
    BoardConfig,
    BoardRateConfig,
    ConfigurationConfig,
    CustomPartConfig,
    DimensionsConfig,
    FurnitureSpecConfig,
    LaminateConfig,
    RateTableConfig,
)
from furniture_estimator.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_spec,
)

__all__ = [
    "BoardConfig",
    "BoardRateConfig",
    "ConfigError",
    "ConfigurationConfig",
    "CustomPartConfig",
    "DimensionsConfig",
    "FurnitureSpecConfig",
    "LaminateConfig",
    "RateTableConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_rates",
    "config_to_spec",
    "load_rates",
    "load_rates_from_dict",
    "load_spec",
    "load_spec_from_dict",
    "merge_spec_with_cli",
    "rates_to_config",
    "spec_to_config",
    "validate_spec",
]
