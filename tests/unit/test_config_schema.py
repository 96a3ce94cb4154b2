"""Tests for the spec and rate table Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from furniture_estimator.application.config import (
    ConfigurationConfig,
    DimensionsConfig,
    FurnitureSpecConfig,
    RateTableConfig,
)
from furniture_estimator.domain.value_objects import (
    BandingClass,
    Finish,
    FurnitureType,
    MaterialCategory,
    PricingBasis,
    UnitOfMeasure,
)


class TestFurnitureSpecConfig:
    """Tests for FurnitureSpecConfig."""

    def test_camel_case_keys(self) -> None:
        config = FurnitureSpecConfig.model_validate(
            {
                "furnitureType": "tv_unit",
                "dimensions": {"height": 600, "width": 1800, "depth": 400},
                "configuration": {"shutters": 2, "customParts": [{"name": "Partition"}]},
                "unitOfMeasure": "mm",
                "calculationNumber": "BOM-7",
            }
        )
        assert config.furniture_type is FurnitureType.TV_UNIT
        assert config.configuration.custom_parts[0].quantity == 1
        assert config.calculation_number == "BOM-7"

    def test_snake_case_names_accepted(self) -> None:
        config = FurnitureSpecConfig(
            furniture_type="cabinet",
            dimensions=DimensionsConfig(height=900, width=600, depth=400),
            unit_of_measure="inch",
        )
        assert config.unit_of_measure is UnitOfMeasure.INCH

    def test_defaults(self) -> None:
        config = FurnitureSpecConfig.model_validate(
            {"furnitureType": "cabinet", "dimensions": {"height": 1, "width": 1, "depth": 1}}
        )
        assert config.configuration == ConfigurationConfig()
        assert config.unit_of_measure is UnitOfMeasure.MM
        assert config.finish is Finish.NONE
        assert config.calculation_number is None

    def test_dump_by_alias(self) -> None:
        config = FurnitureSpecConfig.model_validate(
            {"furnitureType": "cabinet", "dimensions": {"height": 1, "width": 1, "depth": 1}}
        )
        data = config.model_dump(by_alias=True, mode="json")
        assert data["furnitureType"] == "cabinet"
        assert data["configuration"]["customParts"] == []

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FurnitureSpecConfig.model_validate(
                {
                    "furnitureType": "cabinet",
                    "dimensions": {"height": 1, "width": 1, "depth": 1},
                    "colour": "walnut",
                }
            )

    def test_unknown_furniture_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FurnitureSpecConfig.model_validate(
                {"furnitureType": "sofa", "dimensions": {"height": 1, "width": 1, "depth": 1}}
            )

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_dimension_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            DimensionsConfig(height=value, width=1, depth=1)

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ConfigurationConfig(drawers=-1)

    def test_custom_part_quantity_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ConfigurationConfig.model_validate({"customParts": [{"name": "Partition", "quantity": 0}]})


class TestRateTableConfig:
    """Tests for RateTableConfig."""

    def test_full_table(self) -> None:
        config = RateTableConfig.model_validate(
            {
                "materials": {"carcass": {"material": "mdf", "thickness": 18}},
                "boards": [{"material": "mdf", "thickness": 18, "rate": 100, "basis": "count"}],
                "edgeBanding": {"2mm": 13, "0.8mm": 6.5},
                "hardware": {"hinge": 30},
                "laminate": {"outerRate": 90},
            }
        )
        assert config.materials[MaterialCategory.CARCASS].material == "mdf"
        assert config.boards[0].basis is PricingBasis.COUNT
        assert config.edge_banding[BandingClass.THIN] == 6.5
        assert config.laminate is not None
        assert config.laminate.outer_rate == 90
        assert config.laminate.inner_rate == 65

    def test_empty_table_is_valid(self) -> None:
        config = RateTableConfig()
        assert config.boards == []
        assert config.laminate is None

    def test_negative_hardware_rate_rejected(self) -> None:
        with pytest.raises(ValidationError, match="cannot be negative"):
            RateTableConfig.model_validate({"hardware": {"hinge": -1}})

    def test_negative_board_rate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RateTableConfig.model_validate(
                {"boards": [{"material": "mdf", "thickness": 18, "rate": -1}]}
            )

    def test_duplicate_board_rejected(self) -> None:
        with pytest.raises(ValidationError, match="more than once"):
            RateTableConfig.model_validate(
                {
                    "boards": [
                        {"material": "mdf", "thickness": 18, "rate": 100},
                        {"material": "mdf", "thickness": 18, "rate": 110},
                    ]
                }
            )

    def test_unknown_banding_class_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RateTableConfig.model_validate({"edgeBanding": {"1mm": 10}})
