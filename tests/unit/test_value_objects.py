"""Unit tests for the estimation value objects."""

from __future__ import annotations

import math

import pytest

from furniture_estimator.domain import (
    Configuration,
    CustomPart,
    Dimensions,
    FurnitureSpec,
    FurnitureType,
    InvalidSpecError,
    UnitOfMeasure,
)
from furniture_estimator.domain.value_objects import (
    ALL_EDGES,
    BandingClass,
    BomResult,
    Edge,
    Finish,
    ItemCategory,
    ItemType,
    MaterialCategory,
    PanelRole,
    PanelSpec,
)


def _panel(**overrides) -> PanelSpec:
    values = dict(
        item_type=ItemType.PANEL,
        item_category=ItemCategory.MAIN_STRUCTURE,
        part_name="Side Panel",
        role=PanelRole.SIDE,
        material_category=MaterialCategory.CARCASS,
        material_type="18mm Plywood",
        length=2400.0,
        width=600.0,
        thickness=18.0,
    )
    values.update(overrides)
    return PanelSpec(**values)


class TestDimensions:
    def test_valid_dimensions(self) -> None:
        dims = Dimensions(height=2400, width=1200, depth=600)
        assert (dims.height, dims.width, dims.depth) == (2400, 1200, 600)

    @pytest.mark.parametrize("name", ["height", "width", "depth"])
    def test_zero_dimension_rejected(self, name: str) -> None:
        values = {"height": 2400, "width": 1200, "depth": 600, name: 0}
        with pytest.raises(InvalidSpecError) as exc_info:
            Dimensions(**values)
        assert exc_info.value.field == f"dimensions.{name}"

    def test_negative_dimension_rejected(self) -> None:
        with pytest.raises(InvalidSpecError):
            Dimensions(height=-1, width=1200, depth=600)

    def test_non_finite_dimension_rejected(self) -> None:
        with pytest.raises(InvalidSpecError):
            Dimensions(height=math.inf, width=1200, depth=600)
        with pytest.raises(InvalidSpecError):
            Dimensions(height=math.nan, width=1200, depth=600)

    def test_non_numeric_dimension_rejected(self) -> None:
        with pytest.raises(InvalidSpecError):
            Dimensions(height="2400", width=1200, depth=600)  # type: ignore[arg-type]
        with pytest.raises(InvalidSpecError):
            Dimensions(height=True, width=1200, depth=600)

    def test_invalid_spec_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Dimensions(height=0, width=1, depth=1)


class TestConfiguration:
    def test_defaults_are_zero(self) -> None:
        config = Configuration()
        assert (config.shelves, config.drawers, config.doors, config.shutters) == (0, 0, 0, 0)
        assert config.custom_parts == ()

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(InvalidSpecError) as exc_info:
            Configuration(shelves=-1)
        assert exc_info.value.field == "configuration.shelves"

    def test_non_integer_count_rejected(self) -> None:
        with pytest.raises(InvalidSpecError):
            Configuration(drawers=1.5)  # type: ignore[arg-type]

    def test_front_leaves_counts_doors_and_shutters(self) -> None:
        assert Configuration(doors=2, shutters=1).front_leaves == 3

    def test_custom_parts_list_becomes_tuple(self) -> None:
        config = Configuration(custom_parts=[CustomPart("Partition", 2)])  # type: ignore[arg-type]
        assert config.custom_parts == (CustomPart("Partition", 2),)


class TestCustomPart:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(InvalidSpecError):
            CustomPart("  ")

    def test_zero_quantity_rejected(self) -> None:
        with pytest.raises(InvalidSpecError):
            CustomPart("Partition", 0)


class TestFurnitureSpec:
    def test_string_enums_are_coerced(self) -> None:
        spec = FurnitureSpec(
            furniture_type="tv_unit",
            dimensions=Dimensions(600, 1800, 400),
            unit_of_measure="inch",
            finish="laminate",
        )
        assert spec.furniture_type is FurnitureType.TV_UNIT
        assert spec.unit_of_measure is UnitOfMeasure.INCH
        assert spec.finish is Finish.LAMINATE

    def test_unknown_furniture_type_rejected(self) -> None:
        with pytest.raises(InvalidSpecError) as exc_info:
            FurnitureSpec(furniture_type="sofa", dimensions=Dimensions(1, 1, 1))
        assert exc_info.value.field == "furnitureType"
        assert "wardrobe" in str(exc_info.value)

    def test_unknown_unit_rejected(self) -> None:
        with pytest.raises(InvalidSpecError) as exc_info:
            FurnitureSpec(
                furniture_type="cabinet",
                dimensions=Dimensions(1, 1, 1),
                unit_of_measure="cm",
            )
        assert exc_info.value.field == "unitOfMeasure"

    def test_spec_is_immutable(self, wardrobe_spec: FurnitureSpec) -> None:
        with pytest.raises(AttributeError):
            wardrobe_spec.finish = Finish.LAMINATE  # type: ignore[misc]


class TestPanelSpec:
    def test_non_positive_dimensions_rejected(self) -> None:
        with pytest.raises(ValueError):
            _panel(length=0)
        with pytest.raises(ValueError):
            _panel(thickness=-18)

    def test_quantity_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            _panel(quantity=0)

    def test_exposed_edge_length_front_only(self) -> None:
        assert _panel(exposed_edges=frozenset({Edge.FRONT})).exposed_edge_length == 2400

    def test_exposed_edge_length_all_edges(self) -> None:
        assert _panel(exposed_edges=ALL_EDGES).exposed_edge_length == 2 * (2400 + 600)

    def test_no_exposed_edges(self) -> None:
        assert _panel().exposed_edge_length == 0

    def test_grouping_key_ignores_quantity_and_pricing(self) -> None:
        assert _panel(quantity=1).grouping_key == _panel(quantity=3, total_cost=9).grouping_key

    def test_grouping_key_differs_by_dimension(self) -> None:
        assert _panel(length=2400).grouping_key != _panel(length=2399).grouping_key


class TestBomResult:
    def test_banding_class_shortcuts(self) -> None:
        bom = BomResult(
            calculation_number=None,
            total_board_area=0.0,
            board_area_by_thickness={},
            edge_banding_by_class={BandingClass.THICK: 4.5, BandingClass.THIN: 1.5},
            total_material_cost=0.0,
            total_hardware_cost=0.0,
            total_cost=0.0,
        )
        assert bom.total_edge_banding_2mm == 4.5
        assert bom.total_edge_banding_0_8mm == 1.5

    def test_mappings_are_read_only(self) -> None:
        bom = BomResult(
            calculation_number=None,
            total_board_area=1.0,
            board_area_by_thickness={18.0: 1.0},
            edge_banding_by_class={},
            total_material_cost=0.0,
            total_hardware_cost=0.0,
            total_cost=0.0,
        )
        with pytest.raises(TypeError):
            bom.board_area_by_thickness[6.0] = 2.0  # type: ignore[index]

    def test_equal_results_hash_alike(self) -> None:
        """BomResults can be used as set members and dict keys."""

        def build() -> BomResult:
            return BomResult(
                calculation_number="BOM-0001",
                total_board_area=2.0,
                board_area_by_thickness={18.0: 1.5, 6.0: 0.5},
                edge_banding_by_class={BandingClass.THICK: 3.0},
                total_material_cost=100.0,
                total_hardware_cost=0.0,
                total_cost=100.0,
                items=(_panel(),),
            )

        first, second = build(), build()
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_mapping_order_is_part_of_equality(self) -> None:
        common = dict(
            calculation_number=None,
            total_board_area=2.0,
            edge_banding_by_class={},
            total_material_cost=0.0,
            total_hardware_cost=0.0,
            total_cost=0.0,
        )
        a = BomResult(board_area_by_thickness={18.0: 1.0, 6.0: 1.0}, **common)
        b = BomResult(board_area_by_thickness={6.0: 1.0, 18.0: 1.0}, **common)
        assert a != b
