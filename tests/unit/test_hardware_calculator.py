"""Tests for HardwareCalculator."""

from __future__ import annotations

import pytest

from furniture_estimator.domain import (
    Configuration,
    Dimensions,
    FurnitureSpec,
    HardwareCalculator,
    RateSnapshot,
    UnknownMaterialError,
)
from furniture_estimator.domain.services.hardware_calculator import estimated_joints


@pytest.fixture
def calculator() -> HardwareCalculator:
    return HardwareCalculator()


def _cabinet(height: float, unit: str = "mm", **config) -> FurnitureSpec:
    return FurnitureSpec(
        furniture_type="cabinet",
        dimensions=Dimensions(height=height, width=900, depth=450),
        configuration=Configuration(**config),
        unit_of_measure=unit,
    )


class TestCounts:
    """Tests for the per-item counting rules."""

    def test_reference_wardrobe(self, calculator, wardrobe_spec) -> None:
        counts = {name: qty for _, name, qty in calculator.counts(wardrobe_spec)}
        assert counts == {
            "Lock": 2,
            "Handle": 5,
            "Hinge": 8,
            "Drawer Slide": 6,
            "Minifix": 36,
            "Dowel": 60,
            "Straightener": 2,
        }

    def test_short_leaves_get_three_hinges(self, calculator) -> None:
        counts = {name: qty for _, name, qty in calculator.counts(_cabinet(1200, doors=2))}
        assert counts["Hinge"] == 6

    def test_tall_leaves_get_four_hinges(self, calculator) -> None:
        counts = {name: qty for _, name, qty in calculator.counts(_cabinet(1201, doors=2))}
        assert counts["Hinge"] == 8

    def test_hinge_threshold_uses_millimetres(self, calculator) -> None:
        """A 4 ft piece is 1219.2 mm tall, over the threshold."""
        counts = {name: qty for _, name, qty in calculator.counts(_cabinet(4, unit="ft", doors=1))}
        assert counts["Hinge"] == 4

    def test_straightener_only_above_threshold(self, calculator) -> None:
        at = {name for _, name, _ in calculator.counts(_cabinet(2100, doors=2))}
        above = {name for _, name, _ in calculator.counts(_cabinet(2101, doors=2))}
        assert "Straightener" not in at
        assert "Straightener" in above

    def test_zero_count_lines_are_omitted(self, calculator, plain_cabinet_spec) -> None:
        counts = {name: qty for _, name, qty in calculator.counts(plain_cabinet_spec)}
        assert counts == {"Minifix": 12, "Dowel": 20}

    def test_tv_unit_adds_wall_brackets(self, calculator) -> None:
        spec = FurnitureSpec(
            furniture_type="tv_unit",
            dimensions=Dimensions(height=600, width=1800, depth=400),
            configuration=Configuration(shelves=1, shutters=2),
        )
        assert [(name, qty) for _, name, qty in calculator.counts(spec)] == [
            ("Lock", 2),
            ("Handle", 2),
            ("Hinge", 6),
            ("Minifix", 18),
            ("Dowel", 30),
            ("Wall Bracket", 4),
        ]

    @pytest.mark.parametrize("shelves, joints", [(0, 4), (1, 6), (4, 12)])
    def test_estimated_joints(self, shelves: int, joints: int) -> None:
        assert estimated_joints(shelves) == joints


class TestCalculate:
    def test_priced_lines(self, calculator, wardrobe_spec, default_rates) -> None:
        lines = calculator.calculate(wardrobe_spec, default_rates)
        by_name = {line.name: line for line in lines}
        assert by_name["Hinge"].total_cost == 240
        assert by_name["Drawer Slide"].unit_rate == 120
        assert all(line.unit == "Nos" and line.category == "Hardware" for line in lines)
        assert sum(line.total_cost for line in lines) == 2025

    def test_missing_rate_raises(self, calculator, wardrobe_spec) -> None:
        with pytest.raises(UnknownMaterialError) as exc_info:
            calculator.calculate(wardrobe_spec, RateSnapshot(hardware={"lock": 80.0}))
        assert exc_info.value.key == "handle"

    def test_unused_items_need_no_rate(self, calculator, plain_cabinet_spec) -> None:
        rates = RateSnapshot(hardware={"minifix": 10.0, "dowel": 2.0})
        assert len(calculator.calculate(plain_cabinet_spec, rates)) == 2
