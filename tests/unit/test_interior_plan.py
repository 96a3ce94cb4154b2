"""Tests for interior planning (drawer bands, shelf levels, leaves)."""

from __future__ import annotations

import pytest

from furniture_estimator.domain import (
    Configuration,
    Dimensions,
    FurnitureSpec,
    InfeasibleConfigurationError,
)
from furniture_estimator.domain.services import BoardThicknesses, plan_interior, plan_with_boards


def _spec(height=2400, width=1200, depth=600, unit="mm", **config) -> FurnitureSpec:
    return FurnitureSpec(
        furniture_type="cabinet",
        dimensions=Dimensions(height=height, width=width, depth=depth),
        configuration=Configuration(**config),
        unit_of_measure=unit,
    )


class TestPlanInterior:
    """Tests for plan_interior with explicit board thicknesses."""

    def test_carcass_interior(self) -> None:
        plan = plan_interior(_spec(), thickness=18, back_thickness=6, drawer_box_thickness=12)
        assert plan.interior_width == 1164
        assert plan.interior_height == 2364
        assert plan.shelf_depth == 594

    def test_drawer_bands_stack_from_the_bottom(self) -> None:
        plan = plan_interior(_spec(drawers=3), 18, 6, 12)
        assert plan.drawer_band == 200
        assert plan.drawer_zone == 600
        assert plan.drawer_bands == ((0, 200), (200, 400), (400, 600))

    def test_drawer_box_geometry(self) -> None:
        """Boxes clear the slides on both sides and the back panel at the rear."""
        plan = plan_interior(_spec(drawers=1), 18, 6, 12)
        assert plan.drawer_box_width == pytest.approx(1164 - 25)
        assert plan.drawer_box_depth == pytest.approx(600 - 6 - 20)
        assert plan.drawer_box_height == 150

    def test_shelves_spaced_evenly_above_drawers(self) -> None:
        plan = plan_interior(_spec(shelves=4, drawers=3), 18, 18, 18)
        spacing = (2382 - 600) / 5
        assert plan.shelf_spacing == pytest.approx(spacing)
        assert list(plan.shelf_levels) == pytest.approx([600 + spacing * i for i in range(1, 5)])

    def test_shelf_spacing_is_centre_to_centre(self) -> None:
        """Clear gap between neighbouring shelves is the pitch minus one board."""
        plan = plan_interior(_spec(shelves=3), 18, 6, 12)
        levels = plan.shelf_levels
        assert [b - a for a, b in zip(levels, levels[1:])] == pytest.approx([plan.shelf_spacing] * 2)
        clear_gap = (levels[1] - plan.thickness / 2) - (levels[0] + plan.thickness / 2)
        assert clear_gap == pytest.approx(plan.shelf_spacing - plan.thickness)

    def test_shelves_start_above_bottom_panel_without_drawers(self) -> None:
        plan = plan_interior(_spec(height=1036, shelves=1), 18, 6, 12)
        assert list(plan.shelf_levels) == pytest.approx([518])

    def test_no_shelves(self) -> None:
        plan = plan_interior(_spec(), 18, 6, 12)
        assert plan.shelf_levels == ()
        assert plan.shelf_spacing == 0.0

    def test_leaves_split_width_evenly(self) -> None:
        plan = plan_interior(_spec(doors=2, shutters=1, width=1500), 18, 6, 12)
        assert [leaf.width for leaf in plan.leaves] == [500, 500, 500]
        assert [leaf.left for leaf in plan.leaves] == [0, 500, 1000]
        assert plan.door_count == 2
        assert plan.leaf_width == 500

    def test_leaves_sit_above_drawer_zone(self) -> None:
        plan = plan_interior(_spec(doors=2, drawers=3), 18, 6, 12)
        assert plan.leaf_height == 1800

    def test_inch_spec_converts_constants(self) -> None:
        plan = plan_interior(
            _spec(height=96, width=48, depth=24, unit="inch", drawers=1),
            thickness=18 / 25.4,
            back_thickness=6 / 25.4,
            drawer_box_thickness=12 / 25.4,
        )
        assert plan.drawer_band == pytest.approx(200 / 25.4)
        assert plan.drawer_box_height == pytest.approx(150 / 25.4)


class TestInfeasibleConfigurations:
    """Tests for configurations that cannot physically fit."""

    def test_drawers_taller_than_carcass(self) -> None:
        with pytest.raises(InfeasibleConfigurationError) as exc_info:
            plan_interior(_spec(height=500, drawers=3), 18, 6, 12)
        assert exc_info.value.dimension == "height"
        assert exc_info.value.required == 600
        assert exc_info.value.available == 482

    def test_shelves_too_close_together(self) -> None:
        with pytest.raises(InfeasibleConfigurationError) as exc_info:
            plan_interior(_spec(height=1000, shelves=10), 18, 6, 12)
        assert exc_info.value.dimension == "height"

    def test_leaves_too_narrow(self) -> None:
        with pytest.raises(InfeasibleConfigurationError) as exc_info:
            plan_interior(_spec(width=400, doors=3), 18, 6, 12)
        assert exc_info.value.dimension == "width"

    def test_width_smaller_than_two_sides(self) -> None:
        with pytest.raises(InfeasibleConfigurationError) as exc_info:
            plan_interior(_spec(width=30), 18, 6, 12)
        assert exc_info.value.dimension == "width"

    def test_depth_not_deeper_than_back(self) -> None:
        with pytest.raises(InfeasibleConfigurationError) as exc_info:
            plan_interior(_spec(depth=5), 18, 6, 12)
        assert exc_info.value.dimension == "depth"

    def test_drawer_box_too_shallow(self) -> None:
        with pytest.raises(InfeasibleConfigurationError) as exc_info:
            plan_interior(_spec(depth=200, drawers=1), 18, 6, 12)
        assert exc_info.value.dimension == "depth"

    def test_leaves_too_short_above_drawers(self) -> None:
        with pytest.raises(InfeasibleConfigurationError) as exc_info:
            plan_interior(_spec(height=700, drawers=3, doors=1), 18, 6, 12)
        assert exc_info.value.dimension == "height"

    def test_error_message_names_the_shortfall(self) -> None:
        with pytest.raises(InfeasibleConfigurationError, match="3 drawers need 600"):
            plan_interior(_spec(height=500, drawers=3), 18, 6, 12)


class TestPlanWithBoards:
    def test_uses_nominal_boards(self) -> None:
        plan = plan_with_boards(_spec(drawers=1))
        assert plan.thickness == 18
        assert plan.back_thickness == 6
        assert plan.drawer_box_thickness == 12

    def test_board_override(self) -> None:
        plan = plan_with_boards(_spec(), BoardThicknesses(carcass_mm=25, back_mm=9, drawer_box_mm=15))
        assert (plan.thickness, plan.back_thickness, plan.drawer_box_thickness) == (25, 9, 15)
        assert plan.interior_width == 1150

    def test_nominal_boards_in_feet(self) -> None:
        plan = plan_with_boards(_spec(height=8, width=4, depth=2, unit="ft"))
        assert plan.thickness == pytest.approx(18 / 304.8)
