"""Tests for PanelDecomposer."""

from __future__ import annotations

from dataclasses import replace

import pytest

from furniture_estimator.domain import (
    BoardAssignment,
    Configuration,
    CustomPart,
    Dimensions,
    FurnitureSpec,
    InvalidSpecError,
    PanelDecomposer,
    RateEntry,
    RateSnapshot,
    UnknownMaterialError,
)
from furniture_estimator.domain.services import BoardThicknesses, group_pieces
from furniture_estimator.domain.value_objects import (
    ALL_EDGES,
    Edge,
    ItemCategory,
    ItemType,
    MaterialCategory,
    PanelRole,
)


@pytest.fixture
def decomposer() -> PanelDecomposer:
    return PanelDecomposer()


class TestWardrobeDecomposition:
    """The reference wardrobe on uniform 18mm plywood."""

    def test_panel_lines_in_order(self, decomposer, wardrobe_spec, plywood_rates) -> None:
        panels = decomposer.decompose(wardrobe_spec, plywood_rates)
        assert [(p.part_name, p.quantity) for p in panels] == [
            ("Side Panel", 2),
            ("Top Panel", 1),
            ("Bottom Panel", 1),
            ("Back Panel", 1),
            ("Shelf", 4),
            ("Drawer Front", 3),
            ("Drawer Side", 6),
            ("Drawer Back", 3),
            ("Drawer Bottom", 3),
            ("Door", 2),
        ]

    def test_panel_sizes(self, decomposer, wardrobe_spec, plywood_rates) -> None:
        sizes = {
            p.part_name: (p.length, p.width)
            for p in decomposer.decompose(wardrobe_spec, plywood_rates)
        }
        assert sizes["Side Panel"] == (2400, 600)
        assert sizes["Top Panel"] == (1164, 600)
        assert sizes["Back Panel"] == (2364, 1164)
        assert sizes["Shelf"] == (1164, 582)
        assert sizes["Drawer Front"] == (1200, 200)
        assert sizes["Drawer Side"] == (562, 150)
        assert sizes["Drawer Back"] == (1103, 150)
        assert sizes["Drawer Bottom"] == (1139, 562)
        assert sizes["Door"] == (1800, 600)

    def test_total_area_matches_reference(self, decomposer, wardrobe_spec, plywood_rates) -> None:
        panels = decomposer.decompose(wardrobe_spec, plywood_rates)
        assert sum(p.length * p.width * p.quantity for p in panels) == pytest.approx(15_540_792)

    def test_material_labels_and_thickness(self, decomposer, wardrobe_spec, plywood_rates) -> None:
        for panel in decomposer.decompose(wardrobe_spec, plywood_rates):
            assert panel.material_type == "18mm Plywood"
            assert panel.thickness == 18

    def test_classification(self, decomposer, wardrobe_spec, plywood_rates) -> None:
        by_name = {p.part_name: p for p in decomposer.decompose(wardrobe_spec, plywood_rates)}
        assert by_name["Side Panel"].item_category == ItemCategory.MAIN_STRUCTURE
        assert by_name["Shelf"].item_type == ItemType.SHELF
        assert by_name["Shelf"].item_category == ItemCategory.INTERNAL
        assert by_name["Drawer Front"].item_category == ItemCategory.FRONT
        assert by_name["Drawer Side"].material_category == MaterialCategory.DRAWER_BOX
        assert by_name["Drawer Bottom"].material_category == MaterialCategory.DRAWER_BOTTOM
        assert by_name["Door"].role == PanelRole.DOOR

    def test_exposed_edges(self, decomposer, wardrobe_spec, plywood_rates) -> None:
        by_name = {p.part_name: p for p in decomposer.decompose(wardrobe_spec, plywood_rates)}
        assert by_name["Side Panel"].exposed_edges == frozenset({Edge.FRONT})
        assert by_name["Back Panel"].exposed_edges == frozenset()
        assert by_name["Door"].exposed_edges == ALL_EDGES
        assert by_name["Drawer Front"].exposed_edges == ALL_EDGES

    def test_decomposition_is_deterministic(self, decomposer, wardrobe_spec, plywood_rates) -> None:
        first = decomposer.decompose(wardrobe_spec, plywood_rates)
        second = decomposer.decompose(wardrobe_spec, plywood_rates)
        assert first == second


class TestBoardThicknesses:
    def test_default_rates_use_thinner_back_and_boxes(self, decomposer, wardrobe_spec, default_rates) -> None:
        by_name = {p.part_name: p for p in decomposer.decompose(wardrobe_spec, default_rates)}
        assert by_name["Back Panel"].material_type == "6mm Plywood"
        assert by_name["Shelf"].width == 594
        assert by_name["Drawer Side"].material_type == "12mm Plywood"
        assert by_name["Drawer Back"].length == 1164 - 25 - 24

    def test_thicker_carcass_narrows_interior(self, decomposer, plain_cabinet_spec) -> None:
        rates = RateSnapshot(
            materials={
                MaterialCategory.CARCASS: BoardAssignment("mdf", 25),
                MaterialCategory.BACK: BoardAssignment("mdf", 6),
            },
            boards={("mdf", 25): RateEntry(110.0), ("mdf", 6): RateEntry(50.0)},
        )
        by_name = {p.part_name: p for p in decomposer.decompose(plain_cabinet_spec, rates)}
        assert by_name["Top Panel"].length == 550
        assert by_name["Top Panel"].material_type == "25mm MDF"

    def test_inch_spec_converts_board_thickness(self, decomposer, default_rates) -> None:
        spec = FurnitureSpec(
            furniture_type="cabinet",
            dimensions=Dimensions(height=36, width=24, depth=16),
            unit_of_measure="inch",
        )
        by_name = {p.part_name: p for p in decomposer.decompose(spec, default_rates)}
        assert by_name["Side Panel"].thickness == pytest.approx(18 / 25.4)
        assert by_name["Top Panel"].length == pytest.approx(24 - 36 / 25.4)

    def test_board_thicknesses_read_the_snapshot(self, decomposer, wardrobe_spec, thick_carcass_rates) -> None:
        boards = decomposer.board_thicknesses(wardrobe_spec, thick_carcass_rates)
        assert boards == BoardThicknesses(carcass_mm=25, back_mm=6, drawer_box_mm=12)

    def test_board_thicknesses_without_drawers_keep_nominal_box(self, decomposer, plain_cabinet_spec) -> None:
        rates = RateSnapshot(
            materials={
                MaterialCategory.CARCASS: BoardAssignment("mdf", 25),
                MaterialCategory.BACK: BoardAssignment("mdf", 9),
            },
        )
        boards = decomposer.board_thicknesses(plain_cabinet_spec, rates)
        assert boards == BoardThicknesses(carcass_mm=25, back_mm=9)


class TestFronts:
    def test_doors_precede_shutters(self, decomposer, default_rates) -> None:
        spec = FurnitureSpec(
            furniture_type="cabinet",
            dimensions=Dimensions(height=900, width=900, depth=400),
            configuration=Configuration(doors=1, shutters=2),
        )
        fronts = [p for p in decomposer.decompose(spec, default_rates) if p.item_category == ItemCategory.FRONT]
        assert [(p.part_name, p.quantity, p.width) for p in fronts] == [
            ("Door", 1, 300),
            ("Shutter", 2, 300),
        ]
        assert fronts[1].item_type == ItemType.SHUTTER


class TestCustomParts:
    def test_custom_parts_come_last(self, decomposer, default_rates) -> None:
        spec = FurnitureSpec(
            furniture_type="cabinet",
            dimensions=Dimensions(height=900, width=600, depth=400),
            configuration=Configuration(shelves=1, custom_parts=(CustomPart("Partition", 2),)),
        )
        last = decomposer.decompose(spec, default_rates)[-1]
        assert last.part_name == "Partition"
        assert last.item_type == ItemType.CUSTOM_PART
        assert last.quantity == 2
        assert (last.length, last.width) == pytest.approx((320, 240))


class TestFailures:
    def test_archetype_restriction(self, decomposer, default_rates) -> None:
        spec = FurnitureSpec(
            furniture_type="storage_unit",
            dimensions=Dimensions(height=1800, width=900, depth=450),
            configuration=Configuration(shutters=2),
        )
        with pytest.raises(InvalidSpecError):
            decomposer.decompose(spec, default_rates)

    def test_missing_category_only_when_needed(self, decomposer, wardrobe_spec, plain_cabinet_spec) -> None:
        rates = RateSnapshot(
            materials={
                MaterialCategory.CARCASS: BoardAssignment("plywood", 18),
                MaterialCategory.BACK: BoardAssignment("plywood", 6),
            },
        )
        assert len(decomposer.decompose(plain_cabinet_spec, rates)) == 4
        with pytest.raises(UnknownMaterialError):
            decomposer.decompose(wardrobe_spec, rates)


class TestGroupPieces:
    def test_identical_pieces_merge(self, decomposer, plain_cabinet_spec, default_rates) -> None:
        side = decomposer.decompose(plain_cabinet_spec, default_rates)[0]
        single = replace(side, quantity=1)
        grouped = group_pieces([single, single, single])
        assert len(grouped) == 1
        assert grouped[0].quantity == 3
