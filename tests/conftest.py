"""Pytest configuration and shared fixtures for estimator tests."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

import pytest

from furniture_estimator.domain import (
    BoardAssignment,
    Configuration,
    Dimensions,
    FurnitureSpec,
    RateEntry,
    RateSnapshot,
)
from furniture_estimator.domain.value_objects import BandingClass, MaterialCategory

if TYPE_CHECKING:
    from furniture_estimator.application.commands import EstimateCommand


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests that run the CLI or the API")
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_service_factory():
    """Give every test a fresh default ServiceFactory."""
    from furniture_estimator.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()


@pytest.fixture
def plywood_rates() -> RateSnapshot:
    """Every category on 18mm plywood at 180/sqft, 2mm banding at 15/m."""
    board = BoardAssignment("plywood", 18)
    return RateSnapshot(
        materials={category: board for category in MaterialCategory},
        boards={("plywood", 18): RateEntry(180.0)},
        edge_banding={BandingClass.THICK: 15.0, BandingClass.THIN: 8.0},
        hardware={},
    )


@pytest.fixture
def default_rates() -> RateSnapshot:
    return RateSnapshot.default()


@pytest.fixture
def thick_carcass_rates() -> RateSnapshot:
    """Default rates with the carcass and fronts on 25mm plywood."""
    base = RateSnapshot.default()
    materials = dict(base.materials)
    materials[MaterialCategory.CARCASS] = BoardAssignment("plywood", 25)
    materials[MaterialCategory.FRONT] = BoardAssignment("plywood", 25)
    boards = dict(base.boards)
    boards[("plywood", 25)] = RateEntry(150.0)
    return replace(base, materials=materials, boards=boards)


@pytest.fixture
def wardrobe_spec() -> FurnitureSpec:
    """2400 x 1200 x 600 mm wardrobe with 4 shelves, 3 drawers and 2 doors."""
    return FurnitureSpec(
        furniture_type="wardrobe",
        dimensions=Dimensions(height=2400, width=1200, depth=600),
        configuration=Configuration(shelves=4, drawers=3, doors=2),
    )


@pytest.fixture
def plain_cabinet_spec() -> FurnitureSpec:
    """Cabinet with no interior features: carcass and back only."""
    return FurnitureSpec(
        furniture_type="cabinet",
        dimensions=Dimensions(height=900, width=600, depth=400),
    )


@pytest.fixture
def estimate_command() -> "EstimateCommand":
    """EstimateCommand built by the default ServiceFactory."""
    from furniture_estimator.application.factory import get_factory

    return get_factory().create_estimate_command()
