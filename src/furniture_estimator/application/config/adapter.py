"""Adapters between configuration models and domain objects.

Domain validation runs when the domain objects are built, so a config
that passed schema validation can still raise InvalidSpecError here
(for example an unsupported feature for the archetype is caught later,
during decomposition).
"""

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
from furniture_estimator.domain.rates import (
    BoardAssignment,
    LaminateRates,
    RateEntry,
    RateSnapshot,
)
from furniture_estimator.domain.value_objects import (
    Configuration,
    CustomPart,
    Dimensions,
    FurnitureSpec,
)


def config_to_spec(config: FurnitureSpecConfig) -> FurnitureSpec:
    """Convert a FurnitureSpecConfig to a domain FurnitureSpec.

    Raises:
        InvalidSpecError: If the domain rejects the values.
    """
    cfg = config.configuration
    return FurnitureSpec(
        furniture_type=config.furniture_type,
        dimensions=Dimensions(
            height=config.dimensions.height,
            width=config.dimensions.width,
            depth=config.dimensions.depth,
        ),
        configuration=Configuration(
            shelves=cfg.shelves,
            drawers=cfg.drawers,
            doors=cfg.doors,
            shutters=cfg.shutters,
            custom_parts=tuple(CustomPart(p.name, p.quantity) for p in cfg.custom_parts),
        ),
        unit_of_measure=config.unit_of_measure,
        finish=config.finish,
    )


def spec_to_config(spec: FurnitureSpec) -> FurnitureSpecConfig:
    """Convert a domain FurnitureSpec back to its configuration model."""
    cfg = spec.configuration
    return FurnitureSpecConfig(
        furniture_type=spec.furniture_type,
        dimensions=DimensionsConfig(
            height=spec.dimensions.height,
            width=spec.dimensions.width,
            depth=spec.dimensions.depth,
        ),
        configuration=ConfigurationConfig(
            shelves=cfg.shelves,
            drawers=cfg.drawers,
            doors=cfg.doors,
            shutters=cfg.shutters,
            custom_parts=[CustomPartConfig(name=p.name, quantity=p.quantity) for p in cfg.custom_parts],
        ),
        unit_of_measure=spec.unit_of_measure,
        finish=spec.finish,
    )


def config_to_rates(config: RateTableConfig) -> RateSnapshot:
    """Convert a RateTableConfig to an immutable RateSnapshot."""
    laminate = None
    if config.laminate is not None:
        laminate = LaminateRates(
            outer_rate=config.laminate.outer_rate,
            inner_rate=config.laminate.inner_rate,
            adhesive_bottle_price=config.laminate.adhesive_bottle_price,
            adhesive_coverage_sqft=config.laminate.adhesive_coverage_sqft,
            adhesive_waste=config.laminate.adhesive_waste,
        )
    return RateSnapshot(
        materials={
            category: BoardAssignment(board.material, board.thickness)
            for category, board in config.materials.items()
        },
        boards={
            (board.material, board.thickness): RateEntry(board.rate, board.basis)
            for board in config.boards
        },
        edge_banding=dict(config.edge_banding),
        hardware=dict(config.hardware),
        laminate=laminate,
    )


def rates_to_config(rates: RateSnapshot) -> RateTableConfig:
    """Convert a RateSnapshot back to its configuration model."""
    laminate = None
    if rates.laminate is not None:
        laminate = LaminateConfig(
            outer_rate=rates.laminate.outer_rate,
            inner_rate=rates.laminate.inner_rate,
            adhesive_bottle_price=rates.laminate.adhesive_bottle_price,
            adhesive_coverage_sqft=rates.laminate.adhesive_coverage_sqft,
            adhesive_waste=rates.laminate.adhesive_waste,
        )
    return RateTableConfig(
        materials={
            category: BoardConfig(material=a.material, thickness=a.thickness_mm)
            for category, a in rates.materials.items()
        },
        boards=[
            BoardRateConfig(
                material=material, thickness=thickness, rate=entry.unit_rate, basis=entry.pricing_basis
            )
            for (material, thickness), entry in rates.boards.items()
        ],
        edge_banding=dict(rates.edge_banding),
        hardware=dict(rates.hardware),
        laminate=laminate,
    )
