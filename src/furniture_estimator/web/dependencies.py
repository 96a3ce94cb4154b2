"""FastAPI dependency injection for estimation services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from furniture_estimator.application.commands import EstimateCommand
from furniture_estimator.application.factory import ServiceFactory, get_factory
from furniture_estimator.domain import LayoutEngine


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_estimate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> EstimateCommand:
    """Dependency for EstimateCommand."""
    return factory.create_estimate_command()


def get_layout_engine(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> LayoutEngine:
    """Dependency for LayoutEngine."""
    return factory.get_layout_engine()


# Type aliases for cleaner endpoint signatures
EstimateCommandDep = Annotated[EstimateCommand, Depends(get_estimate_command)]
LayoutEngineDep = Annotated[LayoutEngine, Depends(get_layout_engine)]
