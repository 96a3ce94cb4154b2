"""API routers for the REST API."""

from furniture_estimator.web.routers.estimate import router as estimate_router
from furniture_estimator.web.routers.export import router as export_router
from furniture_estimator.web.routers.layout import router as layout_router
from furniture_estimator.web.routers.rates import router as rates_router
from furniture_estimator.web.routers.validate import router as validate_router

__all__ = [
    "estimate_router",
    "export_router",
    "layout_router",
    "rates_router",
    "validate_router",
]
