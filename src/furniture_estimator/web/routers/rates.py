"""Rate table endpoints."""

from typing import Any

from fastapi import APIRouter

from furniture_estimator.application.config import rates_to_config
from furniture_estimator.domain import RateSnapshot

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("/default")
async def default_rates() -> dict[str, Any]:
    """The built-in rate table, in the rate file format."""
    return rates_to_config(RateSnapshot.default()).model_dump(by_alias=True, mode="json")
