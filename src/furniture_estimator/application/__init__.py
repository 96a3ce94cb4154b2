"""Application layer - use cases and orchestration."""

from .commands import EstimateCommand
from .dtos import EstimateOutput

__all__ = [
    "EstimateCommand",
    "EstimateOutput",
]
