"""Pydantic request schemas for the REST API.

Specs and rate tables are accepted as raw dictionaries and validated by
the configuration loader, so the API reports the same field paths as
the CLI.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_REQUEST_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EstimateRequest(BaseModel):
    """Request for a full estimate."""

    model_config = _REQUEST_CONFIG

    spec: dict[str, Any] = Field(..., description="Furniture spec JSON")
    rates: dict[str, Any] | None = Field(
        default=None, description="Rate table JSON (default: built-in rates)"
    )
    include_hardware: bool = Field(default=True, description="Estimate hardware")
    include_layout: bool = Field(default=False, description="Also return the layout")


class LayoutRequest(BaseModel):
    """Request for the front-view layout."""

    model_config = _REQUEST_CONFIG

    spec: dict[str, Any] = Field(..., description="Furniture spec JSON")


class ExportRequest(BaseModel):
    """Request for an estimate rendered in an export format."""

    model_config = _REQUEST_CONFIG

    spec: dict[str, Any] = Field(..., description="Furniture spec JSON")
    rates: dict[str, Any] | None = Field(default=None, description="Rate table JSON")
    include_hardware: bool = Field(default=True, description="Estimate hardware")


class SpecValidateRequest(BaseModel):
    """Request for validating a spec."""

    spec: dict[str, Any] = Field(..., description="Furniture spec JSON")
