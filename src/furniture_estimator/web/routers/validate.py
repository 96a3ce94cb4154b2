"""Spec validation endpoints."""

from fastapi import APIRouter

from furniture_estimator.application.config import load_spec_from_dict, validate_spec
from furniture_estimator.web.schemas import SpecValidateRequest, ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
def validate(request: SpecValidateRequest) -> ValidationResultSchema:
    """Validate a spec without estimating it.

    Schema errors are reported by the ConfigError handler with status 422.
    """
    result = validate_spec(load_spec_from_dict(request.spec))
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
