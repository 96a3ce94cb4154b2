"""Loading of spec and rate files with structured error reporting.

File system problems, JSON syntax errors and schema violations all
surface as ConfigError, whose ``error_type`` tells them apart.
"""

import json
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from furniture_estimator.application.config.schema import (
    FurnitureSpecConfig,
    RateTableConfig,
)

M = TypeVar("M", bound=BaseModel)


class ConfigError(Exception):
    """Exception raised when a spec or rate file cannot be used.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Path to the file (if loaded from disk)
        details: Line/column for JSON errors, one entry per field for
            validation errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("dimensions", "height"))
        'dimensions.height'
        >>> _format_json_path(("configuration", "customParts", 0, "name"))
        'configuration.customParts[0].name'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(kind: str, details: list[dict[str, Any]]) -> str:
    lines = [f"{kind} validation failed:"]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _read_json(path: Path, kind: str) -> Any:
    if not path.exists():
        raise ConfigError(
            message=f"{kind} file not found: {path}",
            error_type="file_not_found",
            path=path,
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading {kind.lower()} file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading {kind.lower()} file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in {kind.lower()} file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def _validate(model: type[M], data: Any, kind: str, path: Path | None = None) -> M:
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(kind, details),
            error_type="validation",
            path=path,
            details=details,
        )


def load_spec(path: Path) -> FurnitureSpecConfig:
    """Load and validate a furniture spec from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.

    Example:
        >>> try:
        ...     config = load_spec(Path("wardrobe.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    return _validate(FurnitureSpecConfig, _read_json(path, "Spec"), "Spec", path)


def load_rates(path: Path) -> RateTableConfig:
    """Load and validate a rate table from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    return _validate(RateTableConfig, _read_json(path, "Rate"), "Rate table", path)


def load_spec_from_dict(data: dict[str, Any]) -> FurnitureSpecConfig:
    """Validate a furniture spec given as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(FurnitureSpecConfig, data, "Spec")


def load_rates_from_dict(data: dict[str, Any]) -> RateTableConfig:
    """Validate a rate table given as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(RateTableConfig, data, "Rate table")
