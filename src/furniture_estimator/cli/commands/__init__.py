"""CLI command implementations for the furniture-estimator application."""

from furniture_estimator.cli.commands.validate import validate_command

__all__ = ["validate_command"]
