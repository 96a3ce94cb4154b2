"""Typer CLI for furniture estimation."""

import json
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from pydantic import ValidationError as PydanticValidationError

from furniture_estimator.application import EstimateOutput
from furniture_estimator.application.config import (
    ConfigError,
    FurnitureSpecConfig,
    config_to_rates,
    config_to_spec,
    load_rates,
    load_spec,
    load_spec_from_dict,
    merge_spec_with_cli,
    rates_to_config,
)
from furniture_estimator.application.factory import get_factory
from furniture_estimator.cli.commands import validate_command
from furniture_estimator.domain import EstimationError, RateSnapshot
from furniture_estimator.infrastructure.exporters import (
    ExporterRegistry,
    drawing_to_dict,
)

BOM_FORMATS = ("text", "csv", "json")
LAYOUT_FORMATS = ("svg", "dxf", "json")


app = typer.Typer(
    name="furniture-estimator",
    help="Estimate materials, cost and a front-view layout for furniture pieces.",
)

app.command(name="validate")(validate_command)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON spec file"),
]
TypeOption = Annotated[
    str | None,
    typer.Option(
        "--type",
        "-t",
        help="Furniture type: wardrobe, cabinet, storage_unit, bookshelf, tv_unit, shoe_rack",
    ),
]
HeightOption = Annotated[float | None, typer.Option("--height", "-h", help="Outer height")]
WidthOption = Annotated[float | None, typer.Option("--width", "-w", help="Outer width")]
DepthOption = Annotated[float | None, typer.Option("--depth", "-d", help="Outer depth")]
ShelvesOption = Annotated[int | None, typer.Option("--shelves", help="Number of shelves")]
DrawersOption = Annotated[int | None, typer.Option("--drawers", help="Number of drawers")]
DoorsOption = Annotated[int | None, typer.Option("--doors", help="Number of doors")]
ShuttersOption = Annotated[int | None, typer.Option("--shutters", help="Number of shutters")]
UnitOption = Annotated[
    str | None,
    typer.Option("--unit", "-u", help="Unit of measure: mm, inch, ft (default: mm)"),
]
FinishOption = Annotated[
    str | None,
    typer.Option("--finish", help="Surface finish: none, laminate"),
]
OutputOption = Annotated[
    Path | None,
    typer.Option("--output", "-o", help="Write to this file instead of stdout"),
]


def _fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _resolve_spec(
    config_file: Path | None,
    furniture_type: str | None,
    height: float | None,
    width: float | None,
    depth: float | None,
    shelves: int | None,
    drawers: int | None,
    doors: int | None,
    shutters: int | None,
    unit: str | None,
    finish: str | None,
    calculation_number: str | None = None,
) -> FurnitureSpecConfig:
    """Build the spec from a file and/or options; options win over the file."""
    overrides: dict[str, Any] = {
        "furniture_type": furniture_type,
        "height": height,
        "width": width,
        "depth": depth,
        "shelves": shelves,
        "drawers": drawers,
        "doors": doors,
        "shutters": shutters,
        "unit_of_measure": unit,
        "finish": finish,
        "calculation_number": calculation_number,
    }
    try:
        if config_file is not None:
            return merge_spec_with_cli(load_spec(config_file), **overrides)

        missing = [
            f"--{name}"
            for name, value in (
                ("type", furniture_type),
                ("height", height),
                ("width", width),
                ("depth", depth),
            )
            if value is None
        ]
        if missing:
            _fail(f"Missing required options: {', '.join(missing)} (or use --config)")

        data: dict[str, Any] = {
            "furnitureType": furniture_type,
            "dimensions": {"height": height, "width": width, "depth": depth},
            "configuration": {
                key: value
                for key, value in (
                    ("shelves", shelves),
                    ("drawers", drawers),
                    ("doors", doors),
                    ("shutters", shutters),
                )
                if value is not None
            },
        }
        if unit is not None:
            data["unitOfMeasure"] = unit
        if finish is not None:
            data["finish"] = finish
        if calculation_number is not None:
            data["calculationNumber"] = calculation_number
        return load_spec_from_dict(data)
    except ConfigError as e:
        _fail(str(e))
    except PydanticValidationError as e:
        _fail(f"Invalid option value: {e.errors()[0]['msg']}")


def _resolve_rates(rates_file: Path | None) -> RateSnapshot:
    if rates_file is None:
        return RateSnapshot.default()
    try:
        return config_to_rates(load_rates(rates_file))
    except ConfigError as e:
        _fail(str(e))


def _emit(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content, encoding="utf-8")
    typer.echo(f"Wrote {output_file}")


def _run_estimate(
    config: FurnitureSpecConfig,
    rates: RateSnapshot,
    include_hardware: bool = True,
    include_layout: bool = False,
) -> EstimateOutput:
    command = get_factory().create_estimate_command()
    try:
        return command.execute(
            config_to_spec(config),
            rates,
            calculation_number=config.calculation_number,
            include_hardware=include_hardware,
            include_layout=include_layout,
        )
    except EstimationError as e:
        _fail(str(e))


@app.command()
def estimate(
    config_file: ConfigOption = None,
    furniture_type: TypeOption = None,
    height: HeightOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    shelves: ShelvesOption = None,
    drawers: DrawersOption = None,
    doors: DoorsOption = None,
    shutters: ShuttersOption = None,
    unit: UnitOption = None,
    finish: FinishOption = None,
    rates_file: Annotated[
        Path | None,
        typer.Option("--rates", "-r", help="Path to JSON rate table (default: built-in rates)"),
    ] = None,
    no_hardware: Annotated[
        bool,
        typer.Option("--no-hardware", help="Leave hardware out of the estimate"),
    ] = False,
    calculation_number: Annotated[
        str | None,
        typer.Option("--calculation-number", "-n", help="Identifier carried into the BOM"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, csv, json"),
    ] = "text",
    output_file: OutputOption = None,
) -> None:
    """Estimate the bill of materials and cost of a piece.

    Example:
        furniture-estimator estimate -t wardrobe -h 2400 -w 1200 -d 600 --shelves 4 --doors 2
    """
    if output_format not in BOM_FORMATS:
        _fail(f"Unknown format '{output_format}'. Available: {', '.join(BOM_FORMATS)}")

    config = _resolve_spec(
        config_file,
        furniture_type,
        height,
        width,
        depth,
        shelves,
        drawers,
        doors,
        shutters,
        unit,
        finish,
        calculation_number,
    )
    rates = _resolve_rates(rates_file)
    result = _run_estimate(config, rates, include_hardware=not no_hardware)

    exporter = ExporterRegistry.get(output_format)()
    _emit(exporter.export_string(result), output_file)


@app.command()
def layout(
    config_file: ConfigOption = None,
    furniture_type: TypeOption = None,
    height: HeightOption = None,
    width: WidthOption = None,
    depth: DepthOption = None,
    shelves: ShelvesOption = None,
    drawers: DrawersOption = None,
    doors: DoorsOption = None,
    shutters: ShuttersOption = None,
    unit: UnitOption = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: svg, dxf, json"),
    ] = "svg",
    output_file: OutputOption = None,
) -> None:
    """Draw the front-view schematic of a piece.

    Example:
        furniture-estimator layout -c wardrobe.json -f svg -o wardrobe.svg
    """
    if output_format not in LAYOUT_FORMATS:
        _fail(f"Unknown format '{output_format}'. Available: {', '.join(LAYOUT_FORMATS)}")

    config = _resolve_spec(
        config_file,
        furniture_type,
        height,
        width,
        depth,
        shelves,
        drawers,
        doors,
        shutters,
        unit,
        None,
    )
    try:
        drawing = get_factory().get_layout_engine().layout(config_to_spec(config))
    except EstimationError as e:
        _fail(str(e))

    if output_format == "json":
        content = json.dumps(drawing_to_dict(drawing), indent=2)
    else:
        content = ExporterRegistry.get(output_format)().render(drawing)
    _emit(content, output_file)


@app.command()
def rates(
    output_file: OutputOption = None,
) -> None:
    """Print the built-in rate table as JSON.

    The output is a valid --rates file and can be edited as a starting point.
    """
    data = rates_to_config(RateSnapshot.default()).model_dump(by_alias=True, mode="json")
    _emit(json.dumps(data, indent=2), output_file)


if __name__ == "__main__":
    app()
