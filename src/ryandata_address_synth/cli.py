from __future__ import annotations

import csv
import io
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from ryandata_address_synth.data import DataSourceFactory
from ryandata_address_synth.generator import AddressGenerator
from ryandata_address_synth.models import (
    ADDRESS_FIELDS,
    AddressItem,
    AtFailure,
    RyanDataValidationError,
    SecondaryDescriptorType,
    StateNotFoundError,
)

app = typer.Typer(help="Generate synthetic, internally consistent US addresses.")


class OutputFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    TEXT = "text"


def _generator(ctx: typer.Context) -> AddressGenerator:
    return ctx.ensure_object(dict)["generator"]


def _at_failure(strict: bool) -> AtFailure:
    return AtFailure.ERROR if strict else AtFailure.RANDOM


def render_items(items: list[AddressItem], output_format: OutputFormat) -> str:
    """Render address records as JSON, CSV or one formatted line each."""
    if output_format is OutputFormat.JSON:
        return json.dumps([item.to_dict() for item in items], indent=2)
    if output_format is OutputFormat.CSV:
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=ADDRESS_FIELDS, lineterminator="\n")
        writer.writeheader()
        writer.writerows(item.to_dict() for item in items)
        return buffer.getvalue().rstrip("\n")
    return "\n".join(item.formatted for item in items)


@app.callback()
def main_callback(
    ctx: typer.Context,
    seed: Optional[int] = typer.Option(  # noqa: B008
        None,
        "--seed",
        help="Seed for reproducible output.",
    ),
    data_file: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--data-file",
        help="CSV of cities (state_id,state_name,city,county_name,zip_prefix).",
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr.",
    ),
) -> None:
    """Generate synthetic, internally consistent US addresses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    data_source = DataSourceFactory.create(csv_path=data_file) if data_file else None
    try:
        generator = AddressGenerator(data_source=data_source, seed=seed)
    except (OSError, RyanDataValidationError) as exc:
        typer.echo(f"Could not load reference data: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    ctx.ensure_object(dict)["generator"] = generator


@app.command()
def full(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=0, help="Number of addresses."),
    state: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--state",
        help="Anchor addresses in this state (abbreviation or full name).",
    ),
    strict: bool = typer.Option(False, "--strict", help="Fail on an unknown --state."),
    state_abbreviated: bool = typer.Option(
        False, "--state-abbreviated", help="Use 'CA' rather than 'California'."
    ),
    nine_digit_zip: bool = typer.Option(False, "--nine-digit-zip", help="Use ZIP+4 codes."),
    no_dash: bool = typer.Option(False, "--no-dash", help="Omit the dash in ZIP+4 codes."),
    output_format: OutputFormat = typer.Option(  # noqa: B008
        OutputFormat.TEXT,
        "--format",
        "-f",
        help="Output format.",
    ),
) -> None:
    """Generate complete address records."""
    generator = _generator(ctx)
    try:
        items = generator.full_batch(
            count,
            state_abbreviated=state_abbreviated,
            nine_digit_zip=nine_digit_zip,
            no_dash_in_zip=no_dash,
            state=state,
            at_failure=_at_failure(strict),
        )
    except StateNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    if items:
        typer.echo(render_items(items, output_format))


@app.command()
def street1(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=0),
    number: bool = typer.Option(True, "--number/--no-number", help="Include a street number."),
) -> None:
    """Generate street address lines."""
    generator = _generator(ctx)
    for _ in range(count):
        typer.echo(generator.street1(include_street_number=number))


@app.command()
def street2(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=0),
    descriptor_type: Optional[SecondaryDescriptorType] = typer.Option(  # noqa: B008
        None,
        "--type",
        help="Descriptor category; random when omitted.",
    ),
) -> None:
    """Generate secondary unit lines."""
    generator = _generator(ctx)
    for _ in range(count):
        typer.echo(generator.street2(descriptor_type))


@app.command()
def city(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=0),
    state: Optional[str] = typer.Option(None, "--state", help="State abbreviation or name."),
    strict: bool = typer.Option(False, "--strict", help="Fail on an unknown --state."),
) -> None:
    """Generate city names."""
    generator = _generator(ctx)
    try:
        for _ in range(count):
            typer.echo(generator.city(state, _at_failure(strict)))
    except StateNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def county(ctx: typer.Context, count: int = typer.Option(1, "--count", "-n", min=0)) -> None:
    """Generate county names."""
    generator = _generator(ctx)
    for _ in range(count):
        typer.echo(generator.county())


@app.command()
def state(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=0),
    abbreviated: bool = typer.Option(False, "--abbreviated", "-a"),
) -> None:
    """Generate state names."""
    generator = _generator(ctx)
    for _ in range(count):
        typer.echo(generator.state(abbreviated=abbreviated))


@app.command("zip")
def zip_command(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=0),
    prefix: str = typer.Option("", "--prefix", help="Leading digits of the code."),
    nine_digit_zip: bool = typer.Option(False, "--nine-digit-zip"),
    no_dash: bool = typer.Option(False, "--no-dash"),
) -> None:
    """Generate ZIP codes."""
    generator = _generator(ctx)
    for _ in range(count):
        typer.echo(
            generator.zip_code(
                prefix=prefix, nine_digit_zip=nine_digit_zip, no_dash_in_zip=no_dash
            )
        )


@app.command()
def direction(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=0),
    cardinal_only: bool = typer.Option(False, "--cardinal-only"),
    abbreviated: bool = typer.Option(False, "--abbreviated", "-a"),
) -> None:
    """Generate compass directions."""
    generator = _generator(ctx)
    for _ in range(count):
        typer.echo(
            generator.direction(exclude_intercardinals=cardinal_only, abbreviated=abbreviated)
        )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
