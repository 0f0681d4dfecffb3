#!/usr/bin/env python3
"""CLI interface for netmonitor-timeline."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .converter import build_axis
from .divider import DEFAULT_TICK_COUNT, MAX_TICK_COUNT, divide
from .models import AxisResult, TimeScale


def _print_axis(axis: AxisResult, scale: Optional[TimeScale]) -> None:
    divisions = axis.divisions_by_unit(scale) if scale else axis.divisions
    click.echo(
        f"Duration: {axis.duration_ms:g} ms, step: {axis.step_ms:g} ms, "
        f"{len(divisions)} divisions"
    )
    for division in divisions:
        click.echo(f"{division.offset_ms:>12g}  {division.unit:<11}  {division.label}")


@click.command()
@click.argument(
    "input_path", type=click.Path(exists=True, path_type=Path), required=False
)
@click.option(
    "-d",
    "--duration",
    type=float,
    help="Divide a raw duration in milliseconds instead of a request log",
)
@click.option(
    "-n",
    "--ticks",
    type=click.IntRange(1, MAX_TICK_COUNT),
    default=DEFAULT_TICK_COUNT,
    show_default=True,
    help="Target number of intervals on the axis",
)
@click.option(
    "--from-date",
    type=str,
    help='Only count requests from this date/time (e.g., "2 hours ago", "yesterday", "2025-06-08")',
)
@click.option(
    "--to-date",
    type=str,
    help='Only count requests up to this date/time (e.g., "1 hour ago", "today", "2025-06-08 15:00")',
)
@click.option(
    "--scale",
    type=click.Choice(["millisecond", "second", "minute"]),
    help="Only print divisions labelled in this time scale",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the axis as JSON",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
def main(
    input_path: Optional[Path],
    duration: Optional[float],
    ticks: int,
    from_date: Optional[str],
    to_date: Optional[str],
    scale: Optional[TimeScale],
    as_json: bool,
    verbose: bool,
) -> None:
    """Compute timeline axis divisions for recorded network requests.

    INPUT_PATH: Path to a JSONL request log or a directory of them. Use --duration instead to divide a raw span in milliseconds.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if input_path is not None and duration is not None:
        raise click.UsageError("Provide either INPUT_PATH or --duration, not both")

    try:
        if input_path is not None:
            axis = build_axis(input_path, ticks, from_date, to_date)
        elif duration is not None:
            axis = divide(duration, ticks)
        else:
            raise click.UsageError("Provide either INPUT_PATH or --duration")

        if as_json:
            click.echo(axis.model_dump_json(indent=2))
        else:
            _print_axis(axis, scale)

    except FileNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
