"""
Typer command line for the geoid height lookup.

    geoid-height 38.625473 359.9995
    geoid-height -14.621217 305.021114 --wgs84-altitude 120.5
"""

from __future__ import annotations

import logging
import math
import sys
from typing import List, Optional

import typer

from ..api.intpt_client import IntptClient
from ..calculator import egm96_altitude, lookup_geoid_height
from ..common_core import Coordinate

log = logging.getLogger(__name__)

EXIT_NO_RESULT = 1
EXIT_USAGE = 2

app = typer.Typer(
    help="EGM96 geoid height lookup via the NGA interpolation service",
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _parse_coordinate(values: List[str]) -> Coordinate:
    lat, lng = (float(v) for v in values)
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ValueError(f"coordinates must be finite, got {values}")
    return Coordinate(lat, lng)


# unknown "options" pass through so negative coordinates work as positionals
@app.command(context_settings={"ignore_unknown_options": True})
def main(
    coords: Optional[List[str]] = typer.Argument(None, help="LATITUDE LONGITUDE in decimal degrees"),
    wgs84_altitude: Optional[float] = typer.Option(
        None, "--wgs84-altitude", help="Ellipsoidal altitude [m]; print the EGM96 altitude instead of N"
    ),
    url: Optional[str] = typer.Option(None, help="Service URL (default: $GEOID_INTPT_URL or NGA intpt.cgi)"),
    timeout: Optional[float] = typer.Option(None, help="Request timeout in seconds"),
    strict: bool = typer.Option(False, help="Reject coordinates outside lat [-90, 90], lng [-180, 360)"),
    verbose: bool = typer.Option(False, help="Debug logging on stderr"),
) -> None:
    """Print the geoid undulation in meters, or -9999.99 when none is available."""
    _configure_logging(verbose)
    coords = list(coords or [])
    if len(coords) != 2:
        log.debug("Expected 2 positional values, got %d", len(coords))
        raise typer.Exit(code=EXIT_USAGE)

    try:
        coordinate = _parse_coordinate(coords)
        if strict:
            coordinate.validate()
    except ValueError as exc:
        log.error("Invalid coordinate %s: %s", coords, exc)
        raise typer.Exit(code=EXIT_USAGE)

    try:
        client = IntptClient(url=url, timeout=timeout)
    except ValueError as exc:
        log.error("Invalid configuration: %s", exc)
        raise typer.Exit(code=EXIT_USAGE)

    with client:
        if wgs84_altitude is None:
            result = lookup_geoid_height(coordinate.lat, coordinate.lng, client=client)
        else:
            result = egm96_altitude(coordinate.lat, coordinate.lng, wgs84_altitude, client=client)

    typer.echo(result.value)
    if not result.ok:
        raise typer.Exit(code=EXIT_NO_RESULT)


if __name__ == "__main__":
    app()
