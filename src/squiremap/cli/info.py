"""Command for displaying information about waypoint profiles."""

import logging
from pathlib import Path

import typer

from ..bounds import profile_bounds
from ..errors import NoWaypoints
from ..models import MAP_SCALAR, format_coordinate
from .utils import load_profile
from . import app

logger = logging.getLogger(__name__)


@app.command()
def info(
        profile_file: Path = typer.Argument(
            ...,
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the XML waypoint profile"
        )
):
    """Display information about a waypoint profile."""
    profile = load_profile(profile_file)

    try:
        bounds = profile_bounds(profile)
    except NoWaypoints as e:
        logger.error(str(e))
        raise typer.Abort()

    typer.echo(f"Profile: {profile_file}")
    typer.echo(f"Normal waypoints: {len(profile.normal)}")
    typer.echo(f"Ghost waypoints: {len(profile.ghost)}")
    typer.echo(f"Vendor waypoints: {len(profile.vendor)}")
    typer.echo(f"Bounds: {bounds.x:.4f},{bounds.y:.4f} to {bounds.right:.4f},{bounds.bottom:.4f}")

    if profile.normal:
        start = profile.start_point
        typer.echo(f"Start point: {format_coordinate(start.x * MAP_SCALAR)} {format_coordinate(start.y * MAP_SCALAR)}")
    else:
        typer.echo("No start point (normal route is empty)")
