"""Command for printing the addon waypoint macros of a profile."""

import logging
from pathlib import Path

import typer

from .utils import load_profile
from . import app

logger = logging.getLogger(__name__)


@app.command()
def addon(
        profile_file: Path = typer.Argument(
            ...,
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the XML waypoint profile"
        )
):
    """Print one /way macro line per normal route waypoint."""
    profile = load_profile(profile_file)

    if not profile.addon_lines:
        logger.warning("Profile has no normal waypoints")
        return

    typer.echo("".join(profile.addon_lines), nl=False)
