"""Utility functions for the CLI commands."""

import logging
from pathlib import Path
from typing import Optional

import typer

from ..models import RenderConfig, WaypointProfile
from ..waypoint_parser import WaypointParser
from ..zones import ZoneCatalog

logger = logging.getLogger(__name__)


def load_profile(profile_file: Path) -> WaypointProfile:
    """Parse a profile for a command, aborting on failure."""
    logger.info(f"Parsing profile: {profile_file}")
    try:
        return WaypointParser(str(profile_file)).parse()
    except (ValueError, OSError) as e:
        logger.error(f"Error reading profile: {e}")
        raise typer.Abort()


def load_catalog(zones_file: Optional[Path]) -> ZoneCatalog:
    """Load the zone catalog from the given or default location, aborting on failure."""
    try:
        return ZoneCatalog.from_file(str(zones_file) if zones_file else None)
    except (ValueError, OSError) as e:
        logger.error(f"Error loading zone catalog: {e}")
        raise typer.Abort()


def create_render_config(font_file: Optional[Path] = None, font_size: int = 12,
                         padding: int = 40) -> RenderConfig:
    """Create a RenderConfig object from the given parameters.

    Args:
        font_file: Optional path to a TrueType font file (.ttf) for the caption
        font_size: Caption font size in pixels
        padding: Margin around the route bounds in pixels

    Returns:
        RenderConfig object
    """
    if padding < 1:
        logger.error(f"Invalid padding: {padding}")
        raise typer.BadParameter("Padding must be at least 1 pixel")

    return RenderConfig(
        padding=padding,
        font_file=str(font_file) if font_file else None,
        font_size=font_size
    )
