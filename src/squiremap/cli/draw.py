"""Command for drawing a waypoint profile onto a zone map."""

import logging
from pathlib import Path
from typing import Optional

import typer

from ..errors import SquireMapError
from ..image_fetcher import ImageFetcher
from ..pipeline import MapDrawer
from ..zones import ZoneCatalog
from .utils import create_render_config, load_catalog
from . import app

logger = logging.getLogger(__name__)


@app.command()
def draw(
    profile_file: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="Path to the XML waypoint profile"
    ),
    zone: Optional[str] = typer.Option(
        None,
        "--zone", "-z",
        help="Zone name to look up in the zone catalog"
    ),
    url: Optional[str] = typer.Option(
        None,
        "--url", "-u",
        help="Zone map image URL, bypasses the zone catalog"
    ),
    zones_file: Optional[Path] = typer.Option(
        None,
        "--zones-file",
        help="JSON file mapping zone names to image URLs (default: OS dependent config location)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir", "-o",
        help="Directory for the output image (default: current directory)"
    ),
    font_file: Optional[Path] = typer.Option(
        None,
        "--font", "-ff",
        help="Path to a TrueType font file (.ttf) for the caption",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True
    ),
    font_size: int = typer.Option(
        12,
        "--font-size", "-fs",
        min=6,
        max=72,
        help="Caption font size in pixels"
    ),
    padding: int = typer.Option(
        40,
        "--padding", "-p",
        min=1,
        help="Margin around the route in pixels"
    ),
    addon_file: Optional[Path] = typer.Option(
        None,
        "--addon-file", "-a",
        help="Also write the /way addon lines of the normal route to this file"
    ),
    timeout: float = typer.Option(
        30.0,
        "--timeout", "-t",
        min=1.0,
        help="Image download timeout in seconds"
    ),
):
    """Draw the waypoints of a profile onto a zone map.

    The image is cropped around the route and saved as <profile name>.jpg.
    """
    if zone is None and url is None:
        raise typer.BadParameter("Either --zone or --url is required")

    catalog = load_catalog(zones_file) if url is None else ZoneCatalog()

    if output_dir is not None and not output_dir.exists():
        output_dir.mkdir(parents=True)

    drawer = MapDrawer(
        catalog=catalog,
        fetch_image=ImageFetcher(timeout=timeout),
        render_config=create_render_config(font_file, font_size, padding),
        output_dir=output_dir
    )

    lines = []
    try:
        output_path = drawer.draw(profile_file, zone=zone, url=url, addon_sink=lines.append)
        if addon_file is not None:
            addon_file.write_text("".join(lines), encoding="utf-8")
            logger.info(f"Addon lines written to {addon_file}")
    except (SquireMapError, OSError) as e:
        logger.error(f"Error drawing map: {e}")
        raise typer.Abort()

    typer.echo(str(output_path))
