"""Command for listing the zones of the zone catalog."""

import logging
from pathlib import Path
from typing import Optional

import typer

from .utils import load_catalog
from . import app

logger = logging.getLogger(__name__)


@app.command()
def zones(
        zones_file: Optional[Path] = typer.Option(
            None,
            "--zones-file",
            help="JSON file mapping zone names to image URLs (default: OS dependent config location)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True
        )
):
    """List the zone names known to the zone catalog."""
    catalog = load_catalog(zones_file)

    if len(catalog) == 0:
        typer.echo("Zone catalog is empty")
        return

    for name in catalog.names():
        marker = "" if catalog.lookup(name) else " (no image)"
        typer.echo(f"{name}{marker}")
