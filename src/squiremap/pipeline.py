"""Route map drawing pipeline: one profile and one zone map to one JPEG."""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from .bounds import profile_bounds
from .errors import MissingBackground, MissingStartPoint
from .exporter import export_image, output_path_for
from .image_fetcher import ImageFetcher, load_background
from .models import RenderConfig, WaypointProfile
from .overlay_renderer import OverlayRenderer
from .waypoint_parser import AddonSink, WaypointParser
from .zones import ZoneCatalog

logger = logging.getLogger(__name__)

FetchImage = Callable[[str], bytes]


class MapDrawer:
    """Runs the parse, render and export steps for a waypoint profile."""

    def __init__(self, catalog: Optional[ZoneCatalog] = None,
                 fetch_image: Optional[FetchImage] = None,
                 render_config: Optional[RenderConfig] = None,
                 output_dir: Optional[Union[str, Path]] = None):
        """Initialize the map drawer.

        Args:
            catalog: Zone name to image URL lookup
            fetch_image: Callable returning raw image bytes for a URL
            render_config: Overlay rendering configuration
            output_dir: Directory for output images, the working directory if None
        """
        self.catalog = catalog or ZoneCatalog()
        self.fetch_image = fetch_image or ImageFetcher()
        self.render_config = render_config or RenderConfig()
        self.output_dir = output_dir

    def load_profile(self, profile_path: Union[str, Path],
                     addon_sink: Optional[AddonSink] = None) -> WaypointProfile:
        logger.info(f"Parsing profile: {profile_path}")
        return WaypointParser(str(profile_path), addon_sink=addon_sink).parse()

    def resolve_url(self, zone: str) -> str:
        """Look up the map image URL of a zone.

        Raises:
            MissingBackground: If the zone has no image URL
        """
        url = self.catalog.lookup(zone)
        if not url:
            logger.error(f"No image URL for zone '{zone}'")
            raise MissingBackground(f"No image URL for zone '{zone}'")
        return url

    def draw(self, profile_path: Union[str, Path], zone: Optional[str] = None,
             url: Optional[str] = None, addon_sink: Optional[AddonSink] = None) -> Path:
        """Draw the waypoints of a profile onto a zone map and save it.

        Args:
            profile_path: Path to the XML waypoint profile
            zone: Zone name to look up in the catalog
            url: Image URL, used instead of the catalog lookup when given
            addon_sink: Optional callable receiving the ``/way`` lines

        Returns:
            Path of the written JPEG

        Raises:
            NoWaypoints: If the profile has no waypoints at all
            MissingStartPoint: If the profile has no normal waypoints; raised
                before the zone map is downloaded
            MissingBackground: If no zone map could be obtained
            EncodeError: If the image could not be written
        """
        profile = self.load_profile(profile_path, addon_sink)
        bounds = profile_bounds(profile)
        if not profile.normal:
            logger.error(f"Profile {profile.name} has no normal waypoints")
            raise MissingStartPoint(f"Profile '{profile.name}' has no normal waypoints")

        if url is None:
            if zone is None:
                raise MissingBackground("Neither a zone nor an image URL was given")
            url = self.resolve_url(zone)

        data = self.fetch_image(url)
        if not data:
            raise MissingBackground(f"Empty image downloaded from {url}")

        output_path = output_path_for(profile_path, self.output_dir)
        with load_background(data) as background:
            renderer = OverlayRenderer(self.render_config)
            rect = renderer.render_profile(background, profile, bounds)
            export_image(background, rect, output_path)

        logger.info(f"Route map generated successfully: {output_path}")
        return output_path
