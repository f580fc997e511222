"""Overlay rendering module for drawing waypoint routes onto zone maps.

Markers are drawn category by category (ghost, vendor, then normal so the
route stays on top). Below the padded route bounds a caption strip shows the
start coordinates and letters flagging ghost and vendor routes.
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw

from .errors import MissingStartPoint
from .font_manager import FontManager
from .models import (BoundsRect, MarkerStyle, OutputRect, RenderConfig, WaypointProfile,
                     WaypointSet, format_coordinate)

logger = logging.getLogger(__name__)


class OverlayRenderer:
    """Draws waypoint markers and the start caption onto a map image."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """Initialize the overlay renderer.

        Args:
            config: Rendering configuration; defaults reproduce the classic look
        """
        self.config = config or RenderConfig()
        self.font_manager = FontManager(self.config.font_file, self.config.font_size)

    def render_profile(self, target: Image.Image, profile: WaypointProfile,
                       bounds: BoundsRect) -> OutputRect:
        """Render all categories of a profile. See :meth:`render`."""
        return self.render(target, profile.normal, profile.ghost, profile.vendor, bounds)

    def render(self, target: Image.Image, normal: WaypointSet, ghost: WaypointSet,
               vendor: WaypointSet, bounds: BoundsRect) -> OutputRect:
        """Draw markers and caption onto target in place.

        Args:
            target: Zone map image, modified in place
            normal: Normal route waypoints; the last one is the start point
            ghost: Ghost route waypoints
            vendor: Vendor route waypoints
            bounds: Bounds of all waypoints in normalized map units

        Returns:
            Pixel rectangle to crop, including the caption strip

        Raises:
            MissingStartPoint: If the normal route is empty
        """
        if not normal:
            raise MissingStartPoint("Cannot caption the map without normal waypoints")
        start = normal[-1]
        width, height = target.size
        draw = ImageDraw.Draw(target)

        self.draw_path(draw, ghost, width, height, self.config.ghost_style)
        self.draw_path(draw, vendor, width, height, self.config.vendor_style)
        self.draw_path(draw, normal, width, height, self.config.normal_style)

        box = self.bounding_box(bounds, width, height)
        left, top, box_width, box_height = box

        scalar = self.config.map_scalar
        start_text = f"{format_coordinate(start.x * scalar)} {format_coordinate(start.y * scalar)}"
        text_width, text_height = self.font_manager.get_text_size(start_text)

        # Black strip under the bounding box
        strip_top = top + box_height
        if text_height > 0 and box_width > 0:
            draw.rectangle(
                (left, strip_top, left + box_width - 1, strip_top + text_height - 1),
                fill=self.config.caption_background
            )
        self.font_manager.render_text(draw, start_text, (left, strip_top), self.config.caption_color)

        # Glyph positions do not depend on each other
        ghost_x = left + int(text_width + 1) + 1
        if ghost:
            self.font_manager.render_text(draw, "G", (ghost_x, strip_top), self.config.ghost_glyph_color)

        vendor_x = ghost_x + self.config.glyph_offset
        if vendor:
            self.font_manager.render_text(draw, "V", (vendor_x, strip_top), self.config.vendor_glyph_color)

        output = OutputRect(left, top, box_width, box_height + text_height)
        logger.info(f"Rendered {len(normal) + len(ghost) + len(vendor)} waypoints, output rect {output}")
        return output

    def draw_path(self, draw: ImageDraw.ImageDraw, points: WaypointSet, width: int, height: int,
                  style: MarkerStyle) -> None:
        """Draw one category: body markers first, then the head point on top.

        The head is the most recently inserted point.
        """
        if not points:
            return

        for point in points[:-1]:
            self._draw_marker(draw, point.x * width, point.y * height, style.body)

        head = points[-1]
        self._draw_marker(draw, head.x * width, head.y * height, style.head)

    def bounding_box(self, bounds: BoundsRect, width: int, height: int) -> Tuple[int, int, int, int]:
        """Scale bounds to pixels, pad them and clamp the origin.

        Only the origin is clamped; the far edges may extend past the image.
        The box is never narrower or lower than one pixel.

        Returns:
            (x, y, width, height) rounded to whole pixels
        """
        padding = self.config.padding
        x = bounds.x * width - padding
        y = bounds.y * height - padding
        box_width = bounds.width * width + 2 * padding
        box_height = bounds.height * height + 2 * padding

        if x < 0:
            x = 0
        if y < 0:
            y = 0

        return round(x), round(y), max(1, round(box_width)), max(1, round(box_height))

    def _draw_marker(self, draw: ImageDraw.ImageDraw, x: float, y: float, color: Tuple[int, int, int]) -> None:
        radius = self.config.marker_radius
        draw.ellipse((x, y, x + radius, y + radius), fill=color)
