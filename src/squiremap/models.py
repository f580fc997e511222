"""Data representation classes for the squiremap package.

This module contains the data classes used throughout the squiremap package.
These classes represent waypoints, waypoint profiles, rectangles in both
normalized map space and image pixel space, and rendering configuration.
"""

from typing import List, NamedTuple, Optional, Tuple
from dataclasses import dataclass, field

from .errors import MissingStartPoint

Color = Tuple[int, int, int]

# Raw in-game coordinates are divided by this to get normalized map units
MAP_SCALAR = 100.0


class Point(NamedTuple):
    """A waypoint position in normalized map units."""
    x: float
    y: float


WaypointSet = List[Point]


def format_coordinate(value: float) -> str:
    """Format a raw coordinate the way the bot's addon macros expect it.

    Whole numbers are written without a decimal part and float noise from
    normalizing and scaling back is rounded off.

    Args:
        value: Raw (non-normalized) coordinate

    Returns:
        The coordinate as text, e.g. ``"1100"`` or ``"12.5"``
    """
    value = round(value, 4)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class WaypointProfile:
    """The three waypoint categories read from one profile document."""

    def __init__(self, name: str, normal: Optional[WaypointSet] = None,
                 ghost: Optional[WaypointSet] = None, vendor: Optional[WaypointSet] = None,
                 addon_lines: Optional[List[str]] = None):
        """Initialize a waypoint profile.

        Args:
            name: Profile base name, used to name the output image
            normal: Normal route waypoints in document order
            ghost: Ghost route waypoints in document order
            vendor: Vendor route waypoints in document order
            addon_lines: ``/way`` macro lines for the normal route
        """
        self.name = name
        self.normal = normal if normal is not None else []
        self.ghost = ghost if ghost is not None else []
        self.vendor = vendor if vendor is not None else []
        self.addon_lines = addon_lines if addon_lines is not None else []

    @property
    def all_points(self) -> WaypointSet:
        """Union of all categories: normal first, then ghost, then vendor."""
        return self.normal + self.ghost + self.vendor

    @property
    def total(self) -> int:
        return len(self.normal) + len(self.ghost) + len(self.vendor)

    @property
    def start_point(self) -> Point:
        """The route's starting point, which is the last normal waypoint.

        Raises:
            MissingStartPoint: If the normal route is empty
        """
        if not self.normal:
            raise MissingStartPoint(f"Profile '{self.name}' has no normal waypoints")
        return self.normal[-1]

    def __repr__(self) -> str:
        return (f"WaypointProfile(name={self.name!r}, normal={len(self.normal)}, "
                f"ghost={len(self.ghost)}, vendor={len(self.vendor)})")


@dataclass(frozen=True)
class BoundsRect:
    """Axis-aligned rectangle in normalized map units."""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class OutputRect:
    """Integer pixel rectangle of the final crop."""
    x: int
    y: int
    width: int
    height: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """The rectangle as a PIL ``(left, top, right, bottom)`` box."""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass(frozen=True)
class MarkerStyle:
    """Colors for one waypoint category."""
    head: Color
    body: Color


@dataclass
class RenderConfig:
    """Configuration for overlay rendering."""
    marker_radius: int = 3
    padding: int = 40
    map_scalar: float = MAP_SCALAR
    glyph_offset: int = 10
    ghost_style: MarkerStyle = field(default_factory=lambda: MarkerStyle((0, 0, 0), (0, 255, 255)))
    vendor_style: MarkerStyle = field(default_factory=lambda: MarkerStyle((255, 165, 0), (255, 255, 0)))
    normal_style: MarkerStyle = field(default_factory=lambda: MarkerStyle((255, 255, 255), (255, 0, 0)))
    caption_background: Color = (0, 0, 0)
    caption_color: Color = (255, 255, 255)
    ghost_glyph_color: Color = (0, 255, 255)
    vendor_glyph_color: Color = (255, 255, 0)
    font_file: Optional[str] = None
    font_size: int = 12
