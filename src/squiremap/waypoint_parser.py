"""Waypoint profile parsing module for extracting route data."""

import logging
import math
import os
import xml.etree.ElementTree as ET
from typing import Callable, List, Optional

from .errors import MalformedWaypoint, ProfileError
from .models import MAP_SCALAR, Point, WaypointProfile, WaypointSet, format_coordinate

logger = logging.getLogger(__name__)

NORMAL_PATH = "Grind/Waypoints/Normal"
GHOST_PATH = "Grind/Waypoints/Ghost"
VENDOR_PATH = "Grind/Waypoints/Vendor"

AddonSink = Callable[[str], None]


def addon_line(x: float, y: float) -> str:
    """Build one ``/way`` macro line from raw coordinates."""
    return f"/way {format_coordinate(x)} {format_coordinate(y)}\n"


class WaypointParser:
    """Parser for bot profiles that extracts normal, ghost and vendor waypoints."""

    def __init__(self, profile_path: str, normal_path: str = NORMAL_PATH,
                 ghost_path: str = GHOST_PATH, vendor_path: str = VENDOR_PATH,
                 addon_sink: Optional[AddonSink] = None):
        """Initialize with the path to a profile file.

        Args:
            profile_path: Path to the XML profile to parse
            normal_path: Element path of the normal route container
            ghost_path: Element path of the ghost route container
            vendor_path: Element path of the vendor route container
            addon_sink: Optional callable receiving each ``/way`` line of the
                        normal route as it is parsed
        """
        self.profile_path = profile_path
        self.normal_path = normal_path
        self.ghost_path = ghost_path
        self.vendor_path = vendor_path
        self.addon_sink = addon_sink

    @property
    def profile_name(self) -> str:
        """Base name of the profile file without its extension."""
        return os.path.splitext(os.path.basename(self.profile_path))[0]

    def parse(self) -> WaypointProfile:
        """Parse the profile file and extract all waypoint categories.

        Returns:
            WaypointProfile holding the three waypoint sets

        Raises:
            FileNotFoundError: If the profile doesn't exist
            ProfileError: If the profile is not well-formed XML
            MalformedWaypoint: If a waypoint lacks a numeric X or Y attribute
        """
        try:
            with open(self.profile_path, 'rb') as profile_file:
                tree = ET.parse(profile_file)
        except FileNotFoundError:
            logger.error(f"Profile file not found: {self.profile_path}")
            raise
        except ET.ParseError as e:
            logger.error(f"Error parsing profile file: {e}")
            raise ProfileError(f"Invalid profile file: {e}") from e

        return self.parse_document(tree.getroot())

    def parse_document(self, root: ET.Element) -> WaypointProfile:
        """Extract the waypoint categories from an already parsed document.

        Args:
            root: Root element of the profile document

        Returns:
            WaypointProfile holding the three waypoint sets
        """
        addon_lines: List[str] = []
        normal = self._read_category(root, self.normal_path, "normal", addon_lines)
        ghost = self._read_category(root, self.ghost_path, "ghost")
        vendor = self._read_category(root, self.vendor_path, "vendor")

        logger.info(f"Parsed {len(normal)} normal, {len(ghost)} ghost and "
                    f"{len(vendor)} vendor waypoints from {self.profile_path}")

        return WaypointProfile(self.profile_name, normal, ghost, vendor, addon_lines)

    @staticmethod
    def find_container(root: ET.Element, path: str) -> Optional[ET.Element]:
        """Locate a category container by its element path.

        The path may start with the root element's own tag or be relative to it.
        """
        head, _, rest = path.partition("/")
        if head == root.tag:
            return root.find(rest) if rest else root
        return root.find(path)

    def _read_category(self, root: ET.Element, path: str, category: str,
                       addon_lines: Optional[List[str]] = None) -> WaypointSet:
        container = self.find_container(root, path)
        if container is None:
            logger.debug(f"No {category} waypoints at {path}")
            return []

        points: WaypointSet = []
        for index, element in enumerate(container):
            x = self._read_attribute(element, "X", category, index)
            y = self._read_attribute(element, "Y", category, index)

            if addon_lines is not None:
                line = addon_line(x, y)
                addon_lines.append(line)
                if self.addon_sink is not None:
                    self.addon_sink(line)

            points.append(Point(x / MAP_SCALAR, y / MAP_SCALAR))

        return points

    @staticmethod
    def _read_attribute(element: ET.Element, name: str, category: str, index: int) -> float:
        raw = element.get(name)
        if raw is None:
            raise MalformedWaypoint(category, index, f"missing {name} attribute")
        try:
            value = float(raw.strip())
        except ValueError:
            raise MalformedWaypoint(category, index, f"{name}={raw!r} is not a number")
        if not math.isfinite(value):
            raise MalformedWaypoint(category, index, f"{name}={raw!r} is not finite")
        return value
