"""Bounding box calculation over normalized waypoints."""

import logging
from typing import Sequence

import numpy as np

from .errors import EmptyPointSet, NoWaypoints
from .models import BoundsRect, Point, WaypointProfile

logger = logging.getLogger(__name__)


def compute_bounds(points: Sequence[Point]) -> BoundsRect:
    """Get the minimal axis-aligned rectangle containing all points.

    Args:
        points: Non-empty sequence of points in normalized map units

    Returns:
        BoundsRect with the minimum corner and the extent in each axis

    Raises:
        EmptyPointSet: If no points are given
    """
    if len(points) == 0:
        raise EmptyPointSet("Cannot compute bounds of an empty point set")

    coords = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)

    return BoundsRect(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))


def profile_bounds(profile: WaypointProfile) -> BoundsRect:
    """Get the bounds over every waypoint category of a profile.

    Raises:
        NoWaypoints: If the profile holds no waypoints at all
    """
    if profile.total == 0:
        logger.error(f"No waypoints found in profile {profile.name}")
        raise NoWaypoints(f"Profile '{profile.name}' contains no waypoints")

    bounds = compute_bounds(profile.all_points)
    logger.debug(f"Bounds of {profile.name}: {bounds}")
    return bounds
