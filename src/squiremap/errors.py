"""Exception types raised by the squiremap pipeline."""


class SquireMapError(Exception):
    """Base class for all squiremap errors."""


class ProfileError(SquireMapError, ValueError):
    """The waypoint profile could not be read."""


class MalformedWaypoint(ProfileError):
    """A waypoint element lacks a numeric X or Y attribute."""

    def __init__(self, category: str, index: int, reason: str):
        self.category = category
        self.index = index
        self.reason = reason
        super().__init__(f"Malformed {category} waypoint #{index}: {reason}")


class EmptyPointSet(SquireMapError, ValueError):
    """Bounds were requested over an empty point sequence."""


class NoWaypoints(EmptyPointSet):
    """The profile contains no waypoints in any category."""


class MissingStartPoint(SquireMapError, ValueError):
    """The normal route is empty, so there is no start point to caption."""


class MissingBackground(SquireMapError):
    """No zone image could be obtained for rendering."""


class EncodeError(SquireMapError, OSError):
    """The rendered image could not be encoded or written."""


class ZoneCatalogError(SquireMapError, ValueError):
    """The zone catalog file is invalid."""
