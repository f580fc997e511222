"""Waypoint profile map drawer - renders bot routes onto zone map images."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("squiremap")
except PackageNotFoundError:
    __version__ = "0.1.0"  # Default version if package is not installed
