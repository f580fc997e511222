"""Zone catalog mapping zone names to map image URLs."""

import json
import logging
import os
import platform
from typing import Dict, List, Optional

from .errors import ZoneCatalogError

logger = logging.getLogger(__name__)

ZONES_ENV_VAR = "SQUIREMAP_ZONES"


def default_catalog_path() -> str:
    """Get the zone catalog location for the current operating system.

    The ``SQUIREMAP_ZONES`` environment variable takes precedence.
    """
    override = os.environ.get(ZONES_ENV_VAR)
    if override:
        return override

    system = platform.system()
    if system == "Windows":
        # Windows default: %APPDATA%\squiremap\zones.json
        appdata = os.environ.get("APPDATA")
        if appdata:
            return os.path.join(appdata, "squiremap", "zones.json")
        return os.path.join(os.path.expanduser("~"), "AppData", "Roaming", "squiremap", "zones.json")
    elif system == "Linux":
        # Linux default: ~/.config/squiremap/zones.json
        return os.path.join(os.path.expanduser("~"), ".config", "squiremap", "zones.json")
    else:
        return os.path.join(os.path.expanduser("~"), ".squiremap", "zones.json")


class ZoneCatalog:
    """Lookup table from zone name to map image URL."""

    def __init__(self, zones: Optional[Dict[str, str]] = None):
        self._zones = dict(zones or {})

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "ZoneCatalog":
        """Load a catalog from a JSON object of ``name -> url``.

        Args:
            path: Catalog file, the OS dependent default location if None

        Returns:
            The loaded ZoneCatalog

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            ZoneCatalogError: If the file is not a JSON object of strings
        """
        if path is None:
            path = default_catalog_path()
        logger.info(f"Loading zone catalog: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as catalog_file:
                data = json.load(catalog_file)
        except FileNotFoundError:
            logger.error(f"Zone catalog not found: {path}")
            raise
        except json.JSONDecodeError as e:
            raise ZoneCatalogError(f"Invalid zone catalog {path}: {e}") from e

        if not isinstance(data, dict):
            raise ZoneCatalogError(f"Zone catalog {path} must be a JSON object")
        for name, url in data.items():
            if not isinstance(url, str):
                raise ZoneCatalogError(f"URL of zone '{name}' must be a string")

        return cls(data)

    def lookup(self, name: str) -> Optional[str]:
        """Get the image URL of a zone, or None if unknown or empty."""
        url = self._zones.get(name)
        if not url:
            return None
        return url

    def names(self) -> List[str]:
        return sorted(self._zones)

    def __contains__(self, name: str) -> bool:
        return name in self._zones

    def __len__(self) -> int:
        return len(self._zones)
