"""Zone map image download module."""

import io
import logging
from typing import Optional

import requests
from PIL import Image, UnidentifiedImageError

from . import __version__
from .errors import MissingBackground

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"squiremap/{__version__}"


class ImageFetcher:
    """Downloads zone map images over HTTP."""

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: Optional[float] = 30.0):
        """Initialize the image fetcher.

        Args:
            user_agent: User-Agent header sent with every request
            timeout: Request timeout in seconds, None to wait indefinitely
        """
        self.user_agent = user_agent
        self.timeout = timeout

    def fetch(self, url: str) -> bytes:
        """Download raw image bytes.

        Args:
            url: Image URL

        Returns:
            The response body

        Raises:
            MissingBackground: If the URL is empty or the download failed
        """
        if not url:
            raise MissingBackground("Image URL is empty")

        logger.info(f"Downloading zone map from {url}")
        try:
            response = requests.get(url, headers={"User-Agent": self.user_agent}, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to download zone map {url}: {e}")
            raise MissingBackground(f"Could not download {url}: {e}") from e

        return response.content

    def __call__(self, url: str) -> bytes:
        return self.fetch(url)


def load_background(data: bytes) -> Image.Image:
    """Decode downloaded bytes into an RGBA image to draw on.

    Raises:
        MissingBackground: If the data is not a readable image
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            # Convert to RGBA mode to ensure full color support
            return image.convert("RGBA")
    except (UnidentifiedImageError, OSError) as e:
        logger.error(f"Downloaded data is not an image: {e}")
        raise MissingBackground(f"Zone map could not be decoded: {e}") from e
