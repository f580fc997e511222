"""Font management module for caption rendering on map images.

This module provides the FontManager class which handles font loading, text
measurement and text drawing with Pillow.
"""

import logging
import os
from typing import Optional, Tuple

from PIL import ImageDraw, ImageFont

logger = logging.getLogger(__name__)


class FontManager:
    """Manages font loading and text rendering for map captions."""

    def __init__(self, font_file: Optional[str] = None, font_size: int = 12):
        """Initialize the font manager.

        Args:
            font_file: Optional path to a TrueType font file (.ttf)
            font_size: Font size in pixels
        """
        self.font_file = font_file
        self.font_size = font_size
        self.font = None

        # Load custom font if provided
        if font_file and os.path.exists(font_file):
            try:
                self.font = ImageFont.truetype(font_file, font_size)
                logger.info(f"Loaded custom font from {font_file} with size {font_size}")
            except OSError as e:
                logger.error(f"Failed to load custom font {font_file}: {e}")
                self.font = None
        elif font_file:
            logger.warning(f"Font file not found: {font_file}, using default font")

        if self.font is None:
            self.font = ImageFont.load_default(size=font_size)

    def get_text_size(self, text: str) -> Tuple[int, int]:
        """Get the size of text when rendered from the origin.

        Args:
            text: The text to measure

        Returns:
            (width, height) tuple in pixels
        """
        _, _, right, bottom = self.font.getbbox(text)
        return int(right), int(bottom)

    def render_text(self, draw: ImageDraw.ImageDraw, text: str, position: Tuple[int, int],
                    color: Tuple[int, int, int]) -> None:
        """Draw text with its top-left corner at position."""
        draw.text(position, text, fill=color, font=self.font)
