"""Image export module for writing the cropped route map as JPEG."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from .errors import EncodeError
from .models import OutputRect

logger = logging.getLogger(__name__)

JPEG_QUALITY = 100


def output_path_for(profile_path: Union[str, Path], output_dir: Optional[Union[str, Path]] = None) -> Path:
    """Build the output path ``{profile base name}.jpg``.

    Args:
        profile_path: Path to the waypoint profile
        output_dir: Directory for the image, the working directory if None

    Returns:
        Path of the JPEG file to write
    """
    name = Path(profile_path).stem + ".jpg"
    return Path(output_dir if output_dir is not None else os.getcwd()) / name


def crop_image(target: Image.Image, rect: OutputRect) -> Image.Image:
    """Crop target to rect as a new 32-bit RGBA image.

    Areas of rect beyond the image edge come out transparent black.
    """
    return target.crop(rect.box).convert("RGBA")


def export_image(target: Image.Image, rect: OutputRect, path: Union[str, Path]) -> Path:
    """Crop the rendered map and save it as a maximum quality JPEG.

    Args:
        target: Rendered map image
        rect: Pixel rectangle to keep
        path: Destination file path

    Returns:
        Path of the written file

    Raises:
        EncodeError: If the image could not be encoded or written
    """
    path = Path(path)
    try:
        cropped = crop_image(target, rect)
        cropped.convert("RGB").save(path, format="JPEG", quality=JPEG_QUALITY)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to write image {path}: {e}")
        raise EncodeError(f"Could not write {path}: {e}") from e

    logger.info(f"Saved {rect.width}x{rect.height} map to {path}")
    return path
