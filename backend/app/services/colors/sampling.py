"""
Palette Studio - Image Color Sampling

Reads seed colors from an image at five fixed positions: the center and the
midpoints of the four quadrants. The center pixel comes first and becomes the
dominant color for palette generation.
"""

import io
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from app.config import config
from .conversion import rgb_to_hex
from .errors import ImageDecodeError


@dataclass(frozen=True)
class SamplePoint:
    """A pixel coordinate in an image."""
    x: int
    y: int


def sample_points(width: int, height: int) -> List[SamplePoint]:
    """
    Compute the sampling coordinates for an image of the given size.

    Order: center, top-left, top-right, bottom-left, bottom-right.
    """
    return [
        SamplePoint(width // 2, height // 2),
        SamplePoint(width // 4, height // 4),
        SamplePoint(3 * width // 4, height // 4),
        SamplePoint(width // 4, 3 * height // 4),
        SamplePoint(3 * width // 4, 3 * height // 4),
    ]


def validate_magic_bytes(file_bytes: bytes) -> str:
    """
    Validate file magic bytes to ensure it's actually an image.

    Returns:
        Detected MIME type

    Raises:
        ImageDecodeError: For truncated or unsupported files
    """
    if len(file_bytes) < 8:
        raise ImageDecodeError("File too small or corrupt")

    if file_bytes.startswith(b'\xff\xd8\xff'):
        return "image/jpeg"
    elif file_bytes.startswith(b'\x89PNG\r\n\x1a\n'):
        return "image/png"

    raise ImageDecodeError("Invalid image file. Magic bytes don't match supported formats.")


def load_image(file_bytes: bytes) -> Image.Image:
    """
    Safely decode PNG or JPEG bytes into an RGB Pillow image.

    Raises:
        ImageDecodeError: For oversized, corrupt, unsupported or undersized images
    """
    if len(file_bytes) > config.MAX_FILE_MB * 1024 * 1024:
        raise ImageDecodeError(f"File too large. Maximum size: {config.MAX_FILE_MB}MB")

    validate_magic_bytes(file_bytes)

    try:
        image = Image.open(io.BytesIO(file_bytes))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        raise ImageDecodeError(f"Failed to decode image: {str(e)}")

    if image.mode != 'RGB':
        image = image.convert('RGB')

    width, height = image.size
    if width < config.MIN_EDGE or height < config.MIN_EDGE:
        raise ImageDecodeError(f"Image too small. Minimum dimension: {config.MIN_EDGE}px")

    return image


def extract_colors_from_image(image: Image.Image, points: Optional[List[SamplePoint]] = None) -> List[str]:
    """
    Sample hex colors from an image.

    Args:
        image: Pillow image in any mode; converted to RGB for reading
        points: Coordinates to read (defaults to sample_points for the image size)

    Returns:
        Lowercase hex colors in the order of the sample points
    """
    if image.mode != 'RGB':
        image = image.convert('RGB')

    width, height = image.size
    if points is None:
        points = sample_points(width, height)

    rgb = np.asarray(image)
    colors = []
    for point in points:
        r, g, b = (int(channel) for channel in rgb[point.y, point.x])
        colors.append(rgb_to_hex(r, g, b))

    return colors
