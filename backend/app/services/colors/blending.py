"""
Palette Studio - Color Blending

Linear per-channel interpolation between two hex colors.
"""

from loguru import logger

from .conversion import hex_to_rgb, rgb_to_hex, round_half_up


def clamp_ratio(ratio: float) -> float:
    """Clamp a blend ratio into [0, 1]."""
    return max(0.0, min(1.0, float(ratio)))


def blend_colors(color1: str, color2: str, ratio: float) -> str:
    """
    Blend two colors together.

    Each channel is round(c1 * (1 - ratio) + c2 * ratio). Ratios outside
    [0, 1] are clamped, so ratio 0 yields color1 and ratio 1 yields color2
    (in canonical lowercase form).

    Args:
        color1: First hex color
        color2: Second hex color
        ratio: Blend ratio, 0 = all color1, 1 = all color2

    Returns:
        Resulting hex color in format #rrggbb

    Raises:
        InvalidFormatError: If either input is not a valid hex color
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    t = clamp_ratio(ratio)
    if t != ratio:
        logger.debug(f"Blend ratio {ratio} clamped to {t}")

    r = round_half_up(rgb1.r * (1 - t) + rgb2.r * t)
    g = round_half_up(rgb1.g * (1 - t) + rgb2.g * t)
    b = round_half_up(rgb1.b * (1 - t) + rgb2.b * t)

    return rgb_to_hex(r, g, b)
