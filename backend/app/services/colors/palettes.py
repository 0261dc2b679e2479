"""
Palette Studio - Palette Generation

Derives five named palettes from an ordered list of sampled colors. The
first sample is the dominant color and seeds the four derived palettes:

    Extracted      the samples themselves, unchanged
    Complementary  dominant -> RGB inverse in quarter steps
    Monochromatic  dominant hue/saturation at lightness 20, 35, 50, 65, 80
    Analogous      dominant hue -60, -30, 0, +30, +60 degrees
    Triadic        three hues 120 degrees apart plus two midpoint blends

Every function is deterministic and depends only on its arguments.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from loguru import logger

from .blending import blend_colors
from .conversion import hex_to_hsl, hex_to_rgb, hsl_to_hex, normalize_hex, normalize_hue, rgb_to_hex
from .errors import InvalidInputError


COMPLEMENTARY_BLEND_RATIOS = (0.25, 0.5, 0.75)

MONOCHROMATIC_STEPS = 5
MONOCHROMATIC_LIGHTNESS_START = 20
MONOCHROMATIC_LIGHTNESS_STEP = 15

ANALOGOUS_HUE_STEP = 30
ANALOGOUS_SPAN = 2  # steps on each side of the dominant hue

TRIADIC_HUE_STEP = 120
TRIADIC_BASE_COUNT = 3


class PaletteKind(str, Enum):
    """Supported palette algorithms, in output order."""
    EXTRACTED = "extracted"
    COMPLEMENTARY = "complementary"
    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"


PALETTE_LABELS: Dict[PaletteKind, Tuple[str, str]] = {
    PaletteKind.EXTRACTED: (
        "Extracted Colors",
        "Colors sampled from different parts of your image",
    ),
    PaletteKind.COMPLEMENTARY: (
        "Complementary",
        "Colors opposite each other on the color wheel",
    ),
    PaletteKind.MONOCHROMATIC: (
        "Monochromatic",
        "Different shades and tints of the base color",
    ),
    PaletteKind.ANALOGOUS: (
        "Analogous",
        "Colors adjacent to each other on the color wheel",
    ),
    PaletteKind.TRIADIC: (
        "Triadic",
        "Three colors evenly spaced on the color wheel",
    ),
}


@dataclass(frozen=True)
class Palette:
    """A named, described, ordered sequence of hex colors."""
    name: str
    description: str
    colors: Tuple[str, ...]

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "colors": list(self.colors),
        }


def complementary_color(hex_color: str) -> str:
    """Return the RGB inverse (255 - channel) of a hex color."""
    rgb = hex_to_rgb(hex_color)
    return rgb_to_hex(255 - rgb.r, 255 - rgb.g, 255 - rgb.b)


def get_extracted_palette(samples: Sequence[str]) -> List[str]:
    """
    Return the sampled colors unchanged, after checking each one parses.

    Raises:
        InvalidFormatError: If any sample is not a valid hex color
    """
    for sample in samples:
        hex_to_rgb(sample)
    return list(samples)


def get_complementary_palette(hex_color: str) -> List[str]:
    """
    Generate a complementary color palette.

    Returns the base color, three blends towards its RGB inverse at
    0.25/0.5/0.75, and the inverse itself.
    """
    base = normalize_hex(hex_color)
    complement = complementary_color(base)

    return (
        [base]
        + [blend_colors(base, complement, ratio) for ratio in COMPLEMENTARY_BLEND_RATIOS]
        + [complement]
    )


def get_monochromatic_palette(hex_color: str) -> List[str]:
    """Generate five shades of the base hue, ordered darkest to lightest."""
    hsl = hex_to_hsl(hex_color)
    return [
        hsl_to_hex(hsl.h, hsl.s, MONOCHROMATIC_LIGHTNESS_START + i * MONOCHROMATIC_LIGHTNESS_STEP)
        for i in range(MONOCHROMATIC_STEPS)
    ]


def get_analogous_palette(hex_color: str) -> List[str]:
    """Generate two hues before, the base hue, and two hues after, 30 degrees apart."""
    hsl = hex_to_hsl(hex_color)
    colors = []

    for i in range(-ANALOGOUS_SPAN, ANALOGOUS_SPAN + 1):
        new_hue = normalize_hue(hsl.h + i * ANALOGOUS_HUE_STEP)
        colors.append(hsl_to_hex(new_hue, hsl.s, hsl.l))

    return colors


def get_triadic_palette(hex_color: str) -> List[str]:
    """
    Generate a triadic color palette.

    The first three entries are hues 0, 120 and 240 degrees from the base;
    entries 3 and 4 are midpoint blends of (0, 1) and (1, 2).
    """
    hsl = hex_to_hsl(hex_color)
    colors = [
        hsl_to_hex(normalize_hue(hsl.h + i * TRIADIC_HUE_STEP), hsl.s, hsl.l)
        for i in range(TRIADIC_BASE_COUNT)
    ]

    colors.append(blend_colors(colors[0], colors[1], 0.5))
    colors.append(blend_colors(colors[1], colors[2], 0.5))

    return colors


def get_dominant_color(samples: Sequence[str]) -> str:
    """
    Select the dominant color: the first sample (the center pixel by convention).

    Raises:
        InvalidInputError: If no samples were provided
    """
    if not samples:
        raise InvalidInputError("Cannot derive a dominant color from an empty sample list")
    return samples[0]


_GENERATORS = {
    PaletteKind.COMPLEMENTARY: get_complementary_palette,
    PaletteKind.MONOCHROMATIC: get_monochromatic_palette,
    PaletteKind.ANALOGOUS: get_analogous_palette,
    PaletteKind.TRIADIC: get_triadic_palette,
}


def _build(kind: PaletteKind, samples: Sequence[str]) -> Palette:
    name, description = PALETTE_LABELS[kind]
    if kind is PaletteKind.EXTRACTED:
        colors = get_extracted_palette(samples)
    else:
        colors = _GENERATORS[kind](get_dominant_color(samples))
    return Palette(name=name, description=description, colors=tuple(colors))


def generate_palette(kind, samples: Sequence[str]) -> Palette:
    """
    Generate a single named palette from sampled colors.

    Args:
        kind: PaletteKind or its string value
        samples: Ordered, non-empty list of hex colors

    Raises:
        InvalidInputError: If samples is empty or kind is unknown
        InvalidFormatError: If any sample is not a valid hex color
    """
    try:
        kind = PaletteKind(kind)
    except ValueError:
        raise InvalidInputError(f"Unknown palette kind: {kind!r}")

    get_dominant_color(samples)
    get_extracted_palette(samples)
    return _build(kind, samples)


def generate_palettes(samples: Sequence[str]) -> List[Palette]:
    """
    Generate all five palettes from sampled colors.

    Palettes are returned in the fixed order Extracted, Complementary,
    Monochromatic, Analogous, Triadic. Generation succeeds or fails as a
    unit; no partial result is returned.

    Args:
        samples: Ordered, non-empty list of hex colors; element 0 is dominant

    Raises:
        InvalidInputError: If samples is empty
        InvalidFormatError: If any sample is not a valid hex color
    """
    dominant = get_dominant_color(samples)
    get_extracted_palette(samples)

    logger.debug(f"Generating palettes from {len(samples)} samples, dominant={dominant}")
    return [_build(kind, samples) for kind in PaletteKind]
