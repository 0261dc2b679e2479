"""
Palette Studio API Schemas
Pydantic models for palette generation and color conversion request/response validation.
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from app.config import config


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("palette-studio", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# COLOR CONVERSION SCHEMAS
# ============================================================================

class RGBModel(BaseModel):
    """RGB channels."""
    r: int = Field(..., description="Red channel (0-255)")
    g: int = Field(..., description="Green channel (0-255)")
    b: int = Field(..., description="Blue channel (0-255)")


class HSLModel(BaseModel):
    """HSL components."""
    h: float = Field(..., description="Hue in degrees")
    s: float = Field(..., description="Saturation in percent (0-100)")
    l: float = Field(..., description="Lightness in percent (0-100)")


class ColorResponse(BaseModel):
    """A color in all three representations."""
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Canonical hex color #rrggbb")
    rgb: RGBModel
    hsl: HSLModel


class HexResponse(BaseModel):
    """A single hex color result."""
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Canonical hex color #rrggbb")


class BlendRequest(BaseModel):
    """Request body for blending two colors."""
    color1: str = Field(..., description="First hex color")
    color2: str = Field(..., description="Second hex color")
    ratio: float = Field(0.5, description="Blend ratio; clamped into [0, 1]")


# ============================================================================
# PALETTE SCHEMAS
# ============================================================================

class PaletteRequest(BaseModel):
    """Ordered sample colors; the first entry is the dominant color."""
    colors: List[str] = Field(..., description="Sampled hex colors, dominant first")

    @field_validator("colors")
    @classmethod
    def validate_colors_length(cls, v):
        if len(v) > config.MAX_SAMPLES:
            raise ValueError(f"maximum {config.MAX_SAMPLES} colors allowed")
        return v


class PaletteModel(BaseModel):
    """A named palette."""
    name: str = Field(..., description="Short palette label")
    description: str = Field(..., description="Human-readable summary")
    colors: List[str] = Field(..., description="Ordered hex colors")


class PaletteDebug(BaseModel):
    """Timing information for palette generation."""
    request_id: str
    timing_ms: Dict[str, float]


class PaletteSetResponse(BaseModel):
    """All five palettes derived from a sample list."""
    dominant: str = Field(..., description="Dominant color used as seed")
    palettes: List[PaletteModel]
    debug: Optional[PaletteDebug] = None


class SinglePaletteResponse(BaseModel):
    """One palette derived from a sample list."""
    dominant: str = Field(..., description="Dominant color used as seed")
    palette: PaletteModel


class ImagePaletteResponse(BaseModel):
    """Palettes derived from colors sampled out of an uploaded image."""
    width: int = Field(..., description="Image width in pixels")
    height: int = Field(..., description="Image height in pixels")
    samples: List[str] = Field(..., description="Sampled colors, center first")
    dominant: str = Field(..., description="Dominant color used as seed")
    palettes: List[PaletteModel]
    debug: Optional[PaletteDebug] = None
