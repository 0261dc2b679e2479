"""
Palette Studio Colors Module

Provides color space conversion, blending, image sampling and palette
generation (extracted, complementary, monochromatic, analogous, triadic).
"""

__version__ = "1.0.0"
