"""
Palette Studio - Color Engine Errors

Exception taxonomy shared by the conversion, blending and palette modules.
Every failure is raised; nothing in the engine substitutes a default color.
"""


class ColorError(ValueError):
    """Base class for all color engine failures."""
    pass


class InvalidFormatError(ColorError):
    """A hex string does not match the 6-digit #RRGGBB pattern."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color format: {value!r}")


class InvalidInputError(ColorError):
    """Input that cannot be used: empty sample list, out-of-range channel, unknown palette kind."""
    pass


class ImageDecodeError(InvalidInputError):
    """Uploaded image bytes could not be decoded or failed validation."""
    pass
