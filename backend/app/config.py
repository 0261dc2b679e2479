"""
Palette Studio Configuration
Manages environment variables and defaults for the palette service.
"""
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration class for Palette Studio services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("PALETTE_LOG_LEVEL", "INFO")

    # Upload limits
    MAX_FILE_MB: int = int(os.environ.get("PALETTE_MAX_FILE_MB", "10"))
    MIN_EDGE: int = int(os.environ.get("PALETTE_MIN_EDGE", "4"))

    # Longest sample list accepted by the palette endpoints
    MAX_SAMPLES: int = int(os.environ.get("PALETTE_MAX_SAMPLES", "64"))

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get("PALETTE_ALLOWED_ORIGINS", "http://localhost:3000")

    # Supported image formats
    SUPPORTED_MIME_TYPES = ["image/jpeg", "image/png"]

    @property
    def allowed_origins(self) -> List[str]:
        """CORS origins as a list."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Global config instance
config = Config()
