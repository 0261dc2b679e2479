"""
Test configuration and fixtures for Palette Studio tests.
"""
import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

# Import the main app
from main import app


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def quadrant_image():
    """8x8 RGB image with distinct colors at the five sample points."""
    image = Image.new("RGB", (8, 8), (255, 255, 255))
    image.putpixel((4, 4), (255, 0, 0))      # center
    image.putpixel((2, 2), (0, 255, 0))      # top-left
    image.putpixel((6, 2), (0, 0, 255))      # top-right
    image.putpixel((2, 6), (255, 255, 255))  # bottom-left
    image.putpixel((6, 6), (0, 0, 0))        # bottom-right
    return image


@pytest.fixture
def quadrant_png(quadrant_image):
    """PNG-encoded bytes of the quadrant image."""
    buffer = io.BytesIO()
    quadrant_image.save(buffer, format="PNG")
    return buffer.getvalue()
