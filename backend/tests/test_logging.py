"""
Tests for structured logging through loguru.
"""

import pytest
from loguru import logger

from app.services.colors.blending import blend_colors
from app.utils.logging import get_logger


@pytest.fixture
def records():
    """Collect loguru records emitted during a test."""
    get_logger()  # configure sinks first; it resets existing handlers
    captured = []
    handler_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(handler_id)


def test_error_binds_extra(records):
    get_logger().error("decode failed", extra={"request_id": "pal-test"})

    errors = [r for r in records if r["level"].name == "ERROR"]
    assert errors[-1]["message"] == "decode failed"
    assert errors[-1]["extra"]["request_id"] == "pal-test"


def test_blend_logs_clamped_ratio(records):
    blend_colors("#000000", "#ffffff", 1.5)

    assert any("clamped" in r["message"] for r in records)


def test_blend_in_range_does_not_log_clamp(records):
    blend_colors("#000000", "#ffffff", 0.5)

    assert not any("clamped" in r["message"] for r in records)
