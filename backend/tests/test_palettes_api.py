"""
API integration tests for the /v1 palette and color endpoints.
"""

import asyncio
import io

import pytest
from fastapi import HTTPException, UploadFile
from starlette.datastructures import Headers

from app.config import config
from app.services.colors.palette_api import handle_image

SAMPLES = ["#ff0000", "#00ff00", "#0000ff", "#ffffff", "#000000"]


class TestPalettesAPI:
    """Test POST /v1/palettes and /v1/palettes/{kind}."""

    def test_generate_all(self, test_client):
        response = test_client.post("/v1/palettes", json={"colors": SAMPLES})

        assert response.status_code == 200
        data = response.json()

        assert data["dominant"] == "#ff0000"
        palettes = data["palettes"]
        assert [p["name"] for p in palettes] == [
            "Extracted Colors", "Complementary", "Monochromatic", "Analogous", "Triadic",
        ]
        assert palettes[0]["colors"] == SAMPLES
        assert palettes[1]["colors"][4] == "#00ffff"
        assert data["debug"]["request_id"].startswith("pal-")
        assert "total" in data["debug"]["timing_ms"]

    def test_empty_list_is_bad_request(self, test_client):
        response = test_client.post("/v1/palettes", json={"colors": []})
        assert response.status_code == 400
        assert "empty" in response.json()["detail"]

    def test_malformed_color_is_bad_request(self, test_client):
        response = test_client.post("/v1/palettes", json={"colors": ["#ff0000", "notacolor"]})
        assert response.status_code == 400
        assert "notacolor" in response.json()["detail"]

    def test_too_many_colors_rejected(self, test_client):
        response = test_client.post("/v1/palettes", json={"colors": ["#000000"] * 1000})
        assert response.status_code == 422

    def test_missing_body_field(self, test_client):
        response = test_client.post("/v1/palettes", json={})
        assert response.status_code == 422

    def test_single_palette(self, test_client):
        response = test_client.post("/v1/palettes/triadic", json={"colors": SAMPLES})

        assert response.status_code == 200
        palette = response.json()["palette"]
        assert palette["name"] == "Triadic"
        assert palette["colors"] == ["#ff0000", "#00ff00", "#0000ff", "#808000", "#008080"]

    def test_unknown_palette_kind(self, test_client):
        response = test_client.post("/v1/palettes/tetradic", json={"colors": SAMPLES})
        assert response.status_code == 400


class TestImagePalettesAPI:
    """Test POST /v1/palettes/image."""

    def test_png_upload(self, test_client, quadrant_png):
        response = test_client.post(
            "/v1/palettes/image",
            files={"file": ("quadrants.png", quadrant_png, "image/png")}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["width"] == 8
        assert data["height"] == 8
        assert data["samples"] == SAMPLES
        assert data["dominant"] == "#ff0000"
        assert len(data["palettes"]) == 5
        assert data["palettes"][0]["colors"] == SAMPLES
        assert "decode" in data["debug"]["timing_ms"]

    def test_corrupt_upload(self, test_client):
        response = test_client.post(
            "/v1/palettes/image",
            files={"file": ("broken.png", b"not really a png", "image/png")}
        )
        assert response.status_code == 400

    def test_oversized_upload_rejected(self, test_client, monkeypatch):
        monkeypatch.setattr(config, "MAX_FILE_MB", 1)
        body = b"\x89PNG\r\n\x1a\n" + b"\x00" * (1024 * 1024)
        response = test_client.post(
            "/v1/palettes/image",
            files={"file": ("huge.png", body, "image/png")}
        )
        assert response.status_code == 400
        assert "too large" in response.json()["detail"]

    def test_undeclared_size_reads_at_most_one_byte_past_limit(self, monkeypatch):
        monkeypatch.setattr(config, "MAX_FILE_MB", 1)
        max_bytes = 1024 * 1024
        stream = io.BytesIO(b"\x89PNG\r\n\x1a\n" + b"\x00" * (3 * max_bytes))
        upload = UploadFile(file=stream, filename="huge.png",
                            headers=Headers({"content-type": "image/png"}))

        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(handle_image(upload))

        assert exc_info.value.status_code == 400
        assert "too large" in exc_info.value.detail
        assert stream.tell() <= max_bytes + 1

    def test_unsupported_media_type(self, test_client):
        response = test_client.post(
            "/v1/palettes/image",
            files={"file": ("notes.txt", b"hello world", "text/plain")}
        )
        assert response.status_code == 415


class TestColorsAPI:
    """Test conversion and blending endpoints."""

    def test_describe_color(self, test_client):
        response = test_client.get("/v1/colors/FF0000")

        assert response.status_code == 200
        data = response.json()
        assert data["hex"] == "#ff0000"
        assert data["rgb"] == {"r": 255, "g": 0, "b": 0}
        assert data["hsl"] == {"h": 0.0, "s": 100.0, "l": 50.0}

    def test_describe_invalid(self, test_client):
        response = test_client.get("/v1/colors/zzzzzz")
        assert response.status_code == 400

    def test_from_rgb(self, test_client):
        response = test_client.post("/v1/colors/from-rgb", json={"r": 0, "g": 128, "b": 255})
        assert response.status_code == 200
        assert response.json()["hex"] == "#0080ff"

    def test_from_rgb_out_of_range(self, test_client):
        response = test_client.post("/v1/colors/from-rgb", json={"r": 300, "g": 0, "b": 0})
        assert response.status_code == 400

    def test_from_hsl(self, test_client):
        response = test_client.post("/v1/colors/from-hsl", json={"h": 240, "s": 100, "l": 50})
        assert response.status_code == 200
        assert response.json()["hex"] == "#0000ff"

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_from_hsl_non_finite_is_bad_request(self, test_client, literal):
        response = test_client.post(
            "/v1/colors/from-hsl",
            content=f'{{"h": {literal}, "s": 50, "l": 50}}',
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert "finite" in response.json()["detail"]

    def test_blend(self, test_client):
        response = test_client.post(
            "/v1/colors/blend",
            json={"color1": "#ff0000", "color2": "#00ffff", "ratio": 0.5}
        )
        assert response.status_code == 200
        assert response.json()["hex"] == "#808080"

    def test_blend_ratio_clamped(self, test_client):
        response = test_client.post(
            "/v1/colors/blend",
            json={"color1": "#ff0000", "color2": "#00ffff", "ratio": 3}
        )
        assert response.status_code == 200
        assert response.json()["hex"] == "#00ffff"

    def test_blend_invalid_color(self, test_client):
        response = test_client.post(
            "/v1/colors/blend",
            json={"color1": "#ff0000", "color2": "bogus"}
        )
        assert response.status_code == 400
