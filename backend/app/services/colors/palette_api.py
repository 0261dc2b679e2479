"""
Palette API Orchestrator

Coordinates the palette engine for the /v1 endpoints: validates input,
times each stage, logs with a request ID, and turns engine errors into
HTTP 400 responses.
"""

import time
from typing import List

from fastapi import HTTPException, UploadFile

from app.config import config
from app.schemas import (
    ColorResponse, HexResponse, HSLModel, ImagePaletteResponse, PaletteDebug,
    PaletteModel, PaletteSetResponse, RGBModel, SinglePaletteResponse,
)
from app.services.colors.blending import blend_colors
from app.services.colors.conversion import describe_color, hsl_to_hex, normalize_hex, rgb_to_hex
from app.services.colors.errors import ColorError, ImageDecodeError
from app.services.colors.palettes import Palette, generate_palette, generate_palettes, get_dominant_color
from app.services.colors.sampling import extract_colors_from_image, load_image
from app.utils.ids import generate_request_id
from app.utils.logging import get_logger

logger = get_logger()


def _bad_request(request_id: str, error: ColorError) -> HTTPException:
    logger.warning(f"Palette request {request_id} rejected", extra={
        "request_id": request_id,
        "error_type": type(error).__name__,
        "error": str(error)
    })
    return HTTPException(status_code=400, detail=str(error))


def _to_models(palettes: List[Palette]) -> List[PaletteModel]:
    return [PaletteModel(**palette.to_dict()) for palette in palettes]


def handle_palettes(colors: List[str]) -> PaletteSetResponse:
    """
    Generate all five palettes from a list of sampled colors.

    Raises:
        HTTPException: 400 for an empty list or a malformed hex color
    """
    request_id = generate_request_id()
    start_time = time.time()

    logger.info(f"Palette request {request_id} started", extra={
        "request_id": request_id,
        "sample_count": len(colors)
    })

    try:
        palettes = generate_palettes(colors)
        dominant = normalize_hex(get_dominant_color(colors))
    except ColorError as e:
        raise _bad_request(request_id, e)

    total_ms = round((time.time() - start_time) * 1000, 2)
    logger.info(f"Palette request {request_id} completed", extra={
        "request_id": request_id,
        "dominant": dominant,
        "total_ms": total_ms
    })

    return PaletteSetResponse(
        dominant=dominant,
        palettes=_to_models(palettes),
        debug=PaletteDebug(request_id=request_id, timing_ms={"total": total_ms})
    )


def handle_single_palette(kind: str, colors: List[str]) -> SinglePaletteResponse:
    """
    Generate one palette by kind.

    Raises:
        HTTPException: 400 for an unknown kind, an empty list or a malformed color
    """
    request_id = generate_request_id()

    try:
        palette = generate_palette(kind, colors)
        dominant = normalize_hex(get_dominant_color(colors))
    except ColorError as e:
        raise _bad_request(request_id, e)

    logger.info(f"Palette request {request_id} completed", extra={
        "request_id": request_id,
        "kind": kind,
        "dominant": dominant
    })

    return SinglePaletteResponse(dominant=dominant, palette=PaletteModel(**palette.to_dict()))


async def handle_image(file: UploadFile) -> ImagePaletteResponse:
    """
    Sample an uploaded image and generate palettes from the sampled colors.

    Raises:
        HTTPException: 415 for unsupported media types, 400 for undecodable images
    """
    request_id = generate_request_id()
    start_time = time.time()

    logger.info(f"Image palette request {request_id} started", extra={
        "request_id": request_id,
        "upload_filename": file.filename,
        "content_type": file.content_type
    })

    if file.content_type and file.content_type not in config.SUPPORTED_MIME_TYPES:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported media type. Supported: {', '.join(config.SUPPORTED_MIME_TYPES)}"
        )

    max_bytes = config.MAX_FILE_MB * 1024 * 1024

    # file.size might be None for some clients
    if hasattr(file, 'size') and file.size and file.size > max_bytes:
        raise _bad_request(
            request_id, ImageDecodeError(f"File too large. Maximum size: {config.MAX_FILE_MB}MB")
        )

    # One byte past the limit lets load_image reject bodies with no declared size
    file_bytes = await file.read(max_bytes + 1)

    try:
        image = load_image(file_bytes)
    except ImageDecodeError as e:
        logger.error(f"Image palette request {request_id} failed to decode", extra={
            "request_id": request_id,
            "upload_filename": file.filename,
            "byte_count": len(file_bytes),
            "error": str(e)
        })
        raise HTTPException(status_code=400, detail=str(e))

    decode_ms = round((time.time() - start_time) * 1000, 2)

    try:
        samples = extract_colors_from_image(image)
        palettes = generate_palettes(samples)
    except ColorError as e:
        raise _bad_request(request_id, e)

    total_ms = round((time.time() - start_time) * 1000, 2)
    width, height = image.size

    logger.info(f"Image palette request {request_id} completed", extra={
        "request_id": request_id,
        "width": width,
        "height": height,
        "dominant": samples[0],
        "total_ms": total_ms
    })

    return ImagePaletteResponse(
        width=width,
        height=height,
        samples=samples,
        dominant=samples[0],
        palettes=_to_models(palettes),
        debug=PaletteDebug(
            request_id=request_id,
            timing_ms={"decode": decode_ms, "total": total_ms}
        )
    )


def handle_describe(hex_color: str) -> ColorResponse:
    """Return a color in hex, RGB and HSL form."""
    request_id = generate_request_id()
    try:
        color = describe_color(hex_color)
    except ColorError as e:
        raise _bad_request(request_id, e)

    rgb, hsl = color.rgb, color.hsl
    return ColorResponse(
        hex=color.hex,
        rgb=RGBModel(r=rgb.r, g=rgb.g, b=rgb.b),
        hsl=HSLModel(h=round(hsl.h, 3), s=round(hsl.s, 3), l=round(hsl.l, 3))
    )


def handle_from_rgb(r: int, g: int, b: int) -> HexResponse:
    """Encode RGB channels as hex."""
    request_id = generate_request_id()
    try:
        return HexResponse(hex=rgb_to_hex(r, g, b))
    except ColorError as e:
        raise _bad_request(request_id, e)


def handle_from_hsl(h: float, s: float, l: float) -> HexResponse:
    """Encode HSL components as hex."""
    request_id = generate_request_id()
    try:
        return HexResponse(hex=hsl_to_hex(h, s, l))
    except ColorError as e:
        raise _bad_request(request_id, e)


def handle_blend(color1: str, color2: str, ratio: float) -> HexResponse:
    """Blend two hex colors."""
    request_id = generate_request_id()
    try:
        return HexResponse(hex=blend_colors(color1, color2, ratio))
    except ColorError as e:
        raise _bad_request(request_id, e)
