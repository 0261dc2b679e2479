"""
Palette Studio v1 API Routes
Implements palette generation and color conversion endpoints.
"""
from fastapi import APIRouter, File, UploadFile

from app.schemas import (
    BlendRequest, ColorResponse, ErrorResponse, HexResponse, HSLModel,
    ImagePaletteResponse, PaletteRequest, PaletteSetResponse, RGBModel,
    SinglePaletteResponse,
)
from app.services.colors.palette_api import (
    handle_blend, handle_describe, handle_from_hsl, handle_from_rgb,
    handle_image, handle_palettes, handle_single_palette,
)

router = APIRouter(prefix="/v1", tags=["Palettes"])

_errors = {400: {"model": ErrorResponse}}


@router.post("/palettes",
             response_model=PaletteSetResponse,
             responses=_errors,
             summary="Generate Palettes",
             description="Derive Extracted, Complementary, Monochromatic, Analogous and Triadic palettes")
def create_palettes(body: PaletteRequest) -> PaletteSetResponse:
    return handle_palettes(body.colors)


@router.post("/palettes/image",
             response_model=ImagePaletteResponse,
             responses={**_errors, 415: {"model": ErrorResponse}},
             summary="Generate Palettes From Image",
             description="Sample five colors from an uploaded PNG/JPEG and derive palettes")
async def create_palettes_from_image(
    file: UploadFile = File(..., description="PNG or JPEG image")
) -> ImagePaletteResponse:
    return await handle_image(file)


@router.post("/palettes/{kind}",
             response_model=SinglePaletteResponse,
             responses=_errors,
             summary="Generate One Palette")
def create_palette(kind: str, body: PaletteRequest) -> SinglePaletteResponse:
    return handle_single_palette(kind, body.colors)


@router.get("/colors/{hex_color}",
            response_model=ColorResponse,
            responses=_errors,
            summary="Describe Color")
def get_color(hex_color: str) -> ColorResponse:
    """Accepts the hex with or without '#' (URL-encode '#' as %23)."""
    return handle_describe(hex_color)


@router.post("/colors/from-rgb", response_model=HexResponse, responses=_errors)
def color_from_rgb(body: RGBModel) -> HexResponse:
    return handle_from_rgb(body.r, body.g, body.b)


@router.post("/colors/from-hsl", response_model=HexResponse, responses=_errors)
def color_from_hsl(body: HSLModel) -> HexResponse:
    return handle_from_hsl(body.h, body.s, body.l)


@router.post("/colors/blend", response_model=HexResponse, responses=_errors)
def color_blend(body: BlendRequest) -> HexResponse:
    return handle_blend(body.color1, body.color2, body.ratio)
