"""
Color conversion endpoints. Each one is also exposed as an MCP tool through
its operation_id. All parsing and math lives in the colorengine package; the
routes only translate Success/Failure values into HTTP responses.
"""

import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from colorengine import (
    ColorConversionService,
    ColorFormat,
    detect_format,
    get_settings,
    validate,
    validate_any,
)
from colorengine.errors import Failure
from schemas.requests import (
    ColorConvertRequest,
    ColorDetectRequest,
    ColorRepresentationRequest,
    ColorValidateRequest,
)
from schemas.responses import (
    DetectionResponse,
    ErrorResponse,
    RepresentationResponse,
    SuccessResponse,
    ValidationResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache
def get_service() -> ColorConversionService:
    return ColorConversionService(get_settings())


def _raise_for(result: Failure):
    error = result.error
    logger.info("Rejected color code: %s", error.message)
    body = ErrorResponse(error=error.message, suggestion=error.recovery_suggestion)
    raise HTTPException(status_code=400, detail=body.model_dump())


@router.post("/convert_color_code", response_model=SuccessResponse, operation_id="convert_color_code", responses={400: {"model": ErrorResponse}}, description="Convert a color code (rgb, hex, hsl, hsv, cmyk, lab) to a target format")
async def convert_color_code(request: ColorConvertRequest, service: ColorConversionService = Depends(get_service)):
    """Parse a color code and convert it to the target format."""
    if request.source is None:
        result = service.convert_auto(request.code, request.target)
    else:
        result = service.convert_color(request.source, request.target, request.code)
    if not result.ok:
        _raise_for(result)
    return SuccessResponse(success=True, message=result.value)


@router.post("/color_representation", response_model=RepresentationResponse, operation_id="color_representation", responses={400: {"model": ErrorResponse}}, description="Describe a color code in every supported format at once")
async def color_representation(request: ColorRepresentationRequest, service: ColorConversionService = Depends(get_service)):
    """Parse a color code and derive all six representations."""
    result = service.create_color_representation(request.format, request.code)
    if not result.ok:
        _raise_for(result)
    return RepresentationResponse(success=True, color=result.value)


@router.post("/validate_color_code", response_model=ValidationResponse, operation_id="validate_color_code", description="Check a color code for structure and component ranges without converting it")
async def validate_color_code(request: ColorValidateRequest):
    """Strictly validate a color code; out-of-range values are rejected, not clamped."""
    if request.format is None:
        fmt = detect_format(request.code)
        check = validate_any(request.code)
    else:
        fmt = ColorFormat.from_name(request.format)
        check = validate(request.code, fmt)
    return ValidationResponse(
        is_valid=check.is_valid,
        format=fmt.label if fmt else None,
        reason=check.reason,
    )


@router.post("/detect_color_format", response_model=DetectionResponse, operation_id="detect_color_format", description="Infer which color format a code is written in")
async def detect_color_format(request: ColorDetectRequest):
    """Detect the format of a color code; an unrecognized code yields null."""
    fmt = detect_format(request.code)
    return DetectionResponse(format=fmt.label if fmt else None)
