from .requests import ColorConvertRequest, ColorDetectRequest, ColorRepresentationRequest, ColorValidateRequest
from .responses import DetectionResponse, ErrorResponse, RepresentationResponse, SuccessResponse, ValidationResponse

__all__ = [
    "ColorConvertRequest",
    "ColorDetectRequest",
    "ColorRepresentationRequest",
    "ColorValidateRequest",
    "DetectionResponse",
    "ErrorResponse",
    "RepresentationResponse",
    "SuccessResponse",
    "ValidationResponse",
]
