"""
Color conversion and validation engine.
Supported grammars: rgb/rgba, hex (3/6/8 digits), hsl/hsla, hsv/hsva, cmyk, lab.
"""

from .config import Settings, get_settings
from .detector import detect_format
from .errors import (
    ArityError,
    ColorError,
    EmptyInput,
    ErrorSeverity,
    Failure,
    FormatMismatch,
    ParseFailure,
    RangeViolation,
    Result,
    Success,
    UnsupportedFormat,
)
from .grammar import format_color, format_from_rgb, parse_color, parse_to_rgb
from .models import CMYKColor, ColorFormat, HSLColor, HSVColor, LABColor, RGBColor
from .representation import ColorRepresentation, build_representation, representation_from_rgb
from .service import ColorConversionService
from .validator import ValidationResult, validate, validate_any

__all__ = [
    "ArityError",
    "CMYKColor",
    "ColorConversionService",
    "ColorError",
    "ColorFormat",
    "ColorRepresentation",
    "EmptyInput",
    "ErrorSeverity",
    "Failure",
    "FormatMismatch",
    "HSLColor",
    "HSVColor",
    "LABColor",
    "ParseFailure",
    "RGBColor",
    "RangeViolation",
    "Result",
    "Settings",
    "Success",
    "UnsupportedFormat",
    "ValidationResult",
    "build_representation",
    "detect_format",
    "format_color",
    "format_from_rgb",
    "get_settings",
    "parse_color",
    "parse_to_rgb",
    "representation_from_rgb",
    "validate",
    "validate_any",
]
