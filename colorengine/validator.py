"""
Strict validation of raw color strings for live input feedback.

Unlike the parsers, which clamp, the validator rejects anything outside the
declared component ranges and insists on '%' where the grammar requires it.
"""

import logging
import re
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict

from .detector import detect_format
from .errors import RangeViolation, UnsupportedFormat
from .grammar import sanitize, sanitize_input
from .models import COMPONENT_RANGES, ColorFormat

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d+)?|\.\d+)$", re.ASCII)
_CALL_RE = re.compile(r"^([a-z]+)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL | re.ASCII)
_HEX_BODY_RE = re.compile(r"^[0-9a-f]*$", re.IGNORECASE)


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(is_valid=False, reason=reason)

    @property
    def error_message(self) -> Optional[str]:
        return None if self.is_valid else self.reason


# Per-format grammar rules: accepted names, arity, which positions need '%'
_RULES = {
    ColorFormat.RGB: (("rgb", "rgba"), (3, 4), ()),
    ColorFormat.HSL: (("hsl", "hsla"), (3, 4), (1, 2)),
    ColorFormat.HSV: (("hsv", "hsva"), (3, 4), (1, 2)),
    ColorFormat.CMYK: (("cmyk",), (4,), (0, 1, 2, 3)),
    ColorFormat.LAB: (("lab",), (3,), ()),
}


def _validate_functional(text: str, fmt: ColorFormat) -> ValidationResult:
    names, arities, percent_positions = _RULES[fmt]
    s = sanitize(text)
    if not s:
        return ValidationResult.invalid("Color input cannot be empty")

    m = _CALL_RE.match(s)
    if not m or m.group(1).lower() not in names:
        return ValidationResult.invalid(f"Invalid {fmt.label} format. Expected: {fmt.grammar}")

    inner = m.group(2).strip()
    tokens = [t.strip() for t in inner.split(",")] if inner else []
    present = [t for t in tokens if t]
    if len(tokens) not in arities or len(present) != len(tokens):
        expected = " or ".join(str(a) for a in arities)
        return ValidationResult.invalid(
            f"{fmt.label} requires {expected} components, got {len(present)}"
        )

    for index, token in enumerate(tokens):
        comp = COMPONENT_RANGES[fmt][index]
        has_percent = token.endswith("%")
        if index in percent_positions and not has_percent:
            return ValidationResult.invalid(f"Missing % suffix on {comp.name} value: {token}")
        if index not in percent_positions and has_percent:
            return ValidationResult.invalid(f"Unexpected % suffix on {comp.name} value: {token}")

        raw = token[:-1].rstrip() if has_percent else token
        if not _NUMBER_RE.match(raw):
            return ValidationResult.invalid(f"Invalid {comp.name} value: '{token}' is not a number")

        value = float(raw)
        if not comp.contains(value):
            return ValidationResult.invalid(RangeViolation(comp.name, value, comp.range_text).message)

    return ValidationResult.valid()


def validate_rgb(text: str) -> ValidationResult:
    """Strictly validate RGB color string."""
    return _validate_functional(text, ColorFormat.RGB)


def validate_hsl(text: str) -> ValidationResult:
    """Strictly validate HSL color string."""
    return _validate_functional(text, ColorFormat.HSL)


def validate_hsv(text: str) -> ValidationResult:
    """Strictly validate HSV color string."""
    return _validate_functional(text, ColorFormat.HSV)


def validate_cmyk(text: str) -> ValidationResult:
    """Strictly validate CMYK color string."""
    return _validate_functional(text, ColorFormat.CMYK)


def validate_lab(text: str) -> ValidationResult:
    """Strictly validate LAB color string."""
    return _validate_functional(text, ColorFormat.LAB)


def validate_hex(text: str) -> ValidationResult:
    """Strictly validate hex color string."""
    s = sanitize_input(text, ColorFormat.HEX)
    if not s:
        return ValidationResult.invalid("Color input cannot be empty")
    digits = s[1:]
    if not _HEX_BODY_RE.match(digits):
        bad = next(ch for ch in digits if ch.lower() not in "0123456789abcdef")
        return ValidationResult.invalid(f"Invalid hex digit '{bad}' in '{s}'")
    if len(digits) not in (3, 6, 8):
        return ValidationResult.invalid(
            f"Invalid hex format: got {len(digits)} digits. Expected: {ColorFormat.HEX.grammar}"
        )
    return ValidationResult.valid()


VALIDATORS = {
    ColorFormat.RGB: validate_rgb,
    ColorFormat.HEX: validate_hex,
    ColorFormat.HSL: validate_hsl,
    ColorFormat.HSV: validate_hsv,
    ColorFormat.CMYK: validate_cmyk,
    ColorFormat.LAB: validate_lab,
}


def validate(text: str, fmt: Union[ColorFormat, str]) -> ValidationResult:
    """Check ``text`` against the grammar and ranges of ``fmt``."""
    resolved = ColorFormat.from_name(fmt) if fmt is not None else None
    if resolved is None:
        return ValidationResult.invalid(UnsupportedFormat(str(fmt)).message)
    result = VALIDATORS[resolved](text)
    if not result.is_valid:
        logger.debug("Rejected %s input %r: %s", resolved.label, text, result.reason)
    return result


def validate_any(text: str) -> ValidationResult:
    """Detect the format first, then validate against it."""
    if not sanitize(text):
        return ValidationResult.invalid("Color input cannot be empty")
    fmt = detect_format(text)
    if fmt is None:
        supported = ", ".join(f.label for f in ColorFormat)
        return ValidationResult.invalid(f"Unrecognized color format. Supported formats: {supported}")
    return validate(text, fmt)
