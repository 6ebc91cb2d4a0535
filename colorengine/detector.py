"""Infer which grammar a raw color string uses."""

from typing import Optional

from .grammar import sanitize
from .models import ColorFormat

# Order matters: first match wins
DETECTION_RULES = (
    ("#", ColorFormat.HEX),
    ("rgb", ColorFormat.RGB),
    ("hsl", ColorFormat.HSL),
    ("hsv", ColorFormat.HSV),
    ("cmyk", ColorFormat.CMYK),
    ("lab", ColorFormat.LAB),
)


def detect_format(text: str) -> Optional[ColorFormat]:
    """Return the inferred format, or None when nothing matches."""
    s = sanitize(text).lower()
    if not s:
        return None
    for prefix, fmt in DETECTION_RULES:
        if s.startswith(prefix):
            return fmt
    return None
