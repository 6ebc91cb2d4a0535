"""
Color model value types.

Every model clamps its fields into range when it is built (the lenient path,
also reachable explicitly through ``clamped``). ``strict`` is the validating
constructor and reports the first out-of-range field instead.
"""

import math
from enum import Enum
from typing import ClassVar, Dict, NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import (
    ArityError,
    Failure,
    FormatMismatch,
    ParseFailure,
    RangeViolation,
    Result,
    Success,
)


class Component(NamedTuple):
    name: str
    low: float
    high: float
    unit: str = ""

    @property
    def range_text(self) -> str:
        if self.low < 0:
            return f"{_trim(self.low)} to {_trim(self.high)}"
        return f"{_trim(self.low)}-{_trim(self.high)}{self.unit}"

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


def _trim(x: float) -> str:
    return str(int(x)) if float(x).is_integer() else str(x)


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi; NaN lands on lo."""
    if v != v:
        return lo
    return max(lo, min(hi, v))


class ColorFormat(Enum):
    RGB = "RGB"
    HEX = "Hex"
    HSL = "HSL"
    HSV = "HSV"
    CMYK = "CMYK"
    LAB = "LAB"

    @classmethod
    def from_name(cls, name: str) -> Optional["ColorFormat"]:
        """Case-insensitive lookup by value or member name."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        return None

    @property
    def label(self) -> str:
        return self.value

    @property
    def grammar(self) -> str:
        return _GRAMMARS[self]

    @property
    def components(self) -> Tuple[Component, ...]:
        return COMPONENT_RANGES[self]


_ALPHA = Component("alpha", 0.0, 1.0)

COMPONENT_RANGES: Dict[ColorFormat, Tuple[Component, ...]] = {
    ColorFormat.RGB: (
        Component("red", 0, 255),
        Component("green", 0, 255),
        Component("blue", 0, 255),
        _ALPHA,
    ),
    ColorFormat.HSL: (
        Component("hue", 0, 360),
        Component("saturation", 0, 100, "%"),
        Component("lightness", 0, 100, "%"),
        _ALPHA,
    ),
    ColorFormat.HSV: (
        Component("hue", 0, 360),
        Component("saturation", 0, 100, "%"),
        Component("value", 0, 100, "%"),
        _ALPHA,
    ),
    ColorFormat.CMYK: (
        Component("cyan", 0, 100, "%"),
        Component("magenta", 0, 100, "%"),
        Component("yellow", 0, 100, "%"),
        Component("key", 0, 100, "%"),
    ),
    ColorFormat.LAB: (
        Component("lightness", 0, 100),
        Component("a", -128, 127),
        Component("b", -128, 127),
    ),
}
# Hex is a byte encoding of RGB
COMPONENT_RANGES[ColorFormat.HEX] = COMPONENT_RANGES[ColorFormat.RGB]

_GRAMMARS: Dict[ColorFormat, str] = {
    ColorFormat.RGB: "rgb(r, g, b) or rgba(r, g, b, a)",
    ColorFormat.HEX: "#RGB, #RRGGBB, or #RRGGBBAA",
    ColorFormat.HSL: "hsl(h, s%, l%) or hsla(h, s%, l%, a)",
    ColorFormat.HSV: "hsv(h, s%, v%) or hsva(h, s%, v%, a)",
    ColorFormat.CMYK: "cmyk(c%, m%, y%, k%)",
    ColorFormat.LAB: "lab(l, a, b)",
}


class ColorModel(BaseModel):
    """Frozen value type whose fields are clamped on construction."""

    model_config = ConfigDict(frozen=True)

    color_format: ClassVar[ColorFormat]

    @model_validator(mode="before")
    @classmethod
    def _clamp_components(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for comp in COMPONENT_RANGES[cls.color_format]:
            if data.get(comp.name) is not None:
                data[comp.name] = clamp(float(data[comp.name]), comp.low, comp.high)
        return data

    @classmethod
    def clamped(cls, **fields):
        """Lenient constructor: out-of-range values are forced into range."""
        return cls(**fields)

    @classmethod
    def strict(cls, **fields) -> Result:
        """Validating constructor: out-of-range values are reported, not fixed."""
        label = cls.color_format.label
        required = [name for name, info in cls.model_fields.items() if info.is_required()]
        given = [name for name in required if name in fields]
        if len(given) != len(required):
            return Failure(ArityError(label, str(len(required)), len(given)))
        for comp in COMPONENT_RANGES[cls.color_format]:
            if comp.name not in fields:
                continue
            try:
                value = float(fields[comp.name])
            except (TypeError, ValueError):
                return Failure(ParseFailure(str(fields[comp.name]), comp.name))
            if math.isnan(value) or not comp.contains(value):
                return Failure(RangeViolation(comp.name, value, comp.range_text))
        try:
            return Success(cls(**fields))
        except ValidationError as e:
            return Failure(FormatMismatch(label, str(fields), e.errors()[0]["msg"]))


class RGBColor(ColorModel):
    color_format: ClassVar[ColorFormat] = ColorFormat.RGB

    red: float
    green: float
    blue: float
    alpha: float = 1.0


class HSLColor(ColorModel):
    color_format: ClassVar[ColorFormat] = ColorFormat.HSL

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0


class HSVColor(ColorModel):
    color_format: ClassVar[ColorFormat] = ColorFormat.HSV

    hue: float
    saturation: float
    value: float
    alpha: float = 1.0


class CMYKColor(ColorModel):
    color_format: ClassVar[ColorFormat] = ColorFormat.CMYK

    cyan: float
    magenta: float
    yellow: float
    key: float


class LABColor(ColorModel):
    color_format: ClassVar[ColorFormat] = ColorFormat.LAB

    lightness: float
    a: float
    b: float
