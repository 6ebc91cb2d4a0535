"""
Functional-notation and hex grammars: string -> model value and back.

Parsers are lenient: they accept a missing '%' and clamp out-of-range
components through the model constructors. Strict checking lives in
``colorengine.validator``.
"""

import math
import re
from typing import List, Tuple

from .conversions import from_rgb, hex_to_rgb, rgb_to_hex, to_rgb
from .errors import (
    ArityError,
    ColorError,
    EmptyInput,
    Failure,
    FormatMismatch,
    ParseFailure,
    Result,
    Success,
    UnsupportedFormat,
)
from .models import (
    CMYKColor,
    ColorFormat,
    ColorModel,
    HSLColor,
    HSVColor,
    LABColor,
    RGBColor,
)

# str.strip() covers ASCII and Unicode spaces (NBSP included) but not these
_INVISIBLE = "\u200b\ufeff"

num = r"[+-]?(?:\d+(?:\.\d+)?|\.\d+)"
NUMBER_RE = re.compile(f"^{num}$", re.ASCII)
FUNCTIONAL_RE = re.compile(r"^([a-z]+)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL | re.ASCII)
HEX_RE = re.compile(r"^#([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)

PREFIXES = {
    ColorFormat.RGB: ("rgb", "rgba"),
    ColorFormat.HSL: ("hsl", "hsla"),
    ColorFormat.HSV: ("hsv", "hsva"),
    ColorFormat.CMYK: ("cmyk",),
    ColorFormat.LAB: ("lab",),
}


def sanitize(text: str) -> str:
    """Trim ASCII and Unicode whitespace from both ends."""
    if text is None:
        return ""
    s = str(text)
    while True:
        stripped = s.strip().strip(_INVISIBLE)
        if stripped == s:
            return s
        s = stripped


def sanitize_input(text: str, fmt: ColorFormat) -> str:
    """Sanitize for a declared format; hex input gets its '#' back."""
    s = sanitize(text)
    if fmt is ColorFormat.HEX and s and not s.startswith("#"):
        s = "#" + s
    return s


def split_arguments(text: str, fmt: ColorFormat) -> Tuple[str, List[str]]:
    """Return (function name, raw argument tokens) for a functional string."""
    m = FUNCTIONAL_RE.match(text)
    if not m or m.group(1).lower() not in PREFIXES[fmt]:
        raise FormatMismatch(fmt.label, text, f"Expected: {fmt.grammar}")
    inner = m.group(2).strip()
    tokens = [t.strip() for t in inner.split(",")] if inner else []
    return m.group(1).lower(), tokens


def parse_number(token: str, component: str = None) -> float:
    """Parse an integer, decimal or percent token (the '%' is dropped)."""
    t = token.strip()
    if t.endswith("%"):
        t = t[:-1].rstrip()
    if not NUMBER_RE.match(t):
        raise ParseFailure(token, component)
    return float(t)


def _components(text: str, fmt: ColorFormat, required: int, optional_alpha: bool) -> List[float]:
    """Split a functional string and parse each argument to a float."""
    _, tokens = split_arguments(text, fmt)
    allowed = (required, required + 1) if optional_alpha else (required,)
    if len(tokens) not in allowed or any(t == "" for t in tokens):
        expected = f"{required} or {required + 1}" if optional_alpha else f"exactly {required}"
        raise ArityError(fmt.label, expected, len([t for t in tokens if t]))
    names = [c.name for c in fmt.components]
    return [parse_number(tok, names[i]) for i, tok in enumerate(tokens)]


def _alpha(values: List[float], index: int) -> float:
    """Optional trailing alpha, defaulting to opaque."""
    return values[index] if len(values) > index else 1.0


# Parsers ---------------------------------------------------------

def parse_rgb(text: str) -> RGBColor:
    """Parse RGB/RGBA color string to RGBA."""
    v = _components(text, ColorFormat.RGB, 3, True)
    return RGBColor(red=v[0], green=v[1], blue=v[2], alpha=_alpha(v, 3))


def parse_hex(text: str) -> RGBColor:
    """Parse #RGB, #RRGGBB or #RRGGBBAA to RGBA."""
    m = HEX_RE.match(text)
    if not m:
        raise FormatMismatch(ColorFormat.HEX.label, text, f"Expected: {ColorFormat.HEX.grammar}")
    return hex_to_rgb(m.group(1))


def parse_hsl(text: str) -> HSLColor:
    """Parse HSL/HSLA color string to HSL."""
    v = _components(text, ColorFormat.HSL, 3, True)
    return HSLColor(hue=v[0], saturation=v[1], lightness=v[2], alpha=_alpha(v, 3))


def parse_hsv(text: str) -> HSVColor:
    """Parse HSV/HSVA color string to HSV."""
    v = _components(text, ColorFormat.HSV, 3, True)
    return HSVColor(hue=v[0], saturation=v[1], value=v[2], alpha=_alpha(v, 3))


def parse_cmyk(text: str) -> CMYKColor:
    """Parse CMYK color string to CMYK."""
    v = _components(text, ColorFormat.CMYK, 4, False)
    return CMYKColor(cyan=v[0], magenta=v[1], yellow=v[2], key=v[3])


def parse_lab(text: str) -> LABColor:
    """Parse LAB color string to LAB."""
    v = _components(text, ColorFormat.LAB, 3, False)
    return LABColor(lightness=v[0], a=v[1], b=v[2])


PARSERS = {
    ColorFormat.RGB: parse_rgb,
    ColorFormat.HEX: parse_hex,
    ColorFormat.HSL: parse_hsl,
    ColorFormat.HSV: parse_hsv,
    ColorFormat.CMYK: parse_cmyk,
    ColorFormat.LAB: parse_lab,
}


def parse_model(text: str, fmt: ColorFormat) -> ColorModel:
    """Parse into the model of ``fmt``; raises ColorError on failure."""
    if not isinstance(fmt, ColorFormat):
        raise UnsupportedFormat(str(fmt))
    s = sanitize_input(text, fmt)
    if not s:
        raise EmptyInput()
    return PARSERS[fmt](s)


def parse_color(text: str, fmt: ColorFormat) -> Result:
    """Parse into the model of ``fmt`` as a Success/Failure value."""
    try:
        return Success(parse_model(text, fmt))
    except ColorError as e:
        return Failure(e)


def parse_to_rgb(text: str, fmt: ColorFormat) -> Result:
    """Parse and route to the RGB hub."""
    result = parse_color(text, fmt)
    if not result.ok:
        return result
    return Success(to_rgb(result.value))


# Formatters ------------------------------------------------------

def round_half_up(v: float) -> int:
    """Round half up for display."""
    return int(math.floor(v + 0.5))


def fixed_decimal(v: float, places: int) -> str:
    """Fixed-point text that never shows -0."""
    rounded = round(v, places)
    if rounded == 0:
        rounded = 0.0
    return f"{rounded:.{places}f}"


def _is_opaque(alpha: float) -> bool:
    """Alpha is omitted from output only when exactly 1.0."""
    return alpha == 1.0


def format_rgb(rgb: RGBColor) -> str:
    """Format RGBA as rgb() or rgba() string."""
    r, g, b = round_half_up(rgb.red), round_half_up(rgb.green), round_half_up(rgb.blue)
    if _is_opaque(rgb.alpha):
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {fixed_decimal(rgb.alpha, 2)})"


def format_hex(rgb: RGBColor) -> str:
    """Format RGBA as uppercase hex string."""
    return rgb_to_hex(rgb)


def format_hsl(hsl: HSLColor) -> str:
    """Format HSL as hsl() or hsla() string."""
    h, s, l = (round_half_up(x) for x in (hsl.hue, hsl.saturation, hsl.lightness))
    if _is_opaque(hsl.alpha):
        return f"hsl({h}, {s}%, {l}%)"
    return f"hsla({h}, {s}%, {l}%, {fixed_decimal(hsl.alpha, 2)})"


def format_hsv(hsv: HSVColor) -> str:
    """Format HSV as hsv() or hsva() string."""
    h, s, v = (round_half_up(x) for x in (hsv.hue, hsv.saturation, hsv.value))
    if _is_opaque(hsv.alpha):
        return f"hsv({h}, {s}%, {v}%)"
    return f"hsva({h}, {s}%, {v}%, {fixed_decimal(hsv.alpha, 2)})"


def format_cmyk(cmyk: CMYKColor) -> str:
    """Format CMYK as cmyk() string with percent components."""
    c, m, y, k = (round_half_up(x) for x in (cmyk.cyan, cmyk.magenta, cmyk.yellow, cmyk.key))
    return f"cmyk({c}%, {m}%, {y}%, {k}%)"


def format_lab(lab: LABColor) -> str:
    """Format LAB as lab() string with one decimal."""
    l, a, b = (fixed_decimal(x, 1) for x in (lab.lightness, lab.a, lab.b))
    return f"lab({l}, {a}, {b})"


def format_color(color: ColorModel) -> str:
    """Render any model value in its own grammar."""
    if isinstance(color, RGBColor):
        return format_rgb(color)
    if isinstance(color, HSLColor):
        return format_hsl(color)
    if isinstance(color, HSVColor):
        return format_hsv(color)
    if isinstance(color, CMYKColor):
        return format_cmyk(color)
    if isinstance(color, LABColor):
        return format_lab(color)
    raise TypeError(f"Unsupported color model: {type(color).__name__}")


def format_from_rgb(rgb: RGBColor, target: ColorFormat) -> str:
    """Convert the hub value to ``target`` and render it."""
    converted = from_rgb(rgb, target)
    if isinstance(converted, str):
        return converted
    return format_color(converted)
