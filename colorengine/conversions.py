"""
Pure color space conversions with RGB as the hub.
LAB goes through CIE XYZ (sRGB primaries, D65 white).
"""

import math
from typing import Tuple

from .models import (
    CMYKColor,
    ColorFormat,
    ColorModel,
    HSLColor,
    HSVColor,
    LABColor,
    RGBColor,
    clamp,
)

# D65 reference white, XYZ scaled to Y = 100
XN, YN, ZN = 95.047, 100.000, 108.883

# sRGB (linear) -> XYZ
RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ -> sRGB (linear)
XYZ_TO_RGB = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

LAB_DELTA = 6.0 / 29.0

# Normalized channel spread below which a color is treated as gray
ACHROMATIC_EPSILON = 1e-6

# Distance from a whole channel value that XYZ round-off may leave behind
SNAP_EPSILON = 1e-4


def _mul(matrix, v: Tuple[float, float, float]) -> Tuple[float, float, float]:
    return tuple(row[0] * v[0] + row[1] * v[1] + row[2] * v[2] for row in matrix)


def _hue(r: float, g: float, b: float, mx: float, d: float) -> float:
    """Hue in degrees from normalized channels, in [0, 360)."""
    if d < ACHROMATIC_EPSILON:
        return 0.0
    if mx == r:
        h = ((g - b) / d) % 6
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    h *= 60
    if h < 0:
        h += 360
    return h % 360


# HSL -------------------------------------------------------------

def rgb_to_hsl(rgb: RGBColor) -> HSLColor:
    """Convert RGB to HSL."""
    r, g, b = rgb.red / 255, rgb.green / 255, rgb.blue / 255
    mx, mn = max(r, g, b), min(r, g, b)
    d = mx - mn
    l = (mx + mn) / 2
    s = 0.0 if d < ACHROMATIC_EPSILON else d / (1 - abs(2 * l - 1))
    return HSLColor(
        hue=_hue(r, g, b, mx, d),
        saturation=s * 100,
        lightness=l * 100,
        alpha=rgb.alpha,
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSLColor) -> RGBColor:
    """Convert HSL to RGB."""
    h = (hsl.hue % 360) / 360
    s = hsl.saturation / 100
    l = hsl.lightness / 100

    if s == 0:
        gray = l * 255
        return RGBColor(red=gray, green=gray, blue=gray, alpha=hsl.alpha)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return RGBColor(
        red=_hue_to_rgb(p, q, h + 1 / 3) * 255,
        green=_hue_to_rgb(p, q, h) * 255,
        blue=_hue_to_rgb(p, q, h - 1 / 3) * 255,
        alpha=hsl.alpha,
    )


# HSV -------------------------------------------------------------

def rgb_to_hsv(rgb: RGBColor) -> HSVColor:
    """Convert RGB to HSV."""
    r, g, b = rgb.red / 255, rgb.green / 255, rgb.blue / 255
    mx, mn = max(r, g, b), min(r, g, b)
    d = mx - mn
    s = 0.0 if mx == 0 or d < ACHROMATIC_EPSILON else d / mx
    return HSVColor(
        hue=_hue(r, g, b, mx, d),
        saturation=s * 100,
        value=mx * 100,
        alpha=rgb.alpha,
    )


def hsv_to_rgb(hsv: HSVColor) -> RGBColor:
    """Convert HSV to RGB using the sector/fraction formula."""
    h = (hsv.hue % 360) / 60
    s = hsv.saturation / 100
    v = hsv.value / 100

    i = int(math.floor(h)) % 6
    f = h - math.floor(h)
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i]
    return RGBColor(red=r * 255, green=g * 255, blue=b * 255, alpha=hsv.alpha)


# CMYK ------------------------------------------------------------

def rgb_to_cmyk(rgb: RGBColor) -> CMYKColor:
    """Convert RGB to CMYK. Alpha is dropped."""
    r, g, b = rgb.red / 255, rgb.green / 255, rgb.blue / 255
    k = 1 - max(r, g, b)
    # Pure black: C, M, Y are undefined, pin them to 0
    if k >= 1:
        return CMYKColor(cyan=0, magenta=0, yellow=0, key=100)
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return CMYKColor(cyan=c * 100, magenta=m * 100, yellow=y * 100, key=k * 100)


def cmyk_to_rgb(cmyk: CMYKColor) -> RGBColor:
    """Convert CMYK to an opaque RGB."""
    c, m, y, k = cmyk.cyan / 100, cmyk.magenta / 100, cmyk.yellow / 100, cmyk.key / 100
    return RGBColor(
        red=255 * (1 - c) * (1 - k),
        green=255 * (1 - m) * (1 - k),
        blue=255 * (1 - y) * (1 - k),
    )


# LAB via XYZ -----------------------------------------------------

def gamma_decode(c: float) -> float:
    """sRGB companded [0, 1] to linear light."""
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def gamma_encode(c: float) -> float:
    """Linear light to sRGB companded, clamped to [0, 1]."""
    c = 1.055 * (c ** (1 / 2.4)) - 0.055 if c > 0.0031308 else 12.92 * c
    return clamp(c, 0.0, 1.0)


def _snap(channel: float) -> float:
    nearest = round(channel)
    return float(nearest) if abs(channel - nearest) < SNAP_EPSILON else channel


def rgb_to_xyz(rgb: RGBColor) -> Tuple[float, float, float]:
    """sRGB to XYZ, scaled so that white has Y = 100."""
    linear = tuple(gamma_decode(c / 255) for c in (rgb.red, rgb.green, rgb.blue))
    x, y, z = _mul(RGB_TO_XYZ, linear)
    return x * 100, y * 100, z * 100


def xyz_to_rgb(x: float, y: float, z: float) -> RGBColor:
    """XYZ (Y = 100 scale) to an opaque, gamut-clamped sRGB."""
    r, g, b = _mul(XYZ_TO_RGB, (x / 100, y / 100, z / 100))
    return RGBColor(
        red=_snap(gamma_encode(r) * 255),
        green=_snap(gamma_encode(g) * 255),
        blue=_snap(gamma_encode(b) * 255),
    )


def f_lab(t: float) -> float:
    """LAB forward transform."""
    if t > LAB_DELTA ** 3:
        return t ** (1 / 3)
    return t / (3 * LAB_DELTA ** 2) + 4 / 29


def f_inv_lab(t: float) -> float:
    """LAB inverse transform."""
    if t > LAB_DELTA:
        return t ** 3
    return 3 * LAB_DELTA ** 2 * (t - 4 / 29)


def xyz_to_lab(x: float, y: float, z: float) -> LABColor:
    fx, fy, fz = f_lab(x / XN), f_lab(y / YN), f_lab(z / ZN)
    return LABColor(
        lightness=116 * fy - 16,
        a=500 * (fx - fy),
        b=200 * (fy - fz),
    )


def lab_to_xyz(lab: LABColor) -> Tuple[float, float, float]:
    fy = (lab.lightness + 16) / 116
    fx = fy + lab.a / 500
    fz = fy - lab.b / 200
    return XN * f_inv_lab(fx), YN * f_inv_lab(fy), ZN * f_inv_lab(fz)


def rgb_to_lab(rgb: RGBColor) -> LABColor:
    """Convert RGB to LAB."""
    return xyz_to_lab(*rgb_to_xyz(rgb))


def lab_to_rgb(lab: LABColor) -> RGBColor:
    """Convert LAB to RGB."""
    return xyz_to_rgb(*lab_to_xyz(lab))


# HEX -------------------------------------------------------------

def _byte(v: float) -> int:
    """Round half up into 0..255."""
    return int(clamp(math.floor(v + 0.5), 0, 255))


def rgb_to_hex(rgb: RGBColor) -> str:
    """Convert RGB to #RRGGBB, or #RRGGBBAA when not opaque."""
    base = f"#{_byte(rgb.red):02X}{_byte(rgb.green):02X}{_byte(rgb.blue):02X}"
    if rgb.alpha == 1.0:
        return base
    return base + f"{_byte(rgb.alpha * 255):02X}"


def hex_to_rgb(digits: str) -> RGBColor:
    """Decode 3, 6 or 8 hex digits (without '#')."""
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) not in (6, 8):
        raise ValueError(f"expected 3, 6 or 8 hex digits, got {len(digits)}")
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return RGBColor(red=r, green=g, blue=b, alpha=a)


# Dispatch --------------------------------------------------------

def to_rgb(color: ColorModel) -> RGBColor:
    """Route any model value to the RGB hub."""
    if isinstance(color, RGBColor):
        return color
    if isinstance(color, HSLColor):
        return hsl_to_rgb(color)
    if isinstance(color, HSVColor):
        return hsv_to_rgb(color)
    if isinstance(color, CMYKColor):
        return cmyk_to_rgb(color)
    if isinstance(color, LABColor):
        return lab_to_rgb(color)
    raise TypeError(f"Unsupported color model: {type(color).__name__}")


def from_rgb(rgb: RGBColor, target: ColorFormat):
    """Convert the hub value into the target model (hex gives a string)."""
    if target is ColorFormat.RGB:
        return rgb
    if target is ColorFormat.HEX:
        return rgb_to_hex(rgb)
    if target is ColorFormat.HSL:
        return rgb_to_hsl(rgb)
    if target is ColorFormat.HSV:
        return rgb_to_hsv(rgb)
    if target is ColorFormat.CMYK:
        return rgb_to_cmyk(rgb)
    if target is ColorFormat.LAB:
        return rgb_to_lab(rgb)
    raise ValueError(f"Invalid target color space: {target}")
