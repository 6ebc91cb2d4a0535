"""
ColorRepresentation: one color described in all six models at once.
Everything is derived from a single RGB value so the bundle stays
consistent even though individual conversions are lossy.
"""

from pydantic import BaseModel, ConfigDict, computed_field

from .conversions import rgb_to_cmyk, rgb_to_hex, rgb_to_hsl, rgb_to_hsv, rgb_to_lab, to_rgb
from .grammar import (
    fixed_decimal,
    format_cmyk,
    format_hsl,
    format_hsv,
    format_lab,
    format_rgb,
    round_half_up,
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


class ColorRepresentation(BaseModel):
    model_config = ConfigDict(frozen=True)

    rgb: RGBColor
    hex: str
    hsl: HSLColor
    hsv: HSVColor
    cmyk: CMYKColor
    lab: LABColor

    @computed_field
    @property
    def rgb_string(self) -> str:
        return format_rgb(self.rgb)

    @computed_field
    @property
    def hex_string(self) -> str:
        return self.hex

    @computed_field
    @property
    def hsl_string(self) -> str:
        return format_hsl(self.hsl)

    @computed_field
    @property
    def hsv_string(self) -> str:
        return format_hsv(self.hsv)

    @computed_field
    @property
    def cmyk_string(self) -> str:
        return format_cmyk(self.cmyk)

    @computed_field
    @property
    def lab_string(self) -> str:
        return format_lab(self.lab)

    @computed_field
    @property
    def description(self) -> str:
        """Accessible text description of the color."""
        rgb = self.rgb
        alpha = f", alpha {fixed_decimal(rgb.alpha, 2)}" if rgb.alpha != 1.0 else ""
        r, g, b = round_half_up(rgb.red), round_half_up(rgb.green), round_half_up(rgb.blue)
        return f"Red {r}, Green {g}, Blue {b}{alpha}"

    def string_for(self, fmt: ColorFormat) -> str:
        return {
            ColorFormat.RGB: self.rgb_string,
            ColorFormat.HEX: self.hex_string,
            ColorFormat.HSL: self.hsl_string,
            ColorFormat.HSV: self.hsv_string,
            ColorFormat.CMYK: self.cmyk_string,
            ColorFormat.LAB: self.lab_string,
        }[fmt]


def representation_from_rgb(rgb: RGBColor) -> ColorRepresentation:
    return ColorRepresentation(
        rgb=rgb,
        hex=rgb_to_hex(rgb),
        hsl=rgb_to_hsl(rgb),
        hsv=rgb_to_hsv(rgb),
        cmyk=rgb_to_cmyk(rgb),
        lab=rgb_to_lab(rgb),
    )


def build_representation(color: ColorModel) -> ColorRepresentation:
    """Route any model value through RGB and derive the rest from it."""
    return representation_from_rgb(to_rgb(color))


def colors_equal(first: RGBColor, second: RGBColor) -> bool:
    """Equal within half a channel step and a rounding step of alpha."""
    return (
        abs(first.red - second.red) < 0.5
        and abs(first.green - second.green) < 0.5
        and abs(first.blue - second.blue) < 0.5
        and abs(first.alpha - second.alpha) < 0.005
    )
