"""
Tests for parsing and formatting the textual color grammars.
"""

import pytest

from colorengine.errors import (
    ArityError,
    EmptyInput,
    FormatMismatch,
    ParseFailure,
    UnsupportedFormat,
)
from colorengine.grammar import (
    format_cmyk,
    format_color,
    format_from_rgb,
    format_hex,
    format_hsl,
    format_hsv,
    format_lab,
    format_rgb,
    parse_color,
    parse_to_rgb,
    sanitize,
    sanitize_input,
)
from colorengine.models import (
    CMYKColor,
    ColorFormat,
    HSLColor,
    HSVColor,
    LABColor,
    RGBColor,
)


class TestSanitize:

    @pytest.mark.parametrize("raw", [
        "  rgb(1, 2, 3)\n",
        "\u00a0rgb(1, 2, 3)\u00a0",
        "\u2003\u3000rgb(1, 2, 3)\u200b",
        "\ufeff rgb(1, 2, 3) \t",
    ])
    def test_strips_ascii_and_unicode_space(self, raw):
        assert sanitize(raw) == "rgb(1, 2, 3)"

    def test_none_is_empty(self):
        assert sanitize(None) == ""

    def test_hex_gets_hash(self):
        assert sanitize_input(" ff0000 ", ColorFormat.HEX) == "#ff0000"
        assert sanitize_input("ff0000", ColorFormat.RGB) == "ff0000"


class TestParsing:

    def test_rgb(self):
        result = parse_color("rgb(255, 0, 0)", ColorFormat.RGB)
        assert result.ok
        assert result.value == RGBColor(red=255, green=0, blue=0)

    def test_rgba_with_unicode_padding(self):
        rgb = parse_color("\u00a0rgba(10,20,30,0.5)\u00a0", ColorFormat.RGB).unwrap()
        assert (rgb.red, rgb.green, rgb.blue, rgb.alpha) == (10, 20, 30, 0.5)

    def test_prefix_is_case_insensitive(self):
        hsl = parse_color("HSL(120, 100%, 50%)", ColorFormat.HSL).unwrap()
        assert hsl == HSLColor(hue=120, saturation=100, lightness=50)

    def test_hsva_and_cmyk_and_lab(self):
        assert parse_color("hsva(30, 50%, 60%, 0.25)", ColorFormat.HSV).unwrap() == HSVColor(
            hue=30, saturation=50, value=60, alpha=0.25
        )
        assert parse_color("cmyk(0%, 100%, 100%, 0%)", ColorFormat.CMYK).unwrap() == CMYKColor(
            cyan=0, magenta=100, yellow=100, key=0
        )
        assert parse_color("lab(53.2, 80.1, -67.2)", ColorFormat.LAB).unwrap() == LABColor(
            lightness=53.2, a=80.1, b=-67.2
        )

    def test_parser_is_lenient_about_percent(self):
        assert parse_color("hsl(120, 100, 50)", ColorFormat.HSL).ok

    def test_parser_clamps_out_of_range(self):
        rgb = parse_color("rgb(300, -4, 0)", ColorFormat.RGB).unwrap()
        assert (rgb.red, rgb.green) == (255, 0)

    def test_arity(self):
        result = parse_color("cmyk(0%, 100%, 100%)", ColorFormat.CMYK)
        assert isinstance(result.error, ArityError)
        assert isinstance(parse_color("rgb(1, , 3)", ColorFormat.RGB).error, ArityError)
        assert isinstance(parse_color("rgb()", ColorFormat.RGB).error, ArityError)

    def test_bad_token(self):
        result = parse_color("rgb(a, 0, 0)", ColorFormat.RGB)
        assert isinstance(result.error, ParseFailure)
        assert result.error.token == "a"
        assert result.error.component == "red"

    def test_wrong_grammar(self):
        assert isinstance(parse_color("hsl(0, 0%, 0%)", ColorFormat.RGB).error, FormatMismatch)
        assert isinstance(parse_color("rgb 1 2 3", ColorFormat.RGB).error, FormatMismatch)

    def test_empty(self):
        assert isinstance(parse_color("   ", ColorFormat.LAB).error, EmptyInput)

    def test_unsupported_format(self):
        assert isinstance(parse_color("rgb(0,0,0)", "rgb").error, UnsupportedFormat)

    def test_failure_unwrap_raises(self):
        with pytest.raises(FormatMismatch):
            parse_color("#GG0000", ColorFormat.HEX).unwrap()


class TestHexGrammar:

    def test_short_form(self):
        rgb = parse_color("#F0A", ColorFormat.HEX).unwrap()
        assert format_rgb(rgb) == "rgb(255, 0, 170)"

    def test_alpha_round_trip(self):
        rgb = parse_color("#FF804080", ColorFormat.HEX).unwrap()
        assert format_rgb(rgb) == "rgba(255, 128, 64, 0.50)"
        assert format_hex(rgb) == "#FF804080"

    def test_missing_hash_when_format_is_declared(self):
        assert parse_color("ff0000", ColorFormat.HEX).unwrap() == RGBColor(red=255, green=0, blue=0)

    @pytest.mark.parametrize("text", ["#GG0000", "#FF00", "#FF000", "#FF0000F", "#"])
    def test_malformed(self, text):
        assert isinstance(parse_color(text, ColorFormat.HEX).error, FormatMismatch)


class TestFormatting:

    def test_rgb(self):
        assert format_rgb(RGBColor(red=255, green=0, blue=0)) == "rgb(255, 0, 0)"
        assert format_rgb(RGBColor(red=1, green=2, blue=3, alpha=0.333)) == "rgba(1, 2, 3, 0.33)"

    def test_integer_components_round(self):
        assert format_rgb(RGBColor(red=127.5, green=0.49, blue=254.5)) == "rgb(128, 0, 255)"

    def test_hsl_hsv(self):
        assert format_hsl(HSLColor(hue=0, saturation=100, lightness=50)) == "hsl(0, 100%, 50%)"
        assert format_hsl(HSLColor(hue=0, saturation=100, lightness=50, alpha=0.5)) == "hsla(0, 100%, 50%, 0.50)"
        assert format_hsv(HSVColor(hue=240, saturation=100, value=100)) == "hsv(240, 100%, 100%)"
        assert format_hsv(HSVColor(hue=240, saturation=100, value=100, alpha=0)) == "hsva(240, 100%, 100%, 0.00)"

    def test_cmyk_has_no_alpha(self):
        assert format_cmyk(CMYKColor(cyan=0, magenta=100, yellow=100, key=0)) == "cmyk(0%, 100%, 100%, 0%)"

    def test_lab_one_decimal(self):
        assert format_lab(LABColor(lightness=53.2408, a=80.0925, b=67.2032)) == "lab(53.2, 80.1, 67.2)"

    def test_lab_never_prints_negative_zero(self):
        assert format_lab(LABColor(lightness=100, a=-0.00001, b=-0.04)) == "lab(100.0, 0.0, 0.0)"

    def test_format_color_dispatch(self):
        assert format_color(CMYKColor(cyan=0, magenta=0, yellow=0, key=100)) == "cmyk(0%, 0%, 0%, 100%)"
        with pytest.raises(TypeError):
            format_color("red")

    @pytest.mark.parametrize("target,expected", [
        (ColorFormat.RGB, "rgb(255, 0, 0)"),
        (ColorFormat.HEX, "#FF0000"),
        (ColorFormat.HSL, "hsl(0, 100%, 50%)"),
        (ColorFormat.HSV, "hsv(0, 100%, 100%)"),
        (ColorFormat.CMYK, "cmyk(0%, 100%, 100%, 0%)"),
        (ColorFormat.LAB, "lab(53.2, 80.1, 67.2)"),
    ])
    def test_format_from_rgb(self, target, expected):
        assert format_from_rgb(RGBColor(red=255, green=0, blue=0), target) == expected


class TestParseToRGB:

    def test_routes_through_hub(self):
        assert parse_to_rgb("hsl(0, 100%, 50%)", ColorFormat.HSL).unwrap() == RGBColor(red=255, green=0, blue=0)

    def test_failure_passes_through(self):
        assert not parse_to_rgb("lab(1, 2)", ColorFormat.LAB).ok


class TestAsciiDigitsOnly:

    def test_parser_rejects_non_ascii_digits(self):
        result = parse_color("rgb(\u0662\u0665\u0665, 0, 0)", ColorFormat.RGB)
        assert isinstance(result.error, ParseFailure)
        assert result.error.component == "red"
