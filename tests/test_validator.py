"""
Tests for format detection and strict input validation.
"""

import pytest

from colorengine.detector import detect_format
from colorengine.grammar import parse_color
from colorengine.models import ColorFormat
from colorengine.validator import ValidationResult, validate, validate_any


class TestDetectFormat:

    @pytest.mark.parametrize("text,expected", [
        ("#FF0000", ColorFormat.HEX),
        ("  #fff ", ColorFormat.HEX),
        ("rgb(255,0,0)", ColorFormat.RGB),
        ("RGBA(0, 0, 0, 0.5)", ColorFormat.RGB),
        ("hsla(0, 0%, 0%, 1)", ColorFormat.HSL),
        ("hsv(0, 0%, 0%)", ColorFormat.HSV),
        ("cmyk(0%, 0%, 0%, 0%)", ColorFormat.CMYK),
        ("Lab(50, 0, 0)", ColorFormat.LAB),
    ])
    def test_known_prefixes(self, text, expected):
        assert detect_format(text) is expected

    @pytest.mark.parametrize("text", ["banana", "", "   ", "ff0000", "oklch(0.5 0.1 20)"])
    def test_unrecognized_is_none(self, text):
        assert detect_format(text) is None


class TestValidInput:

    @pytest.mark.parametrize("text,fmt", [
        ("rgb(255,0,0)", ColorFormat.RGB),
        ("rgba(255, 0, 0, 0.5)", ColorFormat.RGB),
        ("rgb(0, 0, 0, 1)", ColorFormat.RGB),
        ("#F0A", ColorFormat.HEX),
        ("#ff0000", ColorFormat.HEX),
        ("#FF804080", ColorFormat.HEX),
        ("FF0000", ColorFormat.HEX),
        ("hsl(360, 100%, 50%)", ColorFormat.HSL),
        ("hsva(0, 0%, 100%, 1)", ColorFormat.HSV),
        ("cmyk(0%, 100%, 100%, 0%)", ColorFormat.CMYK),
        ("lab(53.2, 80.1, -67.2)", ColorFormat.LAB),
        ("lab(0, -128, 127)", ColorFormat.LAB),
    ])
    def test_accepted(self, text, fmt):
        result = validate(text, fmt)
        assert result.is_valid, result.reason
        assert result.error_message is None


class TestInvalidInput:

    @pytest.mark.parametrize("text,fmt", [
        ("rgb(256,0,0)", ColorFormat.RGB),
        ("rgb(-1,0,0)", ColorFormat.RGB),
        ("rgba(0,0,0,1.5)", ColorFormat.RGB),
        ("rgb(0,0)", ColorFormat.RGB),
        ("rgb(0,0,0,0,0)", ColorFormat.RGB),
        ("rgb(x,0,0)", ColorFormat.RGB),
        ("hsl(361,100%,50%)", ColorFormat.HSL),
        ("hsl(0,100,50)", ColorFormat.HSL),
        ("hsl(0%,100%,50%)", ColorFormat.HSL),
        ("hsv(0, 50%, 50%)", ColorFormat.HSL),
        ("hsv(0, 101%, 50%)", ColorFormat.HSV),
        ("cmyk(101%,0%,0%,0%)", ColorFormat.CMYK),
        ("cmyk(0%,0%,0%)", ColorFormat.CMYK),
        ("lab(101,0,0)", ColorFormat.LAB),
        ("lab(50,-129,0)", ColorFormat.LAB),
        ("#GG0000", ColorFormat.HEX),
        ("#FF00", ColorFormat.HEX),
        ("#FF000", ColorFormat.HEX),
        ("#FF00000", ColorFormat.HEX),
        ("", ColorFormat.RGB),
    ])
    def test_rejected_with_reason(self, text, fmt):
        result = validate(text, fmt)
        assert not result.is_valid
        assert result.reason

    def test_range_reason_names_component(self):
        assert validate("rgb(256,0,0)", ColorFormat.RGB).reason == (
            "Invalid red value: 256. Expected range: 0-255"
        )
        assert validate("hsl(361,100%,50%)", ColorFormat.HSL).reason == (
            "Invalid hue value: 361. Expected range: 0-360"
        )
        assert validate("cmyk(0%,0%,0%,100.5%)", ColorFormat.CMYK).reason == (
            "Invalid key value: 100.5. Expected range: 0-100%"
        )

    def test_arity_reason(self):
        assert validate("cmyk(0%,0%,0%)", ColorFormat.CMYK).reason == "CMYK requires 4 components, got 3"

    def test_percent_reasons(self):
        assert validate("hsl(0,100,50%)", ColorFormat.HSL).reason == "Missing % suffix on saturation value: 100"
        assert validate("rgb(50%,0,0)", ColorFormat.RGB).reason == "Unexpected % suffix on red value: 50%"

    def test_hex_reasons(self):
        assert validate("#GG0000", ColorFormat.HEX).reason == "Invalid hex digit 'G' in '#GG0000'"
        assert "got 4 digits" in validate("#FF00", ColorFormat.HEX).reason

    def test_empty_reason(self):
        assert validate("  ", ColorFormat.LAB).reason == "Color input cannot be empty"


class TestLenientParserStrictValidator:
    """The parser clamps what the validator rejects."""

    @pytest.mark.parametrize("text,fmt", [
        ("rgb(256, 0, 0)", ColorFormat.RGB),
        ("hsl(361, 100%, 50%)", ColorFormat.HSL),
        ("cmyk(101%, 0%, 0%, 0%)", ColorFormat.CMYK),
    ])
    def test_asymmetry(self, text, fmt):
        assert parse_color(text, fmt).ok
        assert not validate(text, fmt).is_valid


class TestValidateAny:

    def test_detects_then_validates(self):
        assert validate_any("rgb(0, 0, 0)").is_valid
        assert not validate_any("rgb(0, 0, 300)").is_valid

    def test_unrecognized(self):
        result = validate_any("banana")
        assert not result.is_valid
        assert result.reason.startswith("Unrecognized color format")

    def test_empty(self):
        assert validate_any("").reason == "Color input cannot be empty"


class TestValidationResult:

    def test_constructors(self):
        assert ValidationResult.valid() == ValidationResult(is_valid=True)
        invalid = ValidationResult.invalid("nope")
        assert not invalid.is_valid
        assert invalid.error_message == "nope"


class TestFormatArgument:

    def test_accepts_format_names(self):
        assert validate("rgb(0, 0, 0)", "rgb").is_valid
        assert not validate("#GG0000", "Hex").is_valid

    def test_unknown_format_is_invalid(self):
        result = validate("rgb(0, 0, 0)", "xyz")
        assert not result.is_valid
        assert result.reason == "Unsupported color format: xyz"


class TestAsciiDigitsOnly:

    @pytest.mark.parametrize("text,fmt", [
        ("rgb(\u0662\u0665\u0665, 0, 0)", ColorFormat.RGB),
        ("hsl(\uff11\uff12\uff10, 100%, 50%)", ColorFormat.HSL),
        ("lab(\u0665\u0660, 0, 0)", ColorFormat.LAB),
    ])
    def test_non_ascii_digits_rejected(self, text, fmt):
        result = validate(text, fmt)
        assert not result.is_valid
        assert "is not a number" in result.reason

    def test_detected_input_rejected(self):
        assert not validate_any("rgb(\u0662\u0665\u0665, 0, 0)").is_valid
