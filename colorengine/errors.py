"""
Error taxonomy and result values for the color engine.
Internal stages raise ColorError subclasses; public operations wrap them
into Success/Failure values so callers never need shared state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ColorError(Exception):
    """Base class for every recoverable color processing error."""

    severity = ErrorSeverity.ERROR
    recovery_suggestion = "Please check the input color value and try again"
    # Same input always gives the same outcome
    retryable = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInput(ColorError):
    severity = ErrorSeverity.WARNING
    recovery_suggestion = "Please enter a color value"

    def __init__(self):
        super().__init__("Color input cannot be empty")


class UnsupportedFormat(ColorError):
    severity = ErrorSeverity.WARNING
    recovery_suggestion = "Please use a supported color format (RGB, Hex, HSL, HSV, CMYK, LAB)"

    def __init__(self, name: str):
        super().__init__(f"Unsupported color format: {name}")
        self.name = name


class FormatMismatch(ColorError):
    severity = ErrorSeverity.WARNING
    recovery_suggestion = "Please enter a valid color value in the specified format"

    def __init__(self, format: str, input: str, detail: Optional[str] = None):
        message = f"Invalid {format} color format: '{input}'"
        if detail:
            message += f". {detail}"
        super().__init__(message)
        self.format = format
        self.input = input


class RangeViolation(ColorError):
    severity = ErrorSeverity.WARNING
    recovery_suggestion = "Please enter a value within the valid range"

    def __init__(self, component: str, value: float, valid_range: str):
        super().__init__(f"Invalid {component} value: {_number(value)}. Expected range: {valid_range}")
        self.component = component
        self.value = value
        self.valid_range = valid_range


class ArityError(ColorError):
    severity = ErrorSeverity.WARNING
    recovery_suggestion = "Please provide every component the format requires"

    def __init__(self, format: str, expected: str, actual: int):
        super().__init__(f"{format} requires {expected} components, got {actual}")
        self.format = format
        self.expected = expected
        self.actual = actual


class ParseFailure(ColorError):
    recovery_suggestion = "Components must be plain numbers, optionally followed by %"

    def __init__(self, token: str, component: Optional[str] = None):
        where = f" for {component}" if component else ""
        super().__init__(f"Could not parse '{token}'{where} as a number")
        self.token = token
        self.component = component


def _number(value: float) -> str:
    """Render 256.0 as 256 and keep real fractions."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


# Result values ---------------------------------------------------

@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    @property
    def error_message(self) -> Optional[str]:
        return None

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: ColorError

    @property
    def ok(self) -> bool:
        return False

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message

    def unwrap(self):
        raise self.error


Result = Union[Success[T], Failure]
