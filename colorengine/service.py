"""
Conversion service facade: parse -> validate -> convert -> format.

Every call returns its own Success/Failure. ``last_error`` is kept only as a
lock-protected convenience for UI bindings.
"""

import logging
import threading
from functools import lru_cache
from typing import Callable, Optional, Union

from .config import Settings, get_settings
from .conversions import to_rgb
from .detector import detect_format
from .errors import (
    ColorError,
    EmptyInput,
    Failure,
    FormatMismatch,
    Result,
    Success,
    UnsupportedFormat,
)
from .grammar import format_from_rgb, parse_model, sanitize
from .models import ColorFormat, RGBColor
from .representation import ColorRepresentation, representation_from_rgb
from .validator import ValidationResult, validate

logger = logging.getLogger(__name__)

FormatLike = Union[ColorFormat, str]


def resolve_format(fmt: FormatLike) -> ColorFormat:
    resolved = ColorFormat.from_name(fmt) if fmt is not None else None
    if resolved is None:
        raise UnsupportedFormat(str(fmt))
    return resolved


def _detect(value: str) -> ColorFormat:
    text = sanitize(value)
    if not text:
        raise EmptyInput()
    source = detect_format(text)
    if source is None:
        raise UnsupportedFormat(text)
    return source


class ColorConversionService:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._lock = threading.Lock()
        self._last_error: Optional[ColorError] = None
        if self.settings.cache_size > 0:
            self._parse = lru_cache(maxsize=self.settings.cache_size)(parse_model)
        else:
            self._parse = parse_model

    # Last error ---------------------------------------------------

    @property
    def last_error(self) -> Optional[ColorError]:
        with self._lock:
            return self._last_error

    def clear_error(self) -> None:
        with self._lock:
            self._last_error = None

    def _record(self, error: Optional[ColorError]) -> None:
        with self._lock:
            self._last_error = error

    # Pipeline -----------------------------------------------------

    def _run(self, stage: str, step: Callable[[], object]) -> Result:
        try:
            value = step()
        except ColorError as e:
            logger.warning("%s failed [%s]: %s", stage, e.severity.value, e.message)
            self._record(e)
            return Failure(e)
        self._record(None)
        return Success(value)

    def _to_rgb(self, fmt: FormatLike, value: str, validate_input: Optional[bool]) -> RGBColor:
        source = resolve_format(fmt)
        text = sanitize(value)
        if not text:
            raise EmptyInput()
        if self._should_validate(validate_input):
            check = validate(text, source)
            if not check.is_valid:
                raise FormatMismatch(source.label, text, check.reason)
        return to_rgb(self._parse(text, source))

    def _should_validate(self, validate_input: Optional[bool]) -> bool:
        if validate_input is None:
            return self.settings.strict_validation
        return validate_input

    # Public API ---------------------------------------------------

    def convert_color(
        self,
        source: FormatLike,
        target: FormatLike,
        value: str,
        validate_input: Optional[bool] = None,
    ) -> Result:
        """Convert ``value`` from ``source`` grammar into a ``target`` string."""

        def step():
            target_format = resolve_format(target)
            rgb = self._to_rgb(source, value, validate_input)
            return format_from_rgb(rgb, target_format)

        return self._run("Color conversion", step)

    def convert_auto(
        self, value: str, target: FormatLike, validate_input: Optional[bool] = None
    ) -> Result:
        """Like convert_color, with the source grammar detected from ``value``."""

        def step():
            target_format = resolve_format(target)
            rgb = self._to_rgb(_detect(value), value, validate_input)
            return format_from_rgb(rgb, target_format)

        return self._run("Detected color conversion", step)

    def create_color_representation(
        self,
        fmt: Optional[FormatLike],
        value: str,
        validate_input: Optional[bool] = None,
    ) -> Result:
        """Parse ``value`` and derive all six representations (format detected when None)."""

        def step():
            source = _detect(value) if fmt is None else fmt
            return representation_from_rgb(self._to_rgb(source, value, validate_input))

        return self._run("Creating color representation", step)

    def representation_from_rgb(self, rgb: RGBColor) -> ColorRepresentation:
        return representation_from_rgb(rgb)

    def validate_color_input(self, value: str, fmt: FormatLike) -> ValidationResult:
        try:
            source = resolve_format(fmt)
        except UnsupportedFormat as e:
            return ValidationResult.invalid(e.message)
        return validate(value, source)

    def cache_info(self):
        """functools cache statistics, or None when caching is disabled."""
        info = getattr(self._parse, "cache_info", None)
        return info() if info else None
