"""
Value Conversion
================
Helpers shared by the control adapters to move values between a control's
native representation (text, slider integers) and a state's value type.

Formatting and parsing agree, so `parse_value(format_value(v), type(v)) == v`
for every str, bool, int and float value (and their numpy scalar cousins).
"""
from __future__ import annotations

from typing import Any, TypeVar

import numpy as np

from statelink.errors import ConversionError

T = TypeVar("T")

_TRUE_WORDS = {"true", "1", "yes", "on"}
_FALSE_WORDS = {"false", "0", "no", "off"}


def is_bool_type(value_type: type) -> bool:
    return issubclass(value_type, (bool, np.bool_))


def is_numeric_type(value_type: type) -> bool:
    """True for Python and numpy integer/floating types (bool excluded)."""
    if is_bool_type(value_type):
        return False
    try:
        return bool(np.issubdtype(value_type, np.number))
    except TypeError:
        return False


def format_value(value: Any) -> str:
    """Text shown by text-based controls."""
    return str(value)


def parse_value(text: str, value_type: type[T]) -> T:
    """
    Parse control text into `value_type`.

    Raises:
        ConversionError: if the text is not a valid literal of the type.
    """
    if issubclass(value_type, str):
        return value_type(text)

    stripped = text.strip()
    if is_bool_type(value_type):
        word = stripped.lower()
        if word in _TRUE_WORDS:
            return value_type(True)
        if word in _FALSE_WORDS:
            return value_type(False)
        raise ConversionError(text, value_type)

    try:
        return value_type(stripped)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ConversionError(text, value_type) from e


def coerce_value(raw: Any, value_type: type[T]) -> T:
    """
    Convert a native non-text value (e.g. a slider integer) into `value_type`.

    Raises:
        ConversionError: if the value cannot be represented as the type.
    """
    if isinstance(raw, value_type):
        return raw
    if isinstance(raw, str):
        return parse_value(raw, value_type)
    try:
        return value_type(raw)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ConversionError(raw, value_type) from e


def to_slider_int(value: Any) -> int:
    """
    Round a numeric value to the nearest slider position.

    Raises:
        TypeError: for values without a float conversion.
        ValueError: for non-numeric text, NaN and infinities.
    """
    number = float(value)
    if not np.isfinite(number):
        raise ValueError(f"Slider position must be finite, got {value!r}")
    return int(np.rint(number))
