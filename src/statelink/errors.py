from __future__ import annotations

from typing import Any


class ConversionError(ValueError):
    """Raised when a control's native representation cannot be parsed into the state's value type."""

    def __init__(self, raw: Any, value_type: type) -> None:
        self.raw = raw
        self.value_type = value_type
        super().__init__(f"Cannot convert {raw!r} to {value_type.__name__}")
