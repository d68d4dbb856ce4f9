from __future__ import annotations

from typing import Any, Callable

from PySide6.QtWidgets import QAbstractSlider

from statelink.adapters.registry import register_adapter
from statelink.conversion import coerce_value, is_bool_type, is_numeric_type, to_slider_int
from statelink.errors import ConversionError
from statelink.qt.base import QtAdapter, WiredSlot


@register_adapter(QAbstractSlider)
class SliderAdapter(QtAdapter):
    """
    Integer range controls (QSlider, QDial, QScrollBar).

    The value lives in the QAbstractSlider range model, which clamps it to
    [minimum, maximum]. `valueChanged` fires continuously while dragging.

    `write` accepts finite numbers only and rounds them to the nearest
    integer; NaN, infinity or non-numeric values raise ValueError/TypeError.
    """

    def read(self, widget: QAbstractSlider, value_type: type) -> Any:
        raw = widget.value()
        if not (is_numeric_type(value_type) or is_bool_type(value_type)):
            raise ConversionError(raw, value_type)
        return coerce_value(raw, value_type)

    def write(self, widget: QAbstractSlider, value: Any) -> None:
        widget.setValue(to_slider_int(value))

    def wire_event(self, widget: QAbstractSlider, on_user_change: Callable[[QAbstractSlider], None]) -> WiredSlot:
        return WiredSlot(widget, widget.valueChanged, on_user_change).connect()
