from __future__ import annotations

from typing import Any, Callable

from PySide6.QtWidgets import QLineEdit

from statelink.adapters.registry import register_adapter
from statelink.conversion import format_value, parse_value
from statelink.qt.base import QtAdapter, WiredSlot


@register_adapter(QLineEdit)
class LineEditAdapter(QtAdapter):
    """
    Editable text, committed when the user presses Enter (`returnPressed`).

    Intermediate keystrokes do not update the state; only a committed edit
    does.
    """

    def read(self, widget: QLineEdit, value_type: type) -> Any:
        return parse_value(widget.text(), value_type)

    def write(self, widget: QLineEdit, value: Any) -> None:
        widget.setText(format_value(value))

    def wire_event(self, widget: QLineEdit, on_user_change: Callable[[QLineEdit], None]) -> WiredSlot:
        return WiredSlot(widget, widget.returnPressed, on_user_change).connect()

    def fire_event(self, widget: QLineEdit) -> None:
        widget.returnPressed.emit()
