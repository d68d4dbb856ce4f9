from __future__ import annotations

from typing import Any

from PySide6.QtWidgets import QLabel

from statelink.adapters.registry import register_adapter
from statelink.conversion import format_value, parse_value
from statelink.qt.base import QtAdapter


@register_adapter(QLabel)
class LabelAdapter(QtAdapter):
    """Display-only text. Labels emit no user-change event, so nothing is wired."""

    def read(self, widget: QLabel, value_type: type) -> Any:
        return parse_value(widget.text(), value_type)

    def write(self, widget: QLabel, value: Any) -> None:
        widget.setText(format_value(value))
