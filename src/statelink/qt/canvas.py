from __future__ import annotations

from PySide6.QtWidgets import QWidget


class WidgetCanvas:
    """Makes any QWidget a canvas: each refresh schedules a repaint."""

    def __init__(self, widget: QWidget) -> None:
        self.widget = widget

    def refresh(self) -> None:
        self.widget.update()

    def __repr__(self) -> str:
        return f"WidgetCanvas({type(self.widget).__name__})"
