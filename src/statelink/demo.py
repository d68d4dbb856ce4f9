"""
Demo Application
================
Builds a small window in which a label, a line edit, a slider and a gauge
canvas all share one integer `State`.

Usage:
    $ python -m statelink
    $ STATELINK_LOG_LEVEL=DEBUG statelink-demo
"""
from __future__ import annotations

import logging
import sys

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QColor, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import (
    QApplication, QFormLayout, QLabel, QLineEdit, QSlider, QWidget, QVBoxLayout
)

from statelink import config
from statelink.logging_config import setup_logging
from statelink.qt import link
from statelink.state import State

logger = logging.getLogger(__name__)


class GaugeCanvas(QWidget):
    """Horizontal bar showing the state's value relative to the slider range."""

    def __init__(self, state: State[int], value_range: tuple[int, int], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self.value_range = value_range
        self.setMinimumHeight(24)

    def refresh(self) -> None:
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        lo, hi = self.value_range
        span = max(hi - lo, 1)
        fraction = min(max((self.state.get() - lo) / span, 0.0), 1.0)

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = QRectF(self.rect()).adjusted(1, 1, -1, -1)
        painter.setPen(QPen(QColor("black"), 1))
        painter.setBrush(QBrush(QColor("#f0f0f0")))
        painter.drawRect(rect)
        filled = QRectF(rect.x(), rect.y(), rect.width() * fraction, rect.height())
        painter.setBrush(QBrush(QColor("#A0C4FF")))
        painter.drawRect(filled)
        painter.end()


class DemoWindow(QWidget):
    def __init__(self, state: State[int], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle(config.DEMO_WINDOW_TITLE)
        self.state = state

        root = QVBoxLayout(self)
        form = QFormLayout()
        root.addLayout(form)

        self.label = QLabel(self)
        self.label.setObjectName("value-label")
        form.addRow(self.tr("Value:"), self.label)

        self.entry = QLineEdit(self)
        self.entry.setObjectName("value-entry")
        form.addRow(self.tr("Enter value:"), self.entry)

        lo, hi = config.DEMO_SLIDER_RANGE
        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setObjectName("value-slider")
        self.slider.setRange(lo, hi)
        form.addRow(self.tr("Drag value:"), self.slider)

        self.gauge = GaugeCanvas(state, (lo, hi), self)
        root.addWidget(self.gauge)

        link(state, self.label)
        link(state, self.entry)
        link(state, self.slider)
        link(state, self.gauge)
        logger.info(f"Demo window linked: {state!r}")


def main() -> None:
    setup_logging()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(config.DEMO_WINDOW_TITLE)

    state = State(config.DEMO_INITIAL_VALUE)
    window = DemoWindow(state)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
