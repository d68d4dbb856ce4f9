"""
Qt (PySide6) adapters.

Importing this package registers adapters for QLabel, QLineEdit and every
QAbstractSlider, so `statelink.link` accepts those widgets directly.
"""
from statelink.binding import link
from statelink.qt.canvas import WidgetCanvas
from statelink.qt.label import LabelAdapter
from statelink.qt.line_edit import LineEditAdapter
from statelink.qt.slider import SliderAdapter

__all__ = [
    "LabelAdapter",
    "LineEditAdapter",
    "SliderAdapter",
    "WidgetCanvas",
    "link",
]
