"""Bidirectional synchronization of one value across UI controls and canvases."""
from statelink.adapters import NO_TOKEN, ControlAdapter, register_adapter
from statelink.binding import LinkedWidget, link
from statelink.errors import ConversionError
from statelink.state import Canvas, State

__all__ = [
    "NO_TOKEN",
    "Canvas",
    "ControlAdapter",
    "ConversionError",
    "LinkedWidget",
    "State",
    "link",
    "register_adapter",
]
