"""
Linked Widgets
==============
The handle created when a control is linked to a `State`, and the `link`
entry point that creates it.

Linking a control runs three steps, in order:
1. The adapter connects the control's user-change event (obtaining a token).
2. The control is quietly set to the state's current value.
3. The binding is registered with the state.

There is no unlink: dropping every reference to the control and the state
ends the relationship.
"""
from __future__ import annotations

import logging
from typing import Any, Generic, Optional, TypeVar

from statelink.adapters.base import NO_TOKEN, ControlAdapter
from statelink.adapters.registry import find_adapter
from statelink.errors import ConversionError
from statelink.state import Canvas, State

logger = logging.getLogger(__name__)

T = TypeVar("T")
W = TypeVar("W")


class LinkedWidget(Generic[T, W]):
    """A control bound to exactly one `State` through an adapter."""

    def __init__(self, widget: W, state: State[T], adapter: ControlAdapter) -> None:
        self.widget = widget
        self.state = state
        self.adapter = adapter
        self.token: Any = NO_TOKEN

    @property
    def name(self) -> str:
        return self.adapter.name(self.widget)

    def get(self) -> T:
        """Value currently displayed by the control, converted to the state's type."""
        return self.adapter.read(self.widget, self.state.value_type)

    def set(self, value: T) -> State[T]:
        """Set the value of the state, updating every linked object."""
        return self.state.set(value)

    def set_quietly(self, value: T) -> LinkedWidget[T, W]:
        """Display `value` without firing the control's wired event."""
        if self.token is NO_TOKEN:
            self.adapter.write(self.widget, value)
        else:
            with self.adapter.suppress(self.widget, self.token):
                self.adapter.write(self.widget, value)
        return self

    def activate(self, value: T) -> LinkedWidget[T, W]:
        """
        Enter `value` the way a user would: write it unsuppressed, then fire
        the native event for kinds that need explicit firing.
        """
        self.adapter.write(self.widget, value)
        self.adapter.fire_event(self.widget)
        return self

    def _on_user_change(self, widget: W) -> None:
        try:
            value = self.adapter.read(widget, self.state.value_type)
        except ConversionError as e:
            logger.warning(f"Rejected input of {self!r}: {e}")
            raise
        self.state.set_from_control(value, self)

    def __repr__(self) -> str:
        try:
            shown = repr(self.get())
        except ConversionError:
            shown = "?"
        text = f"Linked {type(self.widget).__name__}({shown})"
        n = self.name
        if n:
            text += f", {n!r}"
        return text


def link(state: State[T], target: Any, adapter: Optional[ControlAdapter] = None) -> Optional[LinkedWidget[T, Any]]:
    """
    Link `target` to `state`.

    A control (explicit `adapter`, or a widget type with a registered adapter)
    is synchronized both ways and the new `LinkedWidget` is returned. Any other
    object with a `refresh()` method becomes a canvas of the state and None is
    returned.

    Raises:
        TypeError: if `target` is neither a supported control nor a canvas.
    """
    if adapter is None:
        adapter = find_adapter(target)

    if adapter is None:
        if isinstance(target, Canvas):
            state.attach_canvas(target)
            logger.debug(f"Linked canvas {type(target).__name__} to {state!r}")
            return None
        raise TypeError(f"Cannot link '{type(target).__name__}': no adapter registered and no refresh() method")

    linked: LinkedWidget[T, Any] = LinkedWidget(target, state, adapter)
    linked.token = adapter.wire_event(target, linked._on_user_change)
    try:
        state.attach_control(linked)
    except Exception:
        adapter.unwire_event(target, linked.token)
        linked.token = NO_TOKEN
        raise
    logger.debug(f"Linked {type(target).__name__} to {state!r}")
    return linked
