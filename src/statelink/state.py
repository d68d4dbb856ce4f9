"""
State (Value Cell)
==================
A `State` holds one canonical value and keeps every linked control and
canvas in sync with it.

Why is this file needed?
------------------------
1. Single source of truth: controls never talk to each other directly, they
   report to the state and the state fans the value out.
2. Feedback prevention: the fan-out writes to controls quietly (see
   `LinkedWidget.set_quietly`), so a programmatic update is never mistaken
   for a user edit.

Classes:
    Canvas: Protocol for passive observers (anything with `refresh()`).
    State: The value holder with its control and canvas registries.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Optional, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from statelink.binding import LinkedWidget

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class Canvas(Protocol):
    """A render-only listener, refreshed after every change of the state."""
    def refresh(self) -> None: ...


class State(Generic[T]):
    """
    Canonical value shared by linked controls and canvases.

    Args:
        value: Initial value.
        value_type: Type controls convert to when read. Defaults to type(value).
    """

    def __init__(self, value: T, value_type: Optional[type] = None) -> None:
        self.value: T = value
        self.value_type: type = value_type if value_type is not None else type(value)
        self.widgets: list[LinkedWidget] = []
        self.canvases: list[Canvas] = []

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> State[T]:
        """Assign `value` and push it to every linked control and canvas."""
        return self._propagate(value, origin=None)

    def set_from_control(self, value: T, origin: LinkedWidget) -> State[T]:
        """
        Assign a value reported by the control behind `origin`.

        `origin` already displays the value, so it is skipped during the
        fan-out; rewriting it would reset e.g. the cursor of a text entry.
        """
        return self._propagate(value, origin=origin)

    def attach_control(self, linked: LinkedWidget) -> None:
        """Show the current value in the control, then register it."""
        linked.set_quietly(self.value)
        self.widgets.append(linked)

    def attach_canvas(self, canvas: Canvas) -> None:
        # Canvases read the current value on their first paint.
        self.canvases.append(canvas)

    def _propagate(self, value: T, origin: Optional[LinkedWidget]) -> State[T]:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"{self!r} <- {value!r} ({len(self.widgets)} widgets, {len(self.canvases)} canvases)")
        self.value = value
        for w in self.widgets:
            if w is origin:
                continue
            w.set_quietly(value)
        for c in self.canvases:
            c.refresh()
        return self

    def __repr__(self) -> str:
        parts = [repr(self.value)]
        for w in self.widgets:
            n = w.name
            if n:
                parts.append(repr(n))
        return f"{type(self).__name__}({', '.join(parts)})"
