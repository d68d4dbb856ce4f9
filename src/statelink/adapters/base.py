from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator


# Returned by `wire_event` for control kinds that have no user-change event.
NO_TOKEN = None


class ControlAdapter:
    """
    Strategy translating between one kind of control and a state's value.

    Subclasses implement `read` and `write`. Kinds that emit a user-change
    event also override `wire_event` and `suppress`; kinds whose event can be
    raised synthetically override `fire_event`.
    """

    def read(self, widget: Any, value_type: type) -> Any:
        """Return the value currently displayed by `widget`, converted to `value_type`."""
        raise NotImplementedError("`read` must be implemented in subclass.")

    def write(self, widget: Any, value: Any) -> None:
        """Display `value` in `widget`."""
        raise NotImplementedError("`write` must be implemented in subclass.")

    def wire_event(self, widget: Any, on_user_change: Callable[[Any], None]) -> Any:
        """
        Connect the native change event of `widget` to `on_user_change(widget)`.

        Returns a token for `suppress`, or NO_TOKEN when nothing was connected.
        """
        return NO_TOKEN

    def unwire_event(self, widget: Any, token: Any) -> None:
        """Disconnect the handler behind `token`. Nothing to do for NO_TOKEN."""
        if token is not NO_TOKEN:
            raise NotImplementedError(
                f"{type(self).__name__} wires an event but does not implement `unwire_event`."
            )

    @contextmanager
    def suppress(self, widget: Any, token: Any) -> Iterator[None]:
        """
        Disable the handler behind `token` for the duration of the block.

        The handler's previous enabled/disabled state must be restored on
        every exit path, including exceptions raised inside the block.
        """
        if token is not NO_TOKEN:
            raise NotImplementedError(
                f"{type(self).__name__} wires an event but does not implement `suppress`."
            )
        yield

    def fire_event(self, widget: Any) -> None:
        """Raise the native change event programmatically. No-op by default."""

    def name(self, widget: Any) -> str:
        """Human readable widget name, used in reprs."""
        return ""
