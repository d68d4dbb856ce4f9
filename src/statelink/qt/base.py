from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Callable, Iterator

from PySide6.QtCore import QObject, SignalInstance

from statelink.adapters.base import NO_TOKEN, ControlAdapter


class WiredSlot:
    """
    Handler connected to one Qt signal on behalf of a linked widget.

    While `suppressed` is above zero the slot returns immediately; other
    receivers of the same signal are unaffected.
    """

    def __init__(self, widget: QObject, signal: SignalInstance, on_user_change: Callable[[Any], None]) -> None:
        self.widget = widget
        self.signal = signal
        self.on_user_change = on_user_change
        self.suppressed = 0

    def _on_signal(self, *args: Any) -> None:
        if self.suppressed > 0:
            return
        self.on_user_change(self.widget)

    def connect(self) -> WiredSlot:
        self.signal.connect(self._on_signal)
        return self

    def disconnect(self) -> None:
        self.signal.disconnect(self._on_signal)


class QtAdapter(ControlAdapter):
    """Base for adapters over Qt widgets. Suppression mutes only the wired slot."""

    @contextmanager
    def suppress(self, widget: QObject, token: Any) -> Iterator[None]:
        if token is NO_TOKEN:
            yield
            return
        token.suppressed += 1
        try:
            yield
        finally:
            token.suppressed -= 1

    def unwire_event(self, widget: QObject, token: Any) -> None:
        if token is not NO_TOKEN:
            token.disconnect()

    def name(self, widget: QObject) -> str:
        return widget.objectName()
