"""Shared fixtures for statelink tests."""

import logging
import os
from contextlib import contextmanager

import pytest

# Qt widgets are created without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from statelink import NO_TOKEN, ControlAdapter, State
from statelink.conversion import format_value, parse_value


class FakeControl:
    """Stand-in for a native control: text property plus one change event."""

    def __init__(self, text="", name=""):
        self.text = text
        self.name = name
        self.handlers = []
        self.blocked = False
        self.calls = 0  # handler invocations
        self.writes = 0
        self.fail = False

    def emit(self):
        if self.blocked:
            return
        for handler in list(self.handlers):
            self.calls += 1
            handler(self)

    def user_edit(self, text):
        """Type `text` and commit it, as a user would."""
        self.text = text
        self.emit()


class FakeAdapter(ControlAdapter):
    """Slider-like kind: programmatic writes fire the change event unless suppressed."""

    emits_on_write = True

    def read(self, widget, value_type):
        return parse_value(widget.text, value_type)

    def write(self, widget, value):
        if widget.fail:
            raise RuntimeError("write failed")
        widget.text = format_value(value)
        widget.writes += 1
        if self.emits_on_write:
            widget.emit()

    def wire_event(self, widget, on_user_change):
        widget.handlers.append(on_user_change)
        return on_user_change

    def unwire_event(self, widget, token):
        widget.handlers.remove(token)

    @contextmanager
    def suppress(self, widget, token):
        was_blocked = widget.blocked
        widget.blocked = True
        try:
            yield
        finally:
            widget.blocked = was_blocked

    def fire_event(self, widget):
        widget.emit()

    def name(self, widget):
        return widget.name


class FakeEntryAdapter(FakeAdapter):
    """Entry-like kind: the event fires only on commit."""

    emits_on_write = False


class FakeDisplayAdapter(FakeAdapter):
    """Display-only kind: no event is wired."""

    emits_on_write = False

    def wire_event(self, widget, on_user_change):
        return NO_TOKEN


class FakeCanvas:
    def __init__(self):
        self.refreshes = 0

    def refresh(self):
        self.refreshes += 1


@pytest.fixture
def state():
    """Integer state initialized to 5."""
    return State(5)


@pytest.fixture
def slider_adapter():
    return FakeAdapter()


@pytest.fixture
def entry_adapter():
    return FakeEntryAdapter()


@pytest.fixture
def display_adapter():
    return FakeDisplayAdapter()


@pytest.fixture
def canvas():
    return FakeCanvas()


@pytest.fixture
def statelink_logger():
    """The package logger, with handlers removed again after the test."""
    logger = logging.getLogger("statelink")
    previous_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(previous_level)


@pytest.fixture(scope="session")
def qapp():
    """Session-wide QApplication on the offscreen platform."""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app
