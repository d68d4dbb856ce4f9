from __future__ import annotations

from typing import Any, Callable

from statelink.adapters.base import ControlAdapter

_REGISTRY: dict[type, ControlAdapter] = {}


def register_adapter(widget_type: type) -> Callable[[type[ControlAdapter]], type[ControlAdapter]]:
    """Class decorator to register an adapter for `widget_type` and its subclasses."""
    def decorator(cls: type[ControlAdapter]) -> type[ControlAdapter]:
        _REGISTRY[widget_type] = cls()
        return cls
    return decorator


def unregister_adapter(widget_type: type) -> None:
    _REGISTRY.pop(widget_type, None)


def find_adapter(widget: Any) -> ControlAdapter | None:
    """Most specific registered adapter for `widget`, walking its class MRO."""
    for cls in type(widget).__mro__:
        adapter = _REGISTRY.get(cls)
        if adapter is not None:
            return adapter
    return None


def adapter_for(widget: Any) -> ControlAdapter:
    adapter = find_adapter(widget)
    if adapter is None:
        raise KeyError(f"No adapter registered for '{type(widget).__name__}'")
    return adapter


def registered_types() -> list[type]:
    return list(_REGISTRY.keys())
