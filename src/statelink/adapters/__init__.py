from statelink.adapters.base import NO_TOKEN, ControlAdapter
from statelink.adapters.registry import (
    adapter_for,
    find_adapter,
    register_adapter,
    registered_types,
    unregister_adapter,
)

__all__ = [
    "NO_TOKEN",
    "ControlAdapter",
    "adapter_for",
    "find_adapter",
    "register_adapter",
    "registered_types",
    "unregister_adapter",
]
