"""Host integration: handler registration and file traversal."""

from host.extension import (
    ExtensionPoint,
    FrameworkIndexingHandler,
    create_vue_handler,
    default_extension_point,
)

__all__ = [
    "ExtensionPoint",
    "FrameworkIndexingHandler",
    "create_vue_handler",
    "default_extension_point",
]
