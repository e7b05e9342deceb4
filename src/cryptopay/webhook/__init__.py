"""Webhook plumbing: framework adapters and the composed request handler."""
from .adapters import (
    AdapterRegistry,
    AiohttpAdapter,
    AsgiAdapter,
    DjangoAdapter,
    FastAPIAdapter,
    FrameworkAdapter,
    FrameworkHandler,
    StarletteAdapter,
    default_registry,
)
from .handler import webhook_handler

__all__ = [
    "AdapterRegistry",
    "AiohttpAdapter",
    "AsgiAdapter",
    "DjangoAdapter",
    "FastAPIAdapter",
    "FrameworkAdapter",
    "FrameworkHandler",
    "StarletteAdapter",
    "default_registry",
    "webhook_handler",
]
