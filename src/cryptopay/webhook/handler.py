"""Bind a client to a framework adapter, producing a ready-to-route webhook callback."""
from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Union

from ..logging import get_logger
from .adapters import AdapterRegistry, FrameworkAdapter, default_registry

if TYPE_CHECKING:
    from ..client import AsyncCryptoPay

logger = get_logger(__name__)


def webhook_handler(
    client: "AsyncCryptoPay",
    framework: Union[str, FrameworkAdapter],
    registry: Optional[AdapterRegistry] = None,
) -> Callable[..., Awaitable[Any]]:
    """Create a webhook callback for a web framework.

    The callback takes the framework's native arguments, reads the raw body
    and the signature header, runs ``client.emit`` and answers with the
    adapter's acknowledgement. Updates with a bad signature are acknowledged
    too, but no listener sees them.

    Args:
        client: Client whose API token verifies the signature and whose
            listeners receive the update
        framework: Adapter name (``"starlette"``, ``"fastapi"``, ``"aiohttp"``,
            ``"django"``, ``"asgi"``) or an adapter instance
        registry: Registry to resolve ``framework`` in (default: built-ins)

    Returns:
        Async callable to route in the framework

    Example:
        ```python
        app = Starlette()
        app.add_route("/crypto-pay", webhook_handler(client, "starlette"), methods=["POST"])
        ```
    """
    if isinstance(framework, FrameworkAdapter):
        adapter = framework
    else:
        adapter = (registry or default_registry()).get(framework)

    async def handler(*args: Any, **kwargs: Any) -> Any:
        extracted = adapter.extract(*args, **kwargs)
        body = await extracted.body

        accepted = await client.emit(body, extracted.get_signature_header())
        if not accepted:
            logger.info("Ignored unauthenticated %s webhook request", adapter.name)

        if extracted.response is None:
            return None
        result = extracted.response()
        if inspect.isawaitable(result):
            result = await result
        return result

    handler.__name__ = f"crypto_pay_{adapter.name}_webhook"
    handler.__qualname__ = handler.__name__
    return handler
