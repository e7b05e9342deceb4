"""
Framework adapters for webhook handling.

Each adapter turns the arguments a web framework passes to its request
callback into a ``FrameworkHandler``: the raw body (awaitable), a getter for
the signature header, and optionally a function producing the framework's
acknowledgement. The dispatcher only ever sees that uniform shape, so
supporting another framework means registering one more adapter.

Framework packages are imported lazily; only the one in use must be installed.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Iterator, Optional

from ..logging import get_logger
from ..models.errors import UnknownFrameworkError
from ..signature import SIGNATURE_HEADER

logger = get_logger(__name__)

ACK_BODY = "OK"


@dataclass(frozen=True)
class FrameworkHandler:
    """Normalized view of one inbound webhook request.

    Attributes:
        body: Awaitable resolving to the raw request body
        get_signature_header: Returns the signature header, or None if absent
        response: Builds (or sends) the acknowledgement; None when the
            framework needs no explicit answer
    """

    body: Awaitable[bytes]
    get_signature_header: Callable[[], Optional[str]]
    response: Optional[Callable[[], Any]] = None


async def _resolved(value: bytes) -> bytes:
    return value


class FrameworkAdapter(ABC):
    """Abstract base class for framework adapters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Framework name used for registry lookups (e.g. 'starlette')."""
        ...

    @abstractmethod
    def extract(self, *args: Any, **kwargs: Any) -> FrameworkHandler:
        """
        Build a FrameworkHandler from the framework's callback arguments.

        Args:
            *args: Positional arguments exactly as the framework passes them
            **kwargs: Keyword arguments exactly as the framework passes them

        Returns:
            The normalized handler for this request
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class StarletteAdapter(FrameworkAdapter):
    """Starlette endpoint: ``async def endpoint(request)``."""

    @property
    def name(self) -> str:
        return "starlette"

    def extract(self, request: Any) -> FrameworkHandler:
        def response() -> Any:
            from starlette.responses import PlainTextResponse

            return PlainTextResponse(ACK_BODY)

        return FrameworkHandler(
            body=request.body(),
            get_signature_header=lambda: request.headers.get(SIGNATURE_HEADER),
            response=response,
        )


class FastAPIAdapter(StarletteAdapter):
    """FastAPI route added with ``app.add_route`` (FastAPI requests are Starlette requests)."""

    @property
    def name(self) -> str:
        return "fastapi"


class AiohttpAdapter(FrameworkAdapter):
    """aiohttp.web handler: ``async def handler(request)``."""

    @property
    def name(self) -> str:
        return "aiohttp"

    def extract(self, request: Any) -> FrameworkHandler:
        def response() -> Any:
            from aiohttp import web

            return web.Response(text=ACK_BODY)

        return FrameworkHandler(
            body=request.read(),
            get_signature_header=lambda: request.headers.get(SIGNATURE_HEADER),
            response=response,
        )


class DjangoAdapter(FrameworkAdapter):
    """Django async view: ``async def view(request)``.

    Wrap the handler with ``csrf_exempt`` when routing it directly.
    """

    @property
    def name(self) -> str:
        return "django"

    def extract(self, request: Any) -> FrameworkHandler:
        def response() -> Any:
            from django.http import HttpResponse

            return HttpResponse(ACK_BODY)

        return FrameworkHandler(
            body=_resolved(request.body),
            get_signature_header=lambda: request.headers.get(SIGNATURE_HEADER),
            response=response,
        )


class AsgiAdapter(FrameworkAdapter):
    """Bare ASGI application: ``async def app(scope, receive, send)``.

    The body has to be assembled from ``http.request`` messages and the
    acknowledgement is sent over ``send`` rather than returned.
    """

    @property
    def name(self) -> str:
        return "asgi"

    def extract(self, scope: dict[str, Any], receive: Callable, send: Callable) -> FrameworkHandler:
        async def read_body() -> bytes:
            chunks = []
            more_body = True
            while more_body:
                message = await receive()
                if message["type"] != "http.request":
                    break
                chunks.append(message.get("body", b""))
                more_body = message.get("more_body", False)
            return b"".join(chunks)

        def get_signature_header() -> Optional[str]:
            wanted = SIGNATURE_HEADER.lower().encode("latin-1")
            for key, value in scope.get("headers", []):
                if key.lower() == wanted:
                    return value.decode("latin-1")
            return None

        async def response() -> None:
            await send({
                "type": "http.response.start",
                "status": 200,
                "headers": [(b"content-type", b"text/plain; charset=utf-8")],
            })
            await send({"type": "http.response.body", "body": ACK_BODY.encode()})

        return FrameworkHandler(
            body=read_body(),
            get_signature_header=get_signature_header,
            response=response,
        )


class AdapterRegistry:
    """
    Mapping of framework names to adapters.

    Registries are plain objects handed to ``webhook_handler``; there is no
    process-wide registry to mutate.
    """

    def __init__(self, adapters: Iterable[FrameworkAdapter] = ()):
        self._adapters: dict[str, FrameworkAdapter] = {}
        for adapter in adapters:
            self.register(adapter)

    def register(self, adapter: FrameworkAdapter, name: Optional[str] = None) -> None:
        """
        Register an adapter, replacing any adapter with the same name.

        Args:
            adapter: Adapter instance
            name: Registry key (defaults to ``adapter.name``)
        """
        key = name or adapter.name
        if key in self._adapters:
            logger.debug("Replacing adapter for %s", key)
        self._adapters[key] = adapter

    def get(self, name: str) -> FrameworkAdapter:
        """
        Look up an adapter.

        Raises:
            UnknownFrameworkError: Nothing is registered under ``name``
        """
        try:
            return self._adapters[name]
        except KeyError:
            raise UnknownFrameworkError(name, list(self._adapters)) from None

    def names(self) -> list[str]:
        return list(self._adapters)

    def __contains__(self, name: object) -> bool:
        return name in self._adapters

    def __iter__(self) -> Iterator[FrameworkAdapter]:
        return iter(self._adapters.values())

    def __len__(self) -> int:
        return len(self._adapters)


def default_registry() -> AdapterRegistry:
    """A new registry holding every built-in adapter."""
    return AdapterRegistry([
        StarletteAdapter(),
        FastAPIAdapter(),
        AiohttpAdapter(),
        DjangoAdapter(),
        AsgiAdapter(),
    ])
