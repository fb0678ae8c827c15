"""
HTTP Transport
==============

The client sends requests through an injectable transport: an async callable
``transport(url, method=..., headers=..., body=...)`` returning an object with
``status``, ``ok`` and an async ``json()``. ``AiohttpTransport`` is the default.

Timeouts and cancellation are the transport's business; connection failures
propagate to the caller.
"""

import json
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol

import aiohttp

from htmlcsstoimage.config.logging import get_logger

logger = get_logger(__name__)


class TransportResponse(Protocol):
    """What the client needs from an HTTP response."""

    status: int

    @property
    def ok(self) -> bool: ...

    async def json(self) -> Any: ...


Transport = Callable[..., Awaitable[TransportResponse]]


@dataclass(frozen=True)
class HttpResponse:
    """A fully read HTTP response."""

    status: int
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    async def json(self) -> Any:
        """Decode the body as JSON; raises ``ValueError`` if it is not."""
        return json.loads(self.body.decode("utf-8"))


class AiohttpTransport:
    """Default transport backed by aiohttp."""

    def __init__(self, timeout: float = 30.0, connect_timeout: Optional[float] = 10.0):
        self.timeout = aiohttp.ClientTimeout(total=timeout, connect=connect_timeout)
        self.logger: Any = logger.bind(component="aiohttp_transport")

    async def __call__(
        self,
        url: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> HttpResponse:
        # A session per call keeps the client free of shared mutable state.
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            async with session.request(
                method, url, headers=dict(headers or {}), data=body
            ) as response:
                payload = await response.read()
                self.logger.debug(
                    "HTTP exchange completed",
                    method=method,
                    url=url,
                    status=response.status,
                    size=len(payload),
                )
                return HttpResponse(status=response.status, body=payload)
