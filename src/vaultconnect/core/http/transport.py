from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx

_DEFAULT_TIMEOUT_S = 15.0
_DEFAULT_CONNECT_TIMEOUT_S = 5.0
_DEFAULT_USER_AGENT = "vaultconnect/0.1"


@runtime_checkable
class Transport(Protocol):
    """Sends one fully-formed request.

    Implementations must be safe for concurrent use by many in-flight calls and raise
    ``httpx.TransportError`` subclasses on transport failure. The returned response body
    may still be unread.
    """

    async def send(self, request: httpx.Request) -> httpx.Response: ...

    async def aclose(self) -> None: ...


def build_timeout(total_s: float = _DEFAULT_TIMEOUT_S) -> httpx.Timeout:
    read_total = max(0.1, total_s)
    return httpx.Timeout(read_total, connect=min(_DEFAULT_CONNECT_TIMEOUT_S, read_total))


class HttpxTransport:
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout_s: float = _DEFAULT_TIMEOUT_S,
        user_agent: str = _DEFAULT_USER_AGENT,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=build_timeout(timeout_s),
            headers={"User-Agent": user_agent},
        )

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def send(self, request: httpx.Request) -> httpx.Response:
        return await self._client.send(request, stream=True)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
