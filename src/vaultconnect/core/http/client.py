from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeVar

import httpx

from vaultconnect.core.logging.context import log_context
from vaultconnect.core.logging.redact import redact_headers, redact_string

from .backoff import BackoffSchedule
from .decoder import DecodedResponse, decode_response
from .errors import InternalError, RetryExhaustedError
from .request import RequestDescriptor
from .transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

Sleep = Callable[[float], Awaitable[Any]]


class RequestExecutor:
    """Sends one logical call, retrying transport failures along a backoff schedule."""

    def __init__(self, base_url: str, transport: Transport, *, sleep: Sleep | None = None) -> None:
        self.base_url = base_url
        self.transport = transport
        self._sleep = sleep or asyncio.sleep

    async def execute(self, descriptor: RequestDescriptor, backoff: BackoffSchedule) -> httpx.Response:
        waits = iter(backoff)
        attempt_errors: list[str] = []
        last_exc: httpx.TransportError | None = None
        attempts = len(backoff) + 1

        for attempt in range(attempts):
            request = descriptor.to_httpx(self.base_url)
            fields = {"method": descriptor.method, "endpoint": descriptor.endpoint, "attempt": attempt + 1}
            logger.debug(
                "Sending attempt %d/%d",
                attempt + 1,
                attempts,
                extra={"extra_fields": {**fields, "headers": redact_headers(request.headers.items())}},
            )
            try:
                return await self.transport.send(request)
            except httpx.TransportError as exc:
                last_exc = exc
                message = redact_string(f"[ Retrying ]: Client error: {exc.__class__.__name__}: {exc}")
                attempt_errors.append(message)
                logger.warning(
                    "Transport failure on %s %s (attempt %d/%d): %s",
                    descriptor.method,
                    descriptor.endpoint,
                    attempt + 1,
                    attempts,
                    exc.__class__.__name__,
                    extra={"extra_fields": {**fields, "error": exc.__class__.__name__}},
                )
                wait = next(waits, None)
                if wait is None:
                    break
                await self._sleep(wait)

        if last_exc is None:
            logger.error("Retry loop finished without a recorded transport error")
            raise InternalError()
        raise RetryExhaustedError(last_exc, attempt_errors) from last_exc


class Client:
    """HTTP client bound to one server URL and API token.

    Every ``send_request`` builds a fresh backoff sequence; the transport is shared by
    all calls made through this client.
    """

    def __init__(
        self,
        token: str,
        server_url: str,
        *,
        transport: Transport | None = None,
        backoff: BackoffSchedule | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self._token = token
        self.server_url = server_url
        self.transport = transport if transport is not None else HttpxTransport()
        self.backoff = backoff if backoff is not None else BackoffSchedule()
        self._executor = RequestExecutor(server_url, self.transport, sleep=sleep)

    @property
    def token(self) -> str:
        return self._token

    async def send_request(
        self,
        method: str,
        endpoint: str,
        params: Iterable[tuple[str, str]] = (),
        body: str | None = None,
        *,
        shape: type[T] | Any = Any,
    ) -> DecodedResponse[T]:
        descriptor = RequestDescriptor.create(method, endpoint, params, body, token=self._token)
        with log_context(request_id=uuid.uuid4().hex):
            logger.debug("Sending %s %s", descriptor.method, descriptor.endpoint)
            response = await self._executor.execute(descriptor, self.backoff)
            return await decode_response(response, shape)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
