from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar

from vaultconnect.core.http.decoder import DecodedResponse
from vaultconnect.core.http.errors import UnsuccessfulStatusError

from .classify import classify_status_error

T = TypeVar("T")

# The service is always called with one empty placeholder pair.
PLACEHOLDER_PARAMS: tuple[tuple[str, str], ...] = (("", ""),)


class RequestSender(Protocol):
    async def send_request(
        self,
        method: str,
        endpoint: str,
        params: Iterable[tuple[str, str]] = (),
        body: str | None = None,
        *,
        shape: Any = Any,
    ) -> DecodedResponse[Any]: ...


async def send_classified(
    client: RequestSender,
    method: str,
    path: str,
    shape: type[T] | Any,
    body: str | None = None,
    *,
    vault_scoped: bool = False,
) -> DecodedResponse[T]:
    try:
        return await client.send_request(method, path, PLACEHOLDER_PARAMS, body, shape=shape)
    except UnsuccessfulStatusError as exc:
        resource_error = classify_status_error(exc, vault_scoped=vault_scoped)
        if resource_error is None:
            raise
        raise resource_error from exc
