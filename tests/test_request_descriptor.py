from __future__ import annotations

import asyncio

import httpx
import pytest

from vaultconnect.core.http.client import Client
from vaultconnect.core.http.errors import InternalError, MalformedHeaderError, NotImplementedKindError
from vaultconnect.core.http.request import RequestDescriptor
from vaultconnect.core.http.transport import HttpxTransport


def test_descriptor_builds_authenticated_request() -> None:
    descriptor = RequestDescriptor.create("post", "v1/vaults/v1/items", [("", "")], '{"title":"x"}', token="abc")
    request = descriptor.to_httpx("https://connect.local")

    assert descriptor.method == "POST"
    assert request.method == "POST"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Authorization"] == "Bearer abc"
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b'{"title":"x"}'
    assert request.url.path == "/v1/vaults/v1/items"


def test_descriptor_without_body_sends_empty_content() -> None:
    request = RequestDescriptor.create("GET", "v1/vaults", token="abc").to_httpx("https://connect.local")

    assert request.content == b""
    assert "Content-Type" not in request.headers


def test_descriptor_is_immutable() -> None:
    descriptor = RequestDescriptor.create("GET", "v1/vaults", [("a", "1")], token="abc")

    with pytest.raises(AttributeError):
        descriptor.method = "DELETE"  # type: ignore[misc]
    assert descriptor.params == (("a", "1"),)


@pytest.mark.parametrize("token", ["bad\ntoken", "bad\rtoken", "abc\n", "abc\r\n", "tökén", "null\x00byte"])
def test_malformed_token_fails_before_any_send(token: str, make_client) -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json=[])

    client = make_client(handler, token=token)

    with pytest.raises(MalformedHeaderError) as exc_info:
        asyncio.run(client.send_request("GET", "v1/vaults", [("", "")]))

    assert calls["count"] == 0
    assert str(exc_info.value).startswith("invalid header value")


def test_unsupported_method_is_not_implemented() -> None:
    with pytest.raises(NotImplementedKindError):
        RequestDescriptor.create("TRACE", "v1/vaults", token="abc")


def test_invalid_base_url_fails_before_any_send(recording_sleep) -> None:
    calls = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["count"] += 1
        return httpx.Response(200, json=[])

    transport = HttpxTransport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))
    client = Client("abc", "http://[::1", transport=transport, sleep=recording_sleep)

    with pytest.raises(InternalError) as exc_info:
        asyncio.run(client.send_request("GET", "v1/vaults"))

    assert isinstance(exc_info.value.cause, httpx.InvalidURL)
    assert calls["count"] == 0
    assert recording_sleep.calls == []
