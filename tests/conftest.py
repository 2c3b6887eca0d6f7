from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from vaultconnect.core.http.backoff import BackoffSchedule
from vaultconnect.core.http.client import Client
from vaultconnect.core.http.transport import HttpxTransport

SERVER_URL = "https://connect.local"
TOKEN = "secret-token"


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture(autouse=True)
def clear_connect_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "OP_API_TOKEN",
        "OP_SERVER_URL",
        "VAULTCONNECT_HTTP_RETRIES",
        "VAULTCONNECT_HTTP_BACKOFF_MIN_S",
        "VAULTCONNECT_HTTP_BACKOFF_MAX_S",
        "VAULTCONNECT_HTTP_TIMEOUT_S",
        "VAULTCONNECT_HTTP_USER_AGENT",
        "VAULTCONNECT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_client(recording_sleep: RecordingSleep) -> Callable[..., Client]:
    def factory(handler: Callable[[httpx.Request], httpx.Response], *, retries: int = 1, token: str = TOKEN) -> Client:
        transport = HttpxTransport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        return Client(
            token,
            SERVER_URL,
            transport=transport,
            backoff=BackoffSchedule(max_attempts=retries, min_wait=0.1, max_wait=2.0),
            sleep=recording_sleep,
        )

    return factory
