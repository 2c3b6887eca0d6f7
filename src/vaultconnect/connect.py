from __future__ import annotations

from pathlib import Path
from typing import Optional

from vaultconnect.config import ConnectSettings, load_settings
from vaultconnect.core.http.client import Client, Sleep
from vaultconnect.core.http.decoder import DecodedResponse
from vaultconnect.core.http.transport import HttpxTransport, Transport
from vaultconnect.core.logging.setup import configure_logging
from vaultconnect.core.resources import items, vaults
from vaultconnect.core.resources.schemas import FullItem, ItemData, VaultData


class Connect:
    """Vault and item operations over one shared ``Client``."""

    def __init__(self, client: Client) -> None:
        self.client = client

    @classmethod
    def from_settings(
        cls,
        settings: ConnectSettings,
        *,
        transport: Transport | None = None,
        sleep: Sleep | None = None,
    ) -> Connect:
        if settings.log_level:
            configure_logging(settings.log_level)
        if transport is None:
            transport = HttpxTransport(timeout_s=settings.timeout_s, user_agent=settings.user_agent)
        client = Client(
            settings.api_token,
            settings.server_url,
            transport=transport,
            backoff=settings.backoff(),
            sleep=sleep,
        )
        return cls(client)

    @classmethod
    def from_env(cls, config_path: Optional[str | Path] = None) -> Connect:
        return cls.from_settings(load_settings(config_path))

    async def list_vaults(self) -> DecodedResponse[list[VaultData]]:
        return await vaults.list_vaults(self.client)

    async def get_vault(self, vault_id: str) -> DecodedResponse[VaultData]:
        return await vaults.get_vault(self.client, vault_id)

    async def list_items(self, vault_id: str) -> DecodedResponse[list[ItemData]]:
        return await items.list_items(self.client, vault_id)

    async def get_item(self, vault_id: str, item_id: str) -> DecodedResponse[FullItem]:
        return await items.get_item(self.client, vault_id, item_id)

    async def add_item(self, item: FullItem) -> DecodedResponse[ItemData]:
        return await items.add_item(self.client, item)

    async def remove_item(self, vault_id: str, item_id: str) -> None:
        await items.remove_item(self.client, vault_id, item_id)

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> Connect:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
