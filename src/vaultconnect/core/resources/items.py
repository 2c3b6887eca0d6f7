from __future__ import annotations

from typing import Any

from vaultconnect.core.http.decoder import DecodedResponse
from vaultconnect.core.logging.context import log_context

from .base import RequestSender, send_classified
from .schemas import FullItem, ItemData


async def list_items(client: RequestSender, vault_id: str) -> DecodedResponse[list[ItemData]]:
    with log_context(vault_id=vault_id or None):
        return await send_classified(
            client, "GET", f"v1/vaults/{vault_id}/items", list[ItemData], vault_scoped=True
        )


async def get_item(client: RequestSender, vault_id: str, item_id: str) -> DecodedResponse[FullItem]:
    with log_context(vault_id=vault_id or None, item_id=item_id or None):
        return await send_classified(
            client, "GET", f"v1/vaults/{vault_id}/items/{item_id}", FullItem, vault_scoped=True
        )


async def add_item(client: RequestSender, item: FullItem) -> DecodedResponse[ItemData]:
    """Create ``item`` in the vault named by ``item.vault.id``."""
    vault_id = item.vault.id
    with log_context(vault_id=vault_id or None):
        return await send_classified(
            client,
            "POST",
            f"v1/vaults/{vault_id}/items",
            ItemData,
            body=item.to_json(),
            vault_scoped=True,
        )


async def remove_item(client: RequestSender, vault_id: str, item_id: str) -> None:
    with log_context(vault_id=vault_id or None, item_id=item_id or None):
        await send_classified(
            client, "DELETE", f"v1/vaults/{vault_id}/items/{item_id}", dict[str, Any], vault_scoped=True
        )
