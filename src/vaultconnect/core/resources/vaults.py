from __future__ import annotations

from vaultconnect.core.http.decoder import DecodedResponse
from vaultconnect.core.logging.context import log_context

from .base import RequestSender, send_classified
from .schemas import VaultData


async def list_vaults(client: RequestSender) -> DecodedResponse[list[VaultData]]:
    return await send_classified(client, "GET", "v1/vaults", list[VaultData])


async def get_vault(client: RequestSender, vault_id: str) -> DecodedResponse[VaultData]:
    with log_context(vault_id=vault_id or None):
        return await send_classified(client, "GET", f"v1/vaults/{vault_id}", VaultData, vault_scoped=True)
