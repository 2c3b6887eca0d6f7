from .base import PLACEHOLDER_PARAMS, RequestSender, send_classified
from .builders import ItemBuilder, ItemBuilderError
from .classify import INVALID_BEARER_TOKEN, INVALID_VAULT_UUID, classify_status_error
from .items import add_item, get_item, list_items, remove_item
from .schemas import (
    FieldObject,
    FullItem,
    ItemCategory,
    ItemData,
    SectionID,
    SectionObject,
    UrlObject,
    VaultData,
    VaultID,
)
from .vaults import get_vault, list_vaults

__all__ = [
    "PLACEHOLDER_PARAMS",
    "RequestSender",
    "send_classified",
    "ItemBuilder",
    "ItemBuilderError",
    "INVALID_BEARER_TOKEN",
    "INVALID_VAULT_UUID",
    "classify_status_error",
    "list_vaults",
    "get_vault",
    "list_items",
    "get_item",
    "add_item",
    "remove_item",
    "FieldObject",
    "FullItem",
    "ItemCategory",
    "ItemData",
    "SectionID",
    "SectionObject",
    "UrlObject",
    "VaultData",
    "VaultID",
]
