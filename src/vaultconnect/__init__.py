from vaultconnect.config import ConfigError, ConnectSettings, load_settings
from vaultconnect.connect import Connect
from vaultconnect.core.http import (
    BackoffSchedule,
    Client,
    DecodedResponse,
    ErrorKind,
    HttpxTransport,
    InternalError,
    MalformedHeaderError,
    NetworkError,
    NotImplementedKindError,
    ParseError,
    ResourceCondition,
    ResourceError,
    RetryExhaustedError,
    Transport,
    UnsuccessfulStatusError,
    Utf8DecodeError,
    VaultConnectError,
)
from vaultconnect.core.logging import configure_logging, install_null_handler
from vaultconnect.core.resources import FullItem, ItemBuilder, ItemBuilderError, ItemCategory, ItemData, VaultData

install_null_handler()

__all__ = [
    "Connect",
    "Client",
    "ConnectSettings",
    "ConfigError",
    "load_settings",
    "configure_logging",
    "BackoffSchedule",
    "DecodedResponse",
    "HttpxTransport",
    "Transport",
    "ErrorKind",
    "ResourceCondition",
    "VaultConnectError",
    "NetworkError",
    "ParseError",
    "Utf8DecodeError",
    "RetryExhaustedError",
    "UnsuccessfulStatusError",
    "MalformedHeaderError",
    "InternalError",
    "NotImplementedKindError",
    "ResourceError",
    "FullItem",
    "ItemBuilder",
    "ItemBuilderError",
    "ItemCategory",
    "ItemData",
    "VaultData",
]
