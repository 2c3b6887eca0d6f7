from .backoff import BackoffSchedule
from .client import Client, RequestExecutor
from .decoder import DecodedResponse, decode_bytes, decode_response
from .errors import (
    ErrorKind,
    InternalError,
    MalformedHeaderError,
    NetworkError,
    NotImplementedKindError,
    ParseError,
    ResourceCondition,
    ResourceError,
    RetryExhaustedError,
    UnsuccessfulStatusError,
    Utf8DecodeError,
    VaultConnectError,
)
from .request import RequestDescriptor, encode_query
from .transport import HttpxTransport, Transport

__all__ = [
    "BackoffSchedule",
    "Client",
    "RequestExecutor",
    "DecodedResponse",
    "decode_bytes",
    "decode_response",
    "RequestDescriptor",
    "encode_query",
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
]
