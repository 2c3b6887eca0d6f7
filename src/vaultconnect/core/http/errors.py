from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

E = TypeVar("E", bound=BaseException)


class ErrorKind(str, Enum):
    NETWORK = "network_error"
    PARSE = "parse_error"
    UTF8 = "utf8_error"
    RETRY_EXHAUSTED = "retry_error"
    UNSUCCESSFUL_STATUS = "request_not_successful"
    MALFORMED_HEADER = "invalid_header_value"
    INTERNAL = "internal_error"
    NOT_IMPLEMENTED = "not_implemented_error"
    RESOURCE = "resource_error"


class ResourceCondition(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    INVALID_VAULT = "invalid_vault"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


class VaultConnectError(RuntimeError):
    """Base error for every failure raised by the request pipeline.

    ``str(err)`` is the fixed label of the error kind, followed by the message of the
    underlying cause when one is attached.
    """

    kind: ErrorKind = ErrorKind.INTERNAL
    label: str = "internal error"

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(self.label)
        if cause is not None:
            self.__cause__ = cause

    def with_cause(self: E, cause: BaseException) -> E:
        self.__cause__ = cause
        return self

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def message(self) -> str:
        """The error's own message, without the cause."""
        return self.label

    def find_cause(self, exc_type: type[E]) -> E | None:
        current = self.__cause__
        seen: set[int] = set()
        while current is not None and id(current) not in seen:
            if isinstance(current, exc_type):
                return current
            seen.add(id(current))
            current = current.__cause__
        return None

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"{self.message()}: {self.__cause__}"
        return self.message()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, cause={self.__cause__!r})"


class NetworkError(VaultConnectError):
    kind = ErrorKind.NETWORK
    label = "network error"


class ParseError(VaultConnectError):
    kind = ErrorKind.PARSE
    label = "parsing error"


class Utf8DecodeError(VaultConnectError):
    kind = ErrorKind.UTF8
    label = "parsing bytes experienced a UTF8 error"


class RetryExhaustedError(VaultConnectError):
    """Raised when every transport attempt of a logical call failed."""

    kind = ErrorKind.RETRY_EXHAUSTED
    label = "retry error"

    def __init__(self, cause: BaseException | None = None, attempt_errors: list[str] | None = None) -> None:
        super().__init__(cause)
        self.attempt_errors = list(attempt_errors or [])


class UnsuccessfulStatusError(VaultConnectError):
    kind = ErrorKind.UNSUCCESSFUL_STATUS
    label = "client returned an unsuccessful HTTP status code"

    def __init__(self, status_code: int, body: str, payload: Any = None) -> None:
        super().__init__()
        self.status_code = status_code
        self.body = body
        self.payload = payload

    def message(self) -> str:
        return f"{self.label}: StatusCode: {self.status_code}, Body: {self.body}"


class MalformedHeaderError(VaultConnectError):
    kind = ErrorKind.MALFORMED_HEADER
    label = "invalid header value"


class InternalError(VaultConnectError):
    kind = ErrorKind.INTERNAL
    label = "internal error"


class NotImplementedKindError(VaultConnectError):
    kind = ErrorKind.NOT_IMPLEMENTED
    label = "not implemented error"


class ResourceError(VaultConnectError):
    """A service-level condition recognized from an unsuccessful response."""

    kind = ErrorKind.RESOURCE
    label = "vault error"

    def __init__(
        self,
        status_code: int,
        message: str,
        condition: ResourceCondition | None = None,
    ) -> None:
        super().__init__()
        self.status_code = status_code
        self.detail = message
        self.condition = condition

    def message(self) -> str:
        return f"{self.label}: StatusCode: {self.status_code}, Message: {self.detail}"
