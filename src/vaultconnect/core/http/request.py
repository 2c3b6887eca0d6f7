from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

import httpx

from .errors import InternalError, MalformedHeaderError, NotImplementedKindError

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})

# RFC 9110 field-value: visible ASCII plus space and horizontal tab.
_HEADER_VALUE_RE = re.compile(r"[\x21-\x7e\t ]*")

QueryParams = tuple[tuple[str, str], ...]


def encode_query(params: Iterable[tuple[str, str]]) -> str:
    """Join pairs as ``key=value&`` keeping the trailing separator.

    Only ``+`` is escaped (as ``%2B``); nothing else is percent-encoded.
    """
    encoded = "".join(f"{key}={value}&" for key, value in params)
    return encoded.replace("+", "%2B")


def build_url(base_url: str, endpoint: str, params: Iterable[tuple[str, str]]) -> str:
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}?{encode_query(params)}"


def validate_header_value(name: str, value: str) -> str:
    if _HEADER_VALUE_RE.fullmatch(value) is None:
        raise MalformedHeaderError().with_cause(ValueError(f"illegal character in {name} header value"))
    return value


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    endpoint: str
    params: QueryParams = ()
    body: str | None = None
    token: str = ""

    @classmethod
    def create(
        cls,
        method: str,
        endpoint: str,
        params: Iterable[tuple[str, str]] = (),
        body: str | None = None,
        *,
        token: str,
    ) -> RequestDescriptor:
        normalized = method.strip().upper()
        if normalized not in SUPPORTED_METHODS:
            raise NotImplementedKindError().with_cause(ValueError(f"unsupported HTTP method: {method!r}"))
        descriptor = cls(
            method=normalized,
            endpoint=endpoint,
            params=tuple((str(key), str(value)) for key, value in params),
            body=body,
            token=token,
        )
        validate_header_value("Authorization", descriptor.authorization)
        return descriptor

    @property
    def authorization(self) -> str:
        return f"Bearer {self.token}"

    def headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Authorization": self.authorization,
        }
        if self.body is not None:
            headers["Content-Type"] = "application/json"
        return headers

    def to_httpx(self, base_url: str) -> httpx.Request:
        content = self.body.encode("utf-8") if self.body is not None else b""
        url = build_url(base_url, self.endpoint, self.params)
        try:
            return httpx.Request(self.method, url, headers=self.headers(), content=content)
        except httpx.InvalidURL as exc:
            raise InternalError(exc) from exc
