from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

_SECRET_VALUE_RE = re.compile(r"(?i)(token|secret|password)(\s*[=:]\s*)([^\s,;]+)")
_BEARER_RE = re.compile(r"(?i)(bearer\s+)([^\s\"',;]+)")

# Header names whose values carry credentials.
SENSITIVE_HEADERS = frozenset({"authorization", "proxy-authorization", "cookie", "set-cookie"})


def redact_string(s: str) -> str:
    redacted = _SECRET_VALUE_RE.sub(lambda m: f"{m.group(1)}{m.group(2)}***", s)
    redacted = _BEARER_RE.sub(lambda m: f"{m.group(1)}***", redacted)
    return redacted


def redact_headers(headers: Mapping[str, str] | Iterable[tuple[str, str]]) -> dict[str, str]:
    """Copy ``headers`` with credential values masked; the auth scheme is kept."""
    items = headers.items() if isinstance(headers, Mapping) else headers
    output: dict[str, str] = {}
    for name, value in items:
        if name.casefold() not in SENSITIVE_HEADERS:
            output[name] = value
            continue
        scheme, _, credential = value.partition(" ")
        output[name] = f"{scheme} ***" if credential else "***"
    return output
