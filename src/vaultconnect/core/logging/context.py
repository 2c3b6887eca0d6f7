from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator

correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
vault_id_var: ContextVar[str | None] = ContextVar("vault_id", default=None)
item_id_var: ContextVar[str | None] = ContextVar("item_id", default=None)

_CONTEXT_VARS: dict[str, ContextVar[str | None]] = {
    "correlation_id": correlation_id_var,
    "request_id": request_id_var,
    "vault_id": vault_id_var,
    "item_id": item_id_var,
}


def set_context(**kwargs: str | None) -> dict[str, Token[str | None]]:
    tokens: dict[str, Token[str | None]] = {}
    for key, value in kwargs.items():
        var = _CONTEXT_VARS.get(key)
        if var is None or value is None:
            continue
        tokens[key] = var.set(value)
    return tokens


def reset_context(tokens: dict[str, Token[str | None]]) -> None:
    for key, token in tokens.items():
        var = _CONTEXT_VARS.get(key)
        if var is not None:
            var.reset(token)


@contextmanager
def log_context(
    correlation_id: str | None = None,
    request_id: str | None = None,
    vault_id: str | None = None,
    item_id: str | None = None,
) -> Iterator[None]:
    """Tag log records emitted inside the block; ``None`` keeps the outer value."""
    tokens = set_context(
        correlation_id=correlation_id,
        request_id=request_id,
        vault_id=vault_id,
        item_id=item_id,
    )
    try:
        yield
    finally:
        reset_context(tokens)


def get_log_context() -> dict[str, str]:
    values = {key: var.get() for key, var in _CONTEXT_VARS.items()}
    return {key: value for key, value in values.items() if value is not None}
