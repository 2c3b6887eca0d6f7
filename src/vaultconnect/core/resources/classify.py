from __future__ import annotations

import logging
from typing import Any

from vaultconnect.core.http.errors import ResourceCondition, ResourceError, UnsuccessfulStatusError

logger = logging.getLogger(__name__)

INVALID_BEARER_TOKEN = "Invalid bearer token"
INVALID_VAULT_UUID = "Invalid Vault UUID"

_MESSAGE_CONDITIONS = {
    INVALID_BEARER_TOKEN.casefold(): ResourceCondition.INVALID_CREDENTIALS,
    INVALID_VAULT_UUID.casefold(): ResourceCondition.INVALID_VAULT,
}

_STATUS_CONDITIONS = {
    401: ResourceCondition.INVALID_CREDENTIALS,
    403: ResourceCondition.FORBIDDEN,
    404: ResourceCondition.NOT_FOUND,
}

_VAULT_SCOPED_STATUSES = frozenset({400, 404})

_DEFAULT_MESSAGES = {
    ResourceCondition.INVALID_CREDENTIALS: INVALID_BEARER_TOKEN,
    ResourceCondition.INVALID_VAULT: INVALID_VAULT_UUID,
    ResourceCondition.FORBIDDEN: "Forbidden",
    ResourceCondition.NOT_FOUND: "Not found",
}


def _body_fields(payload: Any) -> tuple[int | None, str | None]:
    if not isinstance(payload, dict):
        return None, None
    status = payload.get("status")
    message = payload.get("message")
    return (
        status if isinstance(status, int) and not isinstance(status, bool) else None,
        message if isinstance(message, str) else None,
    )


def classify_status_error(
    err: UnsuccessfulStatusError, *, vault_scoped: bool = False
) -> ResourceError | None:
    """Map an unsuccessful response to a known service condition.

    The parsed body's ``message`` decides first; the HTTP status code is the fallback.
    On vault-scoped calls a 400/404 whose message names the vault is an invalid vault.
    Returns ``None`` for responses that match no known condition.
    """
    body_status, message = _body_fields(err.payload)
    condition = _MESSAGE_CONDITIONS.get(message.strip().casefold()) if message else None
    if (
        condition is None
        and vault_scoped
        and err.status_code in _VAULT_SCOPED_STATUSES
        and message
        and "vault" in message.casefold()
    ):
        condition = ResourceCondition.INVALID_VAULT
    if condition is None:
        condition = _STATUS_CONDITIONS.get(err.status_code)
    if condition is None:
        return None

    status_code = body_status if body_status is not None else err.status_code
    resource_error = ResourceError(status_code, message or _DEFAULT_MESSAGES[condition], condition)
    resource_error.with_cause(err)
    logger.debug("Classified status %s as %s", err.status_code, condition.value)
    return resource_error
