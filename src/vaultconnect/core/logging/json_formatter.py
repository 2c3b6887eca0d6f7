from __future__ import annotations

import json
import logging
import traceback
from datetime import datetime, timezone

from .context import get_log_context
from .redact import redact_string


class JSONFormatter(logging.Formatter):
    """One JSON object per record.

    Context ids (``request_id``, ``vault_id``, ...) go under ``"context"``; fields passed as
    ``extra={"extra_fields": {...}}`` go under ``"http"``. A raised ``VaultConnectError`` adds
    its ``kind`` and label.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "event": redact_string(record.getMessage()),
        }
        context = get_log_context()
        if context:
            payload["context"] = context

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, dict) and extra_fields:
            payload["http"] = extra_fields

        if record.exc_info:
            exc_type, exc_value, exc_tb = record.exc_info
            error: dict[str, object] = {
                "type": exc_type.__name__ if exc_type else "Exception",
                "message": redact_string(str(exc_value)) if exc_value else "",
                "stack": redact_string("".join(traceback.format_exception(exc_type, exc_value, exc_tb))),
            }
            kind = getattr(exc_value, "kind", None)
            if kind is not None:
                error["kind"] = getattr(kind, "value", str(kind))
                error["label"] = exc_value.message()
            payload["error"] = error

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)
