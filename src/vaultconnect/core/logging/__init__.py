from .context import get_log_context, log_context, reset_context, set_context
from .json_formatter import JSONFormatter
from .redact import redact_headers, redact_string
from .setup import LOGGER_NAME, configure_logging, install_null_handler

__all__ = [
    "LOGGER_NAME",
    "JSONFormatter",
    "configure_logging",
    "install_null_handler",
    "get_log_context",
    "set_context",
    "reset_context",
    "log_context",
    "redact_string",
    "redact_headers",
]
