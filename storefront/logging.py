"""
Logging for the storefront API.

Importing this module attaches one stdout handler to the root logger, so
request handlers, repositories and the cart registry all log the same way:

    from storefront.logging import get_logger
    logger = get_logger(__name__)

    logger.info("Cart %s: %s x%d", sanitize_id_for_logging(cart_id), product_id, qty)

Cart ids, product ids and uploaded file names come from visitors; pass them
through the sanitize helpers before logging.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Supabase tables, auth and storage all talk over httpx (HTTP/2 via hpack)
QUIET_LOGGERS = ("httpx", "httpcore", "hpack")

# Characters that would let a visitor forge a second log line
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})

ID_LOG_LENGTH = 8


def _log_level() -> int:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _configure_root_logger() -> None:
    """Quiet the HTTP client loggers, then attach the stdout handler unless the
    host already configured logging."""
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        return

    level = _log_level()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # The production host stamps each line itself
    production = os.environ.get("ENVIRONMENT", "").lower() == "production"
    handler.setFormatter(logging.Formatter(LOG_FORMAT_SIMPLE if production else LOG_FORMAT))
    root.addHandler(handler)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Module logger; pass __name__."""
    return logging.getLogger(name)


def sanitize_id_for_logging(id_value: str | None) -> str:
    """
    Short, single-line form of a cart, product, page or order id.

    Keeps the first 8 characters, which is enough to correlate log lines
    without writing whole cart ids (they act as bearer keys) to the logs.
    Returns "N/A" for a missing id.
    """
    if not id_value:
        return "N/A"
    return str(id_value).translate(_LOG_ESCAPES)[:ID_LOG_LENGTH]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Single-line, length-capped form of visitor text such as an uploaded
    file name. Longer values are cut to max_length and end with "...".
    """
    if not value:
        return "N/A"
    safe_value = str(value).translate(_LOG_ESCAPES)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
