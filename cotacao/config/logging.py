"""
Structured logging for the quotation engine.

Console output in development, JSON lines elsewhere. Response-link tokens
are bearer credentials for the supplier form, so they are masked before
any renderer sees them.
"""

import logging
import re
import sys
from typing import Any

import structlog
from structlog.types import Processor

from cotacao.config.settings import get_settings

# Keys whose values are response-link tokens
TOKEN_KEYS = frozenset({"token", "link_token"})
# Values that may embed a token in a supplier form URL or path
PATH_KEYS = frozenset({"path", "url"})

_FORM_PATH_RE = re.compile(r"(/cotacao/)([^/?#]+)")
_VISIBLE_CHARS = 4


def mask_token(token: str) -> str:
    """Keep the first few characters so log lines can still be correlated."""
    if len(token) <= _VISIBLE_CHARS:
        return "***"
    return token[:_VISIBLE_CHARS] + "***"


def mask_link_tokens(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask link tokens in token fields and in supplier form paths."""
    for key in TOKEN_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = mask_token(value)
    for key in PATH_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = _FORM_PATH_RE.sub(
                lambda m: m.group(1) + mask_token(m.group(2)), value
            )
    return event_dict


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["environment"] = settings.environment
    return event_dict


def build_processors(environment: str) -> list[Processor]:
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
        mask_link_tokens,
        add_app_context,
    ]
    if environment == "development":
        return shared + [structlog.dev.ConsoleRenderer(colors=True)]
    return shared + [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger for the app."""
    settings = get_settings()

    structlog.configure(
        processors=build_processors(settings.environment),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
    )
    logging.getLogger("cotacao").setLevel(getattr(logging, settings.log_level))

    # Per-statement debug output from the sqlite thread
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    # Request logging middleware already covers access lines
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
