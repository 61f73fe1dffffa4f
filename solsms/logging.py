"""Logging utilities wrapping structlog configuration and the SMS event helpers.

No side-effects beyond configuring the `solsms` logger and structlog once.
"""
from __future__ import annotations

import logging
import contextvars
import structlog
from typing import Any

# -------------------------
# ContextVars for call-scoped data
# -------------------------
_request_id_var = contextvars.ContextVar("request_id", default=None)
_provider_var = contextvars.ContextVar("provider", default=None)

structlog_context = {
    "request_id": _request_id_var,
    "provider": _provider_var,
}


def _add_context(logger, method_name: str, event_dict: dict[str, Any]):  # noqa: D401
    rid = _request_id_var.get()
    if rid:
        event_dict["request_id"] = rid
    prov = _provider_var.get()
    if prov and "provider" not in event_dict:
        event_dict["provider"] = prov
    return event_dict

# -------------------------
# One-time structlog configuration (idempotent)
# -------------------------
if not getattr(structlog, "_SOLSMS_CONFIGURED", False):
    logging_logger = logging.getLogger("solsms")
    logging_logger.setLevel(logging.INFO)
    if not logging_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logging_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            _add_context,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    structlog._SOLSMS_CONFIGURED = True  # type: ignore[attr-defined]

slog = structlog.get_logger("solsms")


def set_log_level(level: str):
    logging.getLogger("solsms").setLevel(level.upper())


def set_log_request(request_id: str | None):
    _request_id_var.set(request_id)


def set_log_provider(provider: str | None):
    _provider_var.set(provider)


def mask_address(to: str | None) -> str | None:
    if not to:
        return to
    if len(to) <= 4:
        return "*" * len(to)
    return "*" * (len(to) - 4) + to[-4:]

# Event helpers

def log_provider_created(provider: str, root_url: str, timeout: int, **extra):
    slog.info("sms_provider_created", provider=provider, root_url=root_url, timeout=timeout, **extra)


def log_sms_pushed(provider: str, to: str, status: str, detail: str | None = None, **extra):
    """Record one push attempt. Never pass the API key in `extra`."""
    slog.info("sms_pushed", provider=provider, to=mask_address(to), status=status, detail=detail, **extra)
