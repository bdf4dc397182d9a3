"""Structured logging for the valuation wizard.

structlog renders on top of the standard library handlers: plain console
lines during development, JSON when ``AVALIADOR_LOG_JSON`` is set. Events
are snake_case names with keyword fields, e.g.
``log.info("submission_sent", status=200, phone="******678")``.
Phone numbers must go through ``mask_phone`` before being logged.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LOG_DIR = Path(__file__).parent.parent.parent / "logs"
LOG_FILE = LOG_DIR / "avaliador.log"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3

_configured: bool = False


def _handlers() -> list[logging.Handler]:
    """Console always; a rotating file outside of test runs when the disk allows it."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers
    try:
        LOG_DIR.mkdir(exist_ok=True)
        handlers.append(logging.handlers.RotatingFileHandler(
            str(LOG_FILE),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        ))
    except OSError:
        # Read-only deployments log to stdout only
        pass
    return handlers


def _processors(json_output: bool) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.BoundLogger:
    """Configure structured logging once per process.

    Args:
        level: Log level name. Defaults to ``AVALIADOR_LOG_LEVEL``.
        json_output: Render JSON lines. Defaults to ``AVALIADOR_LOG_JSON``.

    Returns:
        Root structlog logger.
    """
    global _configured
    if _configured:
        return structlog.get_logger()

    from avaliador.core.settings import get_settings

    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
        handlers=_handlers(),
        force=True,
    )
    structlog.configure(
        processors=_processors(settings.log_json if json_output is None else json_output),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger bound to ``name`` (usually ``__name__``), configuring logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger


def mask_phone(phone: str) -> str:
    """Mask all but the last three digits of a phone number."""
    digits = "".join(ch for ch in phone or "" if ch.isdigit())
    if len(digits) <= 3:
        return "*" * len(digits)
    return "*" * (len(digits) - 3) + digits[-3:]
