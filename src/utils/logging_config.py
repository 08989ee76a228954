"""Structured logger setup shared by services and handlers."""

import logging
import os

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "admissions-assistant"
_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Every line carries a static ``service`` field so chat transcripts can be
    filtered out of a shared log stream. The level comes from ``LOG_LEVEL``
    (default INFO) at first use.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s",
        static_fields={"service": SERVICE_NAME},
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    level = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
    logger.setLevel(level if level in _LEVELS else logging.INFO)
    logger.propagate = False
    return logger
