"""Logfire cloud observability initialization and instrumentation."""

import logging

import logfire
from fastapi import FastAPI

from reelforge import __version__
from reelforge.config import Settings

logger = logging.getLogger(__name__)


def initialize_logfire(settings: Settings, app: FastAPI | None = None) -> bool:
    """
    Initialize Logfire and instrument the web and HTTP layers.

    Call once at process startup. Instruments:
    - FastAPI (the NDJSON generate endpoint), when an app is given
    - HTTPX clients (StudioClient)
    - Python logging (bridges to Logfire)

    Args:
        settings: Application settings containing the Logfire token
        app: Optional FastAPI application to instrument

    Returns:
        True when Logfire was configured, False when observability is disabled.
    """
    if not settings.logfire_token:
        logger.warning("Logfire token not set - observability disabled")
        return False

    try:
        logfire.configure(
            token=settings.logfire_token,
            service_name="reelforge",
            service_version=__version__,
        )

        if app is not None:
            logfire.instrument_fastapi(app)

        logfire.instrument_httpx()

        root_logger = logging.getLogger()
        root_logger.addHandler(logfire.LogfireLoggingHandler())

        logger.info("Logfire cloud tracking initialized")
        return True

    except Exception as e:
        # Observability is optional; keep serving without it
        logger.warning(f"Failed to initialize Logfire: {e}")
        return False
