"""Serve an App with uvicorn.

Single process, single asyncio event loop. The App's own logger
carries application logs; uvicorn keeps its access and error loggers
at the matching level.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import uvicorn

if TYPE_CHECKING:
    from headerecho.app import App


def uvicorn_log_level(level: int) -> str:
    """Map a stdlib logging level onto the names uvicorn accepts."""
    if level <= logging.DEBUG:
        return "trace" if level < logging.DEBUG else "debug"
    if level <= logging.INFO:
        return "info"
    if level <= logging.WARNING:
        return "warning"
    if level <= logging.ERROR:
        return "error"
    return "critical"


def run_server(app: App, host: str, port: int) -> None:
    """Start uvicorn with the given App and block until shutdown."""
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        lifespan="on",
        log_level=uvicorn_log_level(app.logger.getEffectiveLevel()),
    )
    server = uvicorn.Server(config)
    server.run()
