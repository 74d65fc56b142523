"""JSON logging for the ticketing API.

Call configure_logging() once at startup (the lifespan in app.main); modules
then use logging.getLogger(__name__) as usual.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(log_level: str = "INFO") -> None:
    """Install a JSON stdout handler on the root logger."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter(_FORMAT))
    handler.setLevel(level)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # uvicorn installs its own access log; ours comes from RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").propagate = False

    logging.getLogger(__name__).debug("Logging configured", extra={"log_level": log_level})
