"""JSON structured logging for the gallery service."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from gallery import __version__

SERVICE_NAME = "photo-gallery"

# Third-party loggers that are noisy at INFO: uvicorn.access logs every scroll
# report and httpx logs every Unsplash request.
_QUIET_LOGGERS = ("uvicorn.access", "httpx")


def build_formatter() -> JsonFormatter:
    """One JSON object per record, tagged with the service name and version."""
    return JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        },
        static_fields={"service": SERVICE_NAME, "version": __version__},
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def setup_logging(log_level: str = "INFO") -> None:
    """Send root and uvicorn records to stdout as JSON."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # uvicorn installs its own handlers unless log_config=None; replace them either way
    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        uv_logger = logging.getLogger(name)
        uv_logger.handlers.clear()
        uv_logger.addHandler(handler)
        uv_logger.propagate = False

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
