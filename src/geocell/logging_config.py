"""
logging_config.py

structlog setup for geocell.

Library modules only call :func:`get_logger`.  Applications call
:func:`configure_logging` once, usually through
:func:`geocell.config.apply_logging` with loaded settings.  Until then
structlog's defaults apply.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import structlog


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    json_output: bool = False,
) -> None:
    """
    Route structlog events through the stdlib root logger.

    Args:
        level: Stdlib level number, e.g. ``logging.DEBUG``
        log_file: Also append rendered events to this file
        json_output: Render events as JSON lines instead of console text

    Example:
        >>> configure_logging(logging.DEBUG, json_output=True)
        >>> get_logger(__name__).debug("cell_encoded", precision=25, code="wx4g0")
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    root = logging.getLogger()
    root.setLevel(level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(json_output),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Structured logger for *name* (usually ``__name__``)."""
    return structlog.get_logger(name)
