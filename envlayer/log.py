import logging
import os
import sys
from typing import Optional, Union

import structlog

LOG_LEVEL_VARIABLE = "ENVLAYER_LOG_LEVEL"

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Route envlayer log output to stderr at the given level.

    The level defaults to ``ENVLAYER_LOG_LEVEL``, then WARNING. Library
    code never calls this; applications and the CLI do.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_VARIABLE, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger("envlayer")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger backed by the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
