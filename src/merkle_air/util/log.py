"""Opt-in logging configuration.

Modules of `merkle_air` only create module-level loggers and never install handlers. Drivers that want to see the
records call `configure_logging`, optionally passing their own `logging.Handler` as the sink.
"""

import logging
import os

LOG_LEVEL_ENV = "MERKLE_AIR_LOG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None, sink: logging.Handler | None = None) -> logging.Logger:
    """Attach a handler to the `merkle_air` logger.

    Args:
        level (str | int | None): The logging level. If `None`, the value of the `MERKLE_AIR_LOG` environment
            variable is used, falling back to `INFO`.
        sink (logging.Handler | None): The handler receiving the records. Defaults to a `StreamHandler` on stderr.

    Returns:
        The configured `merkle_air` logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, str):
        level = level.upper()

    if sink is None:
        sink = logging.StreamHandler()
        sink.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("merkle_air")
    logger.setLevel(level)
    logger.addHandler(sink)

    return logger
