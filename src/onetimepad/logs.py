import logging
import sys

import structlog

LOGGER_NAME = "onetimepad"
LOG_FORMAT = "%(asctime)s  %(levelname)s  %(message)s"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that hands rendered events to stdlib `logging`.

    Nothing is printed unless the host application (or `configure_logging`)
    attaches a handler to the `onetimepad` logger or the root logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(verbose: bool = False) -> None:
    """Send log events to stderr, hiding debug output unless verbose."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, logging.StreamHandler):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
