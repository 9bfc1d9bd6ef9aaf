"""Log output for the authentication gate service."""

import logging
from typing import Optional

from pythonjsonlogger.json import JsonFormatter


def setup_logger(level: int = logging.INFO, json_format: bool = True,
                 stream: Optional[object] = None) -> logging.Handler:
    """Attach a single stream handler to the root logger."""
    log_handler = logging.StreamHandler(stream)  # type: ignore
    if json_format:
        formatter: logging.Formatter = JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s',
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s: %(message)s'
        )
    log_handler.setFormatter(formatter)
    logger = logging.getLogger()
    for handler in list(logger.handlers):
        if getattr(handler, '_authgate', False):
            logger.removeHandler(handler)
    log_handler._authgate = True  # type: ignore
    logger.addHandler(log_handler)
    logger.setLevel(level)
    return log_handler
