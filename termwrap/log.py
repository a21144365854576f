from __future__ import annotations

"""Logging setup for the `termwrap` logger tree."""

import json
import logging
import logging.handlers
import sys
import time
from typing import Optional, TextIO

from .config import Settings


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            'ts': time.strftime('%Y-%m-%dT%H:%M:%S', time.localtime(record.created)),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        if record.exc_info:
            payload['exc'] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(settings: Settings, stream: Optional[TextIO] = None) -> logging.Logger:
    """Install handlers on the `termwrap` logger according to `settings`.

    Handlers from a previous call are replaced, so calling this twice does not
    duplicate output.
    """
    logger = logging.getLogger('termwrap')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(getattr(logging, settings.log_level, logging.WARNING))
    logger.propagate = False
    if settings.log_json:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s', datefmt='%H:%M:%S')
    if settings.log_file:
        fh = logging.handlers.RotatingFileHandler(settings.log_file, maxBytes=1_000_000, backupCount=3, encoding='utf-8')
        fh.setFormatter(formatter)
        logger.addHandler(fh)
    if settings.log_stderr:
        sh = logging.StreamHandler(stream or sys.stderr)
        sh.setFormatter(formatter)
        logger.addHandler(sh)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


__all__ = ["JsonFormatter", "configure_logging"]
