"""JSON logging for the slink package

`initialize_logging()` attaches a single stderr handler to the 'slink'
logger. Host applications keep control of the root logger; slink records
do not propagate to it once logging is initialized.

Each line is one JSON object. Fields passed through `extra=` are grouped
under "context", so they never collide with the fixed keys:

    {
        "timestamp": "2025-10-15T12:00:00.000Z",
        "level": "DEBUG",
        "logger": "slink.dao.history_store",
        "message": "Recorded short link.",
        "context": {"slot": "slink_history", "recordId": 1760529600000}
    }

Functions:
    initialize_logging(level=None) -> logging.Logger
        Configure the 'slink' logger. Safe to call more than once.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from slink.constants import ENV


PACKAGE_LOGGER = 'slink'

# Attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render a LogRecord as one JSON line, with extras under "context" """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        log = {
            'timestamp': created.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        context = {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRS}
        if context:
            log['context'] = context
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging(level: str | None = None) -> logging.Logger:
    """Configure JSON logging for the 'slink' logger

    Args:
        level (str | None):
            Level name such as 'DEBUG'. Falls back to LOG_LEVEL, then 'INFO'.

    Returns:
        logging.Logger: the configured 'slink' logger.

    Raises:
        ValueError:
            If the level name is unknown.
    """
    level = (level or os.getenv(ENV.App.LOG_LEVEL) or 'INFO').upper()
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                }
            },
            'loggers': {
                PACKAGE_LOGGER: {
                    'level': level,
                    'handlers': ['stderr'],
                    'propagate': False,
                }
            },
        }
    )
    return logging.getLogger(PACKAGE_LOGGER)
