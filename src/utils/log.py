"""Logging for the sha1text command.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
unless the application configures them; the command line gets a single
stderr handler here so its error messages have a timestamp and a level.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def get_logger(name: str = "sha1text", level: str = "WARNING") -> logging.Logger:
    """Return the named CLI logger, attaching the stderr handler on first use.

    ``level`` is a level name such as ``"DEBUG"``; unknown names mean WARNING.
    Calling again only changes the level, it never stacks handlers.
    """
    logger = logging.getLogger(name)
    if not any(getattr(h, "_sha1text", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._sha1text = True
        logger.addHandler(handler)
        logger.propagate = False
    value = getattr(logging, str(level).upper(), None)
    logger.setLevel(value if isinstance(value, int) else logging.WARNING)
    return logger
