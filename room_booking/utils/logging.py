"""
Logging setup shared by all modules.
"""

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root 'booking' logger."""
    global _configured
    root = logging.getLogger("booking")
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a named logger, e.g. get_logger("booking.service")."""
    return logging.getLogger(name)
