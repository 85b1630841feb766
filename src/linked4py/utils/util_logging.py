"""Module loggers for the library, silent unless LINKED4PY_DEBUG is set."""

import logging
import os

debugger_disabled = os.environ.get("LINKED4PY_DEBUG") is None


def setup_debugger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:  # Prevent duplicate handlers on reload
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(name)s:%(levelname)s:%(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.disabled = debugger_disabled
    return logger
