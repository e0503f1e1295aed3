"""
Logging configuration.

Console logging only; the calculators log edge-case decisions at DEBUG.
"""

import logging
import sys
from typing import Optional

from fundcalc.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_console_handler: Optional[logging.Handler] = None


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Attach a console handler to the root logger and set its level.

    Calling it again replaces the handler installed by the previous call.

    Args:
        log_level: Logging level name (DEBUG, INFO, ...), defaults to the
            configured log_level. Unknown names fall back to INFO.
    """
    global _console_handler

    level_name = (log_level or get_settings().log_level).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root_logger = logging.getLogger()
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(_console_handler)
    root_logger.setLevel(numeric_level)
