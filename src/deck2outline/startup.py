"""Startup logic that runs before any interface does anything.

- Console encoding setup (harmless outside Windows)
- Logging configuration
"""

import logging

from deck2outline.internals.logger import setup_logger
from deck2outline.utils import get_debug_mode, setup_console_encoding


# region initialize_application
def initialize_application() -> logging.Logger:
    """Common startup tasks."""

    # Must happen before any console output, so before the logger exists.
    setup_console_encoding()

    log = setup_logger(enable_trace=get_debug_mode())
    log.info("Starting deck2outline Log.")

    return log


# endregion
