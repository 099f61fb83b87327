"""
Logging setup; console and file handlers, with the session id stamped on every log line.
"""

import logging

from deck2outline.internals.paths import user_log_dir_path
from deck2outline.internals.run_context import get_session_id


def setup_logger(
    name: str = "deck2outline",
    level: int = logging.DEBUG,
    enable_trace: bool = False,
) -> logging.Logger:
    """
    Setup logging with console and file output.

    Safe to call multiple times (won't create duplicate handlers).

    Args:
        name: Logger name (default: "deck2outline")
        level: Minimum log level (default: DEBUG)
        enable_trace: Also write a verbose trace log with file/function/line info

    Returns:
        Configured logger instance

    Example:
        >>> log = setup_logger()
        >>> log.info("Parsing deck")
        2026-01-09 14:23:45 [INFO] Parsing deck [session:a1b2c3d4]
    """

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(level)

    # Keep our lines out of the root logger so other libraries' logs don't mix in.
    logger.propagate = False

    session_id = get_session_id()

    log_format = f"%(asctime)s [%(levelname)s] %(message)s [session:{session_id}]"
    formatter = logging.Formatter(log_format, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    # ~/Documents/deck2outline/logs/deck2outline.log
    log_file = user_log_dir_path() / "deck2outline.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)

    if enable_trace:
        trace_log_format = f"%(filename)s: %(funcName)s(), Line: %(lineno)d: - [%(levelname)s] %(asctime)s - %(message)s -- [session={session_id}]"
        trace_formatter = logging.Formatter(trace_log_format, datefmt="%Y-%m-%d %H:%M:%S")
        trace_file_handler = logging.FileHandler(
            user_log_dir_path() / "trace_deck2outline.log", encoding="utf-8"
        )
        trace_file_handler.setFormatter(trace_formatter)
        trace_file_handler.setLevel(logging.DEBUG)
        logger.addHandler(trace_file_handler)

    logger.info(f"Logger initialized. Writing to {log_file}")

    return logger
