import logging
import sys
import traceback

from colorlog import ColoredFormatter

LOGGER_NAME = "horno_bridge"

DEBUG_MODE = False


def setup_logger(debug_mode=False):
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create console handler (Lambda forwards stdout to CloudWatch)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    # Create colored formatter
    formatter = ColoredFormatter(
        "%(log_color)s[%(levelname)s] %(message)s",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "red,bg_white",
        }
    )
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)
    else:
        for existing in logger.handlers:
            existing.setLevel(logging.DEBUG if debug_mode else logging.INFO)

    return logger


def configure_logger(log_mode: str):
    """
    Reconfigure the shared logger from a mode string ("DEBUG" / "INFO").

    Args:
        log_mode: Value of the LOG_MODE setting.
    """
    global logger, DEBUG_MODE
    DEBUG_MODE = (log_mode or "").strip().upper() == "DEBUG"
    logger = setup_logger(debug_mode=DEBUG_MODE)
    if DEBUG_MODE:
        logger.debug("Debug mode is active.")
    return logger


def print_stack_trace():
    """Log the current stack trace if debug mode is enabled."""
    if DEBUG_MODE:
        logger.error(traceback.format_exc())


# Logger defaults to INFO unless reconfigured later.
logger = setup_logger(debug_mode=DEBUG_MODE)
