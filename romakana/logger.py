import logging
import sys

# Library logger: silent unless the application configures logging
logger = logging.getLogger("romakana")
logger.addHandler(logging.NullHandler())


def enable_console_logging(level: int = logging.INFO) -> logging.Logger:
    """Send romakana records to stdout (INFO and below) and stderr (WARNING+)."""
    logger.setLevel(level)
    if any(getattr(handler, "_romakana_console", False) for handler in logger.handlers):
        return logger

    stdout_handler = logging.StreamHandler(sys.stdout)
    stderr_handler = logging.StreamHandler(sys.stderr)

    stdout_handler.setLevel(logging.DEBUG)    # INFO and below
    stdout_handler.addFilter(lambda record: record.levelno < logging.WARNING)
    stderr_handler.setLevel(logging.WARNING)  # WARNING and above

    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    for handler in (stdout_handler, stderr_handler):
        handler.setFormatter(formatter)
        handler._romakana_console = True
        logger.addHandler(handler)

    # console output replaces the root handlers for these records
    logger.propagate = False
    return logger


def disable_console_logging() -> None:
    """Remove the handlers added by enable_console_logging and propagate again."""
    for handler in list(logger.handlers):
        if getattr(handler, "_romakana_console", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
