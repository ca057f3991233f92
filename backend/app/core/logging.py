"""Logging configuration for the application."""
import logging
import sys

LOGGER_NAME = "book_inventory"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colours the level and logger name."""

    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        # Work on a copy so other handlers still see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]
        record.levelname = f"{color}{record.levelname}{reset}"
        record.name = f"\033[34m{record.name}{reset}"  # Blue for logger name
        return super().format(record)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Set up the application logger and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # Remove existing handlers so repeated app construction does not duplicate output
    logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    formatter_cls = ColoredFormatter if sys.stdout.isatty() else logging.Formatter
    console_handler.setFormatter(
        formatter_cls(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
