import logging
import sys


APP_LOGGER = "phrasequiz"


def get_logger(name: str) -> logging.Logger:
    """Return a logger with the given name."""
    return logging.getLogger(name)


class _AppOrWarnings(logging.Filter):
    """Pass every phrasequiz record; from other libraries only WARNING and up."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: int | str = "WARNING") -> logging.Handler:
    """Send log records to stderr so they stay out of the quiz transcript on stdout.

    Replaces any handlers already on the root logger and returns the new one.
    """
    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s - %(message)s"))
    handler.addFilter(_AppOrWarnings())
    root.addHandler(handler)
    return handler
