"""Console logging for the emoji release scripts.

Scripts call :func:`setup_logging` straight after parsing their arguments.
Run as installed commands, they only show emojitools' own records and turn
an uncaught error into a single fatal log line. Run with ``python -m`` or
``--show-tracebacks``, everything is logged and errors keep their traceback.
"""
import logging
import sys

from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


class ForeignFilter(logging.Filter):
    """Drop records emitted from outside the emojitools package."""

    def filter(self, record):
        return "emojitools" in record.pathname


def setup_logging(facility, args, name):
    python_minus_m = name == "__main__"
    user_mode = not python_minus_m and not getattr(args, "show_tracebacks", False)

    handler = RichHandler()

    if user_mode:
        # requests and rich log at DEBUG too
        handler.addFilter(ForeignFilter())

    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
    )

    log = logging.getLogger(facility)

    def report_failure(_type, value, _traceback):
        """Log the error message alone. The interpreter still exits with
        status 1 once the hook returns."""
        log.fatal(value)

    if user_mode:
        sys.excepthook = report_failure

    return log
