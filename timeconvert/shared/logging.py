"""
Logging configuration for the Time Convert service.

One pipe-separated format on stdout for the API server and the CLI.
The CLI convert command runs at WARNING so only the JSON body is printed.
Logging must not change program behavior.
Never logs raw request values.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure structured logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # The access log would repeat every query string, including raw values
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
