# SPDX-License-Identifier: MIT

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: str = "WARNING") -> None:
    """Route the package's log records to stderr through rich."""
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level: {level}")

    package_logger = logging.getLogger("tourneycal")
    package_logger.setLevel(level)
    package_logger.propagate = False
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
    )
