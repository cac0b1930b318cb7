# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Send timebar's log records to stderr through rich."""
    handler = RichHandler(show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("timebar")
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
