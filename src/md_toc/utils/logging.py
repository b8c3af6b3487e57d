"""Logging for md-toc.

All package loggers live under ``md_toc``. The renderer logs one line per
excluded node and per config-driven folder, so its output is kept at INFO
unless the highest verbosity is requested.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "md_toc"

# Logs per-node render decisions at DEBUG
RENDER_LOGGER = f"{ROOT_LOGGER}.toc.renderer"


def setup_logging(
    verbosity: int = 1,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Send md-toc logs to stderr through Rich.

    Args:
        verbosity: 0 shows warnings only, 1 shows progress, 2 adds settings
            and tree debugging, 3 adds every render decision and tracebacks
            with locals.
        log_file: Optional file that receives every record, render traces
            included.

    Returns:
        The ``md_toc`` logger.
    """
    level_map = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
        3: logging.DEBUG,
    }
    level = level_map.get(verbosity, logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    render_logger = logging.getLogger(RENDER_LOGGER)
    if verbosity >= 3 or log_file:
        render_logger.setLevel(logging.NOTSET)
    else:
        render_logger.setLevel(max(level, logging.INFO))

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbosity >= 2,
        show_path=verbosity >= 2,
        rich_tracebacks=True,
        tracebacks_show_locals=verbosity >= 3,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.setLevel(logging.DEBUG)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
        )
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger under the ``md_toc`` namespace.

    Args:
        name: Logger name, e.g. ``"toc.renderer"``. The ``md_toc.`` prefix is
            added when missing.
    """
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
