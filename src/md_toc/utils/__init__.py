"""Shared utilities for md-toc."""

from md_toc.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
