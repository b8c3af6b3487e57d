"""Configuration management for md-toc."""

from md_toc.config.loader import load_settings
from md_toc.config.models import TocSettings

__all__ = [
    "TocSettings",
    "load_settings",
]
