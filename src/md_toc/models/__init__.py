"""Domain models for the TOC renderer."""

from md_toc.models.folder_config import FolderConfig, FolderEntry, count_entries
from md_toc.models.node import MDFile, MDFolder, MDNode

__all__ = [
    "FolderConfig",
    "FolderEntry",
    "MDFile",
    "MDFolder",
    "MDNode",
    "count_entries",
]
