"""Table of contents rendering."""

from md_toc.toc.renderer import (
    TocCreator,
    TocFromNodesCreator,
    TocSink,
    create_toc_for_node,
    is_hidden,
    relative_prefix,
    resolve_toc_root,
)

__all__ = [
    "TocCreator",
    "TocFromNodesCreator",
    "TocSink",
    "create_toc_for_node",
    "is_hidden",
    "relative_prefix",
    "resolve_toc_root",
]
